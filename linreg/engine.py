from dataclasses import dataclass

import numpy as np


class InvalidDatasetError(ValueError):
    """Raised when x/y cannot form a usable dataset."""


@dataclass(eq=False)
class Dataset:
    """ Paired (x, y) observations for fitting y = slope * x + b """
    x: np.ndarray
    y: np.ndarray
    verbose: bool = False

    def __post_init__(self: 'Dataset') -> None:
        # 保证 x, y 一定是 float64 的 ndarray
        self.x = np.asarray(self.x, dtype=float)
        self.y = np.asarray(self.y, dtype=float)

        if self.x.ndim != 1 or self.y.ndim != 1:
            raise InvalidDatasetError(
                f"x and y must be 1-D. Got x: {self.x.shape}, y: {self.y.shape}")
        if len(self.x) != len(self.y):
            raise InvalidDatasetError(
                f"x and y must have same length. Got x: {len(self.x)}, y: {len(self.y)}")
        if len(self.x) == 0:
            raise InvalidDatasetError("dataset is empty")

    def __len__(self: 'Dataset') -> int:
        return len(self.x)

    def __iter__(self):
        """ 按下标顺序产出 (x_i, y_i) """
        return zip(self.x, self.y)

    @classmethod
    def from_csv(cls, path, verbose: bool = False) -> 'Dataset':
        """
        Load a two column ``x,y`` file. A non-numeric first row is treated
        as a header and skipped.
        """
        data = np.atleast_2d(np.genfromtxt(path, delimiter=',', dtype=float))
        # genfromtxt 把表头读成 nan
        if data.size and np.isnan(data[0]).all():
            data = data[1:]
        if data.shape[1] != 2:
            raise InvalidDatasetError(f"{path}: expected 2 columns, got {data.shape[1]}")
        if np.isnan(data).any():
            row = int(np.argwhere(np.isnan(data))[0][0])
            raise InvalidDatasetError(f"{path}: missing or non-numeric value in data row {row}")
        return cls(data[:, 0], data[:, 1], verbose=verbose)

    def __repr__(self: 'Dataset') -> str:
        return f"Dataset(n={len(self)}, verbose={self.verbose})"
