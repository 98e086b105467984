from typing import Tuple

import numpy as np


class Line:
    """ The model y = slope * x + b """

    def __init__(self: 'Line', slope: float = 0.0, b: float = 0.0) -> None:
        self.slope = float(slope)
        self.b = float(b)

    def __call__(self: 'Line', x):
        # 标量或 ndarray 都可以
        if isinstance(x, np.ndarray):
            return self.slope * x + self.b
        return self.slope * float(x) + self.b

    def params(self: 'Line') -> Tuple[float, float]:
        return self.slope, self.b

    def __repr__(self: 'Line') -> str:
        return f"y = {self.slope}x + {self.b}"
