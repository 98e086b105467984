from typing import Callable, Tuple

import numpy as np

from linreg.engine import Dataset


def squared_error(dataset: Dataset, f: Callable[[float], float]) -> float:
    """ Sum of (y_i - f(x_i))^2 over the dataset, accumulated in index order """
    error = 0.0
    for x, y in dataset:
        delta = y - f(x)
        error += delta * delta
    return float(error)


def mean_squared_error(dataset: Dataset, f: Callable[[float], float]) -> float:
    # Dataset 构造时已保证 n > 0
    return squared_error(dataset, f) / len(dataset)


def gradient_descent(dataset: Dataset, slope: float, b: float, learning_rate: float) -> Tuple[float, float]:
    """
    One batch update of (slope, b) against the mean squared error of the
    line y = slope * x + b.

    Args:
        dataset: 观测数据。
        slope: 当前斜率。
        b: 当前截距。
        learning_rate: 步长。

    Returns:
        更新后的 (slope, b)。
    """
    length = float(len(dataset))
    residual = dataset.y - (slope * dataset.x + b)

    # cumsum 按下标顺序逐项累加
    # 对 slope 的偏导
    slope_gradient = np.cumsum(-(2.0 / length) * dataset.x * residual)[-1]
    # 对 b 的偏导
    b_gradient = np.cumsum(-(2.0 / length) * residual)[-1]

    return (
        float(slope - slope_gradient * learning_rate),
        float(b - b_gradient * learning_rate),
    )


class MSELoss:
    """均方误差损失函数"""
    def __call__(self, dataset: Dataset, f: Callable[[float], float]) -> float:
        return mean_squared_error(dataset, f)


class SGD:
    """批量梯度下降优化器, 学习率固定"""
    def __init__(self, dataset: Dataset, lr: float = 0.0001):
        self.dataset = dataset
        self.lr = lr

    def step(self, slope: float, b: float) -> Tuple[float, float]:
        """执行一次参数更新"""
        return gradient_descent(self.dataset, slope, b, self.lr)
