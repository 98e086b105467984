"""
Fixed-epoch training loop.

``regression`` owns its (slope, b) state, so separate calls never share
anything. A single Dataset is still not meant to be trained from several
threads at once.
"""
import logging
import operator
from typing import Callable, Optional, Tuple

from linreg.engine import Dataset
from linreg.nn import Line
from linreg.optim import SGD

logger = logging.getLogger(__name__)

EpochCallback = Callable[[int, float, float], None]


def log_epoch(epoch: int, slope: float, b: float) -> None:
    """Default progress sink: one INFO record per epoch."""
    logger.info(
        "Epoch: %d, %s", epoch, Line(slope, b),
        extra={"epoch": epoch, "slope": slope, "intercept": b},
    )


def regression(
    dataset: Dataset,
    epochs: int,
    learning_rate: float,
    on_epoch: Optional[EpochCallback] = None,
) -> Tuple[float, float]:
    """
    Run ``epochs`` gradient descent updates starting from (0.0, 0.0).

    Args:
        dataset: 训练数据。
        epochs: 更新次数, 0 表示直接返回初始参数。
        learning_rate: 固定学习率, 不做发散检查。
        on_epoch: 每个 epoch 之后调用 on_epoch(epoch, slope, b)。
            未提供且 dataset.verbose 为 True 时使用 log_epoch。

    Returns:
        训练后的 (slope, b)。
    """
    if isinstance(epochs, bool):
        raise ValueError(f"epochs must be an integer, got {epochs!r}")
    try:
        epochs = operator.index(epochs)
    except TypeError:
        raise ValueError(f"epochs must be an integer, got {epochs!r}") from None
    if epochs < 0:
        raise ValueError(f"epochs must be >= 0, got {epochs}")

    if on_epoch is None and dataset.verbose:
        on_epoch = log_epoch

    optimizer = SGD(dataset, lr=learning_rate)
    slope, b = 0.0, 0.0

    if on_epoch is None:
        for _ in range(epochs):
            slope, b = optimizer.step(slope, b)
    else:
        for epoch in range(epochs):
            slope, b = optimizer.step(slope, b)
            on_epoch(epoch, slope, b)

    return slope, b


def fit(dataset: Dataset, epochs: int, learning_rate: float,
        on_epoch: Optional[EpochCallback] = None) -> Line:
    """Same as ``regression`` but wraps the result in a Line."""
    return Line(*regression(dataset, epochs, learning_rate, on_epoch))
