"""
from linreg import Dataset, regression
rather than:
from linreg.train import regression
"""

from linreg.engine import Dataset, InvalidDatasetError
from linreg.nn import Line
from linreg.optim import squared_error, mean_squared_error, gradient_descent, MSELoss, SGD
from linreg.train import regression, fit, log_epoch


__all__ = [
    "Dataset",
    "InvalidDatasetError",
    "Line",
    "squared_error",
    "mean_squared_error",
    "gradient_descent",
    "MSELoss",
    "SGD",
    "regression",
    "fit",
    "log_epoch",
]
