"""
The main objects are re-exported here so that callers can do:
from linreg import Dataset, LinearModel

rather than:
from linreg.ml.dataset import Dataset
"""

from linreg.errors import (
    LinearRegressionError,
    CouldNotOpenFile,
    InvalidFormat,
    IsEmpty,
    CouldNotSaveFile,
    CouldNotSerialize,
    DegenerateData,
    NotNormalized,
)
from linreg.ml.dataset import Dataset, DatasetRow
from linreg.ml.linear_model import LinearModel
from linreg.config import TrainConfig

__version__ = "1.0.0"

__all__ = [
    "LinearRegressionError",
    "CouldNotOpenFile",
    "InvalidFormat",
    "IsEmpty",
    "CouldNotSaveFile",
    "CouldNotSerialize",
    "DegenerateData",
    "NotNormalized",
    "Dataset",
    "DatasetRow",
    "LinearModel",
    "TrainConfig",
]
