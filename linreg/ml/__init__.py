from linreg.ml.dataset import Dataset, DatasetRow
from linreg.ml.linear_model import LinearModel
from linreg.ml.scaling import min_max_normalize, min_max_denormalize

__all__ = [
    "Dataset",
    "DatasetRow",
    "LinearModel",
    "min_max_normalize",
    "min_max_denormalize",
]
