from __future__ import annotations
import csv
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple, Union
import numpy as np
from tqdm import tqdm

from linreg.errors import (
    CouldNotOpenFile,
    CouldNotSaveFile,
    CouldNotSerialize,
    DegenerateData,
    InvalidFormat,
    IsEmpty,
)
from linreg.ml.dataset import Dataset

logger = logging.getLogger(__name__)

#: Column order of the persisted model record.
MODEL_FIELDS = ("a", "b", "learning_rate")


@dataclass
class LinearModel:
    """
    Univariate linear model ``y = a * x + b`` fitted by batch gradient descent.

    Attributes:
        a: Slope.
        b: Intercept.
        learning_rate: Step size used by `gradient_descent`. Not validated here.
    """
    a: float = 0.0
    b: float = 0.0
    learning_rate: float = 0.1

    def estimate(self, x):
        """Predict y for a scalar or an array of x values."""
        return self.a * x + self.b

    def train(self, dataset: Dataset, iterations: int, progress: bool = False) -> None:
        """
        Run exactly `iterations` gradient descent steps over the whole dataset.

        Args:
            dataset: Training data, normally already normalized.
            iterations: Number of full-batch steps. There is no early stopping.
            progress: Show a tqdm progress bar.
        """
        if dataset.is_empty():
            raise IsEmpty("cannot train on an empty dataset")
        logger.info(
            "Training started",
            extra={"iterations": iterations, "learning_rate": self.learning_rate, "rows": len(dataset)},
        )
        for _ in tqdm(range(iterations), desc="Training", disable=not progress):
            self.gradient_descent(dataset)
        logger.info("Training finished", extra={"a": self.a, "b": self.b})

    def gradient(self, dataset: Dataset) -> Tuple[float, float]:
        """Mean gradient of the squared error w.r.t. (a, b) at the current coefficients."""
        x = dataset.x.values
        residuals = self.estimate(x) - dataset.y.values
        return float(np.mean(residuals * x)), float(np.mean(residuals))

    def gradient_descent(self, dataset: Dataset) -> Tuple[float, float]:
        """One batch step. Both coefficients are computed from the old pair, then committed together."""
        cost_a, cost_b = self.gradient(dataset)
        new_a = self.a - self.learning_rate * cost_a
        new_b = self.b - self.learning_rate * cost_b
        self.a, self.b = new_a, new_b
        return new_a, new_b

    def denormalize(self, dataset: Dataset) -> LinearModel:
        """
        Map coefficients fitted on normalized data back to the original scale.

        Uses the min/max stored in `dataset` by its normalization. Returns a new
        model; this one is left as is, so the transform cannot be applied twice
        to the same object by accident.
        """
        x_min, x_max = dataset.x.scale()
        y_min, y_max = dataset.y.scale()
        range_x = x_max - x_min
        range_y = y_max - y_min
        slope_ratio = range_y / range_x
        a = self.a * slope_ratio
        b = range_y * self.b + y_min - slope_ratio * x_min * self.a
        return replace(self, a=a, b=b)

    def mean_squared_error(self, dataset: Dataset) -> float:
        if dataset.is_empty():
            raise IsEmpty("mean squared error is undefined on an empty dataset")
        residuals = self.estimate(dataset.x.values) - dataset.y.values
        return float(np.mean(residuals ** 2))

    def mean_absolute_percentage_error(self, dataset: Dataset) -> float:
        """
        Mean of ``|estimate(x) - y| / y`` as a fraction (multiply by 100 for percent).

        Raises:
            IsEmpty: If the dataset has no rows.
            DegenerateData: If any y is zero.
        """
        if dataset.is_empty():
            raise IsEmpty("mean absolute percentage error is undefined on an empty dataset")
        y = dataset.y.values
        if np.any(y == 0):
            raise DegenerateData("mean absolute percentage error is undefined when a target value is 0")
        return float(np.mean(np.abs(self.estimate(dataset.x.values) - y) / y))

    @classmethod
    def load(cls, path: Union[str, Path]) -> LinearModel:
        """
        Read a model from a CSV file holding a header and one (a, b, learning_rate) record.

        Raises:
            CouldNotOpenFile: If the file cannot be read.
            InvalidFormat: If the record is missing or not three floats.
        """
        try:
            with open(path, newline="") as fh:
                record = next(csv.DictReader(fh), None)
        except OSError as err:
            raise CouldNotOpenFile(str(err)) from err
        except (csv.Error, UnicodeDecodeError) as err:
            raise InvalidFormat(str(err)) from err

        if record is None:
            raise InvalidFormat("model file holds no record")
        if None in record:
            raise InvalidFormat(f"model record has more than {len(MODEL_FIELDS)} fields")
        try:
            model = cls(**{name: float(record[name]) for name in MODEL_FIELDS})
        except KeyError as err:
            raise InvalidFormat(f"missing field {err}") from err
        except (TypeError, ValueError) as err:
            raise InvalidFormat(str(err)) from err
        logger.info("Loaded model", extra={"path": str(path)})
        return model

    def save(self, path: Union[str, Path]) -> None:
        """
        Write the model as a CSV header plus one record.

        Raises:
            CouldNotSerialize: If a field is not a number.
            CouldNotSaveFile: If the file cannot be written.
        """
        try:
            row = [float(getattr(self, name)) for name in MODEL_FIELDS]
        except (TypeError, ValueError) as err:
            raise CouldNotSerialize(str(err)) from err
        try:
            with open(path, "w", newline="") as fh:
                writer = csv.writer(fh)
                writer.writerow(MODEL_FIELDS)
                writer.writerow([repr(value) for value in row])
        except OSError as err:
            raise CouldNotSaveFile(str(err)) from err
        logger.info("Saved model", extra={"path": str(path)})
