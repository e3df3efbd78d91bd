from __future__ import annotations
import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union
import numpy as np

from linreg.errors import CouldNotOpenFile, InvalidFormat, IsEmpty, NotNormalized
from linreg.ml.scaling import min_max_normalize, min_max_denormalize

logger = logging.getLogger(__name__)


def _empty_values() -> np.ndarray:
    return np.array([], dtype=np.float64)


@dataclass
class DatasetRow:
    """One numeric column plus the min/max it was scaled with.

    `min` and `max` stay None until `normalize()` has produced a scaled copy.
    `normalized` tells whether `values` are currently in [0, 1].
    """
    values: np.ndarray = field(default_factory=_empty_values)
    min: Optional[float] = None
    max: Optional[float] = None
    normalized: bool = False

    def __post_init__(self):
        self.values = np.asarray(self.values, dtype=np.float64)

    def push(self, value: float) -> None:
        """Append a raw value.

        A normalized row is first mapped back to its raw scale and its stored
        min/max are cleared, so every value stays in one scale.
        """
        value = np.float64(value)
        if self.normalized:
            self.values = min_max_denormalize(self.values, self.min, self.max)
            self.normalized = False
            self.min = None
            self.max = None
        self.values = np.append(self.values, value)

    def __len__(self) -> int:
        return len(self.values)

    def normalize(self) -> DatasetRow:
        """Return a copy scaled to [0, 1] that remembers its min and max.

        A row that is already normalized is returned unchanged.
        """
        if self.normalized:
            return self
        scaled, low, high = min_max_normalize(self.values)
        return DatasetRow(scaled, low, high, normalized=True)

    def denormalize(self) -> DatasetRow:
        """Return a copy mapped back to the original scale, keeping min and max."""
        if not self.normalized or self.min is None or self.max is None:
            raise NotNormalized("row has no stored min/max; call normalize() first")
        restored = min_max_denormalize(self.values, self.min, self.max)
        return DatasetRow(restored, self.min, self.max, normalized=False)

    def scale(self) -> Tuple[float, float]:
        """(min, max) stored by the last normalization."""
        if self.min is None or self.max is None:
            raise NotNormalized("row has no stored min/max; call normalize() first")
        return self.min, self.max


@dataclass
class Dataset:
    """Paired x/y columns. Both rows always have the same length."""
    x: DatasetRow = field(default_factory=DatasetRow)
    y: DatasetRow = field(default_factory=DatasetRow)

    def __post_init__(self):
        if len(self.x) != len(self.y):
            raise ValueError(f"x and y must have same length. Got x: {len(self.x)}, y: {len(self.y)}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> Dataset:
        """
        Load a dataset from a CSV file with a header and two numeric columns.

        Args:
            path: Location of the CSV file.

        Returns:
            A Dataset with rows in file order.

        Raises:
            CouldNotOpenFile: If the file cannot be opened.
            InvalidFormat: If a record is not exactly two float values.
            IsEmpty: If the file holds no records.
        """
        try:
            with open(path, newline="") as fh:
                dataset = cls.from_pairs(_read_pairs(csv.reader(fh)), allow_empty=True)
        except OSError as err:
            raise CouldNotOpenFile(str(err)) from err
        except (csv.Error, UnicodeDecodeError) as err:
            raise InvalidFormat(str(err)) from err
        if dataset.is_empty():
            raise IsEmpty()
        logger.info("Loaded dataset", extra={"path": str(path), "rows": len(dataset)})
        return dataset

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]], allow_empty: bool = False) -> Dataset:
        xs, ys = [], []
        for x, y in pairs:
            xs.append(x)
            ys.append(y)
        if not xs and not allow_empty:
            raise IsEmpty()
        return cls(DatasetRow(np.array(xs, dtype=np.float64)), DatasetRow(np.array(ys, dtype=np.float64)))

    def push(self, row: Tuple[float, float]) -> None:
        x, y = row
        x, y = float(x), float(y)
        self.x.push(x)
        self.y.push(y)

    def __len__(self) -> int:
        return len(self.x)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for x, y in zip(self.x.values, self.y.values):
            yield float(x), float(y)

    def normalize(self) -> Dataset:
        """Scale x and y independently to [0, 1]; returns a new Dataset."""
        return Dataset(self.x.normalize(), self.y.normalize())

    def denormalize(self) -> Dataset:
        return Dataset(self.x.denormalize(), self.y.denormalize())

    def get_x_min(self) -> float:
        return self.x.scale()[0]

    def get_x_max(self) -> float:
        return self.x.scale()[1]

    def get_y_min(self) -> float:
        return self.y.scale()[0]

    def get_y_max(self) -> float:
        return self.y.scale()[1]


def _read_pairs(reader) -> Iterator[Tuple[float, float]]:
    """Yield (x, y) floats from a csv reader, skipping the header and blank lines."""
    next(reader, None)
    for record in reader:
        if not record:
            continue
        if len(record) != 2:
            raise InvalidFormat(f"line {reader.line_num}: expected 2 fields, found {len(record)}")
        try:
            yield float(record[0]), float(record[1])
        except ValueError as err:
            raise InvalidFormat(f"line {reader.line_num}: {err}") from err
