from typing import Tuple
import numpy as np

from linreg.errors import DegenerateData, IsEmpty


def min_max_normalize(values: np.ndarray) -> Tuple[np.ndarray, float, float]:
    """
    Rescale values to [0, 1].

    Args:
        values: 1-D array of samples.

    Returns:
        Tuple of (scaled values, min, max). The input array is not modified.

    Raises:
        IsEmpty: If there are no values.
        DegenerateData: If a value is nan or infinite, or if all values are
            equal, since the range is then zero.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        raise IsEmpty("cannot normalize an empty column")
    if not np.all(np.isfinite(values)):
        raise DegenerateData("cannot normalize a column holding nan or infinite values")
    low = float(np.min(values))
    high = float(np.max(values))
    value_range = high - low
    if value_range == 0:
        raise DegenerateData(f"cannot normalize a constant column (min == max == {low})")
    return (values - low) / value_range, low, high


def min_max_denormalize(values: np.ndarray, low: float, high: float) -> np.ndarray:
    """Inverse of `min_max_normalize` for an explicit (min, max)."""
    values = np.asarray(values, dtype=np.float64)
    return values * (high - low) + low
