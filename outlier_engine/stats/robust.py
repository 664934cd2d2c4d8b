"""Robust location and scale - median, MAD and robust z-scores."""

from typing import Any, Tuple
import numpy as np
from scipy import stats

# Makes the MAD a consistent estimator of the standard deviation under normality
MAD_CONSTANT = 1.4826


def _as_float(x: Any) -> np.ndarray:
    # None becomes nan under dtype=float64; always a fresh array so callers' data is untouched
    return np.array(x, dtype="float64", ndmin=1)


def _present(data: np.ndarray, drop_missing: bool) -> Tuple[np.ndarray, bool]:
    """Return the values statistics are computed from, and whether they are defined."""
    missing = np.isnan(data)
    if missing.any():
        if not drop_missing:
            return data, False
        data = data[~missing]
    return data, data.size > 0


class RobustStats:
    """
    Outlier-resistant summaries of a 1-D numeric sample.

    Missing values are NaN. With drop_missing=False a single missing value
    makes every statistic NaN; with drop_missing=True they are excluded first.
    """

    @staticmethod
    def median(x: Any, drop_missing: bool = False) -> float:
        data, defined = _present(_as_float(x), drop_missing)
        if not defined:
            return float("nan")
        return float(np.median(data))

    @staticmethod
    def mad(x: Any, drop_missing: bool = False, constant: float = MAD_CONSTANT) -> float:
        """Median absolute deviation about the median, multiplied by `constant`."""
        data, defined = _present(_as_float(x), drop_missing)
        if not defined:
            return float("nan")
        return float(stats.median_abs_deviation(data, scale=1.0 / constant))

    @staticmethod
    def location_scale(x: Any, drop_missing: bool = False) -> Tuple[float, float]:
        """(median, scaled MAD) for the sample."""
        data = _as_float(x)
        return (
            RobustStats.median(data, drop_missing),
            RobustStats.mad(data, drop_missing),
        )

    @staticmethod
    def robust_zscores(x: Any, drop_missing: bool = False) -> np.ndarray:
        """
        (x - median) / MAD for every position.

        NaN where the observation is missing, where the statistics are
        undefined, or where the scale is zero.
        """
        data = _as_float(x)
        center, scale = RobustStats.location_scale(data, drop_missing)
        z = np.full(data.shape, np.nan)
        if np.isnan(center) or np.isnan(scale) or scale == 0:
            return z
        present = ~np.isnan(data)
        z[present] = (data[present] - center) / scale
        return z
