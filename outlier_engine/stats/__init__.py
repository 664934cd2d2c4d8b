"""Robust statistics and outlier detection."""

from .robust import MAD_CONSTANT, RobustStats
from .outliers import DEFAULT_CRIT, detect_outliers

__all__ = [
    "MAD_CONSTANT",
    "RobustStats",
    "DEFAULT_CRIT",
    "detect_outliers",
]
