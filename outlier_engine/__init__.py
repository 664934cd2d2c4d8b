"""Robust (median/MAD) outlier detection for numeric sequences and pandas columns."""

from .errors import (
    AllMissingError,
    ColumnNotFoundError,
    CriterionIsMissingWarning,
    InvalidCriterionKindError,
    InvalidInputKindError,
    InvalidOptionError,
    MultipleCriterionValuesWarning,
    NegativeCriterionCorrectedWarning,
    OutlierError,
    OutlierWarning,
)
from .models import OutlierOptions, OutlierResult
from .stats import DEFAULT_CRIT, MAD_CONSTANT, RobustStats, detect_outliers

__version__ = "0.1.0"

__all__ = [
    "AllMissingError",
    "ColumnNotFoundError",
    "CriterionIsMissingWarning",
    "InvalidCriterionKindError",
    "InvalidInputKindError",
    "InvalidOptionError",
    "MultipleCriterionValuesWarning",
    "NegativeCriterionCorrectedWarning",
    "OutlierError",
    "OutlierWarning",
    "OutlierOptions",
    "OutlierResult",
    "DEFAULT_CRIT",
    "MAD_CONSTANT",
    "RobustStats",
    "detect_outliers",
]
