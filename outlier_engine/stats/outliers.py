"""
Robust z-score outlier detection
"""
import logging
import numbers
import warnings
from collections.abc import Mapping, Set
from typing import Any, List

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_complex_dtype, is_list_like, is_numeric_dtype

from outlier_engine.errors import (
    AllMissingError,
    CriterionIsMissingWarning,
    InvalidCriterionKindError,
    InvalidInputKindError,
    MultipleCriterionValuesWarning,
    NegativeCriterionCorrectedWarning,
)
from outlier_engine.models.outliers import OutlierResult
from outlier_engine.stats.robust import RobustStats

logger = logging.getLogger(__name__)

DEFAULT_CRIT = 4


def _is_missing(v: Any) -> bool:
    if v is None or v is pd.NA:
        return True
    return isinstance(v, (float, np.floating)) and bool(np.isnan(v))


def _is_number(v: Any) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_))


def _numeric_or_missing(items: List[Any]) -> bool:
    return all(_is_missing(v) or _is_number(v) for v in items)


def _coerce_observations(x: Any) -> np.ndarray:
    """Copy x into a float64 array with NaN for missing values, or raise InvalidInputKindError."""
    if isinstance(x, (str, bytes, Mapping)):
        raise InvalidInputKindError("x must be numeric", suggestion="Pass a sequence of numbers")
    if isinstance(x, Set):
        raise InvalidInputKindError("x must be numeric", suggestion="Pass an ordered sequence, not a set")

    if isinstance(x, np.ndarray) and x.ndim == 0:
        x = x.reshape(1)

    if isinstance(x, (np.ndarray, pd.Series, pd.Index)):
        if x.ndim != 1:
            raise InvalidInputKindError("x must be numeric", suggestion="Pass a one-dimensional sequence")
        dtype = x.dtype
        if is_numeric_dtype(dtype) and not is_bool_dtype(dtype) and not is_complex_dtype(dtype):
            return pd.Series(x).to_numpy(dtype="float64", na_value=np.nan, copy=True)
        items = list(x)
    elif is_list_like(x):
        items = list(x)
    else:
        items = [x]

    if not _numeric_or_missing(items):
        raise InvalidInputKindError("x must be numeric", suggestion="Remove text, boolean or date values")
    try:
        return np.array([np.nan if _is_missing(v) else float(v) for v in items], dtype="float64")
    except OverflowError as e:
        raise InvalidInputKindError("x must be numeric", suggestion="Values must fit in a 64-bit float") from e


def _resolve_criterion(crit: Any) -> float:
    """Reduce crit to one non-negative float (NaN when missing), warning on each correction."""
    if isinstance(crit, (str, bytes, Mapping)):
        raise InvalidCriterionKindError("crit must be numeric")

    if isinstance(crit, np.ndarray):
        candidates = list(np.ravel(crit))
    elif is_list_like(crit):
        candidates = list(crit)
    else:
        candidates = [crit]

    if not candidates or not _numeric_or_missing(candidates):
        raise InvalidCriterionKindError("crit must be numeric", suggestion="Pass a single number such as 4")

    if len(candidates) > 1:
        warnings.warn(
            f"crit has {len(candidates)} values; only the first is used",
            MultipleCriterionValuesWarning,
            stacklevel=3,
        )

    first = candidates[0]
    if _is_missing(first):
        warnings.warn(
            "crit is missing; no observations will be flagged",
            CriterionIsMissingWarning,
            stacklevel=3,
        )
        return float("nan")

    try:
        value = float(first)
    except OverflowError as e:
        raise InvalidCriterionKindError("crit must be numeric", suggestion="crit must fit in a 64-bit float") from e
    if value < 0:
        warnings.warn(
            f"crit must be non-negative; using {abs(value)} instead of {value}",
            NegativeCriterionCorrectedWarning,
            stacklevel=3,
        )
        value = abs(value)
    return value


def _none_if_nan(v: float):
    return None if np.isnan(v) else float(v)


def detect_outliers(x: Any, crit: Any = DEFAULT_CRIT, drop_missing: bool = False) -> OutlierResult:
    """
    Flag observations whose robust z-score exceeds crit.

    The robust z-score of x[i] is |x[i] - median(x)| / (1.4826 * MAD(x)).

    Args:
        x: Observations. A list, tuple, 1-D numpy array, pandas Series or a
            single number. None, NaN and pandas.NA count as missing.
        crit: Number of robust standard deviations beyond which a point is
            flagged. Extra values are ignored, negatives are made positive and
            a missing crit flags nothing; each of these emits a warning.
        drop_missing: Exclude missing values before computing the median and
            MAD. When False and x holds a missing value the statistics are
            undefined and nothing is flagged.

    Values are compared as 64-bit floats, so integers beyond 2**53 lose
    precision: neighbouring large integers may compare equal, which can shrink
    the scale, and value[i] may differ from x[index[i]] in its low digits.

    Returns:
        OutlierResult with the flagged values and their 0-based positions.

    Raises:
        InvalidInputKindError: x is not all numbers or missing values, or a
            number does not fit in a 64-bit float.
        AllMissingError: x is empty or every value is missing.
        InvalidCriterionKindError: crit is not numeric or does not fit in a float.

    Examples:
        >>> detect_outliers([10, 11, 9, 10, 12, 200]).index
        [5]
    """
    values = _coerce_observations(x)
    if np.isnan(values).all():
        raise AllMissingError("x values are all NA", suggestion="Provide at least one observed value")

    crit = _resolve_criterion(crit)
    center, scale = RobustStats.location_scale(values, bool(drop_missing))
    logger.debug("n=%d center=%s scale=%s crit=%s", values.size, center, scale, crit)

    if np.isnan(crit) or np.isnan(center) or np.isnan(scale) or scale == 0:
        flagged = np.array([], dtype=np.intp)
    else:
        # missing observations compare False and are never flagged
        with np.errstate(invalid="ignore"):
            flagged = np.flatnonzero(np.abs(values - center) / scale > crit)

    return OutlierResult(
        value=values[flagged].tolist(),
        index=flagged.tolist(),
        center=_none_if_nan(center),
        scale=_none_if_nan(scale),
        crit=_none_if_nan(crit),
        n_total=int(values.size),
    )
