"""
Outlier Detection Service
Applies the robust outlier detector to pandas columns.

Features:
- Explicit, validated options mapping (crit, drop_missing)
- Single column and whole-frame detection
- Outlier/Normal labelling aligned to a Series index
- JSON-serialisable summaries
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype
from pydantic import ValidationError

from outlier_engine.errors import ColumnNotFoundError, InvalidOptionError
from outlier_engine.models.outliers import OutlierOptions, OutlierResult
from outlier_engine.stats.outliers import detect_outliers

logger = logging.getLogger(__name__)


# ============================================================================
# OPTIONS
# ============================================================================

def validate_options(options: Optional[Mapping] = None) -> OutlierOptions:
    """
    Turn a caller-supplied mapping into OutlierOptions.

    Accepted keys are `crit` and `drop_missing`; anything else is rejected
    instead of being passed through. Omitted keys use the settings defaults.
    """
    if options is None:
        return OutlierOptions()
    if isinstance(options, OutlierOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidOptionError(
            "options must be a mapping",
            suggestion="Use a dict such as {'crit': 3, 'drop_missing': True}",
        )
    try:
        return OutlierOptions(**dict(options))
    except ValidationError as e:
        allowed = ", ".join(OutlierOptions.model_fields)
        raise InvalidOptionError(f"Invalid outlier options: {e.errors()}", suggestion=f"Allowed keys: {allowed}") from e


def _run(data: Any, opts: OutlierOptions) -> OutlierResult:
    return detect_outliers(data, crit=opts.crit, drop_missing=opts.drop_missing)


# ============================================================================
# COLUMN DETECTION
# ============================================================================

def detect_column_outliers(
    df: pd.DataFrame,
    column: str,
    options: Optional[Mapping] = None,
) -> OutlierResult:
    """Detect outliers in one column. Indices are row positions, not index labels."""
    opts = validate_options(options)
    if column not in df.columns:
        raise ColumnNotFoundError(f"Column not found: {column}", suggestion=f"Available: {list(df.columns)}")
    logger.debug("Detecting outliers in column %r (crit=%r, drop_missing=%s)", column, opts.crit, opts.drop_missing)
    return _run(df[column], opts)


def numeric_columns(df: pd.DataFrame) -> List[str]:
    return [c for c in df.columns if is_numeric_dtype(df[c]) and not is_bool_dtype(df[c])]


def detect_frame_outliers(
    df: pd.DataFrame,
    columns: Optional[List[str]] = None,
    options: Optional[Mapping] = None,
) -> Dict[str, OutlierResult]:
    """
    Detect outliers column by column.

    Defaults to every numeric, non-boolean column. Errors from a single column
    (non-numeric data, all missing) propagate to the caller.
    """
    opts = validate_options(options)
    selected = numeric_columns(df) if columns is None else list(columns)
    return {c: detect_column_outliers(df, c, opts) for c in selected}


def flag_outliers(series: pd.Series, options: Optional[Mapping] = None) -> pd.Series:
    """Label each row "Outlier" or "Normal", keeping the series index."""
    result = _run(series, validate_options(options))
    flags = pd.Series(False, index=series.index)
    flags.iloc[result.index] = True
    return flags.map({True: "Outlier", False: "Normal"})


# ============================================================================
# SUMMARY
# ============================================================================

def summarize(result: OutlierResult) -> Dict[str, Any]:
    return {
        "n_total": result.n_total,
        "n_outliers": result.n_outliers,
        "outlier_percentage": float(result.outlier_percentage),
        "outlier_indices": list(result.index),
        "outlier_values": list(result.value),
        "center": result.center,
        "scale": result.scale,
        "crit": result.crit,
    }
