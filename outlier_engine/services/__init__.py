from .outlier_service import (
    detect_column_outliers,
    detect_frame_outliers,
    flag_outliers,
    numeric_columns,
    summarize,
    validate_options,
)

__all__ = [
    "detect_column_outliers",
    "detect_frame_outliers",
    "flag_outliers",
    "numeric_columns",
    "summarize",
    "validate_options",
]
