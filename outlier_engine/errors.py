"""
Error kinds and warning categories raised by the outlier detector
"""
from typing import Optional


class OutlierError(Exception):
    """Base exception for fatal detection errors"""
    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)


class InvalidInputKindError(OutlierError, TypeError):
    """x holds something other than numbers and missing values"""


class AllMissingError(OutlierError, ValueError):
    """Every observation in x is missing"""


class InvalidCriterionKindError(OutlierError, TypeError):
    """crit is not numeric"""


class InvalidOptionError(OutlierError, ValueError):
    """An options mapping carries unknown keys or bad values"""


class ColumnNotFoundError(OutlierError, KeyError):
    """Requested DataFrame column does not exist"""

    def __str__(self) -> str:
        return self.message


# ----------------------------------------------------------------------------
# Recoverable conditions: emitted through warnings.warn, execution continues
# ----------------------------------------------------------------------------

class OutlierWarning(UserWarning):
    pass


class MultipleCriterionValuesWarning(OutlierWarning):
    """crit had several values; only the first is used"""


class CriterionIsMissingWarning(OutlierWarning):
    """crit is missing; no observation is flagged"""


class NegativeCriterionCorrectedWarning(OutlierWarning):
    """crit was negative; its absolute value is used"""
