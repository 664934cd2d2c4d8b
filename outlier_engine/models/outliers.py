from pydantic import BaseModel, ConfigDict, Field, StrictBool, model_validator
from typing import Any, List, Optional

from outlier_engine.config import settings


class OutlierResult(BaseModel):
    """
    Flagged observations and their 0-based positions in the input.

    value[i] is the observation found at index[i]. center, scale and crit are
    None when they could not be computed (missing values kept, missing crit).
    """

    model_config = ConfigDict(frozen=True)

    value: List[float] = Field(default_factory=list)
    index: List[int] = Field(default_factory=list)
    center: Optional[float] = None
    scale: Optional[float] = None
    crit: Optional[float] = None
    n_total: int = 0

    @model_validator(mode="after")
    def _check_alignment(self) -> "OutlierResult":
        if len(self.value) != len(self.index):
            raise ValueError("value and index must have the same length")
        if any(i < 0 or i >= self.n_total for i in self.index):
            raise ValueError("index positions must fall inside the input")
        return self

    @property
    def n_outliers(self) -> int:
        return len(self.index)

    @property
    def outlier_percentage(self) -> float:
        if self.n_total == 0:
            return 0.0
        return 100.0 * self.n_outliers / self.n_total


class OutlierOptions(BaseModel):
    """Options accepted by the column helpers. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    # crit is validated by detect_outliers itself so bad values still warn/raise there
    crit: Any = Field(default_factory=lambda: settings.default_crit)
    drop_missing: StrictBool = Field(default_factory=lambda: settings.drop_missing)
