"""Break settings: style, gap, symbol count and removal range.

Writes never fail on out-of-range values; they are coerced to the nearest
safe value, both at construction and on attribute assignment.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autobreak.core.contracts import BreakStyle

MIN_SYMBOLS = 1
MAX_SYMBOLS = 3
MIN_RANGE_PERCENT = 10.0
MAX_RANGE_PERCENT = 90.0


class BreakSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    style: BreakStyle = Field(BreakStyle.RECTANGULAR, description="0 = rectangular, 1 = structural")
    gap: float = Field(0.6, description="Gap between the two break lines (sheet units)")
    symbols: int = Field(MIN_SYMBOLS, description="Number of break symbols (1-3)")
    range_percent: float = Field(
        MAX_RANGE_PERCENT, description="Percentage of the view's dominant dimension to remove (10-90)"
    )

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, value: Any) -> BreakStyle:
        if isinstance(value, str) and value.upper() in BreakStyle.__members__:
            return BreakStyle[value.upper()]
        if isinstance(value, int) and not isinstance(value, bool) and value in (0, 1):
            return BreakStyle(value)
        return BreakStyle.RECTANGULAR

    @field_validator("symbols", mode="before")
    @classmethod
    def _reset_symbols(cls, value: Any) -> int:
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            return MIN_SYMBOLS
        if not MIN_SYMBOLS <= value <= MAX_SYMBOLS:
            return MIN_SYMBOLS
        return value

    @field_validator("range_percent", mode="before")
    @classmethod
    def _clamp_range(cls, value: Any) -> float:
        try:
            value = float(value)
        except (TypeError, ValueError):
            return MAX_RANGE_PERCENT
        if math.isnan(value):
            return MAX_RANGE_PERCENT
        return min(max(value, MIN_RANGE_PERCENT), MAX_RANGE_PERCENT)
