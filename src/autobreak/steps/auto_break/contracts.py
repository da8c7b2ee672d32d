"""I/O contracts for the auto-break step."""

from __future__ import annotations

from pydantic import BaseModel, Field

from autobreak.core.contracts import BreakFailure, BreakRequest, DrawingView, Point2D


class AutoBreakInput(BaseModel):
    views: list[DrawingView] = Field(default_factory=list, description="Views on the active sheet")


class BreakPlacement(BaseModel):
    start: Point2D
    end: Point2D
    ratio: float = Field(..., description="Fraction of the dominant dimension removed")
    valid: bool = Field(..., description="Ratio lies within the safe window")


class AutoBreakOutput(BaseModel):
    """Tagged result: exactly one of ``request`` / ``failure`` is set."""

    request: BreakRequest | None = None
    failure: BreakFailure | None = None
    candidate_id: str | None = Field(None, description="View chosen for breaking, if any")

    @property
    def ok(self) -> bool:
        return self.request is not None
