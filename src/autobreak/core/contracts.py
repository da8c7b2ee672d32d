"""Common Pydantic models shared by the engine and the drawing host."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BreakOrientation = Literal["horizontal", "vertical"]


class CameraOrientation(str, Enum):
    """Viewing direction that produced a drawing view."""

    FRONT = "front"
    BACK = "back"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    ARBITRARY = "arbitrary"
    ISO_TOP_RIGHT = "iso_top_right"
    ISO_TOP_LEFT = "iso_top_left"
    ISO_BOTTOM_RIGHT = "iso_bottom_right"
    ISO_BOTTOM_LEFT = "iso_bottom_left"
    FLAT_PIVOT_RIGHT = "flat_pivot_right"
    FLAT_PIVOT_LEFT = "flat_pivot_left"
    FLAT_PIVOT_180 = "flat_pivot_180"
    FLAT_BACKSIDE = "flat_backside"
    SAVED_CAMERA = "saved_camera"
    DEFAULT = "default"
    CURRENT = "current"


# Standard orientations; anything else is a derived view (iso, flat pattern, ...)
ALLOWED_ORIENTATIONS: frozenset[CameraOrientation] = frozenset({
    CameraOrientation.FRONT,
    CameraOrientation.BACK,
    CameraOrientation.TOP,
    CameraOrientation.BOTTOM,
    CameraOrientation.LEFT,
    CameraOrientation.RIGHT,
    CameraOrientation.ARBITRARY,
})


class BreakStyle(IntEnum):
    RECTANGULAR = 0
    STRUCTURAL = 1


class Point2D(BaseModel):
    """Point in sheet space."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class DrawingView(BaseModel):
    """Read-only description of a view placed on a drawing sheet."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Host identifier of the view")
    width: float = Field(..., ge=0, description="Width in sheet units")
    height: float = Field(..., ge=0, description="Height in sheet units")
    center: Point2D = Field(default_factory=Point2D, description="View center on the sheet")
    camera_orientation: CameraOrientation = CameraOrientation.FRONT
    break_count: int = Field(0, ge=0, description="Break operations already applied")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0


class BreakRequest(BaseModel):
    """Everything the host needs to create one break operation."""

    view_id: str
    orientation: BreakOrientation
    start: Point2D
    end: Point2D
    style: BreakStyle = BreakStyle.RECTANGULAR
    depth: int = Field(5, description="Break symbol display level")
    gap: float
    symbols: int
    consume_existing: bool = Field(True, description="Host flag: merge with overlapping breaks")


class BreakFailure(str, Enum):
    """Expected reasons for not producing a break request."""

    NO_USABLE_VIEW = "no_usable_view"
    VIEW_TOO_SMALL = "view_too_small"
    ALREADY_BROKEN = "already_broken"
    INVALID_BREAK_RATIO = "invalid_break_ratio"


_FAILURE_MESSAGES = {
    BreakFailure.NO_USABLE_VIEW: "There are no usable views!",
    BreakFailure.VIEW_TOO_SMALL: "The biggest view is too small to be broken!",
    BreakFailure.ALREADY_BROKEN: "There already is a break operation applied!",
    BreakFailure.INVALID_BREAK_RATIO: "The break would remove too much or too little of the view!",
}


def describe_failure(reason: BreakFailure) -> str:
    """User-facing message for a failure reason."""
    return _FAILURE_MESSAGES[reason]
