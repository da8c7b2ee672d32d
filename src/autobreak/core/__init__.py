"""AutoBreak core: step base, shared contracts, loaders, logging."""

from .contracts import (
    ALLOWED_ORIENTATIONS,
    BreakFailure,
    BreakOrientation,
    BreakRequest,
    BreakStyle,
    CameraOrientation,
    DrawingView,
    Point2D,
    describe_failure,
)
from .loader import load_yaml_model, save_yaml_model
from .logging import setup_logging
from .step_base import BaseStep

__all__ = [
    "ALLOWED_ORIENTATIONS",
    "BaseStep",
    "BreakFailure",
    "BreakOrientation",
    "BreakRequest",
    "BreakStyle",
    "CameraOrientation",
    "DrawingView",
    "Point2D",
    "describe_failure",
    "load_yaml_model",
    "save_yaml_model",
    "setup_logging",
]
