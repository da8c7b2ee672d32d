"""Break-candidate selection and break-geometry engine."""

from ._break_points import MIN_BREAK_EXTENT, check_feasibility, compute_break_points
from ._selection import classify_orientation, filter_candidates, select_biggest
from .config import BreakSettings
from .contracts import AutoBreakInput, AutoBreakOutput, BreakPlacement
from .step import BREAK_DEPTH, AutoBreakStep, auto_break

__all__ = [
    "AutoBreakInput",
    "AutoBreakOutput",
    "AutoBreakStep",
    "BREAK_DEPTH",
    "BreakPlacement",
    "BreakSettings",
    "MIN_BREAK_EXTENT",
    "auto_break",
    "check_feasibility",
    "classify_orientation",
    "compute_break_points",
    "filter_candidates",
    "select_biggest",
]
