"""Feasibility check and break-line endpoint computation."""

from __future__ import annotations

from autobreak.core.contracts import BreakOrientation, DrawingView, Point2D

from .contracts import BreakPlacement

# Smallest break-line extent the host accepts (sheet units)
MIN_BREAK_EXTENT = 5.0

MIN_BREAK_RATIO = 0.1
MAX_BREAK_RATIO = 0.9


def _dominant_extent(view: DrawingView, orientation: BreakOrientation) -> float:
    return view.width if orientation == "horizontal" else view.height


def check_feasibility(view: DrawingView, orientation: BreakOrientation, gap: float) -> bool:
    """True if the view is unbroken and long enough along ``orientation``.

    The extent left after removing the gap must reach MIN_BREAK_EXTENT.
    """
    if view.break_count > 0:
        return False
    return _dominant_extent(view, orientation) - gap >= MIN_BREAK_EXTENT


def compute_break_points(
    view: DrawingView,
    orientation: BreakOrientation,
    range_percent: float,
) -> BreakPlacement:
    """Place a break of ``range_percent`` % of the dominant dimension on the view center.

    Requests shorter than MIN_BREAK_EXTENT are widened to exactly that extent.
    The coordinate along the other axis is always 0: the host's break call
    only reads the varying axis. Points are returned even when the final
    ratio falls outside [MIN_BREAK_RATIO, MAX_BREAK_RATIO]; ``valid`` tells
    the caller whether to use them.
    A view with no extent along ``orientation`` yields a zero-length,
    invalid placement.
    """
    extent = _dominant_extent(view, orientation)
    if extent > 0:
        ratio = range_percent / 100
        if extent * ratio < MIN_BREAK_EXTENT:
            ratio = MIN_BREAK_EXTENT / extent
    else:
        ratio = 0.0

    half = extent * ratio / 2
    if orientation == "horizontal":
        start = Point2D(x=view.center.x - half, y=0.0)
        end = Point2D(x=view.center.x + half, y=0.0)
    else:
        start = Point2D(x=0.0, y=view.center.y - half)
        end = Point2D(x=0.0, y=view.center.y + half)

    return BreakPlacement(
        start=start,
        end=end,
        ratio=ratio,
        valid=MIN_BREAK_RATIO <= ratio <= MAX_BREAK_RATIO,
    )
