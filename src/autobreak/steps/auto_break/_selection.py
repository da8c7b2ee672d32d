"""Candidate filtering, area ranking and dominant-axis classification."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from autobreak.core.contracts import ALLOWED_ORIENTATIONS, BreakOrientation, DrawingView

logger = logging.getLogger(__name__)


def filter_candidates(views: Iterable[DrawingView]) -> list[DrawingView]:
    """Keep views in a standard camera orientation with non-zero extent."""
    candidates = []
    for view in views:
        if view.camera_orientation not in ALLOWED_ORIENTATIONS:
            logger.debug(f"Skip {view.id}: orientation {view.camera_orientation.value}")
            continue
        if view.is_degenerate:
            logger.debug(f"Skip {view.id}: degenerate ({view.width} x {view.height})")
            continue
        candidates.append(view)
    return candidates


def select_biggest(candidates: list[DrawingView]) -> DrawingView | None:
    """Return the candidate with the largest area, or None if there are none.

    Among views of equal area any one may be returned.
    """
    if not candidates:
        return None
    areas = np.array([view.area for view in candidates], dtype=np.float64)
    return candidates[int(np.argmax(areas))]


def classify_orientation(view: DrawingView) -> BreakOrientation:
    """Horizontal when the view is at least as wide as it is tall."""
    return "horizontal" if view.width >= view.height else "vertical"
