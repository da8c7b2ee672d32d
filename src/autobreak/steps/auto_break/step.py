"""Auto-break: pick the biggest standard view on a sheet and place one break across it."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from typing import ClassVar

from autobreak.core.contracts import BreakFailure, BreakRequest, DrawingView
from autobreak.core.step_base import BaseStep

from ._break_points import check_feasibility, compute_break_points
from ._selection import classify_orientation, filter_candidates, select_biggest
from .config import BreakSettings
from .contracts import AutoBreakInput, AutoBreakOutput

logger = logging.getLogger(__name__)

BREAK_DEPTH = 5


def auto_break(views: Iterable[DrawingView], settings: BreakSettings) -> AutoBreakOutput:
    """Compute a break request for the best view, or the reason there is none.

    Never raises for the expected failure reasons; they come back tagged in
    the output.
    """
    candidates = filter_candidates(views)
    best = select_biggest(candidates)
    if best is None:
        logger.info("No usable view among candidates")
        return AutoBreakOutput(failure=BreakFailure.NO_USABLE_VIEW)

    orientation = classify_orientation(best)
    logger.info(
        f"Candidate {best.id}: {best.width:g} x {best.height:g} "
        f"({len(candidates)} candidates), {orientation} break"
    )

    if best.break_count > 0:
        return AutoBreakOutput(failure=BreakFailure.ALREADY_BROKEN, candidate_id=best.id)

    if not check_feasibility(best, orientation, settings.gap):
        return AutoBreakOutput(failure=BreakFailure.VIEW_TOO_SMALL, candidate_id=best.id)

    placement = compute_break_points(best, orientation, settings.range_percent)
    if not placement.valid:
        logger.info(f"Break ratio {placement.ratio:.3f} outside safe window")
        return AutoBreakOutput(failure=BreakFailure.INVALID_BREAK_RATIO, candidate_id=best.id)

    request = BreakRequest(
        view_id=best.id,
        orientation=orientation,
        start=placement.start,
        end=placement.end,
        style=settings.style,
        depth=BREAK_DEPTH,
        gap=settings.gap,
        symbols=settings.symbols,
    )
    return AutoBreakOutput(request=request, candidate_id=best.id)


class AutoBreakStep(BaseStep[AutoBreakInput, AutoBreakOutput, BreakSettings]):
    """Selection and break-geometry engine behind the auto-break command."""

    name: ClassVar[str] = "auto_break"
    input_type: ClassVar = AutoBreakInput
    output_type: ClassVar = AutoBreakOutput
    config_type: ClassVar = BreakSettings

    def validate_inputs(self, inputs: AutoBreakInput) -> bool:
        duplicates = [vid for vid, n in Counter(v.id for v in inputs.views).items() if n > 1]
        if duplicates:
            logger.error(f"Duplicate view ids on sheet: {duplicates}")
            return False
        return True

    def run(self, inputs: AutoBreakInput) -> AutoBreakOutput:
        return auto_break(inputs.views, self.config)
