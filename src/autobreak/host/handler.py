"""Auto-break command: engine in, host break operation out."""

from __future__ import annotations

import logging

from autobreak.core.contracts import describe_failure
from autobreak.steps.auto_break.contracts import AutoBreakInput, AutoBreakOutput
from autobreak.steps.auto_break.step import AutoBreakStep

from .drawing_host import DrawingHost, HostError
from .session import BreakSession

logger = logging.getLogger(__name__)


class BreakHandler:
    def __init__(self, host: DrawingHost, session: BreakSession):
        self.host = host
        self.session = session

    def auto_break(self, apply: bool = True) -> AutoBreakOutput:
        """Run the engine on the active sheet and, if ``apply``, add the break.

        Failure reasons are logged and returned; host problems raise HostError.
        """
        if self.session.editor_open:
            raise HostError("Close the settings editor before applying auto-break")

        views = self.host.active_sheet_views()
        step = AutoBreakStep(config=self.session.settings)
        output = step.execute(AutoBreakInput(views=views))

        if output.failure is not None:
            logger.warning(f"Cannot apply auto-break: {describe_failure(output.failure)}")
            return output

        if apply:
            self.host.add_break(output.request)
        return output
