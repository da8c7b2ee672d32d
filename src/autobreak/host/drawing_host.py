"""Drawing host interface and the in-memory host backed by a DrawingDocument."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from autobreak.core.contracts import BreakRequest, DrawingView

from .document import AppliedBreak, DrawingDocument, Sheet

logger = logging.getLogger(__name__)


class HostError(RuntimeError):
    """The host cannot serve the request (wrong document type, unknown view, ...)."""


class DrawingHost(ABC):
    """What the break handler needs from a drawing application."""

    @abstractmethod
    def active_sheet_views(self) -> list[DrawingView]:
        """Views on the active sheet, translated to engine views."""
        ...

    @abstractmethod
    def add_break(self, request: BreakRequest) -> None:
        """Create the break operation described by ``request``."""
        ...


class InMemoryDrawingHost(DrawingHost):
    def __init__(self, document: DrawingDocument):
        self.document = document

    def active_sheet(self) -> Sheet:
        doc = self.document
        if doc.kind != "drawing":
            raise HostError(f"Active document '{doc.name}' is a {doc.kind}, not a drawing")
        if not doc.sheets:
            raise HostError(f"Drawing '{doc.name}' has no sheets")
        if doc.active_sheet is None:
            return doc.sheets[0]
        for sheet in doc.sheets:
            if sheet.name == doc.active_sheet:
                return sheet
        raise HostError(f"Active sheet '{doc.active_sheet}' not found in '{doc.name}'")

    def active_sheet_views(self) -> list[DrawingView]:
        return [view.to_drawing_view() for view in self.active_sheet().views]

    def add_break(self, request: BreakRequest) -> None:
        sheet = self.active_sheet()
        view = sheet.find_view(request.view_id)
        if view is None:
            raise HostError(f"View '{request.view_id}' not found on sheet '{sheet.name}'")
        view.breaks.append(AppliedBreak.from_request(request))
        logger.info(
            f"Added {request.orientation} break to {view.name}: "
            f"{request.start.model_dump()} -> {request.end.model_dump()}"
        )
