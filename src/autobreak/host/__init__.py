"""Orchestration around the engine: drawing host, session settings, command handler."""

from .document import AppliedBreak, DrawingDocument, Sheet, SheetView, load_document, save_document
from .drawing_host import DrawingHost, HostError, InMemoryDrawingHost
from .handler import BreakHandler
from .session import BreakSession, SettingsEditor, load_settings

__all__ = [
    "AppliedBreak",
    "BreakHandler",
    "BreakSession",
    "DrawingDocument",
    "DrawingHost",
    "HostError",
    "InMemoryDrawingHost",
    "SettingsEditor",
    "Sheet",
    "SheetView",
    "load_document",
    "load_settings",
    "save_document",
]
