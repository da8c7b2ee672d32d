"""Per-session break settings and the settings editor.

The editor works on draft values and writes them back through
``BreakSettings`` coercion on save. While an editor is open the session
refuses to run auto-break, so the engine never reads half-saved settings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from autobreak.core.loader import load_yaml_model
from autobreak.steps.auto_break.config import BreakSettings

from .drawing_host import HostError

logger = logging.getLogger(__name__)


def load_settings(path: Path | None) -> BreakSettings:
    """Load settings from YAML, or the defaults when no path is given."""
    if path is None:
        return BreakSettings()
    return load_yaml_model(path, BreakSettings)


class BreakSession:
    def __init__(self, settings: BreakSettings | None = None):
        self.settings = settings if settings is not None else BreakSettings()
        self._editor: SettingsEditor | None = None

    @property
    def editor_open(self) -> bool:
        return self._editor is not None

    def open_editor(self) -> SettingsEditor:
        if self._editor is not None:
            raise HostError("Settings editor is already open")
        self._editor = SettingsEditor(self)
        return self._editor

    def _release(self, editor: SettingsEditor) -> None:
        if self._editor is editor:
            self._editor = None


class SettingsEditor:
    """Draft copy of the session settings; gap is edited as free text."""

    def __init__(self, session: BreakSession):
        self._session = session
        current = session.settings
        self.style = int(current.style)
        self.gap = str(current.gap)
        self.symbols = current.symbols
        self.range_percent = int(current.range_percent)
        self.closed = False

    def can_save(self) -> bool:
        try:
            float(self.gap)
        except ValueError:
            return False
        return True

    def save(self) -> BreakSettings:
        if self.closed:
            raise HostError("Settings editor is closed")
        if not self.can_save():
            raise ValueError(f"Gap must be a number, got {self.gap!r}")

        draft = BreakSettings(
            style=self.style,
            gap=float(self.gap),
            symbols=self.symbols,
            range_percent=self.range_percent,
        )
        settings = self._session.settings
        for field_name in BreakSettings.model_fields:
            setattr(settings, field_name, getattr(draft, field_name))
        logger.info(f"Saved settings: {settings.model_dump(mode='json')}")
        self.close()
        return settings

    def cancel(self) -> None:
        self.close()

    def close(self) -> None:
        self.closed = True
        self._session._release(self)

    def __enter__(self) -> SettingsEditor:
        return self

    def __exit__(self, *exc) -> None:
        if not self.closed:
            self.cancel()
