"""Logging setup shared by the CLI and the drawing host."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """Configure root logging once per process.

    ``level`` accepts a level name ("debug", "INFO", ...) or a numeric level.
    Unknown names raise ``ValueError`` instead of silently falling back.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = numeric

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream or sys.stdout,
        force=True,
    )
