"""AutoBreak: automatic break-line placement for drawing sheets."""

__version__ = "0.1.0"
