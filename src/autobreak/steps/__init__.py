"""AutoBreak computation steps."""
