"""Exceptions raised to callers of the logger."""


class LogValidationError(ValueError):
    """Invalid level, indent or message. Raised before any I/O happens."""
