"""
Error types raised by the logkit operations.

Each class also derives from the closest builtin so callers that already
catch ValueError or OSError keep working.
"""


class LogError(Exception):
    """Base class for every error raised by logkit."""


class InvalidArgumentError(LogError, ValueError):
    """A required input was empty or malformed."""


class InvalidFormatError(InvalidArgumentError):
    """The timestamp pattern could not be rendered."""


class LogNotFoundError(LogError, FileNotFoundError):
    """The log directory or log file does not exist."""


class LogPermissionError(LogError, PermissionError):
    """The log directory or log file is not accessible."""


class TransportError(LogError):
    """The mail relay was unreachable or rejected the message."""
