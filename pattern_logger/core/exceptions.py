"""
Exception hierarchy for the logger system
"""


class LoggerException(Exception):
    """Base class for all errors raised by pattern_logger."""


class PatternParseError(LoggerException):
    """
    Raised when a conversion pattern cannot be scanned at all.

    Problems with the pattern content (unknown conversion words, malformed
    modifiers) are not errors; they are reported as warnings and skipped.
    """

    def __init__(self, pattern, reason: str = ""):
        self.pattern = pattern
        self.reason = reason
        message = f"Failed parsing layout pattern {pattern!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class OptionConversionError(LoggerException, ValueError):
    """Raised when a configuration value cannot be converted to the requested type."""
