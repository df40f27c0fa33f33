"""
Log level enumeration
"""

from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    CRITICAL = 50   # Critical errors
    OFF = 100       # Logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str, default: Optional["LogLevel"] = None) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive). "WARNING" and "FATAL"
                       are accepted as aliases.
            default: Returned instead of raising when the name is unknown

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid and no default is given
        """
        name = str(level_str).strip().upper()
        name = _ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        if default is not None:
            return default
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.CRITICAL: "\033[35m",  # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


_ALIASES = {
    "WARNING": "WARN",
    "FATAL": "CRITICAL",
}
