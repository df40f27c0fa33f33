"""
Pattern formatter

Formats log entries with a conversion pattern compiled once at construction
"""

from typing import Mapping, Optional

from pattern_logger.core import internal_log
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.formatters.base_formatter import BaseFormatter
from pattern_logger.pattern.chain import ConverterChain
from pattern_logger.pattern.parser import compile_pattern


class PatternFormatter(BaseFormatter):
    """
    Format log entries using a conversion pattern.

    Supports the conversion words of DEFAULT_WORD_TABLE, each with optional
    width modifiers and an option in braces.
    """

    DEFAULT_PATTERN = "%m"

    def __init__(
        self,
        pattern: Optional[str] = None,
        word_table: Optional[Mapping[str, object]] = None,
        on_warning: Optional[internal_log.WarningHandler] = None,
    ):
        """
        Initialize pattern formatter.

        Args:
            pattern: Conversion pattern (default: "%m", the bare message)
                     Frequently used words:
                     - %d{FORMAT}: Timestamp (ISO8601, ABSOLUTE, DATE or strftime)
                     - %p: Level name
                     - %c{N}: Logger name, optionally the last N segments
                     - %m: Message
                     - %t: Thread name
                     - %F / %L / %M / %l: Caller file, line, function, location
                     - %ex: Exception traceback
                     - %X{key}: Value from the entry's extra fields
                     - %n: Line separator
            word_table: Conversion words to recognize
            on_warning: Receives pattern warnings

        Raises:
            PatternParseError: If the pattern cannot be scanned

        Example:
            # Level padded to 5 characters, last logger segment only
            formatter = PatternFormatter("%d{ABSOLUTE} %-5p %c{1}: %m")

            # Message truncated to its first 80 characters
            formatter = PatternFormatter("%p %.80m")
        """
        self.pattern = self.DEFAULT_PATTERN if pattern is None else pattern
        self._chain = compile_pattern(self.pattern, word_table, on_warning)

    @property
    def chain(self) -> ConverterChain:
        """Compiled converter chain."""
        return self._chain

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry through the compiled pattern.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        return self._chain.format(entry)

    def __repr__(self) -> str:
        """String representation."""
        return f"PatternFormatter(pattern='{self.pattern}')"


class SimpleFormatter(PatternFormatter):
    """
    Format log entries as "LEVEL - message".

    Example:
        formatter = SimpleFormatter()
        formatter.format(entry)   # "INFO - Application started"
    """

    SIMPLE_PATTERN = "%p - %m"

    def __init__(self):
        super().__init__(self.SIMPLE_PATTERN)

    def __repr__(self) -> str:
        """String representation."""
        return "SimpleFormatter()"
