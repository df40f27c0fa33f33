"""Console writer with ANSI colors"""

import sys
from typing import Optional
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.formatters.base_formatter import BaseFormatter


class ConsoleWriter:
    """Write formatted logs to console with optional colors."""

    def __init__(
        self,
        colored: bool = True,
        stream=None,
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize console writer.

        Args:
            colored: Wrap each line in the ANSI color of its level
            stream: Output stream (default: sys.stderr)
            formatter: Log formatter (default: uses entry's __str__)
        """
        self.colored = colored
        self.stream = stream or sys.stderr
        self.formatter = formatter

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        msg = self.formatter.format(entry) if self.formatter else str(entry)

        if self.colored:
            msg = f"{entry.level.color_code}{msg}{entry.level.reset_code}"

        self.stream.write(msg + "\n")
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()
