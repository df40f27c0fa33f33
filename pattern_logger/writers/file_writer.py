"""File writer"""

from pathlib import Path
from typing import Optional, Union
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.formatters.base_formatter import BaseFormatter


class FileWriter:
    """Write formatted logs to a file, one entry per line."""

    def __init__(
        self,
        filepath: Union[str, Path],
        mode: str = "a",
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file. Missing parent directories are created.
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: uses entry's __str__)
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.formatter = formatter
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, entry: LogEntry):
        """Write log entry to file. Entries written after close() are discarded."""
        if self._file is None:
            return
        msg = self.formatter.format(entry) if self.formatter else str(entry)
        self._file.write(msg + "\n")

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None
