"""Logger builder pattern"""

from typing import Mapping, Optional
from pathlib import Path

from pattern_logger.core.logger import Logger
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.pattern_formatter import PatternFormatter
from pattern_logger.writers.console_writer import ConsoleWriter
from pattern_logger.writers.file_writer import FileWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()
        self._console_enabled = False
        self._word_table: Optional[Mapping[str, object]] = None
        self._custom_writers = []
        self._custom_filters = []

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "LoggerBuilder":
        """
        Start from an existing configuration.

        Console output is enabled when config.console_output is set, and a
        file writer is added when config.log_file is set.
        """
        builder = cls(config)
        builder._console_enabled = config.console_output
        return builder

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.min_level = level
        return self

    def with_async(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable async mode."""
        self._config.async_mode = enabled
        return self

    def with_console(self, colored: bool = True) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._config.colored_output = colored
        return self

    def with_file(self, filepath: str) -> "LoggerBuilder":
        """Enable file output."""
        self._config.log_file = Path(filepath)
        return self

    def with_queue_size(self, size: int) -> "LoggerBuilder":
        """Set async queue size."""
        self._config.queue_size = size
        return self

    def with_batch_size(self, size: int) -> "LoggerBuilder":
        """Set batch size."""
        self._config.batch_size = size
        return self

    def with_pattern(
        self,
        pattern: str,
        word_table: Optional[Mapping[str, object]] = None
    ) -> "LoggerBuilder":
        """
        Set the conversion pattern used by console and file writers.

        Args:
            pattern: Conversion pattern
            word_table: Conversion words to recognize (default: all built-in words)

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_console()
                .with_pattern("%d{ABSOLUTE} %-5p [%t] %c{1}: %m")
                .build())
        """
        self._config.conversion_pattern = pattern
        self._word_table = word_table
        return self

    def with_location(self, enabled: bool = True) -> "LoggerBuilder":
        """
        Capture the caller's file, line and function for every entry.

        Needed for %F, %L, %M and %l; without it they render as "NA".
        """
        self._config.capture_location = enabled
        return self

    def with_filter(self, log_filter) -> "LoggerBuilder":
        """
        Add a log filter.

        Args:
            log_filter: Callable taking a LogEntry, or an object with should_log()

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_filter(lambda entry: "heartbeat" not in entry.message)
                .build())
        """
        self._custom_filters.append(log_filter)
        return self

    def add_writer(self, writer) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._custom_writers.append(writer)
        return self

    def build(self) -> Logger:
        """
        Build and return configured logger.

        Raises:
            PatternParseError: If the conversion pattern cannot be scanned
        """
        formatter = PatternFormatter(self._config.conversion_pattern, self._word_table)
        logger = Logger(self._config)

        # Add console writer
        if self._console_enabled:
            logger.add_writer(ConsoleWriter(
                colored=self._config.colored_output,
                formatter=formatter
            ))

        # Add file writer
        if self._config.log_file:
            logger.add_writer(FileWriter(self._config.log_file, formatter=formatter))

        # Add custom writers
        for writer in self._custom_writers:
            logger.add_writer(writer)

        # Add custom filters
        for log_filter in self._custom_filters:
            logger.add_filter(log_filter)

        return logger
