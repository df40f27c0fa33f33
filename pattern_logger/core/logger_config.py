"""
Logger configuration management
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional
from pathlib import Path

from pattern_logger.core import internal_log
from pattern_logger.core import option_converter
from pattern_logger.core.log_level import LogLevel


def _to_string(value: Any) -> str:
    return option_converter.substitute_variables(str(value))


def _to_path(value: Any) -> Path:
    return Path(_to_string(value))


@dataclass
class LoggerConfig:
    """
    Logger configuration.
    """

    # Basic settings
    name: str = "logger"
    min_level: LogLevel = LogLevel.INFO
    async_mode: bool = True

    # Queue settings (for async mode)
    queue_size: int = 10000
    batch_size: int = 100
    flush_interval_ms: int = 100

    # Output settings
    console_output: bool = True
    colored_output: bool = True
    log_file: Optional[Path] = None

    # Layout settings
    conversion_pattern: str = "%d{ISO8601} [%-5p] %c: %m"
    capture_location: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.queue_size <= 0:
            raise ValueError("queue_size must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.batch_size > self.queue_size:
            raise ValueError("batch_size cannot exceed queue_size")
        if self.flush_interval_ms < 0:
            raise ValueError("flush_interval_ms cannot be negative")
        if not isinstance(self.conversion_pattern, str):
            raise ValueError("conversion_pattern must be a string")

        # Convert log_file to Path if it's a string
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from an in-memory structure.

        Values may be given as strings; they are converted to the type of
        the matching field. ``${NAME}`` references in string values are
        replaced with environment variables. None values keep the default.
        Unknown keys are reported as warnings and skipped.

        Args:
            data: Mapping of field names to values

        Returns:
            New LoggerConfig instance

        Raises:
            OptionConversionError: If a value cannot be converted
            ValueError: If the resulting configuration is invalid

        Example:
            config = LoggerConfig.from_dict({
                "name": "app",
                "min_level": "debug",
                "async_mode": "off",
                "log_file": "${LOG_DIR}/app.log",
                "conversion_pattern": "%d %-5p %c: %m",
            })
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                internal_log.warn(f"Unknown configuration key [{key}]. Ignoring.")
                continue
            if value is None:
                continue
            kwargs[key] = _CONVERTERS[key](value)

        return cls(**kwargs)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            console_output=True,
            colored_output=True,
            async_mode=False,  # Synchronous for debugging
            conversion_pattern="%d{ABSOLUTE} [%-5p] %c %l: %m",
            capture_location=True,
        )

    @classmethod
    def performance_config(cls) -> "LoggerConfig":
        """Create configuration optimized for performance."""
        return cls(
            min_level=LogLevel.INFO,
            async_mode=True,
            queue_size=50000,
            batch_size=500,
            flush_interval_ms=50,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            console_output=False,
            async_mode=True,
            queue_size=20000,
            batch_size=200,
        )


_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "name": _to_string,
    "min_level": option_converter.to_level,
    "async_mode": option_converter.to_boolean,
    "queue_size": option_converter.to_positive_integer,
    "batch_size": option_converter.to_positive_integer,
    "flush_interval_ms": option_converter.to_integer,
    "console_output": option_converter.to_boolean,
    "colored_output": option_converter.to_boolean,
    "log_file": _to_path,
    "conversion_pattern": str,
    "capture_location": option_converter.to_boolean,
}
