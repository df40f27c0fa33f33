"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import os
import threading

from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.throwable_info import ThrowableInformation

# Reference point for relative timestamps (%r)
START_TIME = datetime.now()


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. Layouts only read
    from it.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    process_id: int = field(default_factory=os.getpid)
    logger_name: str = ""
    file_name: str = ""
    line_number: int = 0
    function_name: str = ""
    throwable: Optional[ThrowableInformation] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)
        if isinstance(self.throwable, BaseException):
            self.throwable = ThrowableInformation(self.throwable)

    @property
    def has_location(self) -> bool:
        """True if caller location was captured for this entry."""
        return bool(self.file_name)

    @property
    def relative_time_ms(self) -> int:
        """Milliseconds elapsed between library start and this entry."""
        return int((self.timestamp - START_TIME).total_seconds() * 1000)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
            "process_id": self.process_id,
            "logger_name": self.logger_name,
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
            "throwable": (
                self.throwable.get_string_representation()
                if self.throwable else None
            ),
            "extra": self.extra,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        The rendered traceback of a serialized entry cannot be turned back
        into an exception and is dropped.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            level=LogLevel[data["level"]],
            message=data["message"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            thread_id=data.get("thread_id", 0),
            thread_name=data.get("thread_name", ""),
            process_id=data.get("process_id", 0),
            logger_name=data.get("logger_name", ""),
            file_name=data.get("file_name", ""),
            line_number=data.get("line_number", 0),
            function_name=data.get("function_name", ""),
            extra=data.get("extra", {}),
        )

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:8}] "
            f"[{self.thread_name}] "
            f"{self.message}"
        )
