"""
Main Logger class - Asynchronous logger feeding formatted entries to writers
"""

from __future__ import annotations
from typing import Optional, List, Any, Dict
import atexit
import os
import queue
import sys
import threading
import time

from pattern_logger.core import internal_log
from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.core.throwable_info import ThrowableInformation

_SRCFILE = os.path.normcase(__file__)


def _find_caller() -> Dict[str, Any]:
    """Locate the first stack frame outside this module."""
    frame = sys._getframe(1)
    while frame is not None and os.path.normcase(frame.f_code.co_filename) == _SRCFILE:
        frame = frame.f_back
    if frame is None:
        return {}
    return {
        "file_name": frame.f_code.co_filename,
        "line_number": frame.f_lineno,
        "function_name": frame.f_code.co_name,
    }


def _to_throwable(exc_info: Any) -> Optional[ThrowableInformation]:
    if exc_info is None or exc_info is False:
        return None
    if isinstance(exc_info, BaseException):
        return ThrowableInformation(exc_info)
    if isinstance(exc_info, tuple):
        exception = exc_info[1] if len(exc_info) > 1 else None
    else:
        exception = sys.exc_info()[1]
    return ThrowableInformation(exception) if exception is not None else None


class Logger:
    """Main logger class with async support."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._writers: List[Any] = []
        self._filters: List[Any] = []
        self._running = False
        self._log_queue: Optional[queue.Queue] = None
        self._worker_thread: Optional[threading.Thread] = None
        self._metrics = {"logged": 0, "dropped": 0, "processed": 0}

        if self._config.async_mode:
            self._start_async_worker()

        atexit.register(self.shutdown)

    @property
    def name(self) -> str:
        return self._config.name

    def _start_async_worker(self):
        """Start async worker thread."""
        self._log_queue = queue.Queue(maxsize=self._config.queue_size)
        self._running = True
        self._worker_thread = threading.Thread(
            target=self._process_queue,
            name=f"{self._config.name}-worker",
            daemon=True
        )
        self._worker_thread.start()

    def _process_queue(self):
        """Process log entries from queue (worker thread)."""
        batch = []
        last_flush = time.time()

        while self._running or not self._log_queue.empty():
            try:
                timeout = self._config.flush_interval_ms / 1000.0
                entry = self._log_queue.get(timeout=timeout)

                try:
                    batch.append(entry)

                    should_flush = (
                        len(batch) >= self._config.batch_size or
                        (time.time() - last_flush) >= timeout
                    )

                    if should_flush:
                        self._write_batch(batch)
                        batch.clear()
                        last_flush = time.time()
                finally:
                    # Always mark task as done to prevent queue.join() deadlock
                    self._log_queue.task_done()

            except queue.Empty:
                if batch:
                    self._write_batch(batch)
                    batch.clear()
                    last_flush = time.time()

        # Entries still batched when the logger stopped
        if batch:
            self._write_batch(batch)

    def _write_batch(self, batch: List[LogEntry]):
        """Write batch of log entries to all writers."""
        for entry in batch:
            for writer in self._writers:
                try:
                    writer.write(entry)
                except Exception as e:
                    internal_log.warn(f"Writer error: {e}")
            self._metrics["processed"] += 1

    def add_writer(self, writer: Any) -> None:
        """Add a log writer."""
        self._writers.append(writer)

    def add_filter(self, log_filter: Any) -> None:
        """
        Add a log filter.

        Args:
            log_filter: Object with a should_log(entry) method, or a callable
                        taking the entry and returning True to keep it
        """
        if not (hasattr(log_filter, "should_log") or callable(log_filter)):
            raise TypeError("log_filter must be callable or define should_log")
        self._filters.append(log_filter)

    def _accepts(self, entry: LogEntry) -> bool:
        for f in self._filters:
            check = getattr(f, "should_log", f)
            try:
                if not check(entry):
                    return False
            except Exception as e:
                # Let the entry through
                internal_log.warn(f"Filter error: {e}")
        return True

    def log(self, level: LogLevel, message: str, exc_info: Any = None, **kwargs) -> None:
        """
        Log a message.

        Args:
            level: Severity of the message
            message: Message text
            exc_info: Exception to attach. True attaches the exception
                      currently being handled; an exception instance or a
                      sys.exc_info() tuple attaches that one.
            **kwargs: Additional LogEntry fields (e.g. extra={...})
        """
        if level < self._config.min_level:
            return

        if self._config.capture_location:
            for key, value in _find_caller().items():
                kwargs.setdefault(key, value)

        entry = LogEntry(
            level=level,
            message=message,
            logger_name=self._config.name,
            throwable=_to_throwable(exc_info),
            **kwargs
        )

        if not self._accepts(entry):
            return

        if self._config.async_mode:
            try:
                self._log_queue.put_nowait(entry)
                self._metrics["logged"] += 1
            except queue.Full:
                self._metrics["dropped"] += 1
        else:
            self._write_batch([entry])
            self._metrics["logged"] += 1

    def trace(self, message: str, **kwargs) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log error message with the exception currently being handled."""
        kwargs.setdefault("exc_info", True)
        self.log(LogLevel.ERROR, message, **kwargs)

    def flush(self):
        """Flush all pending log entries."""
        if self._config.async_mode and self._log_queue:
            # Wait for queue to empty
            self._log_queue.join()

            # Wait for all entries to be processed (not just dequeued)
            max_wait = 1.0  # Maximum 1 second wait
            start_time = time.time()
            while (time.time() - start_time) < max_wait:
                if self._metrics["processed"] >= self._metrics["logged"]:
                    break
                time.sleep(0.01)  # 10ms polling interval

        for writer in self._writers:
            if hasattr(writer, 'flush'):
                writer.flush()

    def shutdown(self):
        """Shutdown logger gracefully."""
        if self._running:
            self._running = False
            if self._worker_thread:
                self._worker_thread.join(timeout=5.0)

        writers, self._writers = self._writers, []
        for writer in writers:
            if hasattr(writer, 'close'):
                writer.close()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()
