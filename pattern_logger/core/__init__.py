"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- ThrowableInformation: Exception attached to a log entry
"""

from pattern_logger.core.exceptions import (
    LoggerException,
    PatternParseError,
    OptionConversionError,
)
from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.throwable_info import ThrowableInformation
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.core.logger import Logger
from pattern_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "ThrowableInformation",
    "LoggerException",
    "PatternParseError",
    "OptionConversionError",
]
