"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Pattern Logger - A logging framework with conversion-pattern layouts
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from pattern_logger.core.logger import Logger
from pattern_logger.core.logger_builder import LoggerBuilder
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.core.exceptions import LoggerException, PatternParseError
from pattern_logger.core.internal_log import set_warning_handler
from pattern_logger.formatters.pattern_formatter import PatternFormatter
from pattern_logger.pattern.parser import compile_pattern

# Import submodules (not all classes by default)
from pattern_logger import formatters
from pattern_logger import pattern
from pattern_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "LoggerException",
    "PatternParseError",
    "PatternFormatter",
    "compile_pattern",
    "set_warning_handler",
    "formatters",
    "pattern",
    "writers",
]
