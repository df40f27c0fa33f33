"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from pattern_logger.formatters.base_formatter import BaseFormatter
from pattern_logger.formatters.pattern_formatter import PatternFormatter, SimpleFormatter

__all__ = [
    "BaseFormatter",
    "PatternFormatter",
    "SimpleFormatter",
]
