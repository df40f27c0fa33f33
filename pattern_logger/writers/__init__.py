"""Writers module - Log output handlers"""

from pattern_logger.writers.console_writer import ConsoleWriter
from pattern_logger.writers.file_writer import FileWriter

__all__ = ["ConsoleWriter", "FileWriter"]
