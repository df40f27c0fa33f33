"""
Conversion of configuration values

Values arriving from an in-memory configuration structure are usually
strings. These helpers turn them into the types the logger expects and
fail with a uniform message when they cannot.
"""

import os
import re
from typing import Any, Mapping, Optional

from pattern_logger.core.exceptions import OptionConversionError
from pattern_logger.core.log_level import LogLevel

_TRUE_VALUES = {"1", "true", "on", "yes"}
_FALSE_VALUES = {"0", "false", "off", "no"}

_VARIABLE_PATTERN = re.compile(r"\$\{([^}]+)\}")


def _describe(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f"'{value}'"
    return str(value)


def to_boolean(value: Any) -> bool:
    """
    Convert a configuration value to bool.

    Accepts booleans, the integers 1 and 0, and the strings
    1/0, true/false, on/off, yes/no (case-insensitive).

    Raises:
        OptionConversionError: If the value has no boolean meaning
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return value == 1
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False

    raise OptionConversionError(
        f"Given value [{_describe(value)}] cannot be converted to boolean."
    )


def to_integer(value: Any) -> int:
    """
    Convert a configuration value to int.

    Raises:
        OptionConversionError: For None, booleans, and non-numeric strings
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and re.fullmatch(r"\s*-?\d+\s*", value):
        return int(value)

    raise OptionConversionError(
        f"Given value [{_describe(value)}] cannot be converted to integer."
    )


def to_positive_integer(value: Any) -> int:
    """Like to_integer, but the result must be greater than zero."""
    number = to_integer(value)
    if number <= 0:
        raise OptionConversionError(
            f"Given value [{_describe(value)}] cannot be converted to a positive integer."
        )
    return number


def to_level(value: Any) -> LogLevel:
    """
    Convert a level name or number to LogLevel.

    Raises:
        OptionConversionError: If the value names no level
    """
    if isinstance(value, LogLevel):
        return value
    try:
        if isinstance(value, int) and not isinstance(value, bool):
            return LogLevel(value)
        if isinstance(value, str):
            return LogLevel.from_string(value)
    except ValueError:
        pass

    raise OptionConversionError(
        f"Given value [{_describe(value)}] cannot be converted to a log level."
    )


def substitute_variables(text: str, variables: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace ${NAME} references in text.

    Args:
        text: Text containing ${NAME} references
        variables: Lookup table (default: the process environment).
                   Unknown names are replaced with an empty string.

    Example:
        substitute_variables("${HOME}/logs/app.log")
    """
    lookup = os.environ if variables is None else variables
    return _VARIABLE_PATTERN.sub(lambda m: str(lookup.get(m.group(1), "")), text)
