"""
Field kinds and their resolvers

Every conversion word in a pattern maps to a FieldKind. Each kind has one
FieldResolver class that extracts the raw text for that field from a log
entry. Resolvers are registered explicitly in FIELD_RESOLVERS; the parser
never looks classes up by name.
"""

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from pattern_logger.core.log_entry import LogEntry

# Rendered for caller-location fields when the entry carries no location
LOCATION_NA = "NA"

FieldValue = Union[str, List[str]]


class FieldKind(Enum):
    """Categories of log entry data a directive can render."""

    DATE = "date"
    ENV = "env"
    FILE = "file"
    LEVEL = "level"
    LINE = "line"
    LOCATION = "location"
    LOGGER = "logger"
    MDC = "mdc"
    MESSAGE = "message"
    METHOD = "method"
    NEWLINE = "newline"
    PROCESS = "process"
    RELATIVE = "relative"
    THREAD = "thread"
    THROWABLE = "throwable"


class FieldResolver(ABC):
    """
    Extracts the raw text of one field from a log entry.

    A resolver is built once per directive at compile time with the
    directive's option (the text inside ``{...}``, or None).

    Subclasses raise ValueError from __init__ when the option is invalid;
    the parser then reports a warning and retries without an option.
    """

    def __init__(self, option: Optional[str] = None):
        self.option = option

    @abstractmethod
    def resolve(self, entry: LogEntry) -> FieldValue:
        """
        Extract the field from the entry.

        Args:
            entry: The log entry being formatted

        Returns:
            The field text, or a list of lines for multi-line fields
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(option={self.option!r})"


class DateResolver(FieldResolver):
    """
    Timestamp of the entry.

    The option is either a named format or a strftime format string.
    """

    ISO8601 = "ISO8601"
    NAMED_FORMATS = {
        "ABSOLUTE": "%H:%M:%S",
        "DATE": "%d %b %Y %H:%M:%S",
    }

    def __init__(self, option: Optional[str] = None):
        super().__init__(option)
        if option is None or option == self.ISO8601:
            self._format = None
        else:
            self._format = self.NAMED_FORMATS.get(option, option)

    def resolve(self, entry: LogEntry) -> FieldValue:
        if self._format is None:
            return entry.timestamp.isoformat(timespec="milliseconds")
        return entry.timestamp.strftime(self._format)


class EnvResolver(FieldResolver):
    """Value of the environment variable named by the option."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        if not self.option:
            return ""
        return os.environ.get(self.option, "")


class FileResolver(FieldResolver):
    """File of the logging call."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        return entry.file_name or LOCATION_NA


class LevelResolver(FieldResolver):
    def resolve(self, entry: LogEntry) -> FieldValue:
        return entry.level.name


class LineResolver(FieldResolver):
    """Line number of the logging call."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        if not entry.line_number:
            return LOCATION_NA
        return str(entry.line_number)


class LocationResolver(FieldResolver):
    """Full caller location as ``function(file:line)``."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        if not entry.has_location:
            return LOCATION_NA
        function = entry.function_name or LOCATION_NA
        line = entry.line_number or LOCATION_NA
        return f"{function}({entry.file_name}:{line})"


class LoggerResolver(FieldResolver):
    """
    Name of the logger.

    An integer option N keeps only the last N dot-separated segments,
    e.g. ``%c{2}`` renders "app.db.pool" as "db.pool".
    """

    def __init__(self, option: Optional[str] = None):
        super().__init__(option)
        self._depth = 0
        if option is not None:
            try:
                depth = int(option)
            except ValueError:
                raise ValueError(f"logger depth must be an integer, got {option!r}") from None
            if depth < 0:
                raise ValueError(f"logger depth cannot be negative, got {depth}")
            self._depth = depth

    def resolve(self, entry: LogEntry) -> FieldValue:
        name = entry.logger_name
        if self._depth <= 0:
            return name
        return ".".join(name.split(".")[-self._depth:])


class MdcResolver(FieldResolver):
    """
    Mapped diagnostic context, taken from the entry's extra fields.

    With an option, renders that key only (empty if missing). Without one,
    renders every key as ``key=value`` pairs.
    """

    def resolve(self, entry: LogEntry) -> FieldValue:
        if self.option:
            value = entry.extra.get(self.option)
            return "" if value is None else str(value)
        return ", ".join(f"{key}={value}" for key, value in entry.extra.items())


class MessageResolver(FieldResolver):
    def resolve(self, entry: LogEntry) -> FieldValue:
        return entry.message


class MethodResolver(FieldResolver):
    """Function name of the logging call."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        return entry.function_name or LOCATION_NA


class NewlineResolver(FieldResolver):
    def resolve(self, entry: LogEntry) -> FieldValue:
        return os.linesep


class ProcessResolver(FieldResolver):
    def resolve(self, entry: LogEntry) -> FieldValue:
        return str(entry.process_id)


class RelativeResolver(FieldResolver):
    """Milliseconds since the library was loaded."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        return str(entry.relative_time_ms)


class ThreadResolver(FieldResolver):
    def resolve(self, entry: LogEntry) -> FieldValue:
        return entry.thread_name


class ThrowableResolver(FieldResolver):
    """Traceback of the logged exception, one list item per line."""

    def resolve(self, entry: LogEntry) -> FieldValue:
        if entry.throwable is None:
            return ""
        return entry.throwable.get_string_representation()


FIELD_RESOLVERS: Dict[FieldKind, Type[FieldResolver]] = {
    FieldKind.DATE: DateResolver,
    FieldKind.ENV: EnvResolver,
    FieldKind.FILE: FileResolver,
    FieldKind.LEVEL: LevelResolver,
    FieldKind.LINE: LineResolver,
    FieldKind.LOCATION: LocationResolver,
    FieldKind.LOGGER: LoggerResolver,
    FieldKind.MDC: MdcResolver,
    FieldKind.MESSAGE: MessageResolver,
    FieldKind.METHOD: MethodResolver,
    FieldKind.NEWLINE: NewlineResolver,
    FieldKind.PROCESS: ProcessResolver,
    FieldKind.RELATIVE: RelativeResolver,
    FieldKind.THREAD: ThreadResolver,
    FieldKind.THROWABLE: ThrowableResolver,
}

# Conversion words recognized by PatternFormatter unless told otherwise
DEFAULT_WORD_TABLE: Dict[str, FieldKind] = {
    "c": FieldKind.LOGGER,
    "lo": FieldKind.LOGGER,
    "logger": FieldKind.LOGGER,

    "d": FieldKind.DATE,
    "date": FieldKind.DATE,

    "e": FieldKind.ENV,
    "env": FieldKind.ENV,

    "ex": FieldKind.THROWABLE,
    "exception": FieldKind.THROWABLE,
    "throwable": FieldKind.THROWABLE,

    "F": FieldKind.FILE,
    "file": FieldKind.FILE,

    "l": FieldKind.LOCATION,
    "location": FieldKind.LOCATION,

    "L": FieldKind.LINE,
    "line": FieldKind.LINE,

    "m": FieldKind.MESSAGE,
    "msg": FieldKind.MESSAGE,
    "message": FieldKind.MESSAGE,

    "M": FieldKind.METHOD,
    "method": FieldKind.METHOD,

    "n": FieldKind.NEWLINE,
    "newline": FieldKind.NEWLINE,

    "p": FieldKind.LEVEL,
    "le": FieldKind.LEVEL,
    "level": FieldKind.LEVEL,

    "r": FieldKind.RELATIVE,
    "relative": FieldKind.RELATIVE,

    "t": FieldKind.THREAD,
    "thread": FieldKind.THREAD,

    "pid": FieldKind.PROCESS,
    "process": FieldKind.PROCESS,

    "X": FieldKind.MDC,
    "mdc": FieldKind.MDC,
}


def resolver_for(target) -> Optional[Type[FieldResolver]]:
    """
    Find the resolver class for a word table entry.

    Args:
        target: A FieldKind, or a FieldResolver subclass supplied directly
                by a custom word table

    Returns:
        The resolver class, or None if target is neither
    """
    if isinstance(target, FieldKind):
        return FIELD_RESOLVERS.get(target)
    if isinstance(target, type) and issubclass(target, FieldResolver):
        return target
    return None
