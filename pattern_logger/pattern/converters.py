"""
Converter nodes

A compiled conversion pattern is a sequence of converters. A literal
converter renders fixed text; a field converter renders one field of the
log entry and fits it into its FormattingInfo.
"""

import os
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from pattern_logger.core import internal_log
from pattern_logger.core.log_entry import LogEntry
from pattern_logger.pattern.fields import FieldResolver
from pattern_logger.pattern.formatting_info import FormattingInfo, DEFAULT_FORMATTING


class PatternConverter(ABC):
    """Base class for the units of a converter chain."""

    @abstractmethod
    def render(self, entry: LogEntry) -> str:
        """
        Render this unit for a log entry.

        Args:
            entry: The log entry being formatted

        Returns:
            Text contributed by this unit
        """
        pass


@dataclass(frozen=True)
class LiteralConverter(PatternConverter):
    """Fixed text copied verbatim from the pattern."""

    text: str

    def render(self, entry: LogEntry) -> str:
        return self.text


@dataclass(frozen=True)
class FieldConverter(PatternConverter):
    """
    One ``%<modifiers><word><option>`` directive.

    Attributes:
        word: Conversion word as written in the pattern
        kind: Word table entry the word resolved to
        resolver: Extracts the raw field text
        formatting: Width rules applied to the raw text
        option: Option text without braces, or None
    """

    word: str
    kind: Any
    resolver: FieldResolver
    formatting: FormattingInfo = DEFAULT_FORMATTING
    option: Optional[str] = None
    _failure_reported: threading.Event = field(
        default_factory=threading.Event, init=False, compare=False, repr=False
    )

    def render(self, entry: LogEntry) -> str:
        try:
            value = self.resolver.resolve(entry)
        except Exception as e:
            # Reported once per directive; later failures render silently
            if not self._failure_reported.is_set():
                self._failure_reported.set()
                internal_log.warn(f"Failed rendering '%{self.word}' in conversion pattern: {e}")
            value = ""

        if isinstance(value, (list, tuple)):
            value = os.linesep.join(str(line) for line in value)
        elif not isinstance(value, str):
            value = str(value)

        return self.formatting.apply(value)
