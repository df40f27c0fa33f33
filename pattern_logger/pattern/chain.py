"""
Compiled converter chain

The chain is frozen when the parser returns it. Formatting only reads it,
so one chain can be shared by any number of threads.
"""

from typing import Iterable, Iterator, Optional, Tuple

from pattern_logger.core.log_entry import LogEntry
from pattern_logger.pattern.converters import PatternConverter


class ConverterChain:
    """Immutable, ordered sequence of converters for one conversion pattern."""

    __slots__ = ("_converters", "_pattern")

    def __init__(self, converters: Iterable[PatternConverter], pattern: str = ""):
        converters = tuple(converters)
        for converter in converters:
            if not isinstance(converter, PatternConverter):
                raise TypeError(f"not a PatternConverter: {converter!r}")
        object.__setattr__(self, "_converters", converters)
        object.__setattr__(self, "_pattern", pattern)

    def __setattr__(self, name, value):
        raise AttributeError("ConverterChain is immutable")

    @property
    def pattern(self) -> str:
        """Conversion pattern this chain was compiled from."""
        return self._pattern

    @property
    def converters(self) -> Tuple[PatternConverter, ...]:
        return self._converters

    @property
    def head(self) -> Optional[PatternConverter]:
        """First converter, or None for an empty chain."""
        return self._converters[0] if self._converters else None

    def format(self, entry: LogEntry) -> str:
        """
        Render every converter in order and join the results.

        Args:
            entry: Log entry to format

        Returns:
            The formatted line
        """
        return "".join([converter.render(entry) for converter in self._converters])

    def __iter__(self) -> Iterator[PatternConverter]:
        return iter(self._converters)

    def __len__(self) -> int:
        return len(self._converters)

    def __getitem__(self, index: int) -> PatternConverter:
        return self._converters[index]

    def __repr__(self) -> str:
        return f"ConverterChain(pattern={self._pattern!r}, converters={len(self._converters)})"


def format_chain(chain: ConverterChain, entry: LogEntry) -> str:
    """Format entry through chain. Same as ``chain.format(entry)``."""
    return chain.format(entry)
