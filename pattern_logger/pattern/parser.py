"""
Conversion pattern parser

Compiles a conversion pattern such as ``%d{ISO8601} [%-5p] %c: %m`` into a
ConverterChain. Text between directives becomes literal converters; each
directive becomes a field converter.

Directive syntax::

    %<modifiers><word>{<option>}

- modifiers: optional width rules, ``[-]min[.[-]max]`` (see FormattingInfo)
- word: one or more letters, looked up in the word table
- option: optional free text in braces, passed to the field resolver

Unknown words and malformed modifiers are reported as warnings and do not
stop compilation.
"""

import re
from typing import List, Mapping, NamedTuple, Optional, Union

from pattern_logger.core import internal_log
from pattern_logger.core.exceptions import PatternParseError
from pattern_logger.pattern.chain import ConverterChain
from pattern_logger.pattern.converters import (
    PatternConverter,
    LiteralConverter,
    FieldConverter,
)
from pattern_logger.pattern.fields import DEFAULT_WORD_TABLE, resolver_for
from pattern_logger.pattern.formatting_info import FormattingInfo, DEFAULT_FORMATTING

ESCAPE_CHAR = "%"

DIRECTIVE_REGEX = re.compile(
    re.escape(ESCAPE_CHAR)
    + r"(?P<modifiers>[0-9.-]*)"   # Format modifiers (optional)
    + r"(?P<word>[a-zA-Z]+)"       # The conversion word
    + r"(?P<option>\{[^}]*\})?"    # Conversion option in braces (optional)
)

MODIFIER_REGEX = re.compile(r"^(?P<min>-?[0-9]+)?(?:\.(?P<max>-?[0-9]+))?$")


class Directive(NamedTuple):
    """One directive found in a conversion pattern."""

    text: str
    modifiers: str
    word: str
    option: Optional[str]
    start: int
    end: int


Token = Union[str, Directive]


def scan_pattern(pattern: str) -> List[Token]:
    """
    Split a conversion pattern into literal text and directives.

    Concatenating the literal strings and the ``text`` of every directive
    reproduces the pattern exactly.

    Args:
        pattern: Conversion pattern

    Returns:
        Tokens in encounter order; literals are plain strings

    Raises:
        PatternParseError: If the pattern cannot be scanned
    """
    try:
        matches = list(DIRECTIVE_REGEX.finditer(pattern))
    except (TypeError, re.error) as e:
        raise PatternParseError(pattern, str(e)) from e

    tokens: List[Token] = []
    prev_end = 0

    for match in matches:
        start, end = match.span()
        if start > prev_end:
            tokens.append(pattern[prev_end:start])

        option = match.group("option")
        tokens.append(Directive(
            text=match.group(0),
            modifiers=match.group("modifiers"),
            word=match.group("word"),
            option=option[1:-1].strip() if option else None,
            start=start,
            end=end,
        ))
        prev_end = end

    if prev_end < len(pattern):
        tokens.append(pattern[prev_end:])

    return tokens


def parse_modifiers(
    modifiers: str,
    on_warning: Optional[internal_log.WarningHandler] = None,
) -> FormattingInfo:
    """
    Turn a modifier string such as ``-5.10`` into FormattingInfo.

    Args:
        modifiers: Text between the escape character and the conversion word
        on_warning: Receives a message when the modifiers are malformed

    Returns:
        FormattingInfo for the modifiers, or the defaults if they are empty
        or malformed
    """
    if not modifiers:
        return DEFAULT_FORMATTING

    match = MODIFIER_REGEX.match(modifiers)
    if match is None or (match.group("min") is None and match.group("max") is None):
        internal_log.warn(
            f"Invalid modifier in conversion pattern: [{modifiers}]. Ignoring modifier.",
            on_warning,
        )
        return DEFAULT_FORMATTING

    min_width = 0
    pad_left = True
    max_width = None
    trim_left = False

    # A zero width is the same as no width: ".0" leaves the field unbounded
    min_part = int(match.group("min") or 0)
    if min_part:
        min_width = abs(min_part)
        pad_left = min_part > 0

    max_part = int(match.group("max") or 0)
    if max_part:
        max_width = abs(max_part)
        trim_left = max_part < 0

    return FormattingInfo(
        min_width=min_width,
        pad_left=pad_left,
        max_width=max_width,
        trim_left=trim_left,
    )


class PatternParser:
    """
    Compiles one conversion pattern against a word table.

    Example:
        parser = PatternParser("%d{ABSOLUTE} %-5p %c{1}: %m")
        chain = parser.parse()
        line = chain.format(entry)
    """

    def __init__(
        self,
        pattern: str,
        word_table: Optional[Mapping[str, object]] = None,
        on_warning: Optional[internal_log.WarningHandler] = None,
    ):
        """
        Initialize parser.

        Args:
            pattern: Conversion pattern
            word_table: Maps conversion words to FieldKind values (or to
                        FieldResolver subclasses). Default: DEFAULT_WORD_TABLE
            on_warning: Receives compile warnings. Default: the internal
                        warning channel
        """
        self.pattern = pattern
        self.word_table = DEFAULT_WORD_TABLE if word_table is None else word_table
        self.on_warning = on_warning

    def parse(self) -> ConverterChain:
        """
        Compile the pattern.

        Returns:
            The compiled chain. An empty pattern yields a chain holding a
            single empty literal.

        Raises:
            PatternParseError: If the pattern cannot be scanned
        """
        if self.pattern == "" or self.pattern is None:
            return ConverterChain([LiteralConverter("")], "")

        converters: List[PatternConverter] = []
        for token in scan_pattern(self.pattern):
            if isinstance(token, Directive):
                converter = self._create_converter(token)
                if converter is not None:
                    converters.append(converter)
            else:
                converters.append(LiteralConverter(token))

        return ConverterChain(converters, self.pattern)

    def _warn(self, message: str) -> None:
        internal_log.warn(message, self.on_warning)

    def _create_converter(self, directive: Directive) -> Optional[FieldConverter]:
        formatting = parse_modifiers(directive.modifiers, self.on_warning)

        if directive.word not in self.word_table:
            self._warn(
                f"Invalid keyword '%{directive.word}' in conversion pattern. Ignoring keyword."
            )
            return None

        kind = self.word_table[directive.word]
        resolver_cls = resolver_for(kind)
        if resolver_cls is None:
            self._warn(
                f"No converter available for keyword '%{directive.word}' ({kind!r}). Ignoring keyword."
            )
            return None

        option = directive.option or None
        try:
            resolver = resolver_cls(option)
        except ValueError as e:
            self._warn(
                f"Invalid option [{option}] for keyword '%{directive.word}': {e}. Ignoring option."
            )
            option = None
            resolver = resolver_cls(None)

        return FieldConverter(
            word=directive.word,
            kind=kind,
            resolver=resolver,
            formatting=formatting,
            option=option,
        )


def compile_pattern(
    pattern: str,
    word_table: Optional[Mapping[str, object]] = None,
    on_warning: Optional[internal_log.WarningHandler] = None,
) -> ConverterChain:
    """
    Compile a conversion pattern into a ConverterChain.

    Args:
        pattern: Conversion pattern
        word_table: Conversion words to recognize (default: DEFAULT_WORD_TABLE)
        on_warning: Receives compile warnings

    Returns:
        The compiled chain

    Raises:
        PatternParseError: If the pattern cannot be scanned
    """
    return PatternParser(pattern, word_table, on_warning).parse()
