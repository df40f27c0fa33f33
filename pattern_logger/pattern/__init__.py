"""
Conversion pattern engine

Compiles printf-style conversion patterns into converter chains and
renders log entries through them.
"""

from pattern_logger.pattern.formatting_info import FormattingInfo
from pattern_logger.pattern.fields import (
    FieldKind,
    FieldResolver,
    FIELD_RESOLVERS,
    DEFAULT_WORD_TABLE,
    LOCATION_NA,
)
from pattern_logger.pattern.converters import (
    PatternConverter,
    LiteralConverter,
    FieldConverter,
)
from pattern_logger.pattern.chain import ConverterChain, format_chain
from pattern_logger.pattern.parser import (
    PatternParser,
    Directive,
    compile_pattern,
    parse_modifiers,
    scan_pattern,
)

__all__ = [
    "FormattingInfo",
    "FieldKind",
    "FieldResolver",
    "FIELD_RESOLVERS",
    "DEFAULT_WORD_TABLE",
    "LOCATION_NA",
    "PatternConverter",
    "LiteralConverter",
    "FieldConverter",
    "ConverterChain",
    "format_chain",
    "PatternParser",
    "Directive",
    "compile_pattern",
    "parse_modifiers",
    "scan_pattern",
]
