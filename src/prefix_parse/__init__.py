"""
prefix_parse — разбор чисел с префиксом системы счисления

    >>> from prefix_parse import U32, U8, parse, HEX
    >>> parse(U32, "0x10")
    16
    >>> U32.parse("0b10")
    2
    >>> U32.parse_with(HEX, "ff")
    255
"""

from prefix_parse.core.contracts import load_format_set, load_format_set_json
from prefix_parse.core.domain import (
    BIN,
    DEC,
    DEFAULT_FORMATS,
    HEX,
    OCT,
    PrefixFormat,
    PrefixFormatSet,
)
from prefix_parse.core.math import (
    IntegerType,
    ParseError,
    ParseErrorKind,
    RadixParsable,
    parse_digits,
)
from prefix_parse.dispatch import (
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    IntegerTarget,
    PrefixDispatcher,
    PrefixDispatcherConfig,
    PrefixParseMixin,
    parse,
    parse_with,
)

__version__ = "0.1.0"

__all__ = [
    # Formats
    "PrefixFormat",
    "PrefixFormatSet",
    "HEX",
    "OCT",
    "BIN",
    "DEC",
    "DEFAULT_FORMATS",
    # Errors
    "ParseError",
    "ParseErrorKind",
    # Target types
    "RadixParsable",
    "IntegerType",
    "IntegerTarget",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    # Parsing
    "parse_digits",
    "parse",
    "parse_with",
    "PrefixDispatcher",
    "PrefixDispatcherConfig",
    "PrefixParseMixin",
    # Config loading
    "load_format_set",
    "load_format_set_json",
]
