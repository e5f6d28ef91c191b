"""Prefix dispatch: prefix matching, radix selection and built-in targets"""

from .prefix_dispatcher import (
    PrefixDispatcher,
    PrefixDispatcherConfig,
    PrefixParseMixin,
    parse,
    parse_with,
)
from .integer_targets import (
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
)

__all__ = [
    "PrefixDispatcher",
    "PrefixDispatcherConfig",
    "PrefixParseMixin",
    "parse",
    "parse_with",
    # Built-in targets
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
]
