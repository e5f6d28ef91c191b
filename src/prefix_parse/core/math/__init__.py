"""
Core math modules для prefix_parse

Примитив разбора цифр в заданном основании и целый тип фиксированной ширины.
"""

# Radix primitive
from prefix_parse.core.math.radix_primitive import (
    MAX_RADIX,
    MIN_RADIX,
    ParseError,
    ParseErrorKind,
    RadixParsable,
    digit_value,
    parse_digits,
    validate_radix,
)

# Integer types
from prefix_parse.core.math.integer_types import IntegerType

__all__ = [
    # Radix primitive — Constants
    "MAX_RADIX",
    "MIN_RADIX",
    # Radix primitive — Errors
    "ParseError",
    "ParseErrorKind",
    # Radix primitive — Functions
    "RadixParsable",
    "digit_value",
    "parse_digits",
    "validate_radix",
    # Integer types
    "IntegerType",
]
