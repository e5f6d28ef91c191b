"""
Domain models and value objects.

Contains prefix formats and the built-in format constants.
"""

from prefix_parse.core.domain.prefix_format import (
    BIN,
    DEC,
    DEFAULT_FORMATS,
    HEX,
    OCT,
    PrefixFormat,
    PrefixFormatSet,
)

__all__ = [
    "PrefixFormat",
    "PrefixFormatSet",
    "HEX",
    "OCT",
    "BIN",
    "DEC",
    "DEFAULT_FORMATS",
]
