"""
Contract Validation Module

Валидация внешних описаний наборов префиксов.
"""

from .validators import (
    ContractValidator,
    PrefixFormatSetValidator,
    SchemaLoader,
    load_format_set,
    load_format_set_json,
    validate_prefix_format_set,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PrefixFormatSetValidator",
    # Functions
    "validate_prefix_format_set",
    "load_format_set",
    "load_format_set_json",
]
