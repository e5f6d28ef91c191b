"""
Integer Targets — встроенные целевые типы с extension-операциями

- Беззнаковые: U8, U16, U32, U64, U128
- Знаковые: I8, I16, I32, I64, I128

IntegerType из core не зависит от диспетчера; миксин PrefixParseMixin
подключается здесь, поэтому U32.parse("0x10") доступен без обратного
импорта core → dispatch.
"""

from typing import Final

from prefix_parse.core.math.integer_types import IntegerType
from prefix_parse.dispatch.prefix_dispatcher import PrefixParseMixin


class IntegerTarget(IntegerType, PrefixParseMixin):
    """IntegerType с методами parse / parse_with."""


# =============================================================================
# ВСТРОЕННЫЕ ТИПЫ
# =============================================================================

U8: Final[IntegerTarget] = IntegerTarget("u8", 8, signed=False)
U16: Final[IntegerTarget] = IntegerTarget("u16", 16, signed=False)
U32: Final[IntegerTarget] = IntegerTarget("u32", 32, signed=False)
U64: Final[IntegerTarget] = IntegerTarget("u64", 64, signed=False)
U128: Final[IntegerTarget] = IntegerTarget("u128", 128, signed=False)

I8: Final[IntegerTarget] = IntegerTarget("i8", 8, signed=True)
I16: Final[IntegerTarget] = IntegerTarget("i16", 16, signed=True)
I32: Final[IntegerTarget] = IntegerTarget("i32", 32, signed=True)
I64: Final[IntegerTarget] = IntegerTarget("i64", 64, signed=True)
I128: Final[IntegerTarget] = IntegerTarget("i128", 128, signed=True)
