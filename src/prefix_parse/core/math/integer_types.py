"""
Integer Types — Целые типы фиксированной ширины

Целевой тип для разбора префиксных чисел: диапазон задаётся
шириной в битах и знаковостью. Реализует from_str_radix
(capability RadixParsable).
"""

from dataclasses import dataclass

from prefix_parse.core.math.radix_primitive import (
    ParseError,
    ParseErrorKind,
    digit_value,
    validate_radix,
)


# =============================================================================
# ЦЕЛЫЕ ТИПЫ
# =============================================================================


@dataclass(frozen=True)
class IntegerType:
    """
    Целый тип фиксированной ширины.

    Python int не ограничен, поэтому диапазон целевого типа задаётся явно:
    bits и signed определяют [min_value, max_value].
    """

    name: str
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """Проверка, что значение представимо в типе."""
        return self.min_value <= value <= self.max_value

    def from_str_radix(self, digits: str, radix: int) -> int:
        """
        Разбор строки цифр в заданном основании.

        Допускается один ведущий знак: "+" для любого типа, "-" только для
        знаковых. Одиночный знак без цифр считается невалидной цифрой.

        Args:
            digits: Строка цифр (без префикса)
            radix: Основание системы счисления (2..36)

        Returns:
            Разобранное значение в диапазоне [min_value, max_value]

        Raises:
            ValueError: Если radix вне [MIN_RADIX, MAX_RADIX]
            ParseError: EMPTY / INVALID_DIGIT / OVERFLOW

        Examples:
            >>> IntegerType("u32", 32, signed=False).from_str_radix("ff", 16)
            255
            >>> IntegerType("i8", 8, signed=True).from_str_radix("-80", 16)
            -128
        """
        validate_radix(radix)

        if not digits:
            raise ParseError(ParseErrorKind.EMPTY, digits, radix=radix)

        negative = False
        body = digits
        if body[0] == "+":
            body = body[1:]
        elif body[0] == "-" and self.signed:
            negative = True
            body = body[1:]

        if not body:
            raise ParseError(ParseErrorKind.INVALID_DIGIT, digits, radix=radix)

        result = 0
        for char in body:
            value = digit_value(char, radix)
            if value is None:
                raise ParseError(ParseErrorKind.INVALID_DIGIT, digits, radix=radix)

            result = result * radix + (-value if negative else value)
            if not self.contains(result):
                raise ParseError(ParseErrorKind.OVERFLOW, digits, radix=radix)

        return result

    def __repr__(self) -> str:
        return self.name
