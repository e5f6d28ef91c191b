"""
Radix Primitive — Разбор строки цифр в заданной системе счисления

Базовый примитив, на котором построен разбор префиксных чисел:
- parse_digits(digits, radix, target) → значение целевого типа
- Таксономия ошибок разбора (ParseErrorKind / ParseError)
- Протокол RadixParsable: любой тип с from_str_radix получает префиксный разбор
- Проверка radix и значения отдельных цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. radix вне диапазона [MIN_RADIX, MAX_RADIX] → ValueError (ошибка вызывающего кода)
2. Пустая строка цифр → ParseError(EMPTY)
3. Символ, не являющийся цифрой в radix → ParseError(INVALID_DIGIT)
4. Значение вне диапазона целевого типа → ParseError(OVERFLOW)
5. Цифры обрабатываются слева направо, сообщается первая ошибка
6. Пробелы и разделители "_" не допускаются (в отличие от int())
"""

from enum import Enum
from typing import Final, Optional, Protocol, TypeVar, runtime_checkable

# =============================================================================
# ГРАНИЦЫ RADIX
# =============================================================================

# Минимальное основание системы счисления
MIN_RADIX: Final[int] = 2

# Максимальное основание: 10 цифр + 26 латинских букв
MAX_RADIX: Final[int] = 36


# =============================================================================
# ОШИБКИ
# =============================================================================


class ParseErrorKind(str, Enum):
    """Вид ошибки разбора"""

    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    OVERFLOW = "overflow"
    NO_PREFIX_MATCH = "no_prefix_match"


_KIND_MESSAGES: Final[dict] = {
    ParseErrorKind.EMPTY: "cannot parse integer from empty string",
    ParseErrorKind.INVALID_DIGIT: "invalid digit found in string",
    ParseErrorKind.OVERFLOW: "number too large or too small to fit in target type",
    ParseErrorKind.NO_PREFIX_MATCH: "no prefix match",
}


class ParseError(ValueError):
    """
    Ошибка разбора числа.

    Наследует ValueError, поэтому код, ожидающий ошибки int(), продолжает работать.

    Attributes:
        kind: Вид ошибки (ParseErrorKind)
        source: Строка, переданная в примитив (после снятия префикса)
        radix: Основание, в котором выполнялся разбор
        prefix: Совпавший префикс (заполняется диспетчером, иначе None)
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        source: str,
        radix: Optional[int] = None,
        prefix: Optional[str] = None,
    ):
        self.kind = kind
        self.source = source
        self.radix = radix
        self.prefix = prefix
        super().__init__(_KIND_MESSAGES[kind])

    def __reduce__(self):
        return (ParseError, (self.kind, self.source, self.radix, self.prefix))

    def __str__(self) -> str:
        details = [f"source={self.source!r}"]
        if self.radix is not None:
            details.append(f"radix={self.radix}")
        if self.prefix is not None:
            details.append(f"prefix={self.prefix!r}")
        return f"{self.args[0]} ({', '.join(details)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.kind, self.source, self.radix, self.prefix) == (
            other.kind,
            other.source,
            other.radix,
            other.prefix,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.source, self.radix, self.prefix))


# =============================================================================
# ПРОТОКОЛ
# =============================================================================

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class RadixParsable(Protocol[T_co]):
    """
    Capability: разбор строки цифр в заданном основании.

    Любой объект с методом from_str_radix удовлетворяет протоколу
    и может использоваться как целевой тип для parse / parse_with.
    """

    def from_str_radix(self, digits: str, radix: int) -> T_co:
        ...


# =============================================================================
# ЦИФРЫ
# =============================================================================


def validate_radix(radix: int) -> None:
    """
    Проверка основания системы счисления.

    Raises:
        ValueError: Если radix вне [MIN_RADIX, MAX_RADIX]
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise ValueError(f"radix must be an int, got {radix!r}")
    if radix < MIN_RADIX or radix > MAX_RADIX:
        raise ValueError(
            f"radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}"
        )


def digit_value(char: str, radix: int) -> Optional[int]:
    """
    Значение одной цифры в заданном основании.

    Поддерживаются только ASCII-цифры и латинские буквы (в любом регистре).

    Returns:
        Значение цифры или None, если символ не является цифрой в radix
    """
    if "0" <= char <= "9":
        value = ord(char) - ord("0")
    elif "a" <= char <= "z":
        value = ord(char) - ord("a") + 10
    elif "A" <= char <= "Z":
        value = ord(char) - ord("A") + 10
    else:
        return None

    if value >= radix:
        return None
    return value


# =============================================================================
# ПРИМИТИВ
# =============================================================================


def parse_digits(digits: str, radix: int, target: RadixParsable[T]) -> T:
    """
    Разбор строки цифр в целевой тип.

    Тонкая обёртка над target.from_str_radix: проверяет capability
    и передаёт управление целевому типу.

    Args:
        digits: Строка цифр
        radix: Основание системы счисления
        target: Целевой тип (RadixParsable)

    Raises:
        TypeError: Если target не реализует from_str_radix
        ValueError: Если radix вне допустимого диапазона
        ParseError: Ошибка разбора целевого типа
    """
    if not isinstance(target, RadixParsable):
        raise TypeError(f"{target!r} does not implement from_str_radix")
    return target.from_str_radix(digits, radix)
