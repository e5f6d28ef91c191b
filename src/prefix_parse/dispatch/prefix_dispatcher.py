"""PrefixDispatcher: определение основания по префиксу и разбор числа

Порядок автоопределения (parse):
1. Форматы набора проверяются по порядку (по умолчанию HEX, OCT, BIN, DEC)
2. Первый совпавший префикс снимается, остаток разбирается в его radix
3. Результат (значение или ошибка) возвращается сразу, без перебора дальше
4. DEC (пустой префикс) совпадает всегда, поэтому стоит последним

Явный формат (parse_with):
- Префикс совпал → снимается, остаток разбирается в radix формата
- Префикс не совпал → разбирается вся строка в radix формата
  (или NO_PREFIX_MATCH, если require_prefix=True)

Состояния нет: каждый вызов чистая функция от аргументов.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from prefix_parse.core.domain.prefix_format import (
    DEFAULT_FORMATS,
    PrefixFormat,
    PrefixFormatSet,
)
from prefix_parse.core.math.radix_primitive import (
    ParseError,
    ParseErrorKind,
    RadixParsable,
    T,
    parse_digits,
)

LOGGER = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrefixDispatcherConfig:
    """Конфигурация PrefixDispatcher.

    formats: порядок автоопределения для parse(). Набор без пустого префикса
    не имеет fallback: строка без известного префикса → NO_PREFIX_MATCH.
    """

    formats: PrefixFormatSet = DEFAULT_FORMATS


# =============================================================================
# DISPATCHER
# =============================================================================


class PrefixDispatcher:
    """Диспетчер префиксов.

    Сопоставляет начало строки с префиксами, снимает совпавший префикс
    и передаёт остаток примитиву parse_digits с соответствующим radix.
    Ошибки примитива пробрасываются вызывающему коду без повторов.
    """

    def __init__(self, config: Optional[PrefixDispatcherConfig] = None):
        """
        Args:
            config: Конфигурация диспетчера (default: PrefixDispatcherConfig())
        """
        self.config = config or PrefixDispatcherConfig()

    def parse_with(
        self,
        target: RadixParsable[T],
        fmt: PrefixFormat,
        src: str,
        require_prefix: bool = False,
    ) -> T:
        """
        Разбор строки с явно заданным форматом.

        Args:
            target: Целевой тип (например, U32)
            fmt: Формат префикса
            src: Входная строка
            require_prefix: Требовать наличие префикса (default: False)

        Returns:
            Значение целевого типа

        Raises:
            ParseError: NO_PREFIX_MATCH (только при require_prefix=True)
                        или ошибка примитива (EMPTY / INVALID_DIGIT / OVERFLOW)

        Examples:
            >>> parse_with(U32, PrefixFormat(prefix="0z", radix=36), "0z1jz")
            2015
            >>> parse_with(U32, HEX, "ff")
            255
        """
        _check_source(src)

        remainder = fmt.strip(src)
        if remainder is None:
            if require_prefix:
                raise ParseError(
                    ParseErrorKind.NO_PREFIX_MATCH, src, radix=fmt.radix, prefix=fmt.prefix
                )
            LOGGER.debug("prefix %r absent, parsing whole input at radix %d", fmt.prefix, fmt.radix)
            return parse_digits(src, fmt.radix, target)

        return self._parse_remainder(target, fmt, remainder)

    def parse(self, target: RadixParsable[T], src: str) -> T:
        """
        Разбор строки с автоопределением основания.

        Первый совпавший префикс окончательно выбирает основание: при ошибке
        разбора остатка fallback на следующие форматы не выполняется.

        Args:
            target: Целевой тип (например, U32)
            src: Входная строка

        Returns:
            Значение целевого типа

        Raises:
            ParseError: ошибка примитива для выбранного формата,
                        NO_PREFIX_MATCH если набор без fallback и ничего не совпало

        Examples:
            >>> parse(U32, "0x10")
            16
            >>> parse(U32, "0b10")
            2
            >>> parse(U32, "10")
            10
        """
        _check_source(src)

        fmt = self.config.formats.match(src)
        if fmt is None:
            raise ParseError(ParseErrorKind.NO_PREFIX_MATCH, src)

        return self._parse_remainder(target, fmt, src[len(fmt.prefix):])

    def _parse_remainder(self, target: RadixParsable[T], fmt: PrefixFormat, remainder: str) -> T:
        LOGGER.debug("prefix %r matched, radix %d", fmt.prefix, fmt.radix)
        try:
            return parse_digits(remainder, fmt.radix, target)
        except ParseError as exc:
            # исходная ошибка целевого типа не изменяется
            if exc.prefix is not None:
                raise
            raise ParseError(exc.kind, exc.source, radix=exc.radix, prefix=fmt.prefix) from exc


def _check_source(src: str) -> None:
    if not isinstance(src, str):
        raise TypeError(f"input must be str, got {type(src).__name__}")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Глобальный диспетчер с порядком по умолчанию
_DEFAULT_DISPATCHER = PrefixDispatcher()


def parse(target: RadixParsable[T], src: str) -> T:
    """
    Разбор с автоопределением основания (HEX, OCT, BIN, DEC).

    Raises:
        ParseError: Ошибка разбора
    """
    return _DEFAULT_DISPATCHER.parse(target, src)


def parse_with(
    target: RadixParsable[T],
    fmt: PrefixFormat,
    src: str,
    require_prefix: bool = False,
) -> T:
    """
    Разбор с явным форматом.

    Raises:
        ParseError: Ошибка разбора
    """
    return _DEFAULT_DISPATCHER.parse_with(target, fmt, src, require_prefix=require_prefix)


# =============================================================================
# EXTENSION
# =============================================================================


class PrefixParseMixin:
    """
    Extension-операции для целевых типов.

    Объект-тип, реализующий from_str_radix и унаследовавший миксин,
    получает методы parse / parse_with:

        >>> U32.parse("0o10")
        8
    """

    def parse(self: RadixParsable[T], src: str) -> T:
        return parse(self, src)

    def parse_with(
        self: RadixParsable[T], fmt: PrefixFormat, src: str, require_prefix: bool = False
    ) -> T:
        return parse_with(self, fmt, src, require_prefix=require_prefix)
