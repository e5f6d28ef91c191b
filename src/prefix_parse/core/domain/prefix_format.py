"""
PrefixFormat — Модель префикса системы счисления

Immutable Pydantic модели:
- PrefixFormat: литеральный префикс + основание для цифр после него
- PrefixFormatSet: упорядоченный набор префиксов для автоопределения

Встроенные форматы: HEX ("0x", 16), OCT ("0o", 8), BIN ("0b", 2), DEC ("", 10).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сопоставление префикса литеральное и регистрозависимое ("0X" != "0x")
2. Порядок набора сохраняется: первый совпавший префикс фиксирует основание
3. Пустой префикс (fallback) может стоять только последним
4. Диапазон radix здесь не ограничивается сверху (проверяет примитив разбора)
"""

from typing import Final, Iterator, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# PREFIX FORMAT
# =============================================================================


class PrefixFormat(BaseModel):
    """
    Формат префикса числа.

    Immutable модель (frozen=True). Пустой prefix совпадает с любой строкой
    и используется как fallback (десятичный формат).
    """

    prefix: str = Field(..., description="Литеральный префикс (например, '0x')")
    radix: int = Field(..., gt=0, description="Основание для цифр после префикса")

    model_config = {"frozen": True}

    def matches(self, src: str) -> bool:
        """Проверка, что строка начинается с префикса."""
        return src.startswith(self.prefix)

    def strip(self, src: str) -> Optional[str]:
        """
        Снятие префикса.

        Returns:
            Остаток строки после префикса или None, если префикс не совпал
        """
        if not self.matches(src):
            return None
        return src[len(self.prefix):]


# =============================================================================
# PREFIX FORMAT SET
# =============================================================================


class PrefixFormatSet(BaseModel):
    """
    Упорядоченный набор форматов для автоопределения.

    Форматы проверяются по порядку; совпадение первого префикса окончательно
    (последующие форматы не пробуются, даже если разбор после снятия
    префикса завершится ошибкой).
    """

    formats: Tuple[PrefixFormat, ...] = Field(
        ..., min_length=1, description="Форматы в порядке проверки"
    )

    model_config = {"frozen": True}

    @field_validator("formats")
    @classmethod
    def validate_prefix_order(
        cls, v: Tuple[PrefixFormat, ...]
    ) -> Tuple[PrefixFormat, ...]:
        """
        Проверка порядка префиксов.

        - Префикс не может повторяться
        - Пустой префикс (catch-all) допустим только последним

        Общее начало у разных префиксов ("0x" и "0xy") допустимо:
        побеждает первый по порядку.
        """
        seen = set()
        for index, fmt in enumerate(v):
            if fmt.prefix == "" and index != len(v) - 1:
                raise ValueError("empty prefix must be the last format in the set")
            if fmt.prefix in seen:
                raise ValueError(f"duplicate prefix {fmt.prefix!r} in format set")
            seen.add(fmt.prefix)
        return v

    @property
    def has_fallback(self) -> bool:
        """Есть ли в наборе формат с пустым префиксом."""
        return any(fmt.prefix == "" for fmt in self.formats)

    def match(self, src: str) -> Optional[PrefixFormat]:
        """
        Первый формат, префикс которого совпадает с началом строки.

        Returns:
            PrefixFormat или None, если ни один префикс не совпал
        """
        for fmt in self.formats:
            if fmt.matches(src):
                return fmt
        return None

    def __iter__(self) -> Iterator[PrefixFormat]:
        return iter(self.formats)

    def __getitem__(self, index: int) -> PrefixFormat:
        return self.formats[index]

    def __len__(self) -> int:
        return len(self.formats)


# =============================================================================
# ВСТРОЕННЫЕ ФОРМАТЫ
# =============================================================================

# '0x' — шестнадцатеричные числа
HEX: Final[PrefixFormat] = PrefixFormat(prefix="0x", radix=16)

# '0o' — восьмеричные числа
OCT: Final[PrefixFormat] = PrefixFormat(prefix="0o", radix=8)

# '0b' — двоичные числа
BIN: Final[PrefixFormat] = PrefixFormat(prefix="0b", radix=2)

# '' — десятичные числа (fallback, всегда последний)
DEC: Final[PrefixFormat] = PrefixFormat(prefix="", radix=10)

# Порядок автоопределения по умолчанию
DEFAULT_FORMATS: Final[PrefixFormatSet] = PrefixFormatSet(formats=(HEX, OCT, BIN, DEC))
