"""
Tests for PrefixFormat / PrefixFormatSet Pydantic models

Покрывает:
- Встроенные форматы HEX / OCT / BIN / DEC и порядок DEFAULT_FORMATS
- Снятие префикса (литерально, регистрозависимо)
- Валидацию полей
- Immutability (frozen=True)
- Сопоставление в упорядоченном наборе (first match wins)
"""

import pytest
from pydantic import ValidationError

from prefix_parse.core.domain import (
    BIN,
    DEC,
    DEFAULT_FORMATS,
    HEX,
    OCT,
    PrefixFormat,
    PrefixFormatSet,
)


# =============================================================================
# ВСТРОЕННЫЕ ФОРМАТЫ
# =============================================================================


class TestBuiltinFormats:
    """Тесты встроенных форматов"""

    def test_builtin_values(self) -> None:
        """Префиксы и основания встроенных форматов"""
        assert (HEX.prefix, HEX.radix) == ("0x", 16)
        assert (OCT.prefix, OCT.radix) == ("0o", 8)
        assert (BIN.prefix, BIN.radix) == ("0b", 2)
        assert (DEC.prefix, DEC.radix) == ("", 10)

    def test_default_order(self) -> None:
        """Порядок автоопределения: HEX, OCT, BIN, DEC последним"""
        assert DEFAULT_FORMATS.formats == (HEX, OCT, BIN, DEC)
        assert DEFAULT_FORMATS.formats[-1].prefix == ""
        assert DEFAULT_FORMATS.has_fallback

    def test_default_set_is_iterable(self) -> None:
        """Итерация по набору даёт форматы в порядке проверки"""
        assert list(DEFAULT_FORMATS) == [HEX, OCT, BIN, DEC]
        assert [fmt.prefix for fmt in DEFAULT_FORMATS] == ["0x", "0o", "0b", ""]
        assert len(DEFAULT_FORMATS) == 4

    def test_default_set_indexing(self) -> None:
        """Доступ к форматам по индексу"""
        assert DEFAULT_FORMATS[0] == HEX
        assert DEFAULT_FORMATS[-1] == DEC

    def test_value_equality(self) -> None:
        """Форматы сравниваются по значению"""
        assert PrefixFormat(prefix="0x", radix=16) == HEX
        assert PrefixFormat(prefix="0x", radix=8) != HEX


# =============================================================================
# PREFIX FORMAT
# =============================================================================


class TestPrefixFormat:
    """Тесты PrefixFormat"""

    def test_strip_matching_prefix(self) -> None:
        """Совпавший префикс снимается"""
        assert HEX.strip("0x10") == "10"
        assert HEX.strip("0x") == ""

    def test_strip_missing_prefix(self) -> None:
        """Несовпавший префикс → None"""
        assert HEX.strip("10") is None
        assert HEX.strip("") is None

    def test_strip_is_case_sensitive(self) -> None:
        """'0X' не совпадает с '0x'"""
        assert HEX.strip("0X10") is None
        assert not BIN.matches("0B1")

    def test_empty_prefix_matches_everything(self) -> None:
        """Пустой префикс совпадает с любой строкой"""
        assert DEC.strip("123") == "123"
        assert DEC.strip("") == ""
        assert DEC.matches("0X10")

    def test_radix_must_be_positive(self) -> None:
        """radix <= 0 отклоняется моделью"""
        with pytest.raises(ValidationError):
            PrefixFormat(prefix="0q", radix=0)
        with pytest.raises(ValidationError):
            PrefixFormat(prefix="0q", radix=-2)

    def test_radix_upper_bound_not_enforced(self) -> None:
        """Верхнюю границу radix проверяет примитив, а не модель"""
        fmt = PrefixFormat(prefix="0q", radix=40)
        assert fmt.radix == 40

    def test_missing_fields(self) -> None:
        """Оба поля обязательны"""
        with pytest.raises(ValidationError):
            PrefixFormat(prefix="0x")
        with pytest.raises(ValidationError):
            PrefixFormat(radix=16)

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        with pytest.raises(ValidationError):
            HEX.radix = 8
        assert HEX.radix == 16

    def test_hashable(self) -> None:
        """Frozen модель пригодна как ключ"""
        lookup = {HEX: "hex", DEC: "dec"}
        assert lookup[PrefixFormat(prefix="0x", radix=16)] == "hex"


# =============================================================================
# PREFIX FORMAT SET
# =============================================================================


class TestPrefixFormatSet:
    """Тесты PrefixFormatSet"""

    def test_match_follows_order(self) -> None:
        """Возвращается первый совпавший формат"""
        assert DEFAULT_FORMATS.match("0x1f") == HEX
        assert DEFAULT_FORMATS.match("0o17") == OCT
        assert DEFAULT_FORMATS.match("0b11") == BIN
        assert DEFAULT_FORMATS.match("31") == DEC

    def test_uppercase_prefix_falls_to_decimal(self) -> None:
        """Заглавный префикс не распознаётся"""
        assert DEFAULT_FORMATS.match("0X10") == DEC

    def test_shared_leading_substring_first_wins(self) -> None:
        """При общем начале префиксов побеждает первый по порядку"""
        short = PrefixFormat(prefix="0x", radix=16)
        long = PrefixFormat(prefix="0xy", radix=36)

        assert PrefixFormatSet(formats=(short, long)).match("0xy1") == short
        assert PrefixFormatSet(formats=(long, short)).match("0xy1") == long

    def test_no_fallback(self) -> None:
        """Набор без пустого префикса может не совпасть"""
        formats = PrefixFormatSet(formats=(HEX, BIN))
        assert not formats.has_fallback
        assert formats.match("10") is None
        assert len(formats) == 2

    def test_empty_set_rejected(self) -> None:
        """Пустой набор недопустим"""
        with pytest.raises(ValidationError):
            PrefixFormatSet(formats=())

    def test_duplicate_prefix_rejected(self) -> None:
        """Повторный префикс отклоняется"""
        with pytest.raises(ValidationError) as exc_info:
            PrefixFormatSet(formats=(HEX, PrefixFormat(prefix="0x", radix=36)))
        assert "duplicate prefix" in str(exc_info.value)

    def test_empty_prefix_must_be_last(self) -> None:
        """Пустой префикс (catch-all) допустим только последним"""
        with pytest.raises(ValidationError) as exc_info:
            PrefixFormatSet(formats=(DEC, HEX))
        assert "empty prefix must be the last" in str(exc_info.value)
        with pytest.raises(ValidationError):
            PrefixFormatSet(formats=(BIN, DEC, OCT))

    def test_duplicate_empty_prefix_rejected(self) -> None:
        """Два пустых префикса отклоняются"""
        with pytest.raises(ValidationError):
            PrefixFormatSet(formats=(HEX, PrefixFormat(prefix="", radix=16), DEC))

    def test_accepts_dicts(self) -> None:
        """Форматы можно задать словарями"""
        formats = PrefixFormatSet(formats=[{"prefix": "#", "radix": 16}, {"prefix": "", "radix": 10}])
        assert formats.formats[0] == PrefixFormat(prefix="#", radix=16)
        assert isinstance(formats.formats, tuple)

    def test_frozen(self) -> None:
        """Набор неизменяем"""
        with pytest.raises(ValidationError):
            DEFAULT_FORMATS.formats = (DEC,)
