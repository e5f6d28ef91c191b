"""
JSON Schema Contract Validators

Модуль для валидации внешних описаний наборов префиксов (конфигурация,
JSON-файлы) согласно формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Схемы:
- prefix_format_set.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator

from prefix_parse.core.domain.prefix_format import PrefixFormat, PrefixFormatSet


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'prefix_format_set')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class PrefixFormatSetValidator(ContractValidator):
    """Валидатор для prefix_format_set контракта."""

    def __init__(self):
        super().__init__("prefix_format_set")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_prefix_format_set(data: Dict[str, Any]) -> None:
    """
    Валидация описания набора префиксов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PrefixFormatSetValidator().validate(data)


def load_format_set(data: Dict[str, Any]) -> PrefixFormatSet:
    """
    Построение PrefixFormatSet из описания (dict).

    Порядок форматов в описании сохраняется как порядок автоопределения.

    Args:
        data: {"formats": [{"prefix": "0x", "radix": 16}, ...]}

    Returns:
        Immutable PrefixFormatSet

    Raises:
        jsonschema.ValidationError: Нарушение контракта
        pydantic.ValidationError: Нарушение инвариантов модели (повтор префикса)
    """
    validate_prefix_format_set(data)
    return PrefixFormatSet(
        formats=tuple(PrefixFormat(**entry) for entry in data["formats"])
    )


def load_format_set_json(source: Union[str, Path]) -> PrefixFormatSet:
    """
    Загрузка PrefixFormatSet из JSON-файла.

    Args:
        source: Путь к JSON-файлу

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Нарушение контракта
    """
    with open(source, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_format_set(data)
