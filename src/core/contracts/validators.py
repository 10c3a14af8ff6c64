"""
JSON Schema Contract Validators

Модуль для валидации JSON контрактов арифметических кейсов.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (package data в src/core/contracts/schema/):
- arithmetic_case.json
"""

import json
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из package data (src/core/contracts/schema/),
    поэтому работает и из checkout, и после установки пакета.
    """

    def __init__(self, schema_dir: Traversable | None = None):
        if schema_dir is None:
            schema_dir = resources.files(__package__) / "schema"
        self._schema_dir = schema_dir
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'arithmetic_case')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем; создаётся при первом обращении, не при импорте"""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_schema_loader()).load_schema(schema_name)
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


class ArithmeticCaseValidator(ContractValidator):
    """Валидатор для arithmetic_case контракта."""

    def __init__(self):
        super().__init__("arithmetic_case")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_arithmetic_case(data: Dict[str, Any]) -> None:
    """
    Валидация arithmetic_case данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ArithmeticCaseValidator().validate(data)
