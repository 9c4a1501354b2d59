"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- float_format.json (сериализованный FloatFormat)
- geomath_vectors.json (эталонные векторы для примитивов GeoMath)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# Схемы и векторы поставляются внутри пакета (package data)
_CONTRACTS_DIR = Path(__file__).parent


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = _CONTRACTS_DIR / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'float_format')

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

        # Meta-validation самой схемы
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


class FloatFormatValidator(ContractValidator):
    """Валидатор для float_format контракта."""

    def __init__(self):
        super().__init__("float_format")


class GeoMathVectorsValidator(ContractValidator):
    """Валидатор для файла эталонных векторов GeoMath."""

    def __init__(self):
        super().__init__("geomath_vectors")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_float_format(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного FloatFormat (FloatFormat.model_dump()).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FloatFormatValidator().validate(data)


def validate_geomath_vectors(data: Dict[str, Any]) -> None:
    """
    Валидация набора эталонных векторов.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GeoMathVectorsValidator().validate(data)


def load_geomath_vectors(name: str = "geomath_vectors") -> Dict[str, Any]:
    """
    Загрузка и валидация файла эталонных векторов из vectors/.

    Args:
        name: Имя файла без расширения

    Returns:
        Провалидированные данные: {"schema_version": ..., "cases": [...]}

    Raises:
        FileNotFoundError: Если файл не найден
        ValidationError: Если данные не соответствуют схеме
    """
    vectors_path = _CONTRACTS_DIR / "vectors" / f"{name}.json"
    if not vectors_path.exists():
        raise FileNotFoundError(f"Vectors file not found: {vectors_path}")

    with open(vectors_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_geomath_vectors(data)
    return data
