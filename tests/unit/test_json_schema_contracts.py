"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и enum
- Интеграция с Pydantic моделью FloatFormat
- Прогон эталонных векторов через примитивы GeoMath
"""

import math
from importlib import resources

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    FloatFormatValidator,
    GeoMathVectorsValidator,
    SchemaLoader,
    load_geomath_vectors,
    validate_float_format,
    validate_geomath_vectors,
)
from src.core.math import IEEE754_BINARY64, geomath

# op → функция GeoMath
_OPS = {
    "sq": geomath.sq,
    "hypot": geomath.hypot,
    "log1p": geomath.log1p,
    "atanh": geomath.atanh,
    "cbrt": geomath.cbrt,
    "error_free_sum": geomath.error_free_sum,
    "ang_normalize": geomath.ang_normalize,
    "ang_normalize2": geomath.ang_normalize2,
    "ang_diff": geomath.ang_diff,
    "isfinite": geomath.isfinite,
}

_VECTORS = load_geomath_vectors()


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_float_format():
    """Валидный float_format для тестирования."""
    return IEEE754_BINARY64.model_dump()


@pytest.fixture
def valid_vectors():
    """Минимальный валидный набор векторов."""
    return {
        "schema_version": "1",
        "cases": [
            {"op": "hypot", "args": [3.0, 4.0], "expected": 5.0},
            {"op": "error_free_sum", "args": [1.0, 1e-16], "expected": [1.0, 1e-16]},
            {"op": "isfinite", "args": [1.0], "expected": True, "note": "finite"},
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("schema_name", ["float_format", "geomath_vectors"])
    def test_schemas_load(self, schema_name) -> None:
        """Схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        """Повторная загрузка берётся из кэша"""
        loader = SchemaLoader()
        assert loader.load_schema("float_format") is loader.load_schema("float_format")

    @pytest.mark.parametrize(
        "resource",
        ["schema/float_format.json", "schema/geomath_vectors.json", "vectors/geomath_vectors.json"],
    )
    def test_contracts_ship_inside_package(self, resource) -> None:
        """Схемы и векторы лежат внутри пакета src.core.contracts (package data)"""
        assert resources.files("src.core.contracts").joinpath(resource).is_file()

    def test_unknown_schema(self) -> None:
        """Неизвестная схема → FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# FLOAT FORMAT CONTRACT
# =============================================================================


class TestFloatFormatContract:
    """Тесты float_format контракта."""

    def test_valid(self, valid_float_format) -> None:
        """Валидный float_format проходит"""
        validate_float_format(valid_float_format)
        assert FloatFormatValidator().is_valid(valid_float_format)

    def test_missing_required(self, valid_float_format) -> None:
        """Отсутствие required поля детектируется"""
        del valid_float_format["epsilon"]
        with pytest.raises(ValidationError, match="'epsilon' is a required property"):
            validate_float_format(valid_float_format)

    def test_wrong_type(self, valid_float_format) -> None:
        """Неверный тип детектируется"""
        valid_float_format["digits"] = "53"
        assert not FloatFormatValidator().is_valid(valid_float_format)

    def test_additional_property(self, valid_float_format) -> None:
        """Лишние поля запрещены"""
        valid_float_format["rounding"] = "nearest"
        assert not FloatFormatValidator().is_valid(valid_float_format)

    def test_iter_errors(self, valid_float_format) -> None:
        """iter_errors возвращает все нарушения"""
        valid_float_format["radix"] = 1
        valid_float_format["epsilon"] = -1.0
        errors = list(FloatFormatValidator().iter_errors(valid_float_format))
        assert len(errors) == 2


# =============================================================================
# GEOMATH VECTORS CONTRACT
# =============================================================================


class TestGeoMathVectorsContract:
    """Тесты geomath_vectors контракта."""

    def test_valid(self, valid_vectors) -> None:
        """Валидный набор векторов проходит"""
        validate_geomath_vectors(valid_vectors)

    def test_unknown_op(self, valid_vectors) -> None:
        """Неизвестная операция отвергается"""
        valid_vectors["cases"][0]["op"] = "AngRound"
        with pytest.raises(ValidationError):
            validate_geomath_vectors(valid_vectors)

    def test_too_many_args(self, valid_vectors) -> None:
        """Больше двух аргументов отвергается"""
        valid_vectors["cases"][0]["args"] = [1.0, 2.0, 3.0]
        assert not GeoMathVectorsValidator().is_valid(valid_vectors)

    def test_bad_expected_pair(self, valid_vectors) -> None:
        """Пара expected должна иметь два элемента"""
        valid_vectors["cases"][1]["expected"] = [1.0]
        assert not GeoMathVectorsValidator().is_valid(valid_vectors)

    def test_empty_cases(self, valid_vectors) -> None:
        """Пустой список cases отвергается"""
        valid_vectors["cases"] = []
        assert not GeoMathVectorsValidator().is_valid(valid_vectors)

    def test_reference_file_covers_every_op(self) -> None:
        """Эталонный файл покрывает все операции"""
        ops = {case["op"] for case in _VECTORS["cases"]}
        assert ops == set(_OPS)


# =============================================================================
# REFERENCE VECTORS
# =============================================================================


@pytest.mark.parametrize(
    "case",
    _VECTORS["cases"],
    ids=[f"{c['op']}{tuple(c['args'])}" for c in _VECTORS["cases"]],
)
def test_reference_vector(case) -> None:
    """Примитив на эталонном входе даёт точно эталонный результат."""
    func = _OPS[case["op"]]
    result = func(*(float(a) for a in case["args"]))
    expected = case["expected"]

    if isinstance(expected, bool):
        assert result is expected
    elif isinstance(expected, list):
        assert tuple(result) == tuple(float(e) for e in expected)
    else:
        assert not math.isnan(result)
        assert result == float(expected)
