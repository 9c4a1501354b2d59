"""
Contract Validation Module

Модуль для валидации JSON контрактов GeoMath.
"""

from .validators import (
    ContractValidator,
    FloatFormatValidator,
    GeoMathVectorsValidator,
    SchemaLoader,
    load_geomath_vectors,
    validate_float_format,
    validate_geomath_vectors,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FloatFormatValidator",
    "GeoMathVectorsValidator",
    # Functions
    "validate_float_format",
    "validate_geomath_vectors",
    "load_geomath_vectors",
]
