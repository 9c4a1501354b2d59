"""
Core math modules для GeoMath

Численно устойчивые примитивы и конфигурация формата float.
"""

# Float format configuration
from src.core.math.float_format import (
    IEEE754_BINARY64,
    FloatFormat,
    FloatFormatMismatch,
    check_float_format,
    host_float_format,
)

# GeoMath primitives
from src.core.math.geomath import (
    # Constants
    DEGREE,
    DIGITS,
    EPSILON,
    MIN_NORMAL,
    # Types
    SumResult,
    # Basic transforms
    cbrt,
    hypot,
    isfinite,
    sq,
    # Accuracy-preserving transcendentals
    atanh,
    log1p,
    # Compensated summation
    error_free_sum,
    # Angles
    ang_diff,
    ang_normalize,
    ang_normalize2,
)

__all__ = [
    # Float format
    "IEEE754_BINARY64",
    "FloatFormat",
    "FloatFormatMismatch",
    "check_float_format",
    "host_float_format",
    # GeoMath — Constants
    "DEGREE",
    "DIGITS",
    "EPSILON",
    "MIN_NORMAL",
    # GeoMath — Types
    "SumResult",
    # GeoMath — Functions
    "ang_diff",
    "ang_normalize",
    "ang_normalize2",
    "atanh",
    "cbrt",
    "error_free_sum",
    "hypot",
    "isfinite",
    "log1p",
    "sq",
]
