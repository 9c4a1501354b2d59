"""
FloatFormat — конфигурация формата чисел с плавающей точкой

Все константы GeoMath (DIGITS, EPSILON, MIN_NORMAL) и error-free
преобразования (error_free_sum) предполагают IEEE-754 binary64 с
округлением к ближайшему. Модуль фиксирует этот формат как
immutable конфигурацию процесса и проверяет его один раз при импорте.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Формат хоста должен совпадать с IEEE754_BINARY64 бит-в-бит
2. Конфигурация создаётся один раз и никогда не мутирует (frozen=True)
3. Несовпадение формата → FloatFormatMismatch (без молчаливого fallback)
"""

import logging
import sys
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FloatFormatMismatch(Exception):
    """
    Формат float хоста не совпадает с ожидаемым.

    Константы и compensated-арифметика рассчитаны на binary64; на другом
    формате они дают неверные результаты без каких-либо признаков ошибки,
    поэтому несовпадение фатально.
    """

    pass


# =============================================================================
# MODEL
# =============================================================================


class FloatFormat(BaseModel):
    """
    Параметры формата чисел с плавающей точкой.

    Поля соответствуют sys.float_info (radix, mant_dig, epsilon, min, max).
    """

    radix: int = Field(..., ge=2, description="Основание системы счисления")
    digits: int = Field(..., gt=0, description="Число цифр мантиссы (включая скрытый бит)")
    epsilon: float = Field(..., gt=0, description="Machine epsilon: radix ** (1 - digits)")
    min_normal: float = Field(..., gt=0, description="Минимальное нормализованное значение")
    max_finite: float = Field(..., gt=0, description="Максимальное конечное значение")

    model_config = {"frozen": True}

    @field_validator("epsilon")
    @classmethod
    def validate_epsilon_matches_digits(cls, v: float, info) -> float:
        """Проверка, что epsilon согласован с radix и digits"""
        if "radix" in info.data and "digits" in info.data:
            expected = float(info.data["radix"]) ** (1 - info.data["digits"])
            if v != expected:
                raise ValueError(
                    f"epsilon {v!r} inconsistent with radix={info.data['radix']}, "
                    f"digits={info.data['digits']} (expected {expected!r})"
                )
        return v


# Канонический формат: IEEE-754 binary64
IEEE754_BINARY64: Final[FloatFormat] = FloatFormat(
    radix=2,
    digits=53,
    epsilon=2.0**-52,
    min_normal=2.0**-1022,
    max_finite=(2.0 - 2.0**-52) * 2.0**1023,
)


# =============================================================================
# ПРОВЕРКА ФОРМАТА ХОСТА
# =============================================================================


def host_float_format() -> FloatFormat:
    """FloatFormat текущего интерпретатора (из sys.float_info)."""
    info = sys.float_info
    return FloatFormat(
        radix=info.radix,
        digits=info.mant_dig,
        epsilon=info.epsilon,
        min_normal=info.min,
        max_finite=info.max,
    )


def check_float_format(
    expected: FloatFormat = IEEE754_BINARY64,
    actual: Optional[FloatFormat] = None,
) -> FloatFormat:
    """
    Проверка, что формат float совпадает с ожидаемым.

    Args:
        expected: Ожидаемый формат (default: IEEE754_BINARY64)
        actual: Проверяемый формат (default: формат хоста)

    Returns:
        Проверенный формат (равный expected)

    Raises:
        FloatFormatMismatch: Если хотя бы одно поле отличается

    Examples:
        >>> check_float_format().digits
        53
    """
    if actual is None:
        actual = host_float_format()

    expected_fields = expected.model_dump()
    actual_fields = actual.model_dump()
    diffs = [
        f"{name}: expected {expected_fields[name]!r}, got {actual_fields[name]!r}"
        for name in expected_fields
        if expected_fields[name] != actual_fields[name]
    ]

    if diffs:
        logger.error("Float format mismatch: %s", "; ".join(diffs))
        raise FloatFormatMismatch(
            "Host float format is not the expected one: " + "; ".join(diffs)
        )

    logger.debug(
        "Float format verified: radix=%d digits=%d", actual.radix, actual.digits
    )
    return actual
