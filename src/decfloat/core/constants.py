"""
Constants Table: канонические значения и пороги форматирования

Все константы неизменяемы и доступны через функции-запросы, возвращающие
Float. Экстремальные значения:

    max_positive_value  = MANTISSA_MAX × 10^EXPONENT_MAX   (наибольшее)
    min_positive_value  = 1 × 10^EXPONENT_MIN              (ближайшее к нулю > 0)
    max_negative_value  = -1 × 10^EXPONENT_MIN             (ближайшее к нулю < 0)
    min_negative_value  = MANTISSA_MIN × 10^EXPONENT_MAX   (наименьшее)
"""

from typing import Final

from decfloat.core.codec.formatter import (
    FORMAT_DEFAULT_SCIENTIFIC_MAX,
    FORMAT_DEFAULT_SCIENTIFIC_MIN,
)
from decfloat.core.domain.decimal_float import Float
from decfloat.core.math.scaling import EXPONENT_MAX, EXPONENT_MIN, MANTISSA_MAX, MANTISSA_MIN

# =============================================================================
# КАНОНИЧЕСКИЕ ЗНАЧЕНИЯ
# =============================================================================

ZERO: Final[Float] = Float(0, 0)
ONE: Final[Float] = Float(1, 0)

MAX_POSITIVE_VALUE: Final[Float] = Float(MANTISSA_MAX, EXPONENT_MAX)
MIN_POSITIVE_VALUE: Final[Float] = Float(1, EXPONENT_MIN)
MAX_NEGATIVE_VALUE: Final[Float] = Float(-1, EXPONENT_MIN)
MIN_NEGATIVE_VALUE: Final[Float] = Float(MANTISSA_MIN, EXPONENT_MAX)


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


def zero() -> Float:
    return ZERO


def one() -> Float:
    return ONE


def max_positive_value() -> Float:
    return MAX_POSITIVE_VALUE


def min_positive_value() -> Float:
    return MIN_POSITIVE_VALUE


def max_negative_value() -> Float:
    return MAX_NEGATIVE_VALUE


def min_negative_value() -> Float:
    return MIN_NEGATIVE_VALUE


def format_default_scientific_min() -> Float:
    """Нижний порог decimal-режима форматирования (1e-4)"""
    return Float(*FORMAT_DEFAULT_SCIENTIFIC_MIN)


def format_default_scientific_max() -> Float:
    """Верхний порог decimal-режима форматирования (1e9)"""
    return Float(*FORMAT_DEFAULT_SCIENTIFIC_MAX)
