"""
Boundary API: единый calling convention для вызовов через границу

Каждая операция движка доступна как функция, возвращающая FloatResult:
успех несёт value, неудача: error {kind, msg, readable_msg}. Функции
этого модуля никогда не поднимают DecimalFloatError. Константы тоже
отдаются через envelope, чтобы convention был единым.

    >>> api.parse("3.14").value.format()
    '3.14'
    >>> api.parse("abc").error.kind
    <FloatErrorKind.INVALID_SYNTAX: 'InvalidSyntax'>

Ошибки, превращённые в envelope, логируются на уровне DEBUG.
"""

import logging
from typing import Any, Callable

from decfloat.core import constants
from decfloat.core.domain import Float, FloatResult
from decfloat.core.errors import DecimalFloatError

logger = logging.getLogger(__name__)


def _capture(operation: str, fn: Callable[..., Any], *args: Any) -> FloatResult:
    try:
        return FloatResult.ok(fn(*args))
    except DecimalFloatError as exc:
        logger.debug("%s failed: %s (%s)", operation, exc.message, exc.kind.value)
        return FloatResult.fail(exc)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def parse(text: str) -> FloatResult:
    return _capture("parse", Float.parse, text)


def parse_formatted(text: str) -> FloatResult:
    return _capture("parse_formatted", Float.parse_formatted, text)


def pack_lossless(coefficient: str, exponent: int) -> FloatResult:
    return _capture("pack_lossless", Float.pack_lossless, coefficient, exponent)


def from_hex(text: str) -> FloatResult:
    return _capture("from_hex", Float.from_hex, text)


def from_bytes(data: bytes) -> FloatResult:
    return _capture("from_bytes", Float.from_bytes, data)


def from_bigint(value: int) -> FloatResult:
    return _capture("from_bigint", Float.from_bigint, value)


def from_fixed_decimal(scaled_value: int, decimals: int) -> FloatResult:
    return _capture("from_fixed_decimal", Float.from_fixed_decimal, scaled_value, decimals)


def from_fixed_decimal_lossy(scaled_value: int, decimals: int) -> FloatResult:
    return _capture(
        "from_fixed_decimal_lossy", Float.from_fixed_decimal_lossy, scaled_value, decimals
    )


# =============================================================================
# ПРЕДСТАВЛЕНИЯ
# =============================================================================


def as_hex(value: Float) -> FloatResult:
    return _capture("as_hex", value.as_hex)


def format(value: Float) -> FloatResult:
    return _capture("format", value.format)


def format_with_scientific(value: Float, scientific: bool) -> FloatResult:
    return _capture("format_with_scientific", value.format_with_scientific, scientific)


def format_with_range(value: Float, scientific_min: Float, scientific_max: Float) -> FloatResult:
    return _capture("format_with_range", value.format_with_range, scientific_min, scientific_max)


def format18(value: Float) -> FloatResult:
    return _capture("format18", value.format18)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Float, b: Float) -> FloatResult:
    return _capture("add", a.add, b)


def sub(a: Float, b: Float) -> FloatResult:
    return _capture("sub", a.sub, b)


def mul(a: Float, b: Float) -> FloatResult:
    return _capture("mul", a.mul, b)


def div(a: Float, b: Float) -> FloatResult:
    return _capture("div", a.div, b)


def inv(value: Float) -> FloatResult:
    return _capture("inv", value.inv)


def neg(value: Float) -> FloatResult:
    return _capture("neg", value.neg)


def abs_(value: Float) -> FloatResult:
    return _capture("abs", value.abs)


def floor(value: Float) -> FloatResult:
    return _capture("floor", value.floor)


def frac(value: Float) -> FloatResult:
    return _capture("frac", value.frac)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def lt(a: Float, b: Float) -> FloatResult:
    return _capture("lt", a.lt, b)


def lte(a: Float, b: Float) -> FloatResult:
    return _capture("lte", a.lte, b)


def gt(a: Float, b: Float) -> FloatResult:
    return _capture("gt", a.gt, b)


def gte(a: Float, b: Float) -> FloatResult:
    return _capture("gte", a.gte, b)


def eq(a: Float, b: Float) -> FloatResult:
    return _capture("eq", a.eq, b)


def is_zero(value: Float) -> FloatResult:
    return _capture("is_zero", value.is_zero)


def min_(a: Float, b: Float) -> FloatResult:
    return _capture("min", a.min, b)


def max_(a: Float, b: Float) -> FloatResult:
    return _capture("max", a.max, b)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_bigint(value: Float) -> FloatResult:
    return _capture("to_bigint", value.to_bigint)


def try_to_bigint(value: Float) -> FloatResult:
    result = value.try_to_bigint()
    if result.error is not None:
        logger.debug("try_to_bigint failed: %s (%s)", result.error.msg, result.error.kind.value)
    return result


def to_fixed_decimal(value: Float, decimals: int) -> FloatResult:
    return _capture("to_fixed_decimal", value.to_fixed_decimal, decimals)


def to_fixed_decimal_lossy(value: Float, decimals: int) -> FloatResult:
    return _capture("to_fixed_decimal_lossy", value.to_fixed_decimal_lossy, decimals)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================


def zero() -> FloatResult:
    return _capture("zero", constants.zero)


def max_positive_value() -> FloatResult:
    return _capture("max_positive_value", constants.max_positive_value)


def min_positive_value() -> FloatResult:
    return _capture("min_positive_value", constants.min_positive_value)


def max_negative_value() -> FloatResult:
    return _capture("max_negative_value", constants.max_negative_value)


def min_negative_value() -> FloatResult:
    return _capture("min_negative_value", constants.min_negative_value)


def format_default_scientific_min() -> FloatResult:
    return _capture("format_default_scientific_min", constants.format_default_scientific_min)


def format_default_scientific_max() -> FloatResult:
    return _capture("format_default_scientific_max", constants.format_default_scientific_max)
