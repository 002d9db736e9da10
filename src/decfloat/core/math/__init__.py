"""
Core math modules для decfloat

Точная десятичная арифметика и сравнение над парами (mantissa, exponent).
"""

# Scaling (границы packed word, выравнивание экспонент)
from decfloat.core.math.scaling import (
    # Field widths
    EXPANSION_LIMIT_DIGITS,
    EXPONENT_BITS,
    EXPONENT_MAX,
    EXPONENT_MIN,
    MANTISSA_BITS,
    MANTISSA_MAX,
    MANTISSA_MAX_DIGITS,
    MANTISSA_MIN,
    WORD_BITS,
    # Helpers
    adjusted_exponent,
    align,
    check_expansion,
    check_packable,
    digit_count,
    fit,
    is_exponent_in_range,
    is_mantissa_in_range,
    strip_trailing_zeros,
)

# Arithmetic Engine
from decfloat.core.math.arithmetic import (
    DIV_PRECISION_DIGITS,
    abs_,
    add,
    div,
    floor,
    frac,
    inv,
    mul,
    neg,
    sub,
)

# Comparator
from decfloat.core.math.comparison import compare, eq, gt, gte, is_zero, lt, lte

__all__ = [
    # Scaling: Field widths
    "EXPANSION_LIMIT_DIGITS",
    "EXPONENT_BITS",
    "EXPONENT_MAX",
    "EXPONENT_MIN",
    "MANTISSA_BITS",
    "MANTISSA_MAX",
    "MANTISSA_MAX_DIGITS",
    "MANTISSA_MIN",
    "WORD_BITS",
    # Scaling: Helpers
    "adjusted_exponent",
    "align",
    "check_expansion",
    "check_packable",
    "digit_count",
    "fit",
    "is_exponent_in_range",
    "is_mantissa_in_range",
    "strip_trailing_zeros",
    # Arithmetic
    "DIV_PRECISION_DIGITS",
    "abs_",
    "add",
    "div",
    "floor",
    "frac",
    "inv",
    "mul",
    "neg",
    "sub",
    # Comparator
    "compare",
    "eq",
    "gt",
    "gte",
    "is_zero",
    "lt",
    "lte",
]
