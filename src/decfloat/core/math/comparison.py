"""
Comparator: полный порядок на десятичных значениях

Сравнение по значению, а не по представлению: (300, -2) == (3, 0).
Знак решает сразу; при одинаковом знаке сравниваются позиции старших
цифр, и только при их совпадении mantissa выравниваются через
scaling.align (разница экспонент тогда не превышает 67).
"""

from decfloat.core.math.scaling import adjusted_exponent, align


def compare(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> int:
    """
    Трёхзначное сравнение значений.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare(1, 0, 2, 0)
        -1
        >>> compare(300, -2, 3, 0)
        0
    """
    a_sign = (a_mantissa > 0) - (a_mantissa < 0)
    b_sign = (b_mantissa > 0) - (b_mantissa < 0)
    if a_sign != b_sign:
        return -1 if a_sign < b_sign else 1
    if a_sign == 0:
        return 0

    a_top = adjusted_exponent(a_mantissa, a_exponent)
    b_top = adjusted_exponent(b_mantissa, b_exponent)
    if a_top != b_top:
        return a_sign if a_top > b_top else -a_sign

    x, y, _ = align(a_mantissa, a_exponent, b_mantissa, b_exponent)
    return (x > y) - (x < y)


def is_zero(mantissa: int, exponent: int = 0) -> bool:
    """Канонический ноль: mantissa == 0"""
    return mantissa == 0


def eq(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> bool:
    return compare(a_mantissa, a_exponent, b_mantissa, b_exponent) == 0


def lt(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> bool:
    return compare(a_mantissa, a_exponent, b_mantissa, b_exponent) < 0


def lte(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> bool:
    return compare(a_mantissa, a_exponent, b_mantissa, b_exponent) <= 0


def gt(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> bool:
    return compare(a_mantissa, a_exponent, b_mantissa, b_exponent) > 0


def gte(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> bool:
    return compare(a_mantissa, a_exponent, b_mantissa, b_exponent) >= 0
