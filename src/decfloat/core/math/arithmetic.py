"""
Arithmetic Engine: точная десятичная арифметика над (mantissa, exponent)

Все бинарные операции работают на парах целых:
- add/sub: выравнивание к меньшей экспоненте (scaling.align), сложение mantissa
- mul: произведение mantissa, сумма экспонент
- div: масштабированное целочисленное деление до DIV_PRECISION_DIGITS
  значащих цифр, усечение к нулю
- floor: к минус бесконечности на десятичной точке
- frac: self - floor(self)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/sub/mul/neg/abs/floor/frac точные; непредставимый результат → FloatOverflowError
2. div точна, если частное имеет конечное представление в DIV_PRECISION_DIGITS цифр
3. frac(v) + floor(v) == v
4. Операции чистые: входы не изменяются, общего состояния нет
"""

from typing import Final

from decfloat.core.errors import DivisionByZeroError, FloatOverflowError
from decfloat.core.math.scaling import (
    MANTISSA_MAX_DIGITS,
    Packed,
    align,
    digit_count,
    fit,
    strip_trailing_zeros,
)

# =============================================================================
# ПАРАМЕТРЫ ДЕЛЕНИЯ
# =============================================================================

# Значащие цифры частного. Любое 67-значное целое помещается в mantissa.
DIV_PRECISION_DIGITS: Final[int] = MANTISSA_MAX_DIGITS - 1


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _add_to_zero(mantissa: int, exponent: int) -> Packed:
    """
    Сумма 0 + v при общей экспоненте min(exponent, 0).

    Если v не помещается в mantissa при exponent 0, fit возвращает
    его обратно к меньшему числу цифр, и результат сохраняет exponent v.
    """
    if 0 < exponent <= MANTISSA_MAX_DIGITS:
        return fit(mantissa * 10**exponent, 0)
    return fit(mantissa, exponent)


def add(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> Packed:
    """
    Сумма a + b при общей (меньшей) экспоненте.

    Если экспоненты расходятся больше чем на MANTISSA_MAX_DIGITS, операнды
    сначала освобождаются от хвостовых нулей. Если разрыв остаётся, точная
    сумма требует больше цифр, чем помещается в mantissa.

    Raises:
        FloatOverflowError: Если точная сумма не представима

    Examples:
        >>> add(314, -2, -314, -2)
        (0, 0)
        >>> add(314, -2, 2, 0)
        (514, -2)
        >>> add(0, 0, 5, 2)
        (500, 0)
    """
    if a_mantissa == 0:
        return _add_to_zero(b_mantissa, b_exponent)
    if b_mantissa == 0:
        return _add_to_zero(a_mantissa, a_exponent)

    if abs(a_exponent - b_exponent) > MANTISSA_MAX_DIGITS:
        a_mantissa, a_exponent = strip_trailing_zeros(a_mantissa, a_exponent)
        b_mantissa, b_exponent = strip_trailing_zeros(b_mantissa, b_exponent)
        gap = abs(a_exponent - b_exponent)
        if gap > MANTISSA_MAX_DIGITS:
            raise FloatOverflowError(
                f"Exact sum spans at least {gap} digits, "
                f"mantissa holds at most {MANTISSA_MAX_DIGITS}"
            )

    x, y, exponent = align(a_mantissa, a_exponent, b_mantissa, b_exponent)
    return fit(x + y, exponent)


def sub(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> Packed:
    """Разность a - b, эквивалентна add(a, neg(b))"""
    return add(a_mantissa, a_exponent, -b_mantissa, b_exponent)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def mul(a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int) -> Packed:
    """
    Произведение: mantissa перемножаются, экспоненты складываются.

    Raises:
        FloatOverflowError: Если произведение не представимо точно
    """
    return fit(a_mantissa * b_mantissa, a_exponent + b_exponent)


def div(
    a_mantissa: int,
    a_exponent: int,
    b_mantissa: int,
    b_exponent: int,
    precision: int = DIV_PRECISION_DIGITS,
) -> Packed:
    """
    Частное a / b с precision значащими цифрами, усечение к нулю.

    Делимое масштабируется так, чтобы частное имело precision - 1 или
    precision цифр. Затем хвостовые нули удаляются до "идеальной"
    экспоненты a_exponent - b_exponent, поэтому точные частные совпадают
    побитово с результатом парсинга: 6.28 / 2 даёт (314, -2).

    Args:
        a_mantissa, a_exponent: Делимое
        b_mantissa, b_exponent: Делитель
        precision: Значащие цифры частного (default: DIV_PRECISION_DIGITS)

    Raises:
        DivisionByZeroError: Если делитель ноль
        FloatOverflowError: Если экспонента частного вне границ

    Examples:
        >>> div(314, -2, 20, -1)
        (157, -2)
        >>> div(314, -2, -314, -2)
        (-1, 0)
    """
    if b_mantissa == 0:
        raise DivisionByZeroError("Division by zero")
    if a_mantissa == 0:
        return 0, 0

    shift = precision - 1 - digit_count(a_mantissa) + digit_count(b_mantissa)
    numerator = abs(a_mantissa)
    denominator = abs(b_mantissa)
    if shift >= 0:
        quotient = numerator * 10**shift // denominator
    else:
        quotient = numerator // (denominator * 10**-shift)

    if (a_mantissa < 0) != (b_mantissa < 0):
        quotient = -quotient

    ideal_exponent = a_exponent - b_exponent
    mantissa, exponent = strip_trailing_zeros(
        quotient, ideal_exponent - shift, exponent_limit=ideal_exponent
    )
    return fit(mantissa, exponent)


def inv(mantissa: int, exponent: int) -> Packed:
    """
    Мультипликативная инверсия 1 / v.

    Raises:
        DivisionByZeroError: Если v == 0
    """
    return div(1, 0, mantissa, exponent)


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def neg(mantissa: int, exponent: int) -> Packed:
    """Смена знака; neg(0) == 0"""
    return fit(-mantissa, exponent)


def abs_(mantissa: int, exponent: int) -> Packed:
    """Модуль значения"""
    return fit(abs(mantissa), exponent)


def floor(mantissa: int, exponent: int) -> Packed:
    """
    Округление к минус бесконечности до целого.

    floor(3.14) = 3, floor(-3.14) = -4. Результат имеет exponent 0,
    если у значения была дробная часть.

    Examples:
        >>> floor(314, -2)
        (3, 0)
        >>> floor(-314, -2)
        (-4, 0)
    """
    if exponent >= 0 or mantissa == 0:
        return mantissa, exponent

    places = -exponent
    if places > digit_count(mantissa):
        # |v| < 1
        return (0, 0) if mantissa > 0 else (-1, 0)

    return fit(mantissa // 10**places, 0)


def frac(mantissa: int, exponent: int) -> Packed:
    """
    Дробная часть v - floor(v), всегда в [0, 1).

    Examples:
        >>> frac(314, -2)
        (14, -2)
        >>> frac(-314, -2)
        (86, -2)
    """
    floor_mantissa, floor_exponent = floor(mantissa, exponent)
    return sub(mantissa, exponent, floor_mantissa, floor_exponent)
