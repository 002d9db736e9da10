"""
Fixed-Decimal Bridge: конверсии с парой (scaled_value, decimals)

Fixed decimal представляет scaled_value × 10^(-decimals).

- from_fixed_decimal:       точно, (scaled_value, -decimals)
- pack_lossless:            текстовая mantissa + явный exponent
- to_fixed_decimal:         точный rescale к exponent -decimals, иначе PrecisionLossError
- to_fixed_decimal_lossy:   тот же rescale с усечением остатка к нулю и флагом lossless
"""

from typing import Tuple

from decfloat.core.codec.packed_word import pack
from decfloat.core.codec.parser import parse_integer
from decfloat.core.errors import OutOfRangeError, PrecisionLossError
from decfloat.core.math.scaling import EXPONENT_MIN, Packed, check_expansion, digit_count


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be int, got {type(decimals).__name__}")
    if decimals < 0 or -decimals < EXPONENT_MIN:
        raise OutOfRangeError(f"decimals must be in [0, {-EXPONENT_MIN}], got {decimals}")


def from_fixed_decimal(scaled_value: int, decimals: int) -> Packed:
    """
    (scaled_value, decimals) → (scaled_value, -decimals).

    Raises:
        OutOfRangeError: Если scaled_value не помещается в mantissa
            или decimals вне допустимого диапазона
    """
    _check_decimals(decimals)
    return pack(scaled_value, -decimals)


def pack_lossless(coefficient: str, exponent: int) -> Packed:
    """
    Текстовая mantissa и явный exponent без разбора десятичной точки.

    pack_lossless("314", -2) совпадает побитово с parse_decimal("3.14").

    Raises:
        InvalidSyntaxError: coefficient не является знаковым целым
        OutOfRangeError: Поле вне границ
    """
    return pack(parse_integer(coefficient), exponent)


def rescale(mantissa: int, exponent: int, decimals: int) -> Tuple[int, bool]:
    """
    Rescale значения к exponent -decimals с усечением к нулю.

    Returns:
        (scaled_value, exact): exact=True, если остаток ровно ноль

    Raises:
        OutOfRangeError: Если scaled_value длиннее EXPANSION_LIMIT_DIGITS разрядов

    Examples:
        >>> rescale(12345, -3, 2)
        (1234, False)
        >>> rescale(12340, -3, 2)
        (1234, True)
        >>> rescale(-12345, -3, 2)
        (-1234, False)
    """
    _check_decimals(decimals)
    if mantissa == 0:
        return 0, True

    target = -decimals
    if exponent >= target:
        check_expansion(exponent - target)
        return mantissa * 10**(exponent - target), True

    places = target - exponent
    if places > digit_count(mantissa):
        return 0, False

    quotient, remainder = divmod(abs(mantissa), 10**places)
    if mantissa < 0:
        quotient = -quotient
    return quotient, remainder == 0


def to_fixed_decimal(mantissa: int, exponent: int, decimals: int) -> int:
    """
    Точное scaled_value при decimals знаках.

    Raises:
        PrecisionLossError: Если значение не представимо точно при decimals знаках
    """
    scaled_value, exact = rescale(mantissa, exponent, decimals)
    if not exact:
        raise PrecisionLossError(
            f"Value {mantissa}e{exponent} is not exact at {decimals} decimals"
        )
    return scaled_value


def to_fixed_decimal_lossy(mantissa: int, exponent: int, decimals: int) -> Tuple[int, bool]:
    """Усечённое к нулю scaled_value и флаг lossless"""
    return rescale(mantissa, exponent, decimals)
