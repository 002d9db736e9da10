"""
Integer Bridge: конверсии между значением и целыми произвольной точности

- from_integer:       точно, exponent 0; mantissa вне 224 бит → OutOfRangeError
- to_integer_floor:   отбрасывает дробную часть к минус бесконечности
- to_integer_exact:   дробная часть ≠ 0 → PrecisionLossError
"""

from decfloat.core.codec.packed_word import pack
from decfloat.core.errors import OutOfRangeError, PrecisionLossError
from decfloat.core.math.arithmetic import floor
from decfloat.core.math.scaling import (
    MANTISSA_BITS,
    Packed,
    check_expansion,
    digit_count,
    is_mantissa_in_range,
)


def from_integer(value: int) -> Packed:
    """
    Целое → (value, 0).

    Raises:
        OutOfRangeError: Если value не помещается в mantissa
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if not is_mantissa_in_range(value):
        raise OutOfRangeError(f"Integer {value} exceeds {MANTISSA_BITS}-bit mantissa")
    return pack(value, 0)


def to_integer_floor(mantissa: int, exponent: int) -> int:
    """
    Целая часть значения (floor).

    Raises:
        OutOfRangeError: Если целое длиннее EXPANSION_LIMIT_DIGITS разрядов

    Examples:
        >>> to_integer_floor(314, -2)
        3
        >>> to_integer_floor(-314, -2)
        -4
        >>> to_integer_floor(12, 3)
        12000
    """
    floor_mantissa, floor_exponent = floor(mantissa, exponent)
    check_expansion(floor_exponent)
    return floor_mantissa * 10**floor_exponent


def to_integer_exact(mantissa: int, exponent: int) -> int:
    """
    Точное целое значение.

    Raises:
        PrecisionLossError: Если у значения есть дробная часть
        OutOfRangeError: Если целое длиннее EXPANSION_LIMIT_DIGITS разрядов
    """
    if exponent >= 0:
        check_expansion(exponent)
        return mantissa * 10**exponent

    places = -exponent
    if mantissa != 0 and places > digit_count(mantissa):
        raise PrecisionLossError(
            f"Value {mantissa}e{exponent} has a non-zero fractional part"
        )

    quotient, remainder = divmod(mantissa, 10**places)
    if remainder:
        raise PrecisionLossError(
            f"Value {mantissa}e{exponent} has a non-zero fractional part"
        )
    return quotient
