"""
Decimal Formatter: (mantissa, exponent) → текст

Два режима:
- decimal:    "123.45", "-0.0001", "1000000000"
- scientific: "1e-5", "-1.2345e12" (одна цифра до точки, без хвостовых нулей)

Выбор режима по умолчанию: decimal, если
    FORMAT_DEFAULT_SCIENTIFIC_MIN <= |v| <= FORMAT_DEFAULT_SCIENTIFIC_MAX
или v == 0; иначе scientific. Верхняя граница включена: 1e9 печатается
как "1000000000".

Оба режима точные: значащие цифры не отбрасываются, поэтому
parse_formatted(format(v)) == v для любого представимого v.
"""

from dataclasses import dataclass
from typing import Final

from decfloat.core.errors import OutOfRangeError
from decfloat.core.math.comparison import compare
from decfloat.core.math.scaling import Packed, check_expansion, digit_count, strip_trailing_zeros

# =============================================================================
# ПОРОГИ НАУЧНОЙ ЗАПИСИ
# =============================================================================

# 1e-4
FORMAT_DEFAULT_SCIENTIFIC_MIN: Final[Packed] = (1, -4)

# 1e9
FORMAT_DEFAULT_SCIENTIFIC_MAX: Final[Packed] = (1, 9)

# Количество знаков после точки для format18
DEFAULT_FIXED_FORMAT_DECIMALS: Final[int] = 18


@dataclass(frozen=True)
class FormatRange:
    """
    Диапазон модулей значений, печатаемых в decimal-режиме.

    Границы заданы парами (mantissa, exponent) и включены в диапазон.

    Raises:
        OutOfRangeError: Отрицательная граница или scientific_min > scientific_max
    """

    scientific_min: Packed = FORMAT_DEFAULT_SCIENTIFIC_MIN
    scientific_max: Packed = FORMAT_DEFAULT_SCIENTIFIC_MAX

    def __post_init__(self) -> None:
        if self.scientific_min[0] < 0 or self.scientific_max[0] < 0:
            raise OutOfRangeError(
                f"Format thresholds must be non-negative, got "
                f"{self.scientific_min} and {self.scientific_max}"
            )
        if compare(*self.scientific_min, *self.scientific_max) > 0:
            raise OutOfRangeError(
                f"scientific_min {self.scientific_min} exceeds "
                f"scientific_max {self.scientific_max}"
            )

    def contains(self, mantissa: int, exponent: int) -> bool:
        """|v| внутри диапазона decimal-режима"""
        magnitude = abs(mantissa)
        return (
            compare(magnitude, exponent, *self.scientific_min) >= 0
            and compare(magnitude, exponent, *self.scientific_max) <= 0
        )


DEFAULT_FORMAT_RANGE: Final[FormatRange] = FormatRange()


# =============================================================================
# РЕЖИМЫ
# =============================================================================


def format_decimal(mantissa: int, exponent: int) -> str:
    """
    Decimal-запись без хвостовых нулей дробной части.

    Raises:
        OutOfRangeError: Если запись длиннее EXPANSION_LIMIT_DIGITS разрядов

    Examples:
        >>> format_decimal(12345, -2)
        '123.45'
        >>> format_decimal(-1, -4)
        '-0.0001'
        >>> format_decimal(20, -1)
        '2'
    """
    mantissa, exponent = strip_trailing_zeros(mantissa, exponent)
    if mantissa == 0:
        return "0"
    check_expansion(abs(exponent))

    sign = "-" if mantissa < 0 else ""
    digits = str(abs(mantissa))
    if exponent >= 0:
        return f"{sign}{digits}{'0' * exponent}"

    places = -exponent
    if len(digits) > places:
        return f"{sign}{digits[:-places]}.{digits[-places:]}"
    return f"{sign}0.{digits.rjust(places, '0')}"


def format_scientific(mantissa: int, exponent: int) -> str:
    """
    Научная запись d[.ddd]eN с минимальным числом значащих цифр.

    Examples:
        >>> format_scientific(1, -5)
        '1e-5'
        >>> format_scientific(-12345, 8)
        '-1.2345e12'
    """
    mantissa, exponent = strip_trailing_zeros(mantissa, exponent)
    if mantissa == 0:
        return "0e0"

    sign = "-" if mantissa < 0 else ""
    digits = str(abs(mantissa))
    power = exponent + digit_count(mantissa) - 1
    if len(digits) == 1:
        return f"{sign}{digits}e{power}"
    return f"{sign}{digits[0]}.{digits[1:]}e{power}"


def format_with_range(
    mantissa: int, exponent: int, format_range: FormatRange = DEFAULT_FORMAT_RANGE
) -> str:
    """
    Выбор режима по диапазону: внутри (или ноль): decimal, снаружи: scientific.
    """
    if mantissa == 0 or format_range.contains(mantissa, exponent):
        return format_decimal(mantissa, exponent)
    return format_scientific(mantissa, exponent)


def format_with_scientific(mantissa: int, exponent: int, scientific: bool) -> str:
    """Принудительный режим без учёта порогов"""
    if scientific:
        return format_scientific(mantissa, exponent)
    return format_decimal(mantissa, exponent)


def format_fixed(
    mantissa: int, exponent: int, decimals: int = DEFAULT_FIXED_FORMAT_DECIMALS
) -> str:
    """
    Decimal-запись, усечённая к нулю до decimals знаков после точки.

    Examples:
        >>> format_fixed(11341234234625468391, -19)
        '1.134123423462546839'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    target = -decimals
    if exponent < target:
        places = target - exponent
        if places > digit_count(mantissa):
            return "0"
        truncated = abs(mantissa) // 10**places
        mantissa = -truncated if mantissa < 0 else truncated
        exponent = target

    return format_decimal(mantissa, exponent)
