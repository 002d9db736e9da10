"""
Decimal Parser: десятичный текст → (mantissa, exponent)

Грамматика parse_decimal (строгая):

    [-] digits [. digits]

- хотя бы одна цифра в целой или дробной части ("5.", ".5" допустимы)
- пробелы, знак '+', экспоненциальная запись и пустая строка запрещены
- exponent = -(количество цифр после точки)
- mantissa = конкатенация целых и дробных цифр со знаком

parse_formatted дополнительно принимает научную запись formatter'а
(d[.ddd]eN), поэтому любой результат форматирования разбирается обратно.

Mantissa, не помещающаяся в 224 бит, сначала освобождается от хвостовых
нулей (значение не меняется); если и это не помогает: OutOfRangeError.
"""

import re
from typing import Final

from decfloat.core.errors import FloatOverflowError, InvalidSyntaxError, OutOfRangeError
from decfloat.core.math.scaling import MANTISSA_MAX_DIGITS, Packed, fit

# =============================================================================
# ГРАММАТИКА
# =============================================================================

_DECIMAL: Final = re.compile(r"(-?)([0-9]*)(?:\.([0-9]*))?")
_INTEGER: Final = re.compile(r"-?[0-9]+")
_SCIENTIFIC: Final = re.compile(r"(-?[0-9]*(?:\.[0-9]*)?)[eE]([-+]?[0-9]+)")

# Длиннее этого экспонента в научной записи заведомо вне 32-bit поля
_MAX_EXPONENT_TEXT_DIGITS: Final[int] = 12


def _normalize(mantissa: int, exponent: int) -> Packed:
    """Приведение к границам без потерь; непредставимое значение → OutOfRangeError"""
    try:
        return fit(mantissa, exponent)
    except FloatOverflowError as exc:
        raise OutOfRangeError(exc.message) from exc


# =============================================================================
# PARSE
# =============================================================================


def parse_decimal(text: str) -> Packed:
    """
    Разбор десятичного литерала.

    Args:
        text: Литерал, например "3.14" или "-0.001"

    Returns:
        (mantissa, exponent); "3.14" → (314, -2), "-0.0" → (0, 0)

    Raises:
        InvalidSyntaxError: Текст не соответствует грамматике
        OutOfRangeError: Значение не представимо в packed word
    """
    if not isinstance(text, str):
        raise InvalidSyntaxError(f"Expected decimal text, got {type(text).__name__}")

    match = _DECIMAL.fullmatch(text)
    if match is None:
        raise InvalidSyntaxError(f"Invalid decimal literal: {text!r}")

    sign, int_digits, frac_digits = match.group(1), match.group(2), match.group(3) or ""
    digits = int_digits + frac_digits
    if not digits:
        raise InvalidSyntaxError(f"Decimal literal has no digits: {text!r}")

    exponent = -len(frac_digits)
    significant = digits.lstrip("0")
    if not significant:
        return 0, 0

    if len(significant) > MANTISSA_MAX_DIGITS:
        # int() на тысячах цифр ограничен интерпретатором; хвостовые нули
        # переносятся в exponent до преобразования
        trimmed = significant.rstrip("0")
        if len(trimmed) > MANTISSA_MAX_DIGITS:
            raise OutOfRangeError(
                f"Literal has {len(trimmed)} significant digits, "
                f"mantissa holds at most {MANTISSA_MAX_DIGITS}"
            )
        exponent += len(significant) - len(trimmed)
        significant = trimmed

    mantissa = int(significant)
    if sign:
        mantissa = -mantissa

    return _normalize(mantissa, exponent)


def parse_formatted(text: str) -> Packed:
    """
    Разбор десятичного литерала или научной записи вида "1.57e-3".

    Raises:
        InvalidSyntaxError: Текст не соответствует ни одной из форм
        OutOfRangeError: Значение не представимо в packed word
    """
    if not isinstance(text, str):
        raise InvalidSyntaxError(f"Expected decimal text, got {type(text).__name__}")

    match = _SCIENTIFIC.fullmatch(text)
    if match is None:
        return parse_decimal(text)

    mantissa, exponent = parse_decimal(match.group(1))
    exponent_text = match.group(2).lstrip("+-").lstrip("0")
    if len(exponent_text) > _MAX_EXPONENT_TEXT_DIGITS:
        raise OutOfRangeError(f"Exponent out of range in {text!r}")

    if mantissa == 0:
        return 0, 0
    return _normalize(mantissa, exponent + int(match.group(2)))


def parse_integer(text: str) -> int:
    """
    Разбор знакового целого (без точки) для packLossless.

    Raises:
        InvalidSyntaxError: Текст не является целым
        OutOfRangeError: Больше цифр, чем помещается в mantissa
    """
    if not isinstance(text, str) or _INTEGER.fullmatch(text) is None:
        raise InvalidSyntaxError(f"Invalid integer literal: {text!r}")

    if len(text.lstrip("-").lstrip("0")) > MANTISSA_MAX_DIGITS:
        raise OutOfRangeError(f"Integer literal too long for mantissa: {text!r}")

    return int(text)
