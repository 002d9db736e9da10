"""
Тесты для Decimal Formatter

Проверяет:
1. decimal и scientific режимы
2. Выбор режима по порогам (обе границы включены)
3. FormatRange: пользовательские пороги и их проверку
4. format_fixed: усечение к нулю до N знаков
5. Обратимость через parse_formatted
"""

import pytest

from decfloat.core.codec.formatter import (
    DEFAULT_FIXED_FORMAT_DECIMALS,
    FORMAT_DEFAULT_SCIENTIFIC_MAX,
    FORMAT_DEFAULT_SCIENTIFIC_MIN,
    FormatRange,
    format_decimal,
    format_fixed,
    format_scientific,
    format_with_range,
    format_with_scientific,
)
from decfloat.core.codec.parser import parse_formatted
from decfloat.core.errors import OutOfRangeError
from decfloat.core.math.comparison import eq
from decfloat.core.math.scaling import (
    EXPANSION_LIMIT_DIGITS,
    EXPONENT_MAX,
    EXPONENT_MIN,
    MANTISSA_MAX,
    MANTISSA_MIN,
)

# =============================================================================
# ТЕСТЫ РЕЖИМОВ
# =============================================================================


class TestDecimalMode:
    """Тесты decimal-записи"""

    def test_fraction(self) -> None:
        assert format_decimal(12345, -2) == "123.45"
        assert format_decimal(-1, -4) == "-0.0001"
        assert format_decimal(314, -2) == "3.14"

    def test_trailing_zeros_removed(self) -> None:
        """'3.140' печатается как '3.14', '2.0' как '2'"""
        assert format_decimal(3140, -3) == "3.14"
        assert format_decimal(20, -1) == "2"

    def test_positive_exponent(self) -> None:
        """Положительный exponent раскрывается нулями"""
        assert format_decimal(1, 9) == "1000000000"
        assert format_decimal(-12, 3) == "-12000"

    def test_zero(self) -> None:
        assert format_decimal(0, 0) == "0"

    def test_expansion_limit(self) -> None:
        """Запись длиннее EXPANSION_LIMIT_DIGITS разрядов не строится"""
        assert format_decimal(1, 5000) == "1" + "0" * 5000

        with pytest.raises(OutOfRangeError):
            format_decimal(1, EXPONENT_MAX)
        with pytest.raises(OutOfRangeError):
            format_decimal(-1, EXPONENT_MIN)
        with pytest.raises(OutOfRangeError):
            format_with_scientific(1, EXPANSION_LIMIT_DIGITS + 1, False)

    def test_trailing_zeros_do_not_count(self) -> None:
        """Хвостовые нули mantissa убираются до проверки предела"""
        text = format_decimal(10**60, -EXPANSION_LIMIT_DIGITS - 60)
        assert text == "0." + "0" * (EXPANSION_LIMIT_DIGITS - 1) + "1"


class TestScientificMode:
    """Тесты научной записи"""

    def test_single_digit(self) -> None:
        assert format_scientific(1, -5) == "1e-5"
        assert format_scientific(5, 0) == "5e0"

    def test_multiple_digits(self) -> None:
        assert format_scientific(-12345, 8) == "-1.2345e12"
        assert format_scientific(314, -2) == "3.14e0"

    def test_trailing_zeros_removed(self) -> None:
        assert format_scientific(1000, 0) == "1e3"

    def test_zero(self) -> None:
        """Принудительно научный ноль → '0e0'"""
        assert format_scientific(0, 0) == "0e0"


# =============================================================================
# ТЕСТЫ ВЫБОРА РЕЖИМА
# =============================================================================


class TestDefaultRange:
    """Тесты порогов по умолчанию (1e-4 .. 1e9)"""

    def test_default_thresholds(self) -> None:
        assert FORMAT_DEFAULT_SCIENTIFIC_MIN == (1, -4)
        assert FORMAT_DEFAULT_SCIENTIFIC_MAX == (1, 9)

    def test_inside_range_decimal(self) -> None:
        """Внутри диапазона: decimal"""
        assert format_with_range(314, -2) == "3.14"
        assert format_with_range(-314, -2) == "-3.14"

    def test_lower_bound_inclusive(self) -> None:
        """1e-4 печатается decimal, 1e-5: scientific"""
        assert format_with_range(1, -4) == "0.0001"
        assert format_with_range(1, -5) == "1e-5"

    def test_upper_bound_inclusive(self) -> None:
        """1e9 печатается decimal, чуть больше: scientific"""
        assert format_with_range(1, 9) == "1000000000"
        assert format_with_range(1000000001, 0) == "1.000000001e9"
        assert format_with_range(1, 10) == "1e10"

    def test_negative_uses_magnitude(self) -> None:
        """Порог применяется к модулю значения"""
        assert format_with_range(-1, -5) == "-1e-5"
        assert format_with_range(-12345, 8) == "-1.2345e12"

    def test_zero_always_decimal(self) -> None:
        assert format_with_range(0, 0) == "0"

    def test_forced_mode(self) -> None:
        """format_with_scientific игнорирует пороги"""
        assert format_with_scientific(1, -5, False) == "0.00001"
        assert format_with_scientific(314, -2, True) == "3.14e0"
        assert format_with_scientific(0, 0, True) == "0e0"


class TestFormatRange:
    """Тесты пользовательских порогов"""

    def test_custom_range(self) -> None:
        """Узкий диапазон [1, 100]"""
        format_range = FormatRange((1, 0), (1, 2))
        assert format_with_range(5, 0, format_range) == "5"
        assert format_with_range(1, 2, format_range) == "100"
        assert format_with_range(5, -1, format_range) == "5e-1"
        assert format_with_range(101, 0, format_range) == "1.01e2"

    def test_contains_inclusive(self) -> None:
        format_range = FormatRange((1, 0), (1, 2))
        assert format_range.contains(100, -2)
        assert format_range.contains(-100, 0)
        assert not format_range.contains(99, -2)

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(OutOfRangeError, match="non-negative"):
            FormatRange((-1, 0), (1, 2))

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(OutOfRangeError, match="exceeds"):
            FormatRange((1, 3), (1, 2))

    def test_frozen(self) -> None:
        format_range = FormatRange()
        with pytest.raises(AttributeError):
            format_range.scientific_min = (1, 0)  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ FORMAT_FIXED
# =============================================================================


class TestFormatFixed:
    """Тесты усечения до N знаков"""

    def test_default_decimals(self) -> None:
        assert DEFAULT_FIXED_FORMAT_DECIMALS == 18

    def test_truncates_toward_zero(self) -> None:
        """Лишние знаки отбрасываются, не округляются"""
        assert format_fixed(11341234234625468391, -19) == "1.134123423462546839"
        assert format_fixed(-11341234234625468391, -19) == "-1.134123423462546839"

    def test_short_value_unchanged(self) -> None:
        assert format_fixed(314, -2) == "3.14"
        assert format_fixed(12, 3) == "12000"

    def test_custom_decimals(self) -> None:
        assert format_fixed(314159, -5, 2) == "3.14"
        assert format_fixed(-314159, -5, 0) == "-3"

    def test_tiny_value_truncates_to_zero(self) -> None:
        """Значение меньше 10^-18 → '0'"""
        assert format_fixed(1, -19) == "0"
        assert format_fixed(-5, -30) == "0"
        assert format_fixed(19, -19) == "0.000000000000000001"

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_fixed(1, 0, -1)


# =============================================================================
# ТЕСТЫ ОБРАТИМОСТИ
# =============================================================================


class TestFormatParseInverse:
    """parse_formatted(format(v)) == v"""

    SAMPLES = [
        (314, -2),
        (-314, -2),
        (1, -5),
        (1, 9),
        (1000000001, 0),
        (-12345, 8),
        (MANTISSA_MAX, EXPONENT_MAX),
        (MANTISSA_MIN, EXPONENT_MAX),
        (1, EXPONENT_MIN),
        (-1, EXPONENT_MIN),
        (0, 0),
    ]

    def test_default_format_round_trip(self) -> None:
        for mantissa, exponent in self.SAMPLES:
            text = format_with_range(mantissa, exponent)
            assert eq(*parse_formatted(text), mantissa, exponent), text

    def test_scientific_round_trip(self) -> None:
        for mantissa, exponent in self.SAMPLES:
            text = format_scientific(mantissa, exponent)
            assert eq(*parse_formatted(text), mantissa, exponent), text
