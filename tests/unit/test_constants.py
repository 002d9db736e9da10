"""
Тесты для Constants Table

Проверяет:
1. Экстремальные значения и их порядок
2. Пороги научной записи
3. Попарную различимость констант
"""

from itertools import combinations

from decfloat import (
    Float,
    format_default_scientific_max,
    format_default_scientific_min,
    max_negative_value,
    max_positive_value,
    min_negative_value,
    min_positive_value,
    one,
    zero,
)
from decfloat.core.math.scaling import EXPONENT_MAX, EXPONENT_MIN, MANTISSA_MAX, MANTISSA_MIN


class TestExtremes:
    """Тесты экстремальных значений"""

    def test_fields(self) -> None:
        assert max_positive_value().unpack() == (MANTISSA_MAX, EXPONENT_MAX)
        assert min_positive_value().unpack() == (1, EXPONENT_MIN)
        assert max_negative_value().unpack() == (-1, EXPONENT_MIN)
        assert min_negative_value().unpack() == (MANTISSA_MIN, EXPONENT_MAX)

    def test_relative_to_one(self) -> None:
        """max_positive > 1, 0 < min_positive < 1"""
        assert max_positive_value() > one()
        assert min_positive_value() < one()
        assert min_positive_value() > zero()

    def test_negative_extremes(self) -> None:
        assert max_negative_value() < zero()
        assert min_negative_value() < max_negative_value()

    def test_total_order_of_extremes(self) -> None:
        ordered = [
            min_negative_value(),
            max_negative_value(),
            zero(),
            min_positive_value(),
            max_positive_value(),
        ]
        assert sorted(reversed(ordered)) == ordered

    def test_pairwise_distinct(self) -> None:
        extremes = [
            max_positive_value(),
            min_positive_value(),
            max_negative_value(),
            min_negative_value(),
        ]
        for a, b in combinations(extremes, 2):
            assert not a.eq(b)

    def test_zero(self) -> None:
        assert zero().is_zero()
        assert zero() == Float()


class TestFormatThresholds:
    """Тесты порогов научной записи"""

    def test_values(self) -> None:
        assert format_default_scientific_min() == Float.parse("0.0001")
        assert format_default_scientific_max() == Float.parse("1000000000")

    def test_thresholds_format_as_decimal(self) -> None:
        """Обе границы включены в decimal-диапазон"""
        assert format_default_scientific_min().format() == "0.0001"
        assert format_default_scientific_max().format() == "1000000000"
