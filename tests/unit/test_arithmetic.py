"""
Тесты для Arithmetic Engine

Проверяет:
1. add/sub: выравнивание экспонент, точность, переполнение
2. mul: точность и перенос степени
3. div/inv: точность частного, идеальная экспонента, деление на ноль
4. floor/frac: к минус бесконечности, frac + floor == v
5. neg/abs на границах mantissa
"""

import pytest

from decfloat.core.errors import DivisionByZeroError, FloatOverflowError
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
from decfloat.core.math.comparison import eq
from decfloat.core.math.scaling import EXPONENT_MAX, EXPONENT_MIN, MANTISSA_MAX, MANTISSA_MIN

# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ
# =============================================================================


class TestAddSub:
    """Тесты сложения и вычитания"""

    def test_add_aligned(self) -> None:
        """3.14 + 2 = 5.14"""
        assert add(314, -2, 2, 0) == (514, -2)

    def test_add_to_zero_is_canonical(self) -> None:
        """x + (-x) = (0, 0)"""
        assert add(314, -2, -314, -2) == (0, 0)

    def test_add_zero_operand(self) -> None:
        """Сумма с нулём выравнивается к общей экспоненте min(e, 0)"""
        assert add(0, 0, 5, 2) == (500, 0)
        assert add(5, 3, 0, 0) == (5000, 0)
        assert add(-7, -1, 0, 0) == (-7, -1)

    def test_add_zero_operand_too_wide_keeps_exponent(self) -> None:
        """Если выравнивание не помещается в mantissa, exponent сохраняется"""
        assert add(0, 0, MANTISSA_MAX, 5) == (MANTISSA_MAX, 5)
        assert add(0, 0, 1, EXPONENT_MAX) == (1, EXPONENT_MAX)
        assert add(MANTISSA_MIN, EXPONENT_MAX, 0, 0) == (MANTISSA_MIN, EXPONENT_MAX)

    def test_sub_zero_operand(self) -> None:
        """0 - 0.05 и 12e3 - 0 при общей экспоненте"""
        assert sub(0, 0, 5, -2) == (-5, -2)
        assert sub(12, 3, 0, 0) == (12000, 0)

    def test_add_far_exponents_stripped(self) -> None:
        """Разрыв > 68 преодолевается удалением хвостовых нулей"""
        assert add(10**67, 0, 1, 70) == (1001, 67)

    def test_add_far_exponents_overflow(self) -> None:
        """Точная сумма шире mantissa → FloatOverflowError"""
        with pytest.raises(FloatOverflowError):
            add(1, 100, 1, -100)

    def test_add_mantissa_overflow(self) -> None:
        """MANTISSA_MAX + 1 при exponent 0 → FloatOverflowError"""
        with pytest.raises(FloatOverflowError):
            add(MANTISSA_MAX, 0, 1, 0)

    def test_add_trailing_zeros_absorbed(self) -> None:
        """Переполненная сумма с хвостовыми нулями сжимается"""
        assert add(10**67, 0, 10**67, 0) == (2, 67)

    def test_sub(self) -> None:
        """5.14 - 2 = 3.14"""
        assert sub(514, -2, 2, 0) == (314, -2)
        assert sub(1, 0, 3, 0) == (-2, 0)

    def test_sub_self_is_zero(self) -> None:
        assert sub(MANTISSA_MIN, EXPONENT_MIN, MANTISSA_MIN, EXPONENT_MIN) == (0, 0)


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMul:
    """Тесты умножения"""

    def test_basic(self) -> None:
        """3.14 × 2 = 6.28"""
        assert mul(314, -2, 2, 0) == (628, -2)
        assert mul(-15, -1, 4, 0) == (-60, -1)

    def test_zero(self) -> None:
        assert mul(0, 0, MANTISSA_MAX, EXPONENT_MAX) == (0, 0)

    def test_wide_product_stripped(self) -> None:
        """Произведение шире 224 бит, но с хвостовыми нулями"""
        assert mul(10**40, 0, 10**40, 0) == (1, 80)

    def test_exponent_above_max_absorbed(self) -> None:
        assert mul(1, EXPONENT_MAX, 1, 1) == (10, EXPONENT_MAX)

    def test_exponent_below_min_stripped(self) -> None:
        assert mul(10, EXPONENT_MIN, 1, -1) == (1, EXPONENT_MIN)

    def test_overflow(self) -> None:
        with pytest.raises(FloatOverflowError):
            mul(MANTISSA_MAX, 0, 3, 0)

        with pytest.raises(FloatOverflowError):
            mul(3, EXPONENT_MIN, 7, -1)


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDiv:
    """Тесты деления"""

    def test_exact_quotient_matches_parse(self) -> None:
        """6.28 / 2 даёт ровно (314, -2)"""
        assert div(628, -2, 2, 0) == (314, -2)
        assert div(314, -2, 20, -1) == (157, -2)

    def test_same_value_is_one(self) -> None:
        assert div(314, -2, -314, -2) == (-1, 0)
        # идеальная экспонента -3 - (-2)
        assert div(3140, -3, 314, -2) == (10, -1)

    def test_inexact_truncated(self) -> None:
        """1 / 3 → 66 троек (усечение к нулю)"""
        assert div(1, 0, 3, 0) == (int("3" * 66), -66)
        assert div(-1, 0, 3, 0) == (-int("3" * 66), -66)

    def test_two_thirds_truncated_not_rounded(self) -> None:
        """2 / 3 → 66 шестёрок, последняя цифра не округляется до 7"""
        assert div(2, 0, 3, 0) == (int("6" * 66), -66)

    def test_precision_bounded(self) -> None:
        """Частное не длиннее DIV_PRECISION_DIGITS цифр"""
        mantissa, _ = div(1, 0, 7, 0)
        assert len(str(mantissa)) <= DIV_PRECISION_DIGITS

    def test_custom_precision(self) -> None:
        assert div(1, 0, 3, 0, precision=5) == (3333, -4)

    def test_zero_dividend(self) -> None:
        assert div(0, 0, 7, 3) == (0, 0)

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            div(1, 0, 0, 0)

    def test_exponent_overflow(self) -> None:
        """1e-2147483648 / 1e10 → FloatOverflowError"""
        with pytest.raises(FloatOverflowError):
            div(1, EXPONENT_MIN, 1, 10)


class TestInv:
    """Тесты обратного значения"""

    def test_inverse(self) -> None:
        assert inv(2, 0) == (5, -1)
        assert inv(4, 0) == (25, -2)
        assert inv(-8, 0) == (-125, -3)

    @pytest.mark.parametrize("value", [(2, 0), (3, 0), (25, -2), (-8, 0)])
    def test_double_inverse(self, value) -> None:
        """inv(inv(x)) == x для значений с коротким обратным"""
        assert eq(*inv(*inv(*value)), *value)

    def test_inv_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            inv(0, 0)


# =============================================================================
# ТЕСТЫ FLOOR И FRAC
# =============================================================================


class TestFloorFrac:
    """Тесты округления к минус бесконечности"""

    def test_floor_positive(self) -> None:
        assert floor(314, -2) == (3, 0)
        assert floor(99, -1) == (9, 0)

    def test_floor_negative(self) -> None:
        """floor(-3.14) = -4"""
        assert floor(-314, -2) == (-4, 0)
        assert floor(-300, -2) == (-3, 0)

    def test_floor_integer_unchanged(self) -> None:
        assert floor(12, 3) == (12, 3)
        assert floor(-7, 0) == (-7, 0)

    def test_floor_below_one(self) -> None:
        """|v| < 1: 0 для положительных, -1 для отрицательных"""
        assert floor(1, -5) == (0, 0)
        assert floor(-1, -5) == (-1, 0)
        assert floor(1, EXPONENT_MIN) == (0, 0)

    def test_frac(self) -> None:
        assert frac(314, -2) == (14, -2)
        assert frac(-314, -2) == (86, -2)
        assert frac(12, 3) == (0, 0)

    @pytest.mark.parametrize("value", [(314, -2), (-314, -2), (1, -5), (-1, -5), (12, 3), (0, 0)])
    def test_frac_plus_floor_is_value(self, value) -> None:
        assert eq(*add(*frac(*value), *floor(*value)), *value)

    def test_frac_tiny_negative_overflow(self) -> None:
        """frac(-1e-2147483648) = 1 - 1e-2147483648 не представимо"""
        with pytest.raises(FloatOverflowError):
            frac(-1, EXPONENT_MIN)


# =============================================================================
# ТЕСТЫ УНАРНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestUnary:
    """Тесты neg и abs"""

    def test_neg(self) -> None:
        assert neg(314, -2) == (-314, -2)
        assert neg(0, 0) == (0, 0)
        assert neg(MANTISSA_MAX, 0) == (-MANTISSA_MAX, 0)

    def test_neg_min_mantissa_overflow(self) -> None:
        """-MANTISSA_MIN не помещается в 224 бит"""
        with pytest.raises(FloatOverflowError):
            neg(MANTISSA_MIN, 0)

    def test_abs(self) -> None:
        assert abs_(-314, -2) == (314, -2)
        assert abs_(314, -2) == (314, -2)

    def test_abs_min_mantissa_overflow(self) -> None:
        with pytest.raises(FloatOverflowError):
            abs_(MANTISSA_MIN, EXPONENT_MAX)
