"""
Тесты для Rational — точная арифметика

Проверяемые инварианты:
1. denominator != 0, неотрицательные целые
2. Сложение через LCD, результаты не сокращаются
3. safe_difference возвращает модуль и знак
4. Усечённое десятичное разложение и позиция первой значащей цифры
"""

from fractions import Fraction

import pytest

from bernoulli_laplace.core.math.numerical_safeguards import InvalidParameter, Sign
from bernoulli_laplace.core.math.rational import (
    ONE,
    ZERO,
    DecimalExpansion,
    Rational,
    add_rationals,
    complement,
    decimal_expansion,
    divide_rationals,
    halve_rational,
    invert_rational,
    multiply_rationals,
    rational_pow,
    rationals_equal,
    safe_difference,
)


# =============================================================================
# ТЕСТЫ: Construction
# =============================================================================


class TestRationalConstruction:
    """Тесты валидации при создании Rational."""

    def test_default_denominator(self):
        """Rational(5) == 5/1."""
        assert Rational(5) == Rational(5, 1)

    def test_zero_denominator_rejected(self):
        """Нулевой знаменатель → InvalidParameter."""
        with pytest.raises(InvalidParameter, match="non-zero"):
            Rational(1, 0)

    def test_negative_parts_rejected(self):
        """Отрицательные числитель/знаменатель → InvalidParameter."""
        with pytest.raises(InvalidParameter):
            Rational(-1, 2)
        with pytest.raises(InvalidParameter):
            Rational(1, -2)

    def test_non_integer_rejected(self):
        """float и bool не принимаются."""
        with pytest.raises(InvalidParameter):
            Rational(0.5, 1)
        with pytest.raises(InvalidParameter):
            Rational(True, 2)

    def test_immutable(self):
        """frozen dataclass."""
        value = Rational(1, 2)
        with pytest.raises(AttributeError):
            value.numerator = 3

    def test_views(self):
        """to_fraction / float / str."""
        value = Rational(2, 8)
        assert value.to_fraction() == Fraction(1, 4)
        assert float(value) == 0.25
        assert str(value) == "2/8"


# =============================================================================
# ТЕСТЫ: Arithmetic
# =============================================================================


class TestArithmetic:
    """Тесты арифметических операций."""

    def test_add_uses_least_common_denominator(self):
        """1/6 + 1/4 = 5/12 (а не 10/24)."""
        assert add_rationals(Rational(1, 6), Rational(1, 4)) == Rational(5, 12)

    def test_add_does_not_reduce(self):
        """1/2 + 1/2 = 2/2 структурно не равно 1/1, но равно по значению."""
        result = add_rationals(Rational(1, 2), Rational(1, 2))
        assert result == Rational(2, 2)
        assert result != ONE
        assert rationals_equal(result, ONE)

    def test_add_zero(self):
        assert rationals_equal(add_rationals(ZERO, Rational(3, 7)), Rational(3, 7))

    def test_multiply(self):
        assert multiply_rationals(Rational(2, 3), Rational(3, 4)) == Rational(6, 12)

    def test_divide(self):
        assert divide_rationals(Rational(1, 2), Rational(3, 4)) == Rational(4, 6)

    def test_divide_by_zero(self):
        with pytest.raises(InvalidParameter, match="division by zero"):
            divide_rationals(ONE, ZERO)

    def test_invert(self):
        assert invert_rational(Rational(3, 7)) == Rational(7, 3)

    def test_invert_zero(self):
        with pytest.raises(InvalidParameter, match="cannot invert zero"):
            invert_rational(Rational(0, 5))

    def test_pow(self):
        assert rational_pow(Rational(2, 3), 3) == Rational(8, 27)
        assert rational_pow(ZERO, 0) == ONE

    def test_halve_even_numerator(self):
        """Чётный числитель делится пополам."""
        assert halve_rational(Rational(6, 5)) == Rational(3, 5)

    def test_halve_odd_numerator(self):
        """Нечётный числитель: удваивается знаменатель."""
        assert halve_rational(Rational(3, 5)) == Rational(3, 10)


# =============================================================================
# ТЕСТЫ: Safe Difference
# =============================================================================


class TestSafeDifference:
    """Тесты safe_difference и complement."""

    def test_plus(self):
        diff = safe_difference(Rational(3, 4), Rational(1, 2))
        assert diff.sign is Sign.PLUS
        assert rationals_equal(diff.magnitude, Rational(1, 4))

    def test_minus(self):
        diff = safe_difference(Rational(1, 4), Rational(1, 2))
        assert diff.sign is Sign.MINUS
        assert rationals_equal(diff.magnitude, Rational(1, 4))

    def test_zero_for_equal_values_in_different_form(self):
        """2/4 - 1/2 = 0."""
        diff = safe_difference(Rational(2, 4), Rational(1, 2))
        assert diff.sign is Sign.ZERO
        assert diff.magnitude.is_zero()

    def test_complement(self):
        """1 - a/b = (b - a)/b."""
        assert complement(Rational(4, 5)) == Rational(1, 5)
        assert complement(ONE) == ZERO
        assert complement(ZERO) == ONE

    def test_complement_keeps_denominator(self):
        """Через safe_difference(1, a/b): LCD равен b, дробь не сокращается."""
        assert complement(Rational(2, 4)) == Rational(2, 4)
        assert complement(Rational(30, 100)) == Rational(70, 100)

    def test_complement_above_one(self):
        with pytest.raises(InvalidParameter, match="value <= 1"):
            complement(Rational(3, 2))


# =============================================================================
# ТЕСТЫ: Decimal Expansion
# =============================================================================


class TestDecimalExpansion:
    """Тесты decimal_expansion."""

    def test_truncates(self):
        """Усечение, а не округление: 2/3 → 0.66666."""
        assert str(decimal_expansion(Rational(2, 3), 5)) == "0.66666"

    def test_integer_part(self):
        expansion = decimal_expansion(Rational(7, 2), 3)
        assert expansion == DecimalExpansion(3, "500")
        assert expansion.leading_zero_count == -1
        assert expansion.significant_digits == "3500"

    def test_leading_zeros(self):
        """1/800 = 0.00125."""
        expansion = decimal_expansion(Rational(1, 800), 6)
        assert expansion.fractional_digits == "001250"
        assert expansion.leading_zero_count == 2
        assert expansion.significant_digits == "1250"

    def test_all_zero_digits(self):
        """Значение меньше 10^-precision: значащих цифр нет."""
        expansion = decimal_expansion(Rational(1, 10**9), 4)
        assert expansion.fractional_digits == "0000"
        assert expansion.leading_zero_count == 4
        assert expansion.significant_digits == ""

    def test_zero_precision(self):
        assert str(decimal_expansion(Rational(7, 2), 0)) == "3"

    def test_unreduced_input(self):
        """Несокращённая форма не влияет на разложение."""
        assert decimal_expansion(Rational(50, 100), 3) == decimal_expansion(
            Rational(1, 2), 3
        )
