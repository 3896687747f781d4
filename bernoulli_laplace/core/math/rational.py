"""
Rational — точная арифметика над парами неотрицательных целых

Модуль предоставляет значение Rational (числитель, знаменатель) над
Python int произвольной точности и примитивы, на которых построены
все решатели:
- Сложение через наименьший общий знаменатель (LCD), а не перекрёстное
  умножение, чтобы ограничить рост промежуточных целых
- Вычитание дробей только через safe_difference (модуль + знак),
  целых через numerical_safeguards.safe_int_difference
- Деление на два без выхода из целых (halve_rational)
- Усечённое десятичное разложение для детекции сходимости

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 (проверяется при создании, InvalidParameter)
2. Числитель и знаменатель неотрицательны: знак хранится отдельно
   только в результате safe_difference
3. Результаты НЕ сокращаются: 2/4 и 1/2 являются разными парами.
   Сравнение по значению: rationals_equal() или to_fraction()
4. Никакой плавающей точки внутри вычислений
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import NamedTuple

from bernoulli_laplace.core.math.numerical_safeguards import (
    InvalidParameter,
    Sign,
    safe_int_difference,
    validate_non_negative_int,
)


# =============================================================================
# RATIONAL VALUE
# =============================================================================


@dataclass(frozen=True)
class Rational:
    """
    Несокращённая дробь numerator / denominator.

    Immutable (frozen=True). Сокращение не выполняется;
    сокращённый вид даёт to_fraction().
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        validate_non_negative_int(self.numerator, "numerator")
        validate_non_negative_int(self.denominator, "denominator")

        if self.denominator == 0:
            raise InvalidParameter("denominator must be non-zero")

    def is_zero(self) -> bool:
        return self.numerator == 0

    def to_fraction(self) -> Fraction:
        """Сокращённое представление (только для сравнений и вывода)."""
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return float(self.to_fraction())

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


ZERO = Rational(0, 1)
ONE = Rational(1, 1)


def rationals_equal(lhs: Rational, rhs: Rational) -> bool:
    """
    Равенство по значению (a/b == c/d ⟺ a·d == c·b).

    Examples:
        >>> rationals_equal(Rational(2, 4), Rational(1, 2))
        True
        >>> Rational(2, 4) == Rational(1, 2)
        False
    """
    return lhs.numerator * rhs.denominator == rhs.numerator * lhs.denominator


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add_rationals(lhs: Rational, rhs: Rational) -> Rational:
    """
    Сложение через наименьший общий знаменатель.

    lcd = lcm(b, d); a/b + c/d = (a·(lcd/b) + c·(lcd/d)) / lcd

    Examples:
        >>> add_rationals(Rational(1, 6), Rational(1, 4))
        Rational(numerator=5, denominator=12)
    """
    common_denominator = math.lcm(lhs.denominator, rhs.denominator)

    lhs_multiplier = common_denominator // lhs.denominator
    rhs_multiplier = common_denominator // rhs.denominator

    return Rational(
        lhs.numerator * lhs_multiplier + rhs.numerator * rhs_multiplier,
        common_denominator,
    )


def multiply_rationals(lhs: Rational, rhs: Rational) -> Rational:
    return Rational(
        lhs.numerator * rhs.numerator,
        lhs.denominator * rhs.denominator,
    )


def invert_rational(value: Rational) -> Rational:
    """
    1 / value.

    Raises:
        InvalidParameter: Если value == 0
    """
    if value.is_zero():
        raise InvalidParameter("cannot invert zero")

    return Rational(value.denominator, value.numerator)


def divide_rationals(lhs: Rational, rhs: Rational) -> Rational:
    """lhs / rhs. Деление на ноль → InvalidParameter."""
    if rhs.is_zero():
        raise InvalidParameter("division by zero")

    return Rational(
        lhs.numerator * rhs.denominator,
        lhs.denominator * rhs.numerator,
    )


def rational_pow(value: Rational, exponent: int) -> Rational:
    """value ** exponent для неотрицательного целого exponent (0**0 == 1)."""
    validate_non_negative_int(exponent, "exponent")

    return Rational(value.numerator**exponent, value.denominator**exponent)


def halve_rational(value: Rational) -> Rational:
    """
    value / 2 без выхода из целых.

    Чётный числитель делится пополам, иначе удваивается знаменатель.

    Examples:
        >>> halve_rational(Rational(6, 5))
        Rational(numerator=3, denominator=5)
        >>> halve_rational(Rational(3, 5))
        Rational(numerator=3, denominator=10)
    """
    if value.numerator % 2 == 0:
        return Rational(value.numerator // 2, value.denominator)

    return Rational(value.numerator, value.denominator * 2)


# =============================================================================
# SAFE DIFFERENCE
# =============================================================================


class RationalDifference(NamedTuple):
    """Модуль и знак разности lhs - rhs."""

    magnitude: Rational
    sign: Sign


def safe_difference(lhs: Rational, rhs: Rational) -> RationalDifference:
    """
    Разность двух неотрицательных дробей без underflow.

    Числители приводятся к общему знаменателю (LCD), сравниваются,
    и меньший вычитается из большего.

    Returns:
        RationalDifference(magnitude=|lhs - rhs|, sign)

    Examples:
        >>> diff = safe_difference(Rational(1, 4), Rational(1, 2))
        >>> diff.magnitude, diff.sign
        (Rational(numerator=1, denominator=4), <Sign.MINUS: 'MINUS'>)
    """
    common_denominator = math.lcm(lhs.denominator, rhs.denominator)

    lhs_scaled = lhs.numerator * (common_denominator // lhs.denominator)
    rhs_scaled = rhs.numerator * (common_denominator // rhs.denominator)

    difference = safe_int_difference(lhs_scaled, rhs_scaled)

    return RationalDifference(
        Rational(difference.magnitude, common_denominator),
        difference.sign,
    )


def complement(value: Rational) -> Rational:
    """
    1 - value, вычисленное как (b - a) / b.

    Raises:
        InvalidParameter: Если value > 1
    """
    difference = safe_difference(ONE, value)

    if difference.sign is Sign.MINUS:
        raise InvalidParameter(f"complement requires value <= 1, got {value}")

    return difference.magnitude


# =============================================================================
# ДЕСЯТИЧНОЕ РАЗЛОЖЕНИЕ
# =============================================================================


class DecimalExpansion(NamedTuple):
    """
    Усечённое десятичное разложение дроби.

    integer_part: целая часть
    fractional_digits: ровно precision цифр после точки (floor)
    """

    integer_part: int
    fractional_digits: str

    @property
    def leading_zero_count(self) -> int:
        """
        Позиция первой значащей цифры.

        Для value >= 1: минус длина целой части, иначе количество
        ведущих нулей дробной части (== precision, если все цифры нули).
        """
        if self.integer_part > 0:
            return -len(str(self.integer_part))

        stripped = self.fractional_digits.lstrip("0")
        return len(self.fractional_digits) - len(stripped)

    @property
    def significant_digits(self) -> str:
        """Цифры начиная с первой ненулевой."""
        if self.integer_part > 0:
            return str(self.integer_part) + self.fractional_digits

        return self.fractional_digits.lstrip("0")

    def __str__(self) -> str:
        if not self.fractional_digits:
            return str(self.integer_part)
        return f"{self.integer_part}.{self.fractional_digits}"


def decimal_expansion(value: Rational, precision: int) -> DecimalExpansion:
    """
    Усечённое разложение value с precision цифрами после точки.

    Examples:
        >>> str(decimal_expansion(Rational(1, 3), 5))
        '0.33333'
        >>> decimal_expansion(Rational(1, 800), 6).leading_zero_count
        2
    """
    validate_non_negative_int(precision, "precision")

    integer_part, remainder = divmod(value.numerator, value.denominator)

    if precision == 0:
        return DecimalExpansion(integer_part, "")

    scaled = remainder * 10**precision // value.denominator
    return DecimalExpansion(integer_part, str(scaled).zfill(precision))
