"""
Continued Fraction — построение дробей из цепных дробей

Модуль вычисляет значение a0 + 1/(a1 + 1/(a2 + …)) в точной арифметике
и хранит рациональные константы π и e, полученные как подходящие дроби
их разложений в цепную дробь.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вычисление итеративное (от хвоста к голове), глубина стека не зависит
   от длины последовательности
2. [] → 0/1, [x] → x/1
3. PI == continued_fraction(PI_CONTINUED_FRACTION_TERMS),
   E == continued_fraction(E_CONTINUED_FRACTION_TERMS)
"""

from typing import Final, Iterable, Iterator, Sequence

from bernoulli_laplace.core.math.numerical_safeguards import (
    InvalidParameter,
    validate_non_negative_int,
)
from bernoulli_laplace.core.math.rational import ZERO, Rational


# =============================================================================
# CONSTANTS
# =============================================================================

# Первые 30 элементов разложения π (OEIS A001203)
PI_CONTINUED_FRACTION_TERMS: Final[tuple[int, ...]] = (
    3, 7, 15, 1, 292, 1, 1, 1, 2, 1,
    3, 1, 14, 2, 1, 1, 2, 2, 2, 2,
    1, 84, 2, 1, 1, 15, 3, 13, 1, 4,
)  # fmt: skip

# 30-я подходящая дробь π, |PI - π| < 1e-32
PI: Final[Rational] = Rational(30_246_273_033_735_921, 9_627_687_726_852_338)

# Первые 27 элементов разложения e: [2; 1, 2, 1, 1, 4, 1, 1, 6, ...] (OEIS A003417)
E_CONTINUED_FRACTION_TERMS: Final[tuple[int, ...]] = (
    2, 1, 2, 1, 1, 4, 1, 1, 6, 1,
    1, 8, 1, 1, 10, 1, 1, 12, 1, 1,
    14, 1, 1, 16, 1, 1, 18,
)  # fmt: skip

# 27-я подходящая дробь e, |E - e| < 1e-22
E: Final[Rational] = Rational(534_625_820_200, 196_677_847_971)


# =============================================================================
# CONTINUED FRACTION
# =============================================================================


def continued_fraction(terms: Sequence[int]) -> Rational:
    """
    Значение конечной цепной дроби [a0; a1, …, am].

    Вычисляется от хвоста: value = am, затем value = a_i + 1/value.

    Args:
        terms: Неотрицательные целые элементы

    Returns:
        Rational (несокращённый)

    Raises:
        InvalidParameter: Отрицательный элемент или нулевой хвост (деление на 0)

    Examples:
        >>> continued_fraction([])
        Rational(numerator=0, denominator=1)
        >>> continued_fraction([1, 1])
        Rational(numerator=2, denominator=1)
        >>> continued_fraction([1, 2, 2])
        Rational(numerator=7, denominator=5)
    """
    for term in terms:
        validate_non_negative_int(term, "continued fraction term")

    if not terms:
        return ZERO

    numerator, denominator = terms[-1], 1

    for term in reversed(terms[:-1]):
        if numerator == 0:
            raise InvalidParameter(
                "continued fraction tail evaluates to zero, cannot invert"
            )
        # term + denominator / numerator
        numerator, denominator = term * numerator + denominator, numerator

    return Rational(numerator, denominator)


def convergents(terms: Iterable[int]) -> Iterator[Rational]:
    """
    Последовательные подходящие дроби h_n / k_n.

    h_n = a_n · h_{n-1} + h_{n-2},  k_n = a_n · k_{n-1} + k_{n-2}

    Examples:
        >>> [str(c) for c in convergents([3, 7, 15, 1])]
        ['3/1', '22/7', '333/106', '355/113']
    """
    previous_numerator, numerator = 0, 1
    previous_denominator, denominator = 1, 0

    for term in terms:
        validate_non_negative_int(term, "continued fraction term")

        previous_numerator, numerator = numerator, term * numerator + previous_numerator
        previous_denominator, denominator = (
            denominator,
            term * denominator + previous_denominator,
        )

        if denominator == 0:
            raise InvalidParameter("convergent with zero denominator")

        yield Rational(numerator, denominator)
