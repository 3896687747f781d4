"""
Series — итерационные примитивы над Rational

Замена трансцендентных функций для точной арифметики:
- factorial: итеративное произведение (без рекурсии по n)
- rational_sqrt: метод Ньютона с фиксированным бюджетом итераций
- rational_exp / exp_partial_sums: усечённый ряд Тейлора для e^x

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точность управляется только бюджетом итераций: проверки сходимости
   здесь нет (адаптивный режим живёт в solvers.adaptive)
2. Суммирование всегда через LCD (add_rationals)
3. Деление на два: halve_rational (без выхода из целых)

ФОРМУЛЫ:
    sqrt:  guess_0 = isqrt(a) / isqrt(b)
           guess_{i+1} = (guess_i + target / guess_i) / 2
    exp:   e^x ≈ Σ_{i=0}^{m-1} x^i / i!
           term_0 = 1,  term_i = term_{i-1} · x / i
"""

import itertools
import math
from typing import Iterator

from bernoulli_laplace.core.math.numerical_safeguards import validate_non_negative_int
from bernoulli_laplace.core.math.rational import (
    ZERO,
    Rational,
    add_rationals,
    halve_rational,
)


def factorial(base: int) -> int:
    """
    base! итеративно.

    Examples:
        >>> factorial(0), factorial(1), factorial(5)
        (1, 1, 120)
    """
    validate_non_negative_int(base, "base")

    result = 1
    for factor in range(2, base + 1):
        result *= factor
    return result


def ascending_product(start: int, stop: int) -> int:
    """start · (start + 1) · … · stop; пустое произведение == 1."""
    result = 1
    for factor in range(start, stop + 1):
        result *= factor
    return result


# =============================================================================
# SQUARE ROOT
# =============================================================================


def rational_sqrt(target: Rational, iterations: int) -> Rational:
    """
    Рациональное приближение sqrt(target) методом Ньютона.

    Начальное приближение: целые корни числителя и знаменателя
    (усечённые). Затем iterations шагов
    guess ← (guess + target / guess) / 2.

    Стоимость растёт экспоненциально с iterations: длина целых
    примерно удваивается на каждом шаге.

    Args:
        target: Подкоренное значение
        iterations: Количество шагов Ньютона (>= 0)

    Returns:
        Несокращённое приближение sqrt(target)

    Raises:
        InvalidParameter: Если iterations < 0

    Examples:
        >>> rational_sqrt(Rational(2), 2)
        Rational(numerator=17, denominator=12)
    """
    validate_non_negative_int(iterations, "iterations")

    if target.is_zero():
        return ZERO

    guess = Rational(math.isqrt(target.numerator), math.isqrt(target.denominator))

    for _ in range(iterations):
        # target / guess без вызова divide_rationals: guess > 0 гарантирован
        quotient = Rational(
            target.numerator * guess.denominator,
            target.denominator * guess.numerator,
        )
        guess = halve_rational(add_rationals(guess, quotient))

    return guess


# =============================================================================
# EXPONENTIAL
# =============================================================================


def exp_partial_sums(exponent: Rational) -> Iterator[Rational]:
    """
    Бесконечная последовательность частичных сумм ряда Тейлора e^x.

    Первый элемент: сумма из одного члена (1), второй: 1 + x, и т.д.
    Каждый член получается из предыдущего умножением на x / i.
    """
    term_numerator = 1
    term_denominator = 1
    accumulator = ZERO
    index = 0

    while True:
        if index > 0:
            term_numerator *= exponent.numerator
            term_denominator *= exponent.denominator * index

        accumulator = add_rationals(
            accumulator, Rational(term_numerator, term_denominator)
        )
        index += 1
        yield accumulator


def rational_exp(exponent: Rational, iterations: int) -> Rational:
    """
    Рациональное приближение e^exponent: Σ_{i<iterations} x^i / i!.

    Args:
        exponent: Показатель x (>= 0)
        iterations: Количество членов ряда; 0 → 0/1

    Raises:
        InvalidParameter: Если iterations < 0

    Examples:
        >>> rational_exp(Rational(1), 3)
        Rational(numerator=5, denominator=2)
        >>> rational_exp(Rational(1), 0)
        Rational(numerator=0, denominator=1)
    """
    validate_non_negative_int(iterations, "iterations")

    if iterations == 0:
        return ZERO

    return next(itertools.islice(exp_partial_sums(exponent), iterations - 1, None))
