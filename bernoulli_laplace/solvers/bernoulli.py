"""Exact Binomial Solver (Bernoulli)

P(X = k) = C(n, k) · p^k · q^(n-k),  p = a/b,  q = (b - a)/b

Всё вычисление ведётся в целых числах произвольной точности:
1. Валидация (k <= n, b != 0, a <= b) до начала вычислений
2. C(n, k): больший из k!, (n-k)! сокращается с n!, остаётся
   произведение (max(k, n-k) + 1) · … · n над min(k, n-k)!
3. Числители и знаменатели p^k, q^(n-k) возводятся в степень раздельно
4. Результат не сокращается
"""

import logging
import time
from datetime import timedelta

from bernoulli_laplace.core.domain.solver_io import SolverRequest, SolverResult
from bernoulli_laplace.core.math.numerical_safeguards import (
    validate_outcomes,
    validate_probability_parts,
)
from bernoulli_laplace.core.math.rational import Rational, complement
from bernoulli_laplace.core.math.series import ascending_product, factorial

logger = logging.getLogger(__name__)


def binomial_coefficient(experiments: int, positive_outcomes: int) -> Rational:
    """
    C(n, k) как несокращённая дробь n!/(k!(n-k)!) после сокращения
    большего факториала знаменателя.

    Examples:
        >>> binomial_coefficient(5, 2)
        Rational(numerator=20, denominator=2)
    """
    validate_outcomes(experiments, positive_outcomes)

    larger = max(experiments - positive_outcomes, positive_outcomes)

    return Rational(
        ascending_product(larger + 1, experiments),
        factorial(experiments - larger),
    )


def bernoulli(
    experiments: int,
    positive_outcomes: int,
    positive_probability: Rational,
) -> SolverResult:
    """
    Точная вероятность ровно k успехов из n испытаний.

    Args:
        experiments: n (>= 0)
        positive_outcomes: k (0 <= k <= n)
        positive_probability: p = a/b, 0 <= a <= b

    Returns:
        SolverResult с probability (Rational) и iterations == 0

    Raises:
        InvalidParameter: k > n, b == 0 или p > 1
    """
    validate_outcomes(experiments, positive_outcomes)
    validate_probability_parts(
        positive_probability.numerator, positive_probability.denominator
    )

    started = time.perf_counter()

    positive_numerator = positive_probability.numerator
    probability_denominator = positive_probability.denominator
    negative_numerator = complement(positive_probability).numerator

    combinations = binomial_coefficient(experiments, positive_outcomes)
    negative_power = experiments - positive_outcomes

    probability = Rational(
        combinations.numerator
        * positive_numerator**positive_outcomes
        * negative_numerator**negative_power,
        combinations.denominator * probability_denominator**experiments,
    )

    elapsed = timedelta(seconds=time.perf_counter() - started)
    logger.debug(
        "bernoulli n=%d k=%d p=%s took %s",
        experiments,
        positive_outcomes,
        positive_probability,
        elapsed,
    )

    return SolverResult(probability=probability, elapsed=elapsed, iterations=0)


class BernoulliSolver:
    """Точный решатель: SolverRequest → SolverResult."""

    def solve(self, request: SolverRequest) -> SolverResult:
        return bernoulli(request.total, request.required, request.odds)
