"""Moivre-Laplace Solver (фиксированное число итераций)

P(X = k) ≈ 1 / sqrt(2π·npq) · e^{-(k - np)^2 / (2npq)}

Все величины являются Rational, трансцендентные функции заменены примитивами
series.rational_sqrt (Ньютон) и series.rational_exp (ряд Тейлора):
1. np = n·a / b,  2npq = 2·n·a·(b - a) / b²
2. k приводится к знаменателю b, |k·b - n·a| считается через safe_int_difference
3. e^{-y} = 1 / e^{y}: показатель считается положительным, затем
   результат инвертируется
4. π: рациональная константа (подходящая дробь цепной дроби)

Блоки NormalApproximationTerms / combine_normal_approximation общие
с адаптивным режимом (solvers.adaptive).
"""

import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import NamedTuple

from bernoulli_laplace.core.domain.solver_io import (
    DEFAULT_EXPONENTIATION_ITERATIONS,
    DEFAULT_SQUARE_ROOT_ITERATIONS,
    SolverRequest,
    SolverResult,
)
from bernoulli_laplace.core.math.continued_fraction import PI
from bernoulli_laplace.core.math.numerical_safeguards import (
    InvalidParameter,
    safe_int_difference,
    validate_non_negative_int,
    validate_outcomes,
    validate_positive_int,
    validate_probability_parts,
)
from bernoulli_laplace.core.math.rational import (
    Rational,
    complement,
    divide_rationals,
    invert_rational,
    multiply_rationals,
    rational_pow,
)
from bernoulli_laplace.core.math.series import rational_exp, rational_sqrt

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MoivreLaplaceConfig:
    """Бюджеты итераций фиксированного режима."""

    exponentiation_iterations: int = DEFAULT_EXPONENTIATION_ITERATIONS
    square_root_iterations: int = DEFAULT_SQUARE_ROOT_ITERATIONS

    def __post_init__(self) -> None:
        validate_positive_int(self.exponentiation_iterations, "exponentiation_iterations")
        validate_non_negative_int(self.square_root_iterations, "square_root_iterations")

    @classmethod
    def from_request(cls, request: SolverRequest) -> "MoivreLaplaceConfig":
        return cls(
            exponentiation_iterations=request.iterations,
            square_root_iterations=request.sqrt_iterations,
        )


# =============================================================================
# NORMAL APPROXIMATION BUILDING BLOCKS
# =============================================================================


class NormalApproximationTerms(NamedTuple):
    """
    Части формулы, не зависящие от числа членов ряда e^x.

    exponent: y = (k - np)^2 / (2npq) (неотрицательный)
    inverse_sqrt: 1 / sqrt(2π·npq)
    """

    exponent: Rational
    inverse_sqrt: Rational


def normal_approximation_terms(
    experiments: int,
    positive_outcomes: int,
    positive_probability: Rational,
    square_root_iterations: int,
) -> NormalApproximationTerms:
    """
    Вычисление показателя экспоненты и множителя 1/sqrt(2π·npq).

    Raises:
        InvalidParameter: k > n, p вне [0, 1], отрицательный бюджет sqrt,
            либо npq == 0 (n == 0, p == 0 или p == 1)
    """
    validate_outcomes(experiments, positive_outcomes)
    validate_probability_parts(
        positive_probability.numerator, positive_probability.denominator
    )
    validate_non_negative_int(square_root_iterations, "square_root_iterations")

    positive_numerator = positive_probability.numerator
    probability_denominator = positive_probability.denominator
    negative_numerator = complement(positive_probability).numerator

    if experiments == 0 or positive_numerator == 0 or negative_numerator == 0:
        raise InvalidParameter(
            f"normal approximation requires npq > 0, got n={experiments}, "
            f"p={positive_probability}"
        )

    # np над знаменателем b
    np_numerator = experiments * positive_numerator
    two_npq = Rational(
        2 * np_numerator * negative_numerator,
        probability_denominator * probability_denominator,
    )

    # k·b - n·a без underflow; знак не нужен, разность возводится в квадрат
    deviation = safe_int_difference(
        positive_outcomes * probability_denominator, np_numerator
    )
    exponent = divide_rationals(
        rational_pow(Rational(deviation.magnitude, probability_denominator), 2),
        two_npq,
    )

    square_root = rational_sqrt(
        multiply_rationals(two_npq, PI), square_root_iterations
    )

    return NormalApproximationTerms(
        exponent=exponent,
        inverse_sqrt=invert_rational(square_root),
    )


def combine_normal_approximation(
    terms: NormalApproximationTerms,
    exponential: Rational,
) -> Rational:
    """
    1/sqrt(2π·npq) · 1/e^{y}.

    Raises:
        InvalidParameter: Если exponential == 0 (пустой ряд)
    """
    return multiply_rationals(terms.inverse_sqrt, invert_rational(exponential))


# =============================================================================
# SOLVER
# =============================================================================


def moivre_laplace(
    experiments: int,
    positive_outcomes: int,
    positive_probability: Rational,
    config: MoivreLaplaceConfig = MoivreLaplaceConfig(),
) -> SolverResult:
    """
    Приближение Муавра-Лапласа с фиксированными бюджетами итераций.

    Args:
        experiments: n (> 0)
        positive_outcomes: k (0 <= k <= n)
        positive_probability: p = a/b, 0 < a < b
        config: Членов ряда Тейлора (>= 1) и шагов Ньютона (>= 0)

    Returns:
        SolverResult; iterations == config.exponentiation_iterations

    Raises:
        InvalidParameter: См. normal_approximation_terms
    """
    started = time.perf_counter()

    terms = normal_approximation_terms(
        experiments,
        positive_outcomes,
        positive_probability,
        config.square_root_iterations,
    )
    exponential = rational_exp(terms.exponent, config.exponentiation_iterations)
    probability = combine_normal_approximation(terms, exponential)

    elapsed = timedelta(seconds=time.perf_counter() - started)
    logger.debug(
        "moivre_laplace n=%d k=%d p=%s exp_iterations=%d sqrt_iterations=%d took %s",
        experiments,
        positive_outcomes,
        positive_probability,
        config.exponentiation_iterations,
        config.square_root_iterations,
        elapsed,
    )

    return SolverResult(
        probability=probability,
        elapsed=elapsed,
        iterations=config.exponentiation_iterations,
    )


class MoivreLaplaceSolver:
    """Фиксированный режим: SolverRequest → SolverResult."""

    def solve(self, request: SolverRequest) -> SolverResult:
        return moivre_laplace(
            request.total,
            request.required,
            request.odds,
            config=MoivreLaplaceConfig.from_request(request),
        )
