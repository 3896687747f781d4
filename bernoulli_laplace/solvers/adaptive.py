"""Adaptive Convergence Driver для приближения Муавра-Лапласа

Вместо фиксированного числа членов ряда e^y драйвер добавляет члены
по одному, после каждого пересчитывает вероятность и её усечённое
десятичное разложение с precision цифрами после точки.

Критерий остановки (эвристика, НЕ оценка погрешности):
1. leading_zero_count: позиция первой значащей цифры
2. Если позиция не изменилась с прошлой итерации, сравниваются окна
   из stable_amount значащих цифр текущей и прошлой итераций
3. Окна совпали → сходимость, возвращается текущая вероятность
4. Позиция изменилась → окно сбрасывается
5. Окно короче stable_amount (не хватает цифр при данной precision)
   никогда не считается стабильным

Ограничения:
- max_iterations членов без сходимости → NonConvergence
- CancellationToken проверяется на каждой итерации → ComputationCancelled
"""

import logging
import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from bernoulli_laplace.core.domain.solver_io import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PRECISION,
    DEFAULT_SQUARE_ROOT_ITERATIONS,
    DEFAULT_STABLE_AMOUNT,
    SolverRequest,
    SolverResult,
)
from bernoulli_laplace.core.math.numerical_safeguards import (
    validate_non_negative_int,
    validate_positive_int,
)
from bernoulli_laplace.core.math.rational import (
    DecimalExpansion,
    Rational,
    decimal_expansion,
)
from bernoulli_laplace.core.math.series import exp_partial_sums
from bernoulli_laplace.solvers.moivre_laplace import (
    combine_normal_approximation,
    normal_approximation_terms,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonConvergence(RuntimeError):
    """
    Значащие цифры не стабилизировались за max_iterations членов ряда.

    Обычно означает, что precision слишком мала: при данной точности
    вероятность не содержит stable_amount значащих цифр.
    """

    def __init__(self, iterations: int, last_probability: Rational):
        self.iterations = iterations
        self.last_probability = last_probability
        super().__init__(
            f"adaptive series did not stabilise after {iterations} iterations"
        )


class ComputationCancelled(RuntimeError):
    """Вычисление прервано через CancellationToken (cancel() или дедлайн)."""

    pass


# =============================================================================
# CANCELLATION
# =============================================================================


class CancellationToken:
    """
    Кооперативная отмена адаптивного цикла.

    Потокобезопасен: cancel() можно вызывать из другого потока.
    Опциональный timeout задаёт дедлайн относительно момента создания.
    """

    def __init__(self, timeout: Optional[timedelta] = None):
        self._event = threading.Event()
        self._deadline: Optional[float] = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout.total_seconds()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise ComputationCancelled("computation cancelled")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AdaptiveConvergenceConfig:
    """
    Параметры адаптивного режима.

    precision и stable_amount: настраиваемые ручки без формальной
    гарантии точности.
    """

    square_root_iterations: int = DEFAULT_SQUARE_ROOT_ITERATIONS
    precision: int = DEFAULT_PRECISION
    stable_amount: int = DEFAULT_STABLE_AMOUNT
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        validate_non_negative_int(self.square_root_iterations, "square_root_iterations")
        validate_positive_int(self.precision, "precision")
        validate_positive_int(self.stable_amount, "stable_amount")
        validate_positive_int(self.max_iterations, "max_iterations")

    @classmethod
    def from_request(cls, request: SolverRequest) -> "AdaptiveConvergenceConfig":
        return cls(
            square_root_iterations=request.sqrt_iterations,
            precision=request.precision,
            stable_amount=request.stable_amount,
            max_iterations=request.max_iterations,
        )


# =============================================================================
# DIGIT WINDOW
# =============================================================================


@dataclass
class DigitWindowTracker:
    """Окно значащих цифр прошлой итерации и его позиция."""

    stable_amount: int
    previous_leading_zeros: Optional[int] = None
    previous_window: Optional[str] = None

    def observe(self, expansion: DecimalExpansion) -> bool:
        """
        Запомнить окно текущей итерации.

        Returns:
            True если позиция и полное окно совпали с прошлой итерацией
        """
        leading_zeros = expansion.leading_zero_count
        window = expansion.significant_digits[: self.stable_amount]

        stable = (
            len(window) == self.stable_amount
            and leading_zeros == self.previous_leading_zeros
            and window == self.previous_window
        )

        self.previous_leading_zeros = leading_zeros
        self.previous_window = window
        return stable


# =============================================================================
# DRIVER
# =============================================================================


def moivre_laplace_adaptive(
    experiments: int,
    positive_outcomes: int,
    positive_probability: Rational,
    config: AdaptiveConvergenceConfig = AdaptiveConvergenceConfig(),
    token: Optional[CancellationToken] = None,
) -> SolverResult:
    """
    Приближение Муавра-Лапласа с адаптивным числом членов ряда e^y.

    Args:
        experiments: n (> 0)
        positive_outcomes: k (0 <= k <= n)
        positive_probability: p = a/b, 0 < a < b
        config: precision / stable_amount / max_iterations / бюджет sqrt
        token: Опциональный токен отмены

    Returns:
        SolverResult; iterations = число использованных членов ряда

    Raises:
        InvalidParameter: Невалидные параметры задачи
        NonConvergence: Нет сходимости за config.max_iterations
        ComputationCancelled: Токен отменён или истёк
    """
    started = time.perf_counter()

    terms = normal_approximation_terms(
        experiments,
        positive_outcomes,
        positive_probability,
        config.square_root_iterations,
    )
    tracker = DigitWindowTracker(config.stable_amount)
    partial_sums = exp_partial_sums(terms.exponent)
    iteration = 0

    while True:
        iteration += 1
        exponential = next(partial_sums)

        if token is not None:
            token.raise_if_cancelled()

        probability = combine_normal_approximation(terms, exponential)
        expansion = decimal_expansion(probability, config.precision)
        logger.debug(
            "iteration %d: leading_zeros=%d window=%s",
            iteration,
            expansion.leading_zero_count,
            expansion.significant_digits[: config.stable_amount],
        )

        if tracker.observe(expansion):
            elapsed = timedelta(seconds=time.perf_counter() - started)
            logger.debug(
                "moivre_laplace_adaptive converged after %d iterations, took %s",
                iteration,
                elapsed,
            )
            return SolverResult(
                probability=probability, elapsed=elapsed, iterations=iteration
            )

        if iteration >= config.max_iterations:
            logger.warning(
                "moivre_laplace_adaptive gave up after %d iterations "
                "(precision=%d, stable_amount=%d)",
                iteration,
                config.precision,
                config.stable_amount,
            )
            raise NonConvergence(iteration, probability)


class AdaptiveMoivreLaplaceSolver:
    """Адаптивный режим: SolverRequest → SolverResult."""

    def solve(
        self,
        request: SolverRequest,
        token: Optional[CancellationToken] = None,
    ) -> SolverResult:
        return moivre_laplace_adaptive(
            request.total,
            request.required,
            request.odds,
            config=AdaptiveConvergenceConfig.from_request(request),
            token=token,
        )
