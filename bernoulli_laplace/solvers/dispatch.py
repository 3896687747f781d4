"""Dispatch — запрос → решатель → результат

Точка входа для вызывающих (UI, воркеры): выбирает решатель по SolverMode.
Каждый вызов независим, общего изменяемого состояния нет, поэтому разные
режимы можно запускать параллельно в отдельных потоках/процессах.
"""

import logging
from typing import Any, Dict, Optional

from bernoulli_laplace.core.contracts.validators import validate_solver_request
from bernoulli_laplace.core.domain.solver_io import (
    SolverMode,
    SolverRequest,
    SolverResult,
)
from bernoulli_laplace.solvers.adaptive import (
    AdaptiveMoivreLaplaceSolver,
    CancellationToken,
)
from bernoulli_laplace.solvers.bernoulli import BernoulliSolver
from bernoulli_laplace.solvers.moivre_laplace import MoivreLaplaceSolver

logger = logging.getLogger(__name__)


def solve(
    mode: SolverMode,
    request: SolverRequest,
    token: Optional[CancellationToken] = None,
) -> SolverResult:
    """
    Выполнить запрос выбранным решателем.

    token учитывается только адаптивным режимом: фиксированные решатели
    не прерываются.

    Raises:
        InvalidParameter, NonConvergence, ComputationCancelled
    """
    logger.debug(
        "dispatching %s request n=%d k=%d", mode.value, request.total, request.required
    )

    if mode is SolverMode.BERNOULLI:
        return BernoulliSolver().solve(request)
    if mode is SolverMode.MOIVRE_LAPLACE:
        return MoivreLaplaceSolver().solve(request)
    if mode is SolverMode.MOIVRE_LAPLACE_AUTOMATIC:
        return AdaptiveMoivreLaplaceSolver().solve(request, token=token)

    raise ValueError(f"Unknown solver mode: {mode!r}")


def solve_payload(
    mode: SolverMode,
    payload: Dict[str, Any],
    token: Optional[CancellationToken] = None,
) -> SolverResult:
    """
    Сырой dict → валидация контракта → SolverRequest → решатель.

    Raises:
        jsonschema.ValidationError: payload не соответствует solver_request.json
        pydantic.ValidationError: нарушены межпольные ограничения
    """
    validate_solver_request(payload)
    request = SolverRequest.model_validate(payload)
    return solve(mode, request, token=token)
