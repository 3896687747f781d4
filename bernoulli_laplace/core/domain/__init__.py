"""
Domain models: request and result records of the solvers.
"""

from bernoulli_laplace.core.domain.solver_io import (
    DEFAULT_EXPONENTIATION_ITERATIONS,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PRECISION,
    DEFAULT_SQUARE_ROOT_ITERATIONS,
    DEFAULT_STABLE_AMOUNT,
    SolverMode,
    SolverRequest,
    SolverResult,
)

__all__ = [
    # Defaults
    "DEFAULT_EXPONENTIATION_ITERATIONS",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_PRECISION",
    "DEFAULT_SQUARE_ROOT_ITERATIONS",
    "DEFAULT_STABLE_AMOUNT",
    # Models
    "SolverMode",
    "SolverRequest",
    "SolverResult",
]
