"""
Solvers: exact binomial PMF and the Moivre-Laplace approximation.
"""

from .adaptive import (
    AdaptiveConvergenceConfig,
    AdaptiveMoivreLaplaceSolver,
    CancellationToken,
    ComputationCancelled,
    DigitWindowTracker,
    NonConvergence,
    moivre_laplace_adaptive,
)
from .bernoulli import BernoulliSolver, bernoulli, binomial_coefficient
from .dispatch import solve, solve_payload
from .moivre_laplace import (
    MoivreLaplaceConfig,
    MoivreLaplaceSolver,
    NormalApproximationTerms,
    combine_normal_approximation,
    moivre_laplace,
    normal_approximation_terms,
)

__all__ = [
    # Exact
    "BernoulliSolver",
    "bernoulli",
    "binomial_coefficient",
    # Moivre-Laplace (fixed)
    "MoivreLaplaceConfig",
    "MoivreLaplaceSolver",
    "NormalApproximationTerms",
    "combine_normal_approximation",
    "moivre_laplace",
    "normal_approximation_terms",
    # Moivre-Laplace (adaptive)
    "AdaptiveConvergenceConfig",
    "AdaptiveMoivreLaplaceSolver",
    "CancellationToken",
    "ComputationCancelled",
    "DigitWindowTracker",
    "NonConvergence",
    "moivre_laplace_adaptive",
    # Dispatch
    "solve",
    "solve_payload",
]
