"""
Contract Validation Module

Модуль для валидации JSON контрактов входных запросов решателей.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SolverRequestValidator,
    validate_solver_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SolverRequestValidator",
    # Functions
    "validate_solver_request",
]
