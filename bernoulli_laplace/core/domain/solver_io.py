"""
Solver IO — записи запроса и результата решателей

Immutable Pydantic модели, через которые внешние вызывающие (UI, воркеры,
транспорт) общаются с вычислительным ядром:
- SolverRequest: параметры задачи и бюджеты итераций
- SolverResult: вероятность (Rational), время вычисления, число итераций
"""

from datetime import timedelta
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, StrictInt, field_validator

from bernoulli_laplace.core.math.rational import Rational


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_EXPONENTIATION_ITERATIONS: Final[int] = 300
DEFAULT_SQUARE_ROOT_ITERATIONS: Final[int] = 10
DEFAULT_PRECISION: Final[int] = 1000
DEFAULT_STABLE_AMOUNT: Final[int] = 5
DEFAULT_MAX_ITERATIONS: Final[int] = 5000


# =============================================================================
# ENUMS
# =============================================================================


class SolverMode(str, Enum):
    """Какой решатель обрабатывает запрос."""

    BERNOULLI = "BERNOULLI"
    MOIVRE_LAPLACE = "MOIVRE_LAPLACE"
    MOIVRE_LAPLACE_AUTOMATIC = "MOIVRE_LAPLACE_AUTOMATIC"


# =============================================================================
# REQUEST
# =============================================================================


class SolverRequest(BaseModel):
    """
    Запрос на вычисление P(ровно required успехов из total испытаний).

    Immutable модель (frozen=True). Вероятность успеха odds имеет тип Rational;
    принимается также пара (numerator, denominator).
    Целочисленные поля строгие (StrictInt): bool, float и строки отклоняются.
    """

    # Параметры задачи
    total: StrictInt = Field(..., ge=0, description="Количество испытаний n")
    required: StrictInt = Field(..., ge=0, description="Требуемое число успехов k (k <= n)")
    odds: Rational = Field(..., description="Вероятность успеха p = a/b, 0 <= a <= b")

    # Бюджеты итераций (фиксированный режим)
    iterations: StrictInt = Field(
        DEFAULT_EXPONENTIATION_ITERATIONS,
        ge=1,
        description="Количество членов ряда Тейлора для e^x",
    )
    sqrt_iterations: StrictInt = Field(
        DEFAULT_SQUARE_ROOT_ITERATIONS,
        ge=0,
        description="Количество шагов Ньютона для sqrt",
    )

    # Адаптивный режим
    precision: StrictInt = Field(
        DEFAULT_PRECISION, ge=1, description="Цифр после точки при сравнении"
    )
    stable_amount: StrictInt = Field(
        DEFAULT_STABLE_AMOUNT,
        ge=1,
        description="Ширина окна значащих цифр, которое должно совпасть",
    )
    max_iterations: StrictInt = Field(
        DEFAULT_MAX_ITERATIONS,
        ge=1,
        description="Потолок итераций адаптивного режима (затем NonConvergence)",
    )

    model_config = {"frozen": True}

    @field_validator("required")
    @classmethod
    def validate_required_within_total(cls, v: int, info) -> int:
        """Проверка k <= n."""
        if "total" in info.data and v > info.data["total"]:
            raise ValueError(
                f"required ({v}) must not exceed total ({info.data['total']})"
            )
        return v

    @field_validator("odds", mode="before")
    @classmethod
    def coerce_odds_pair(cls, v: Any) -> Any:
        """Пара (numerator, denominator) → Rational."""
        if isinstance(v, (tuple, list)):
            if len(v) != 2:
                raise ValueError(f"odds pair must have 2 elements, got {len(v)}")
            return Rational(*v)
        return v

    @field_validator("odds")
    @classmethod
    def validate_odds_range(cls, v: Rational) -> Rational:
        """Проверка p в [0, 1]."""
        if v.numerator > v.denominator:
            raise ValueError(f"odds must lie in [0, 1], got {v}")
        return v


# =============================================================================
# RESULT
# =============================================================================


class SolverResult(BaseModel):
    """
    Результат решателя.

    probability: несокращённая дробь; elapsed: только для диагностики;
    iterations: фактически использованные члены ряда (0 для точного решателя).
    """

    probability: Rational = Field(..., description="Вероятность (Rational)")
    elapsed: timedelta = Field(..., description="Время вычисления")
    iterations: StrictInt = Field(..., ge=0, description="Использованные итерации")

    model_config = {"frozen": True}
