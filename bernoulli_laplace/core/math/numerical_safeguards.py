"""
Numerical Safeguards — Validation Primitives для точной арифметики

Модуль обеспечивает раннюю валидацию всех входов вычислительного ядра:
- Беззнаковые целые (количество испытаний, успехов, бюджеты итераций)
- Вероятность в виде пары (числитель, знаменатель)
- Безопасная разность целых без underflow (compare-then-subtract)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный вход отклоняется ДО начала вычислений (InvalidParameter)
2. bool никогда не принимается как целое число
3. Вычитание всегда упорядочено: уменьшаемое >= вычитаемого
4. Все операции детерминированы и воспроизводимы
"""

from enum import Enum
from typing import NamedTuple


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidParameter(ValueError):
    """
    Нарушение предусловия вычисления (k > n, нулевой знаменатель,
    вероятность вне [0, 1], отрицательный бюджет итераций).

    Наследуется от ValueError, чтобы pydantic-валидаторы превращали его
    в ValidationError без дополнительной обработки.
    """

    pass


# =============================================================================
# SIGN / SAFE DIFFERENCE
# =============================================================================


class Sign(str, Enum):
    """Знак разности двух неотрицательных величин."""

    PLUS = "PLUS"
    MINUS = "MINUS"
    ZERO = "ZERO"


class IntDifference(NamedTuple):
    """Модуль и знак разности lhs - rhs."""

    magnitude: int
    sign: Sign


def safe_int_difference(lhs: int, rhs: int) -> IntDifference:
    """
    Разность двух неотрицательных целых без underflow.

    Сначала сравнивает величины, затем вычитает меньшее из большего.

    Args:
        lhs: Уменьшаемое (>= 0)
        rhs: Вычитаемое (>= 0)

    Returns:
        IntDifference(magnitude=|lhs - rhs|, sign)

    Examples:
        >>> safe_int_difference(10, 3)
        IntDifference(magnitude=7, sign=<Sign.PLUS: 'PLUS'>)
        >>> safe_int_difference(3, 10).magnitude
        7
        >>> safe_int_difference(4, 4).sign
        <Sign.ZERO: 'ZERO'>
    """
    validate_non_negative_int(lhs, "lhs")
    validate_non_negative_int(rhs, "rhs")

    if lhs > rhs:
        return IntDifference(lhs - rhs, Sign.PLUS)
    if lhs < rhs:
        return IntDifference(rhs - lhs, Sign.MINUS)
    return IntDifference(0, Sign.ZERO)


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def is_strict_int(value: object) -> bool:
    """True для int, но не для bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение является неотрицательным целым.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidParameter: Если value не int или value < 0
    """
    if not is_strict_int(value):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise InvalidParameter(f"{name} must be non-negative, got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение является положительным целым.

    Raises:
        InvalidParameter: Если value не int или value <= 0
    """
    if not is_strict_int(value):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")

    if value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value}")


def validate_outcomes(experiments: int, positive_outcomes: int) -> None:
    """
    Валидация пары (n, k): оба неотрицательные, k <= n.

    Raises:
        InvalidParameter: Если k > n или значения невалидны
    """
    validate_non_negative_int(experiments, "experiments")
    validate_non_negative_int(positive_outcomes, "positive_outcomes")

    if positive_outcomes > experiments:
        raise InvalidParameter(
            f"positive_outcomes must be <= experiments, "
            f"got {positive_outcomes} > {experiments}"
        )


def validate_probability_parts(numerator: int, denominator: int) -> None:
    """
    Валидация вероятности p = numerator / denominator в [0, 1].

    Args:
        numerator: Числитель (>= 0)
        denominator: Знаменатель (> 0)

    Raises:
        InvalidParameter: Нулевой знаменатель или numerator > denominator
    """
    validate_non_negative_int(numerator, "probability numerator")
    validate_non_negative_int(denominator, "probability denominator")

    if denominator == 0:
        raise InvalidParameter("probability denominator must be non-zero")

    if numerator > denominator:
        raise InvalidParameter(
            f"probability must lie in [0, 1], got {numerator}/{denominator}"
        )
