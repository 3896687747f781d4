"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Безопасную разность целых (без underflow)
2. Валидацию беззнаковых целых
3. Валидацию пар (n, k) и вероятностей a/b
"""

import pytest

from bernoulli_laplace.core.math.numerical_safeguards import (
    IntDifference,
    InvalidParameter,
    Sign,
    is_strict_int,
    safe_int_difference,
    validate_non_negative_int,
    validate_outcomes,
    validate_positive_int,
    validate_probability_parts,
)


# =============================================================================
# ТЕСТЫ БЕЗОПАСНОЙ РАЗНОСТИ
# =============================================================================


class TestSafeIntDifference:
    """Тесты для safe_int_difference"""

    def test_positive_difference(self) -> None:
        """lhs > rhs → PLUS"""
        assert safe_int_difference(10, 3) == IntDifference(7, Sign.PLUS)

    def test_negative_difference_has_positive_magnitude(self) -> None:
        """lhs < rhs → модуль положительный, знак MINUS"""
        result = safe_int_difference(3, 10)
        assert result.magnitude == 7
        assert result.sign is Sign.MINUS

    def test_equal_values(self) -> None:
        """lhs == rhs → ZERO"""
        assert safe_int_difference(4, 4) == IntDifference(0, Sign.ZERO)

    def test_big_integers(self) -> None:
        """Произвольная точность"""
        big = 10**200
        result = safe_int_difference(big, big + 1)
        assert result == IntDifference(1, Sign.MINUS)

    def test_negative_input_rejected(self) -> None:
        """Отрицательные входы не допускаются"""
        with pytest.raises(InvalidParameter, match="must be non-negative"):
            safe_int_difference(-1, 3)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestIntegerValidation:
    """Тесты validate_non_negative_int / validate_positive_int"""

    def test_bool_is_not_int(self) -> None:
        """bool отклоняется"""
        assert not is_strict_int(True)
        assert is_strict_int(0)
        with pytest.raises(InvalidParameter, match="must be an integer"):
            validate_non_negative_int(True, "value")

    def test_float_rejected(self) -> None:
        """float отклоняется даже для целых значений"""
        with pytest.raises(InvalidParameter, match="must be an integer"):
            validate_non_negative_int(3.0, "value")

    def test_zero_non_negative_but_not_positive(self) -> None:
        """0 допустим как неотрицательный, но не как положительный"""
        validate_non_negative_int(0, "value")
        with pytest.raises(InvalidParameter, match="must be positive"):
            validate_positive_int(0, "value")

    def test_error_message_contains_name(self) -> None:
        """Имя параметра в сообщении"""
        with pytest.raises(InvalidParameter, match="iterations"):
            validate_positive_int(-5, "iterations")

    def test_invalid_parameter_is_value_error(self) -> None:
        """InvalidParameter является подклассом ValueError"""
        assert issubclass(InvalidParameter, ValueError)


class TestOutcomesValidation:
    """Тесты validate_outcomes"""

    def test_valid_range(self) -> None:
        validate_outcomes(10, 0)
        validate_outcomes(10, 10)
        validate_outcomes(0, 0)

    def test_k_greater_than_n(self) -> None:
        """k > n → InvalidParameter"""
        with pytest.raises(InvalidParameter, match="must be <= experiments"):
            validate_outcomes(5, 6)


class TestProbabilityValidation:
    """Тесты validate_probability_parts"""

    def test_valid_probabilities(self) -> None:
        validate_probability_parts(0, 1)
        validate_probability_parts(1, 1)
        validate_probability_parts(4, 5)

    def test_zero_denominator(self) -> None:
        """b == 0 → InvalidParameter"""
        with pytest.raises(InvalidParameter, match="non-zero"):
            validate_probability_parts(0, 0)

    def test_probability_above_one(self) -> None:
        """a > b → InvalidParameter"""
        with pytest.raises(InvalidParameter, match=r"\[0, 1\]"):
            validate_probability_parts(6, 5)
