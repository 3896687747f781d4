"""
Core math modules для bernoulli_laplace

Точная рациональная арифметика и итерационные приближения без float.
"""

# Numerical Safeguards
from bernoulli_laplace.core.math.numerical_safeguards import (
    # Exceptions
    InvalidParameter,
    # Safe difference
    IntDifference,
    Sign,
    safe_int_difference,
    # Validation
    is_strict_int,
    validate_non_negative_int,
    validate_outcomes,
    validate_positive_int,
    validate_probability_parts,
)

# Rational
from bernoulli_laplace.core.math.rational import (
    ONE,
    ZERO,
    DecimalExpansion,
    Rational,
    RationalDifference,
    add_rationals,
    complement,
    decimal_expansion,
    divide_rationals,
    halve_rational,
    invert_rational,
    multiply_rationals,
    rational_pow,
    rationals_equal,
    safe_difference,
)

# Series
from bernoulli_laplace.core.math.series import (
    ascending_product,
    exp_partial_sums,
    factorial,
    rational_exp,
    rational_sqrt,
)

# Continued Fraction
from bernoulli_laplace.core.math.continued_fraction import (
    E,
    E_CONTINUED_FRACTION_TERMS,
    PI,
    PI_CONTINUED_FRACTION_TERMS,
    continued_fraction,
    convergents,
)

__all__ = [
    # Numerical Safeguards: Exceptions
    "InvalidParameter",
    # Numerical Safeguards: Safe difference
    "IntDifference",
    "Sign",
    "safe_int_difference",
    # Numerical Safeguards: Validation
    "is_strict_int",
    "validate_non_negative_int",
    "validate_outcomes",
    "validate_positive_int",
    "validate_probability_parts",
    # Rational: Constants
    "ONE",
    "ZERO",
    # Rational: Types
    "DecimalExpansion",
    "Rational",
    "RationalDifference",
    # Rational: Functions
    "add_rationals",
    "complement",
    "decimal_expansion",
    "divide_rationals",
    "halve_rational",
    "invert_rational",
    "multiply_rationals",
    "rational_pow",
    "rationals_equal",
    "safe_difference",
    # Series
    "ascending_product",
    "exp_partial_sums",
    "factorial",
    "rational_exp",
    "rational_sqrt",
    # Continued Fraction: Constants
    "E",
    "E_CONTINUED_FRACTION_TERMS",
    "PI",
    "PI_CONTINUED_FRACTION_TERMS",
    # Continued Fraction: Functions
    "continued_fraction",
    "convergents",
]
