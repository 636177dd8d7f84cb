"""
Core math modules

Точная арифметика над рациональными числами произвольной точности.
"""

# Integer Primitives
from src.core.math.integer_primitives import (
    gcd_abs,
    integer_power,
    integer_sign,
    is_valid_integer,
    validate_integer,
    validate_non_negative_integer,
)

# Fraction
from src.core.math.fraction import (
    FRACTION_ONE,
    FRACTION_SEPARATOR,
    FRACTION_ZERO,
    ZERO_REPR,
    Fraction,
    FractionOperandError,
    sum_all,
)

__all__ = [
    # Integer Primitives — Validation
    "is_valid_integer",
    "validate_integer",
    "validate_non_negative_integer",
    # Integer Primitives — Arithmetic
    "gcd_abs",
    "integer_power",
    "integer_sign",
    # Fraction — Constants
    "FRACTION_ONE",
    "FRACTION_SEPARATOR",
    "FRACTION_ZERO",
    "ZERO_REPR",
    # Fraction — Exceptions
    "FractionOperandError",
    # Fraction — Types
    "Fraction",
    # Fraction — Functions
    "sum_all",
]
