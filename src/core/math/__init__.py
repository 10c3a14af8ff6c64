"""
Core math modules

Арифметические примитивы и сравнения float с толерантностью.
"""

# Arithmetic
from src.core.math.arithmetic import add, subtract

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Tolerance constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    NEAR_TOLERANCE_DEFAULT,
    # Validation
    is_valid_float,
    validate_tolerance,
    # Comparisons
    is_close,
    is_near,
    near_deviation,
)

__all__ = [
    # Arithmetic
    "add",
    "subtract",
    # Numerical Safeguards, Tolerance constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "NEAR_TOLERANCE_DEFAULT",
    # Numerical Safeguards, Validation
    "is_valid_float",
    "validate_tolerance",
    # Numerical Safeguards, Comparisons
    "is_close",
    "is_near",
    "near_deviation",
]
