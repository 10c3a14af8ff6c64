"""
Domain models and value objects.

Contains tolerance-checked arithmetic cases and their outcomes.
"""

from src.core.domain.arithmetic_case import (
    CONTRACT_SCHEMA_VERSION,
    OPERATION_FUNCTIONS,
    REFERENCE_CASES,
    ArithmeticCase,
    ArithmeticOperation,
    ArithmeticOutcome,
    evaluate_cases,
)

__all__ = [
    "CONTRACT_SCHEMA_VERSION",
    "OPERATION_FUNCTIONS",
    "REFERENCE_CASES",
    "ArithmeticCase",
    "ArithmeticOperation",
    "ArithmeticOutcome",
    "evaluate_cases",
]
