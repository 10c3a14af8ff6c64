"""
Contract Validation Module

Модуль для валидации JSON контрактов арифметических кейсов.
"""

from .validators import (
    ArithmeticCaseValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_case,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticCaseValidator",
    # Functions
    "validate_arithmetic_case",
]
