"""
ArithmeticCase: Модель арифметического кейса с толерантностью

Immutable Pydantic модели:
- ArithmeticCase: операция, операнды, ожидаемый результат и толерантность
- ArithmeticOutcome: фактический результат проверки кейса

Кейс проходит, если abs(expected - operation(a, b)) <= tolerance.
Сериализованная форма соответствует схеме arithmetic_case.
"""

from enum import Enum
from typing import Any, Callable, Dict, Final

from pydantic import BaseModel, Field

from src.core.contracts import validate_arithmetic_case
from src.core.math.arithmetic import add, subtract
from src.core.math.numerical_safeguards import (
    NEAR_TOLERANCE_DEFAULT,
    is_near,
    is_valid_float,
    near_deviation,
)

CONTRACT_SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# ENUMS
# =============================================================================


class ArithmeticOperation(str, Enum):
    """Арифметическая операция кейса"""

    SUM = "sum"
    SUBTRACTION = "subtraction"

    def apply(self, a: float, b: float) -> float:
        """Применение операции к операндам"""
        return OPERATION_FUNCTIONS[self](a, b)


# Каждый член ArithmeticOperation обязан иметь функцию
OPERATION_FUNCTIONS: Final[Dict[ArithmeticOperation, Callable[[float, float], float]]] = {
    ArithmeticOperation.SUM: add,
    ArithmeticOperation.SUBTRACTION: subtract,
}


# =============================================================================
# MODELS
# =============================================================================


class ArithmeticCase(BaseModel):
    """
    Арифметический кейс: operation(a, b) ≈ expected с абсолютной толерантностью.

    Операнды не ограничены (NaN/Inf допустимы и пропагируют в результат).
    Ожидаемое значение и толерантность обязаны быть конечными.
    """

    # Идентификация
    suite: str = Field(..., min_length=1, description="Имя набора (например, 'SumTest')")
    name: str = Field(..., min_length=1, description="Имя кейса в наборе")

    # Вычисление
    operation: ArithmeticOperation = Field(..., description="Операция (sum/subtraction)")
    a: float = Field(..., description="Первый операнд")
    b: float = Field(..., description="Второй операнд")

    # Проверка
    expected: float = Field(..., allow_inf_nan=False, description="Ожидаемый результат")
    tolerance: float = Field(
        NEAR_TOLERANCE_DEFAULT,
        ge=0,
        allow_inf_nan=False,
        description="Абсолютная толерантность",
    )

    model_config = {"frozen": True}

    @property
    def case_id(self) -> str:
        """Полный идентификатор кейса: '<suite>.<name>'"""
        return f"{self.suite}.{self.name}"

    def evaluate(self) -> "ArithmeticOutcome":
        """
        Выполнение кейса.

        Returns:
            ArithmeticOutcome с фактическим результатом и отклонением
        """
        actual = self.operation.apply(self.a, self.b)
        return ArithmeticOutcome(
            case=self,
            actual=actual,
            deviation=near_deviation(self.expected, actual),
            passed=is_near(self.expected, actual, self.tolerance),
        )

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "ArithmeticCase":
        """
        Создание кейса из JSON контракта.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_arithmetic_case(data)
        fields = {k: v for k, v in data.items() if k != "schema_version"}
        return cls(**fields)

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация кейса в форму JSON контракта.

        JSON не имеет представления для NaN/Inf, поэтому кейсы
        с неконечными операндами не сериализуются.

        Raises:
            ValueError: Если a или b равны NaN/Inf
        """
        for name in ("a", "b"):
            value = getattr(self, name)
            if not is_valid_float(value):
                raise ValueError(
                    f"{name} must be a valid float (not NaN/Inf) to serialize "
                    f"{self.case_id}, got {value}"
                )

        data = self.model_dump()
        data["operation"] = self.operation.value
        return {"schema_version": CONTRACT_SCHEMA_VERSION, **data}


class ArithmeticOutcome(BaseModel):
    """Результат выполнения ArithmeticCase"""

    case: ArithmeticCase
    actual: float = Field(..., description="Фактический результат операции")
    deviation: float = Field(..., description="abs(expected - actual)")
    passed: bool = Field(..., description="deviation <= tolerance")

    model_config = {"frozen": True}


# =============================================================================
# REFERENCE CASES
# =============================================================================

REFERENCE_CASES: Final[tuple[ArithmeticCase, ...]] = (
    ArithmeticCase(
        suite="SumTest",
        name="TestSum_Valid",
        operation=ArithmeticOperation.SUM,
        a=1.0,
        b=1.0,
        expected=2.0,
    ),
    ArithmeticCase(
        suite="SubtractionTest",
        name="TestSubtraction_Valid",
        operation=ArithmeticOperation.SUBTRACTION,
        a=1.0,
        b=1.0,
        expected=0.0,
    ),
)


def evaluate_cases(
    cases: tuple[ArithmeticCase, ...] | list[ArithmeticCase] = REFERENCE_CASES,
) -> list[ArithmeticOutcome]:
    """Выполнение набора кейсов в исходном порядке"""
    return [case.evaluate() for case in cases]
