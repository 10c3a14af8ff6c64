"""
Numerical Safeguards: сравнения float с толерантностью

Модуль содержит примитивы для проверки результатов вычислений:
- Проверка валидности float (не NaN, не Inf)
- Абсолютная толерантность в стиле EXPECT_NEAR
- Относительное/абсолютное сравнение через math.isclose

ИНВАРИАНТЫ:
1. NaN никогда не считается "близким" ни к какому значению
2. Одинаковые бесконечности считаются равными (отклонение 0.0)
3. Толерантность всегда валидируется до сравнения
"""

import math
from typing import Final

# =============================================================================
# ТОЛЕРАНТНОСТИ
# =============================================================================

# Абсолютная толерантность reference-кейсов арифметики
# Значение намеренно грубое, не уменьшать без подтверждения
NEAR_TOLERANCE_DEFAULT: Final[float] = 0.6

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def validate_tolerance(tolerance: float, name: str = "tolerance") -> None:
    """
    Валидация толерантности.

    Args:
        tolerance: Проверяемая толерантность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если tolerance < 0 или NaN/Inf
    """
    if not is_valid_float(tolerance):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {tolerance}")

    if tolerance < 0:
        raise ValueError(f"{name} must be non-negative, got {tolerance}")


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def near_deviation(expected: float, actual: float) -> float:
    """
    Абсолютное отклонение фактического значения от ожидаемого.

    Args:
        expected: Ожидаемое значение
        actual: Фактическое значение

    Returns:
        abs(expected - actual); 0.0 для одинаковых бесконечностей,
        NaN если хотя бы одно значение NaN

    Examples:
        >>> near_deviation(2.0, 1.5)
        0.5
        >>> near_deviation(float('inf'), float('inf'))
        0.0
    """
    if expected == actual:
        # inf - inf дал бы NaN
        return 0.0
    return abs(expected - actual)


def is_near(
    expected: float,
    actual: float,
    tolerance: float = NEAR_TOLERANCE_DEFAULT,
) -> bool:
    """
    Проверка abs(expected - actual) <= tolerance.

    Аналог EXPECT_NEAR: граница включается, NaN всегда даёт False.

    Args:
        expected: Ожидаемое значение
        actual: Фактическое значение
        tolerance: Абсолютная толерантность (default: NEAR_TOLERANCE_DEFAULT)

    Returns:
        True если отклонение не превышает tolerance

    Raises:
        ValueError: Если tolerance невалидна

    Examples:
        >>> is_near(2.0, 2.5)
        True
        >>> is_near(0.0, 0.7)
        False
        >>> is_near(1.0, float('nan'))
        False
    """
    validate_tolerance(tolerance)
    # NaN <= x всегда False
    return near_deviation(expected, actual) <= tolerance


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
