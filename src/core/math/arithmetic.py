"""
Arithmetic: базовые арифметические операции над float

Чистые функции без состояния: сумма и разность двух вещественных чисел.
Семантика IEEE-754 double: NaN/Inf не санитизируются и пропагируют как есть.
"""


def add(a: float, b: float) -> float:
    """
    Сумма двух чисел.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        a + b

    Examples:
        >>> add(1.0, 1.0)
        2.0
        >>> add(-2.5, 0.5)
        -2.0
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Разность двух чисел.

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        a - b

    Examples:
        >>> subtract(1.0, 1.0)
        0.0
        >>> subtract(0.5, 2.0)
        -1.5
    """
    return a - b
