"""
Тесты для модуля Arithmetic

Проверяет:
1. Reference-кейсы SumTest / SubtractionTest (толерантность 0.6)
2. Точное совпадение с операторами + и -
3. Алгебраические свойства (коммутативность, нейтральный элемент, обратимость)
4. Пропагацию NaN/Inf
5. Отсутствие состояния (повторные и параллельные вызовы)
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.core.math.arithmetic import add, subtract
from src.core.math.numerical_safeguards import NEAR_TOLERANCE_DEFAULT, is_close, is_near

OPERAND_PAIRS = [
    (1.0, 1.0),
    (0.1, 0.2),
    (-3.5, 2.25),
    (1e308, 1e308),
    (1e-300, -1e-300),
    (123456.789, -0.001),
]


# =============================================================================
# SUM
# =============================================================================


class TestAdd:
    """Тесты для add (Sum)"""

    def test_sum_valid(self) -> None:
        """Sum(1.0, 1.0) ≈ 2.0 с толерантностью 0.6"""
        s = add(1.0, 1.0)
        assert is_near(2.0, s, NEAR_TOLERANCE_DEFAULT)
        assert s == pytest.approx(2.0, abs=0.6)

    def test_matches_plus_operator(self) -> None:
        """Результат точно совпадает с a + b"""
        for a, b in OPERAND_PAIRS:
            assert add(a, b) == a + b

    def test_negative_operands(self) -> None:
        """Отрицательные операнды"""
        assert add(-5.0, -3.0) == -8.0
        assert add(-10.0, 5.0) == -5.0
        assert add(10.0, -5.0) == 5.0

    def test_overflow_to_inf(self) -> None:
        """Переполнение даёт inf, а не исключение"""
        assert add(1e308, 1e308) == math.inf
        assert add(-1e308, -1e308) == -math.inf

    def test_nan_propagates(self) -> None:
        """NaN пропагирует"""
        assert math.isnan(add(math.nan, 1.0))
        assert math.isnan(add(math.inf, -math.inf))


# =============================================================================
# SUBTRACTION
# =============================================================================


class TestSubtract:
    """Тесты для subtract (Subtraction)"""

    def test_subtraction_valid(self) -> None:
        """Subtraction(1.0, 1.0) ≈ 0.0 с толерантностью 0.6"""
        s = subtract(1.0, 1.0)
        assert is_near(0.0, s, NEAR_TOLERANCE_DEFAULT)
        assert s == pytest.approx(0.0, abs=0.6)

    def test_matches_minus_operator(self) -> None:
        """Результат точно совпадает с a - b"""
        for a, b in OPERAND_PAIRS:
            assert subtract(a, b) == a - b

    def test_not_commutative(self) -> None:
        """Вычитание не коммутативно"""
        assert subtract(5.0, 3.0) == 2.0
        assert subtract(3.0, 5.0) == -2.0

    def test_inf_propagates(self) -> None:
        """Бесконечность пропагирует"""
        assert subtract(math.inf, 1.0) == math.inf
        assert math.isnan(subtract(math.inf, math.inf))


# =============================================================================
# СВОЙСТВА
# =============================================================================


class TestArithmeticProperties:
    """Алгебраические свойства"""

    def test_sum_commutative(self) -> None:
        """Sum(a, b) == Sum(b, a)"""
        for a, b in OPERAND_PAIRS:
            assert add(a, b) == add(b, a)

    def test_zero_is_identity(self) -> None:
        """Sum(a, 0) == a, Subtraction(a, 0) == a"""
        for a in (0.0, 1.0, -2.5, 1e-300, 1e300):
            assert add(a, 0.0) == a
            assert subtract(a, 0.0) == a

    def test_subtraction_inverts_sum(self) -> None:
        """Subtraction(Sum(a, b), b) ≈ a"""
        for a, b in [(1.0, 1.0), (0.1, 0.2), (-3.5, 2.25), (1e10, 3.0)]:
            assert is_close(subtract(add(a, b), b), a, abs_tol=1e-9)


# =============================================================================
# ЧИСТОТА И ПОТОКОБЕЗОПАСНОСТЬ
# =============================================================================


class TestPurity:
    """Функции без состояния и побочных эффектов"""

    def test_repeated_calls_stable(self) -> None:
        """Повторные вызовы дают одинаковый результат и не меняют операнды"""
        a, b = 0.1, 0.2
        first_sum, first_diff = add(a, b), subtract(a, b)
        for _ in range(1000):
            assert add(a, b) == first_sum
            assert subtract(a, b) == first_diff
        assert (a, b) == (0.1, 0.2)

    def test_concurrent_calls(self) -> None:
        """Параллельные вызовы из потоков совпадают с последовательными"""
        pairs = [(float(i), float(i) / 3.0) for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            sums = list(pool.map(lambda p: add(*p), pairs))
            diffs = list(pool.map(lambda p: subtract(*p), pairs))

        assert sums == [a + b for a, b in pairs]
        assert diffs == [a - b for a, b in pairs]
