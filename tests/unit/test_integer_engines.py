"""
Тесты для точных движков fib(n)

- fib_fast_doubling (три аккумулятора)
- fib_lucas_doubling (пара luc/fib, чётный shortcut)
- fib_luc / fib_recursive (рекурсия с явным scratch)
- fib_reference / luc_reference (O(n) эталон)
- fib_builtin (gmpy2.fib)

Проверяемые инварианты:
1. Базовые значения fib(0..3), fib(10), fib(20)
2. Все движки совпадают с эталоном и друг с другом
3. fib(2k) = luc(k) * fib(k)
4. Повторный вызов даёт тот же результат (нет утечки состояния)
5. Невалидный n → InvalidIndexError
"""

import pytest

from fibcalc.core.math.fast_doubling import fib_fast_doubling
from fibcalc.core.math.fib_lucas_recursive import LucasScratch, fib_luc, fib_recursive
from fibcalc.core.math.gmp_builtin import fib_builtin
from fibcalc.core.math.index_guard import InvalidIndexError
from fibcalc.core.math.lucas_doubling import fib_lucas_doubling
from fibcalc.core.math.reference import fib_reference, luc_reference

ENGINES = [fib_fast_doubling, fib_lucas_doubling, fib_recursive, fib_builtin, fib_reference]

# fib(1000): 209 цифр
FIB_1000_PREFIX = "4346655768"
FIB_1000_SUFFIX = "849228875"
FIB_1000_DIGITS = 209


@pytest.fixture(scope="module")
def fib_table() -> list[int]:
    """fib(0..800) по определению."""
    table = [0, 1]
    while len(table) <= 800:
        table.append(table[-1] + table[-2])
    return table


@pytest.fixture(scope="module")
def luc_table() -> list[int]:
    """luc(0..800) по определению."""
    table = [2, 1]
    while len(table) <= 800:
        table.append(table[-1] + table[-2])
    return table


# =============================================================================
# ТЕСТЫ: Базовые значения
# =============================================================================


class TestBaseCases:
    """Базовые значения для всех движков."""

    @pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.__name__)
    @pytest.mark.parametrize(
        "n,expected",
        [(0, 0), (1, 1), (2, 1), (3, 2), (4, 3), (5, 5), (10, 55), (20, 6765)],
    )
    def test_small_values(self, engine, n: int, expected: int) -> None:
        assert engine(n) == expected

    @pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.__name__)
    def test_fib_100(self, engine) -> None:
        assert engine(100) == 354224848179261915075

    @pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.__name__)
    def test_fib_1000(self, engine) -> None:
        rendered = str(engine(1000))
        assert len(rendered) == FIB_1000_DIGITS
        assert rendered.startswith(FIB_1000_PREFIX)
        assert rendered.endswith(FIB_1000_SUFFIX)

    def test_return_type_is_int(self) -> None:
        for engine in ENGINES:
            assert type(engine(50)) is int

    def test_lucas_reference_values(self) -> None:
        assert [luc_reference(n) for n in range(10)] == [2, 1, 3, 4, 7, 11, 18, 29, 47, 76]


# =============================================================================
# ТЕСТЫ: Кросс-проверка с эталоном
# =============================================================================


class TestAgainstReference:
    """Все быстрые движки совпадают с O(n) эталоном."""

    @pytest.mark.parametrize(
        "engine", [fib_fast_doubling, fib_lucas_doubling, fib_recursive, fib_builtin],
        ids=lambda e: e.__name__,
    )
    def test_exhaustive_moderate_n(self, engine, fib_table: list[int]) -> None:
        for n, expected in enumerate(fib_table):
            assert engine(n) == expected, f"n={n}"

    def test_fib_luc_pair(self, fib_table: list[int], luc_table: list[int]) -> None:
        for n in range(len(fib_table)):
            assert fib_luc(n) == (fib_table[n], luc_table[n]), f"n={n}"

    def test_lucas_doubling_exhaustive_against_fast_doubling(self) -> None:
        """Знаковая логика Lucas doubling проверена на всех n < 3000."""
        for n in range(3000):
            assert fib_lucas_doubling(n) == fib_fast_doubling(n), f"n={n}"

    def test_recursive_exhaustive_against_fast_doubling(self) -> None:
        for n in range(3000):
            assert fib_recursive(n) == fib_fast_doubling(n), f"n={n}"

    def test_builtin_exhaustive_against_fast_doubling(self) -> None:
        for n in range(3000):
            assert fib_builtin(n) == fib_fast_doubling(n), f"n={n}"

    @pytest.mark.parametrize("n", [4095, 4096, 4097, 10_000, 65_535, 100_001])
    def test_engines_agree_on_large_n(self, n: int) -> None:
        """Большие n вокруг степеней двойки и нечётные/чётные."""
        expected = fib_fast_doubling(n)
        assert fib_lucas_doubling(n) == expected
        assert fib_recursive(n) == expected
        assert fib_builtin(n) == expected
        assert fib_luc(n)[0] == expected

    def test_recurrence_holds_for_large_n(self) -> None:
        """fib(n+2) = fib(n+1) + fib(n) для n ~ 50000."""
        n = 50_000
        assert fib_fast_doubling(n + 2) == fib_fast_doubling(n + 1) + fib_fast_doubling(n)
        assert fib_lucas_doubling(n + 2) == fib_lucas_doubling(n + 1) + fib_lucas_doubling(n)


# =============================================================================
# ТЕСТЫ: Тождества удвоения
# =============================================================================


class TestDoublingIdentity:
    """fib(2k) = luc(k) * fib(k)."""

    @pytest.mark.parametrize(
        "engine", [fib_fast_doubling, fib_lucas_doubling, fib_recursive, fib_builtin],
        ids=lambda e: e.__name__,
    )
    def test_fib_2k(self, engine) -> None:
        for k in list(range(0, 200)) + [511, 512, 1000, 1234]:
            assert engine(2 * k) == luc_reference(k) * fib_reference(k), f"k={k}"

    def test_luc_identity(self) -> None:
        """luc(n) = fib(n-1) + fib(n+1)."""
        for n in range(1, 300):
            _, luc = fib_luc(n)
            assert luc == fib_fast_doubling(n - 1) + fib_fast_doubling(n + 1)

    def test_cassini_via_lucas(self) -> None:
        """luc(n)^2 - 5 fib(n)^2 = 4 (-1)^n."""
        for n in range(0, 400):
            fib, luc = fib_luc(n)
            assert luc * luc - 5 * fib * fib == 4 * (-1) ** n


# =============================================================================
# ТЕСТЫ: Scratch и идемпотентность
# =============================================================================


class TestScratchAndIdempotence:
    """Повторные вызовы не зависят от предыдущих."""

    @pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.__name__)
    def test_repeat_call_same_output(self, engine) -> None:
        first = str(engine(777))
        second = str(engine(777))
        assert first == second

    def test_recursive_interleaved_calls(self) -> None:
        """Чередование n не загрязняет последующие вызовы."""
        expected_1001 = fib_reference(1001)
        assert str(fib_recursive(1001)) == str(expected_1001)
        fib_recursive(2000)
        fib_luc(333)
        assert str(fib_recursive(1001)) == str(expected_1001)

    def test_shared_scratch_reused_across_calls(self) -> None:
        """Один scratch на несколько вызовов даёт правильные пары."""
        scratch = LucasScratch()
        assert fib_luc(500, scratch) == (fib_reference(500), luc_reference(500))
        assert fib_luc(7, scratch) == (13, 29)
        assert fib_luc(500, scratch) == (fib_reference(500), luc_reference(500))

    def test_scratch_reset(self) -> None:
        scratch = LucasScratch(temp=12345)
        scratch.reset()
        assert scratch.temp == 0

    def test_dirty_scratch_does_not_leak(self) -> None:
        """Мусор в scratch перед вызовом не влияет на результат."""
        assert fib_luc(64, LucasScratch(temp=-999)) == fib_luc(64)


# =============================================================================
# ТЕСТЫ: Невалидный индекс
# =============================================================================


class TestInvalidIndex:
    """Все движки отвергают невалидный n."""

    @pytest.mark.parametrize("engine", ENGINES + [fib_luc], ids=lambda e: e.__name__)
    def test_negative_rejected(self, engine) -> None:
        with pytest.raises(InvalidIndexError):
            engine(-1)

    @pytest.mark.parametrize("engine", ENGINES + [fib_luc], ids=lambda e: e.__name__)
    def test_float_rejected(self, engine) -> None:
        with pytest.raises(InvalidIndexError):
            engine(10.0)
