"""
Тесты для Bit-Scanner и Index Guard

Проверяемые инварианты:
1. n = 0 → ноль итераций
2. Число итераций = n.bit_length(), порядок MSB → LSB
3. Невалидный индекс → InvalidIndexError (подкласс ValueError)
"""

from decimal import Decimal

import pytest

from fibcalc.core.math.bit_scanner import NO_BITS, iter_bits_msb_first, msb_position
from fibcalc.core.math.index_guard import InvalidIndexError, validate_index


# =============================================================================
# ТЕСТЫ: Bit-Scanner
# =============================================================================


def _shift_loop_msb(n: int) -> int:
    """Классический поиск старшего бита сдвигами (bit = 1, mask = 1, ...)."""
    bit, mask = 1, 1
    while n > mask:
        bit <<= 1
        mask = (mask << 1) | 1
    return bit


class TestMsbPosition:
    """Тесты msb_position."""

    def test_zero_has_no_bits(self) -> None:
        """n = 0 → sentinel NO_BITS."""
        assert msb_position(0) == NO_BITS

    @pytest.mark.parametrize(
        "n,expected",
        [(1, 0), (2, 1), (3, 1), (4, 2), (10, 3), (255, 7), (256, 8), (2**100, 100)],
    )
    def test_known_positions(self, n: int, expected: int) -> None:
        assert msb_position(n) == expected

    def test_matches_shift_loop(self) -> None:
        """Совпадает с поиском старшего бита сдвигами для n ≥ 1."""
        for n in range(1, 5000):
            assert 1 << msb_position(n) == _shift_loop_msb(n)


class TestIterBitsMsbFirst:
    """Тесты iter_bits_msb_first."""

    def test_zero_iterations_for_zero(self) -> None:
        assert list(iter_bits_msb_first(0)) == []

    def test_one(self) -> None:
        assert list(iter_bits_msb_first(1)) == [True]

    def test_order_msb_first(self) -> None:
        """0b1011 → True, False, True, True."""
        assert list(iter_bits_msb_first(0b1011)) == [True, False, True, True]

    def test_iteration_count_is_bit_length(self) -> None:
        for n in [1, 2, 7, 8, 1000, 2**64 + 1]:
            assert len(list(iter_bits_msb_first(n))) == n.bit_length()

    def test_bits_reassemble_to_n(self) -> None:
        """Сборка битов обратно даёт n."""
        for n in range(0, 2049):
            value = 0
            for bit_set in iter_bits_msb_first(n):
                value = (value << 1) | int(bit_set)
            assert value == n


# =============================================================================
# ТЕСТЫ: Index Guard
# =============================================================================


class TestValidateIndex:
    """Тесты validate_index."""

    def test_valid_indices_pass(self) -> None:
        assert validate_index(0) == 0
        assert validate_index(1) == 1
        assert validate_index(10**30) == 10**30

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidIndexError, match="non-negative"):
            validate_index(-1)

    @pytest.mark.parametrize("value", [1.0, "10", Decimal(5), None])
    def test_non_integer_rejected(self, value) -> None:
        with pytest.raises(InvalidIndexError, match="must be an integer"):
            validate_index(value)

    def test_bool_rejected(self) -> None:
        """True/False формально int, но не индекс."""
        with pytest.raises(InvalidIndexError):
            validate_index(True)

    def test_is_value_error(self) -> None:
        """InvalidIndexError ловится как ValueError."""
        with pytest.raises(ValueError):
            validate_index(-5)

    def test_custom_name_in_message(self) -> None:
        with pytest.raises(InvalidIndexError, match="start must be non-negative"):
            validate_index(-3, name="start")
