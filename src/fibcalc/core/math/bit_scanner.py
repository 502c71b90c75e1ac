"""
Bit-Scanner — обход битов индекса от старшего к младшему

Все doubling-алгоритмы (fast doubling, Lucas doubling, возведение в степень
повторным возведением в квадрат) потребляют биты n начиная со старшего
установленного бита и заканчивая битом 0.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для n = 0 обход выполняет ноль итераций
2. Для n ≥ 1 число итераций = n.bit_length()
3. Порядок обхода: MSB → LSB
"""

from typing import Final, Iterator

# Sentinel "нет установленных битов" (n = 0)
NO_BITS: Final[int] = -1


def msb_position(n: int) -> int:
    """
    Позиция старшего установленного бита.

    Args:
        n: Неотрицательное целое

    Returns:
        Индекс старшего бита (0 для n = 1), NO_BITS для n = 0

    Examples:
        >>> msb_position(0)
        -1
        >>> msb_position(1)
        0
        >>> msb_position(10)
        3
    """
    return n.bit_length() - 1


def iter_bits_msb_first(n: int) -> Iterator[bool]:
    """
    Итератор по битам n от старшего к младшему.

    Args:
        n: Неотрицательное целое

    Yields:
        True для установленного бита, False иначе

    Examples:
        >>> list(iter_bits_msb_first(0))
        []
        >>> list(iter_bits_msb_first(6))
        [True, True, False]
    """
    for bit in range(msb_position(n), NO_BITS, -1):
        yield (n >> bit) & 1 == 1
