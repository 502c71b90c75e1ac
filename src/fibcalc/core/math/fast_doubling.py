"""
Integer Fast-Doubling — точное fib(n) на трёх аккумуляторах

Алгоритм fib_fast: обход битов n от старшего к младшему, на каждом шаге
индекс k переходит в 2k (бит 0) или 2k+1 (бит 1).

ИНВАРИАНТ АККУМУЛЯТОРОВ (перед каждой итерацией):
    (a, b, c) = (fib(k-1), fib(k), fib(k+1))
    где k — число, образованное уже обработанными битами n.
    Старт: k = 0 → (fib(-1), fib(0), fib(1)) = (1, 0, 1)

ФОРМУЛЫ:
    бит 1 (k → 2k+1):
        fib(2k)   = fib(k) * (fib(k-1) + fib(k+1))  → a = (a + c) * b
        fib(2k+1) = fib(k)^2 + fib(k+1)^2           → b = b^2 + c^2
    бит 0 (k → 2k):
        fib(2k-1) = fib(k-1)^2 + fib(k)^2           → a = a^2 + b^2
        fib(2k)   = fib(k) * (fib(k+1) + fib(k-1))  → b = b * (c + a)
    после любой ветки:
        c = a + b

Сложность: O(log n) умножений чисел размера O(n) бит.
"""

from fibcalc.core.math.bit_scanner import iter_bits_msb_first
from fibcalc.core.math.index_guard import validate_index


def fib_fast_doubling(n: int) -> int:
    """
    Точное fib(n) методом fast doubling.

    Args:
        n: Индекс (n ≥ 0)

    Returns:
        fib(n)

    Raises:
        InvalidIndexError: если n < 0 или n не целое

    Examples:
        >>> fib_fast_doubling(0)
        0
        >>> fib_fast_doubling(10)
        55
        >>> fib_fast_doubling(100)
        354224848179261915075
    """
    n = validate_index(n)

    a, b, c = 1, 0, 1

    for bit_set in iter_bits_msb_first(n):
        if bit_set:
            a = (a + c) * b
            b = b * b + c * c
        else:
            # c временно хранит c + a
            c = c + a
            a = a * a + b * b
            b = b * c

        c = a + b

    return b
