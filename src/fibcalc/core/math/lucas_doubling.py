"""
Lucas-Identity Doubling — точное fib(n) через числа Люка

Binet в кольце Z[sqrt 5], записанный через тождества Люка:

    fib(2k)   = luc(k) * fib(k)
    luc(2k)   = (luc(k)^2 + 5 * fib(k)^2) / 2
    fib(k+1)  = (luc(k) + fib(k)) / 2
    luc(k+1)  = (luc(k) + 5 * fib(k)) / 2

ИНВАРИАНТ АККУМУЛЯТОРОВ (перед каждой итерацией):
    (a, b) = (luc(k), fib(k)), старт k = 0 → (2, 0)

Форма (luc^2 + 5 fib^2) / 2 не содержит (-1)^k, поэтому в цикле
знаковая поправка не нужна.

ЧЁТНЫЙ n:
    n = 2m обрабатывается как m, а последний (самый дорогой) шаг удвоения
    заменяется одним умножением fib(2m) = luc(m) * fib(m).
    Это экономит одно большое умножение (~10-20% на больших n).

ТОЧНОЕ ДЕЛЕНИЕ:
    luc(k) и fib(k) всегда одной чётности, поэтому a + b и a + 5b чётны
    и деление на 2 точное.
"""

from fibcalc.core.math.bit_scanner import iter_bits_msb_first
from fibcalc.core.math.index_guard import validate_index


def fib_lucas_doubling(n: int) -> int:
    """
    Точное fib(n) через doubling на парах (luc(k), fib(k)).

    Args:
        n: Индекс (n ≥ 0)

    Returns:
        fib(n)

    Raises:
        InvalidIndexError: если n < 0 или n не целое

    Examples:
        >>> fib_lucas_doubling(0)
        0
        >>> fib_lucas_doubling(7)
        13
        >>> fib_lucas_doubling(20)
        6765
    """
    n = validate_index(n)

    is_even = n % 2 == 0
    if is_even:
        n >>= 1

    a, b = 2, 0

    for bit_set in iter_bits_msb_first(n):
        ab = a * b
        a = a + b                   # a+b, b
        b = (a + 4 * b) // 2        # a+b, (a+5b)/2
        a = a * b - 3 * ab          # (a^2 + 5b^2)/2 = luc(2k)
        b = ab                      # fib(2k)

        if bit_set:
            ab = (a + b) // 2       # fib(2k+1)
            a = ab + 2 * b          # luc(2k+1)
            b = ab

    if is_even:
        return a * b

    return b
