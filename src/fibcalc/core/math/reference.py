"""
Reference — эталонные O(n) итерации

Прямое определение последовательностей без doubling-трюков.
Используется как доверенный эталон для кросс-проверки быстрых движков
на умеренных n.
"""

from fibcalc.core.math.index_guard import validate_index


def fib_reference(n: int) -> int:
    """
    fib(n) по определению: fib(0) = 0, fib(1) = 1, fib(k+2) = fib(k+1) + fib(k).

    Examples:
        >>> fib_reference(10)
        55
    """
    n = validate_index(n)

    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following

    return current


def luc_reference(n: int) -> int:
    """
    luc(n) по определению: luc(0) = 2, luc(1) = 1, luc(k+2) = luc(k+1) + luc(k).

    Examples:
        >>> luc_reference(5)
        11
    """
    n = validate_index(n)

    current, following = 2, 1
    for _ in range(n):
        current, following = following, current + following

    return current
