"""
Combined Fibonacci+Lucas — рекурсивное вычисление пары (fib(n), luc(n))

Рекурсия сверху вниз: пара для k = n // 2, затем комбинация вверх.
Глубина рекурсии = n.bit_length().

ФОРМУЛЫ (s = (-1)^k, k = n // 2; чётность k = бит 1 индекса n):
    n = 2k:
        fib(2k)   = fib(k) * luc(k)
        luc(2k)   = 5 * fib(k)^2 + 2s
    n = 2k+1:
        luc(2k+1) = 5 * fib(k) * (fib(k) + luc(k)) / 2 + s
        fib(2k+1) = luc(2k+1) - 2 * luc(k) * fib(k)

SCRATCH:
    Промежуточное произведение хранится в LucasScratch — один экземпляр на
    каждый вызов верхнего уровня, передаётся явно вниз по рекурсии и
    сбрасывается перед каждым шагом комбинации. Глобального состояния нет,
    функции реентерабельны.
"""

from dataclasses import dataclass
from typing import Optional

from fibcalc.core.math.index_guard import validate_index


@dataclass
class LucasScratch:
    """Временное значение для шага комбинации."""

    temp: int = 0

    def reset(self) -> None:
        self.temp = 0


def _sign_for(n: int) -> int:
    """(-1)^(n // 2): +1 если бит 1 индекса n сброшен."""
    return 1 if (n & 2) == 0 else -1


def _fib_luc(n: int, scratch: LucasScratch) -> tuple[int, int]:
    if n == 0:
        return 0, 2

    fib, luc = _fib_luc(n // 2, scratch)
    sign = _sign_for(n)
    scratch.reset()

    if n % 2 == 0:
        scratch.temp = fib * fib
        fib = fib * luc
        luc = 5 * scratch.temp + 2 * sign
    else:
        scratch.temp = fib * luc
        # luc + fib чётно: luc(k) и fib(k) одной чётности
        luc = 5 * fib * ((luc + fib) // 2) + sign
        fib = luc - 2 * scratch.temp

    return fib, luc


def fib_luc(n: int, scratch: Optional[LucasScratch] = None) -> tuple[int, int]:
    """
    Пара (fib(n), luc(n)).

    Args:
        n: Индекс (n ≥ 0)
        scratch: Временное хранилище; если None, создаётся новое на вызов

    Returns:
        (fib(n), luc(n))

    Raises:
        InvalidIndexError: если n < 0 или n не целое

    Examples:
        >>> fib_luc(0)
        (0, 2)
        >>> fib_luc(5)
        (5, 11)
    """
    n = validate_index(n)
    if scratch is None:
        scratch = LucasScratch()
    return _fib_luc(n, scratch)


def fib_recursive(n: int) -> int:
    """
    fib(n) через рекурсивную пару, без вычисления luc(n).

    Последний шаг комбинации вычисляет только fib, что экономит одно
    большое умножение:
        n = 2k:   fib(2k)   = fib(k) * luc(k)
        n = 2k+1: fib(2k+1) = fib(k) * (luc(k) + 5 * fib(k)) / 2 + s

    Args:
        n: Индекс (n ≥ 0)

    Returns:
        fib(n)

    Raises:
        InvalidIndexError: если n < 0 или n не целое

    Examples:
        >>> fib_recursive(1)
        1
        >>> fib_recursive(20)
        6765
    """
    n = validate_index(n)

    fib, luc = _fib_luc(n // 2, LucasScratch())

    if n % 2 == 0:
        return fib * luc

    return fib * ((luc + 5 * fib) // 2) + _sign_for(n)
