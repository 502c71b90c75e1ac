"""
GMP Builtin — fib(n) встроенной функцией GMP (mpz_fib_ui через gmpy2)

Независимая от остальных движков реализация: используется как ещё один
участник кросс-проверки и как ориентир скорости.
"""

import gmpy2

from fibcalc.core.math.index_guard import validate_index


def fib_builtin(n: int) -> int:
    """
    fib(n) через gmpy2.fib.

    Returns:
        fib(n) как int (mpz приводится к int)

    Raises:
        InvalidIndexError: если n < 0 или n не целое

    Examples:
        >>> fib_builtin(20)
        6765
    """
    n = validate_index(n)
    return int(gmpy2.fib(n))
