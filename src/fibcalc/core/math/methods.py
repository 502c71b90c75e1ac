"""
Methods — реестр методов вычисления fib(n)

Связывает имена методов с движками, чтобы harness и внешний слой
выбирали метод по имени
("int", "lucas", "recursive", "builtin", "float", "reference").
"""

from enum import Enum
from typing import Callable, Final, Union

from mpmath import mpf

from fibcalc.core.math.binet import fib_binet
from fibcalc.core.math.decimal_render import to_decimal_string
from fibcalc.core.math.fast_doubling import fib_fast_doubling
from fibcalc.core.math.fib_lucas_recursive import fib_recursive
from fibcalc.core.math.gmp_builtin import fib_builtin
from fibcalc.core.math.lucas_doubling import fib_lucas_doubling
from fibcalc.core.math.reference import fib_reference


class FibonacciMethod(str, Enum):
    """Метод вычисления fib(n)."""

    FAST_DOUBLING = "int"
    LUCAS_DOUBLING = "lucas"
    RECURSIVE = "recursive"
    BUILTIN = "builtin"
    BINET = "float"
    REFERENCE = "reference"

    @property
    def is_exact(self) -> bool:
        """True для целочисленных методов (результат без округления)."""
        return self is not FibonacciMethod.BINET


FibonacciEngine = Callable[[int], Union[int, mpf]]

ENGINES: Final[dict[FibonacciMethod, FibonacciEngine]] = {
    FibonacciMethod.FAST_DOUBLING: fib_fast_doubling,
    FibonacciMethod.LUCAS_DOUBLING: fib_lucas_doubling,
    FibonacciMethod.RECURSIVE: fib_recursive,
    FibonacciMethod.BUILTIN: fib_builtin,
    FibonacciMethod.BINET: fib_binet,
    FibonacciMethod.REFERENCE: fib_reference,
}

# Все точные методы, кроме O(n) эталона
EXACT_METHODS: Final[tuple[FibonacciMethod, ...]] = (
    FibonacciMethod.FAST_DOUBLING,
    FibonacciMethod.LUCAS_DOUBLING,
    FibonacciMethod.RECURSIVE,
    FibonacciMethod.BUILTIN,
)


def get_engine(method: Union[FibonacciMethod, str]) -> FibonacciEngine:
    """
    Движок по методу или его имени.

    Raises:
        ValueError: если имя метода неизвестно
    """
    return ENGINES[FibonacciMethod(method)]


def compute(method: Union[FibonacciMethod, str], n: int) -> Union[int, mpf]:
    """
    fib(n) выбранным методом.

    Examples:
        >>> compute("int", 10)
        55
    """
    return get_engine(method)(n)


def compute_decimal(method: Union[FibonacciMethod, str], n: int) -> str:
    """
    fib(n) выбранным методом в десятичной записи.

    Examples:
        >>> compute_decimal("float", 20)
        '6765'
    """
    return to_decimal_string(compute(method, n))
