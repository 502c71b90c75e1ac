"""
Binet Floating-Point — fib(n) через формулу Бине в mpmath

    fib(n) = round(phi^n / sqrt(5)),  phi = (sqrt(5) + 1) / 2

Формула точна после округления до ближайшего целого, если рабочей
точности хватает. Вычисления идут в mpmath.mpf внутри mp.workprec(bits):
точность выбирается ДО первой операции и восстанавливается на любом
пути выхода.

ПОЛИТИКА ТОЧНОСТИ:
    fib(n) занимает примерно n * log2(phi) ≈ 0.694 * n бит.
    ScaledPrecisionPolicy (по умолчанию):
        bits = n * 7 // 10 + n.bit_length() + guard_bits
    - n * 7 / 10  — приближение ceil(n * log2(phi)) сверху
    - n.bit_length() — относительная ошибка phi умножается на n при phi^n
    - guard_bits — запас на округления при возведении в степень
    FixedPrecisionPolicy игнорирует n: только для демонстрации
    недостаточной точности и инъекции расхождений в harness.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Недостаток точности — дефект корректности, а не производительности
2. Результат — mpf с нулевой дробной частью
3. Стратегия возведения в степень выбирается явно, по умолчанию SQUARING
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Protocol, Union

from mpmath import mp, mpf

from fibcalc.core.math.bit_scanner import iter_bits_msb_first
from fibcalc.core.math.index_guard import validate_index

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# log2(phi) ≈ 0.6942, приближается дробью 7/10
PRECISION_BITS_NUMERATOR: Final[int] = 7
PRECISION_BITS_DENOMINATOR: Final[int] = 10

# Запас точности (один 64-битный limb)
PRECISION_GUARD_BITS: Final[int] = 64

# Минимальная точность, которую принимает FixedPrecisionPolicy
MIN_PRECISION_BITS: Final[int] = 2


# =============================================================================
# PRECISION POLICIES
# =============================================================================


class PrecisionPolicy(Protocol):
    """Выбор точности (в битах) для индекса n."""

    def bits_for(self, n: int) -> int:
        ...


@dataclass(frozen=True)
class ScaledPrecisionPolicy:
    """
    Точность, растущая линейно с n.

    bits = n * numerator // denominator + n.bit_length() + guard_bits
    """

    numerator: int = PRECISION_BITS_NUMERATOR
    denominator: int = PRECISION_BITS_DENOMINATOR
    guard_bits: int = PRECISION_GUARD_BITS

    def __post_init__(self) -> None:
        if self.numerator <= 0 or self.denominator <= 0:
            raise ValueError(
                f"precision ratio must be positive, got "
                f"{self.numerator}/{self.denominator}"
            )
        if self.guard_bits < MIN_PRECISION_BITS:
            raise ValueError(
                f"guard_bits must be >= {MIN_PRECISION_BITS}, got {self.guard_bits}"
            )

    def bits_for(self, n: int) -> int:
        return n * self.numerator // self.denominator + n.bit_length() + self.guard_bits


@dataclass(frozen=True)
class FixedPrecisionPolicy:
    """Фиксированная точность независимо от n."""

    bits: int = 53

    def __post_init__(self) -> None:
        if self.bits < MIN_PRECISION_BITS:
            raise ValueError(f"bits must be >= {MIN_PRECISION_BITS}, got {self.bits}")

    def bits_for(self, n: int) -> int:
        return self.bits


DEFAULT_PRECISION_POLICY: Final[ScaledPrecisionPolicy] = ScaledPrecisionPolicy()


def binet_precision_bits(n: int, policy: PrecisionPolicy = DEFAULT_PRECISION_POLICY) -> int:
    """
    Точность (в битах), которую fib_binet выделит для n.

    Examples:
        >>> binet_precision_bits(0)
        64
        >>> binet_precision_bits(1000)
        774
    """
    n = validate_index(n)
    return policy.bits_for(n)


# =============================================================================
# POWER STRATEGIES
# =============================================================================

PowerFunction = Callable[[mpf, int], mpf]


def power_by_squaring(base: mpf, n: int) -> mpf:
    """
    base^n повторным возведением в квадрат: O(log n) умножений.

    Биты n обходятся от старшего к младшему.
    """
    result = mp.mpf(1)
    for bit_set in iter_bits_msb_first(n):
        result = result * result
        if bit_set:
            result = result * base
    return result


def power_by_multiplication(base: mpf, n: int) -> mpf:
    """
    base^n повторным умножением: O(n) умножений.

    Только для бенчмарков — показывает разрыв с power_by_squaring.
    """
    result = mp.mpf(1)
    for _ in range(n):
        result = result * base
    return result


def power_builtin(base: mpf, n: int) -> mpf:
    """base^n встроенным возведением в степень mpmath."""
    return base ** n


class PowerStrategy(str, Enum):
    """Стратегия возведения phi в степень n."""

    SQUARING = "squaring"
    SLOW = "slow"
    BUILTIN = "builtin"


POWER_FUNCTIONS: Final[dict[PowerStrategy, PowerFunction]] = {
    PowerStrategy.SQUARING: power_by_squaring,
    PowerStrategy.SLOW: power_by_multiplication,
    PowerStrategy.BUILTIN: power_builtin,
}


def resolve_power(power: Union[PowerStrategy, str, PowerFunction]) -> PowerFunction:
    """
    PowerStrategy (или её строковое имя) → функция возведения в степень.

    Callable передаётся без изменений.

    Raises:
        ValueError: если имя стратегии неизвестно
    """
    if callable(power):
        return power
    return POWER_FUNCTIONS[PowerStrategy(power)]


# =============================================================================
# BINET ENGINE
# =============================================================================


def fib_binet(
    n: int,
    policy: PrecisionPolicy = DEFAULT_PRECISION_POLICY,
    power: Union[PowerStrategy, str, PowerFunction] = PowerStrategy.SQUARING,
) -> mpf:
    """
    fib(n) по формуле Бине в арифметике произвольной точности.

    Args:
        n: Индекс (n ≥ 0)
        policy: Политика точности (default: ScaledPrecisionPolicy)
        power: Стратегия возведения в степень (default: SQUARING)

    Returns:
        round(phi^n / sqrt(5)) как mpf

    Raises:
        InvalidIndexError: если n < 0 или n не целое
        ValueError: если стратегия неизвестна

    Examples:
        >>> int(fib_binet(10))
        55
        >>> int(fib_binet(100))
        354224848179261915075
    """
    n = validate_index(n)
    power_fn = resolve_power(power)
    bits = policy.bits_for(n)

    logger.debug("fib_binet(%d): %d bits of precision", n, bits)

    with mp.workprec(bits):
        sqrt5 = mp.sqrt(5)
        phi = (sqrt5 + 1) / 2
        result = mp.nint(power_fn(phi, n) / sqrt5)

    return result
