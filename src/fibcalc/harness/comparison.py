"""
Comparison — вычисление fib(n) двумя методами и сравнение результатов

Порядок одного сравнения:
1. Тик часов → целый метод → десятичная строка → тик часов
2. Тик часов → float метод → десятичная строка → тик часов
3. match = строки совпадают по длине и содержимому

Рендеринг в строку входит в замеряемый интервал для обоих методов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Расхождение не глотается: ComparisonResult.match == False, лог ERROR,
   raise_for_mismatch() поднимает MethodMismatchError
2. Невалидный n отвергается до первого замера времени
3. Повторный вызов с тем же n даёт те же строки
"""

import logging
from functools import partial
from typing import Iterable, Optional, Union

from fibcalc.core.domain.results import (
    EX_OK,
    EX_SOFTWARE,
    ComparisonResult,
    MethodMismatchError,
    TimingSample,
)
from fibcalc.core.math.binet import (
    DEFAULT_PRECISION_POLICY,
    PowerFunction,
    PowerStrategy,
    PrecisionPolicy,
    fib_binet,
)
from fibcalc.core.math.decimal_render import to_decimal_string
from fibcalc.core.math.index_guard import validate_index
from fibcalc.core.math.methods import (
    EXACT_METHODS,
    FibonacciEngine,
    FibonacciMethod,
    get_engine,
)
from fibcalc.harness.clock import DEFAULT_CLOCK, Clock

logger = logging.getLogger(__name__)

MethodLike = Union[FibonacciMethod, str]


def bind_engine(
    method: MethodLike,
    precision_policy: PrecisionPolicy = DEFAULT_PRECISION_POLICY,
    power: Union[PowerStrategy, str, PowerFunction] = PowerStrategy.SQUARING,
) -> FibonacciEngine:
    """
    Движок для метода с параметрами Binet (точность, степень).

    Для целых методов precision_policy и power игнорируются.
    """
    method = FibonacciMethod(method)
    if method is FibonacciMethod.BINET:
        return partial(fib_binet, policy=precision_policy, power=power)
    return get_engine(method)


def _timed_decimal(engine: FibonacciEngine, n: int, clock: Clock) -> tuple[str, int]:
    start = clock.ticks()
    rendered = to_decimal_string(engine(n))
    stop = clock.ticks()
    return rendered, stop - start


def compare(
    n: int,
    *,
    int_method: MethodLike = FibonacciMethod.FAST_DOUBLING,
    float_method: MethodLike = FibonacciMethod.BINET,
    clock: Optional[Clock] = None,
    precision_policy: PrecisionPolicy = DEFAULT_PRECISION_POLICY,
    power: Union[PowerStrategy, str, PowerFunction] = PowerStrategy.SQUARING,
) -> ComparisonResult:
    """
    fib(n) двумя методами, замер времени и сравнение строк.

    Args:
        n: Индекс (n ≥ 0)
        int_method: Первый метод (default: FAST_DOUBLING)
        float_method: Второй метод (default: BINET)
        clock: Часы для замеров (default: ProcessClock)
        precision_policy: Политика точности Binet
        power: Стратегия возведения в степень для Binet

    Returns:
        ComparisonResult

    Raises:
        InvalidIndexError: если n < 0 или n не целое
        ValueError: если имя метода неизвестно

    Examples:
        >>> compare(100).match
        True
    """
    n = validate_index(n)
    clock = clock or DEFAULT_CLOCK
    int_method = FibonacciMethod(int_method)
    float_method = FibonacciMethod(float_method)

    int_engine = bind_engine(int_method, precision_policy, power)
    float_engine = bind_engine(float_method, precision_policy, power)

    int_value, int_ticks = _timed_decimal(int_engine, n, clock)
    float_value, float_ticks = _timed_decimal(float_engine, n, clock)

    match = len(int_value) == len(float_value) and int_value == float_value

    if match:
        logger.debug(
            "fib(%d): %s=%d ticks, %s=%d ticks",
            n, int_method.value, int_ticks, float_method.value, float_ticks,
        )
    else:
        logger.error(
            "different methods gave different results for fib(%d): %s vs %s",
            n, int_method.value, float_method.value,
        )

    return ComparisonResult(
        n=n,
        int_method=int_method.value,
        float_method=float_method.value,
        int_value=int_value,
        float_value=float_value,
        match=match,
        timing=TimingSample(
            int_ticks=int_ticks,
            float_ticks=float_ticks,
            ticks_per_second=clock.ticks_per_second,
        ),
    )


def cross_validate(
    n: int,
    methods: Iterable[MethodLike] = EXACT_METHODS,
) -> str:
    """
    Проверка, что все методы дают одинаковое fib(n).

    Args:
        n: Индекс (n ≥ 0)
        methods: Методы для сравнения (первый — эталон)

    Returns:
        Общая десятичная строка fib(n)

    Raises:
        MethodMismatchError: на первом методе, разошедшемся с эталоном
        ValueError: если список методов пуст
    """
    n = validate_index(n)
    methods = [FibonacciMethod(m) for m in methods]
    if not methods:
        raise ValueError("methods must not be empty")

    baseline_method = methods[0]
    baseline = to_decimal_string(get_engine(baseline_method)(n))

    for method in methods[1:]:
        rendered = to_decimal_string(get_engine(method)(n))
        if rendered != baseline:
            logger.error(
                "fib(%d): %s disagrees with %s", n, method.value, baseline_method.value
            )
            raise MethodMismatchError(n, baseline_method.value, method.value)

    return baseline


def format_timing_report(result: ComparisonResult) -> str:
    """
    Человекочитаемый отчёт по одному сравнению.

    Examples:
        >>> print(format_timing_report(result))  # doctest: +SKIP
        Computing fib(1000) in two different ways.
        Integer computation took 41000 ticks
        Float computation took 530000 ticks
        (at a rate of 1000000000 ticks per second)
    """
    lines = [f"Computing fib({result.n}) in two different ways."]

    if not result.match:
        lines.append(f"different methods gave different results for fib({result.n})")
        return "\n".join(lines)

    lines.extend([
        f"Integer computation took {result.timing.int_ticks} ticks",
        f"Float computation took {result.timing.float_ticks} ticks",
        f"(at a rate of {result.timing.ticks_per_second} ticks per second)",
    ])
    return "\n".join(lines)


def comparison_exit_status(result: ComparisonResult) -> int:
    """EX_OK при совпадении, EX_SOFTWARE при расхождении."""
    return EX_OK if result.match else EX_SOFTWARE
