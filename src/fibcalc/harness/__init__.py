"""Comparison/timing harness — сравнение и замеры методов fib(n).

- compare: одно сравнение (целый метод vs Binet) с замером тиков
- cross_validate: согласие всех точных методов
- run_sweep: серия сравнений с остановкой на первом расхождении
"""

from .clock import (
    DEFAULT_CLOCK,
    NANOSECONDS_PER_SECOND,
    Clock,
    MonotonicClock,
    ProcessClock,
)
from .comparison import (
    bind_engine,
    compare,
    comparison_exit_status,
    cross_validate,
    format_timing_report,
)
from .sweep import (
    SWEEP_HEADER,
    SweepConfig,
    format_sweep_table,
    iter_sweep,
    run_sweep,
)

__all__ = [
    # Clock
    "Clock",
    "DEFAULT_CLOCK",
    "MonotonicClock",
    "NANOSECONDS_PER_SECOND",
    "ProcessClock",
    # Comparison
    "bind_engine",
    "compare",
    "comparison_exit_status",
    "cross_validate",
    "format_timing_report",
    # Sweep
    "SWEEP_HEADER",
    "SweepConfig",
    "format_sweep_table",
    "iter_sweep",
    "run_sweep",
]
