"""
Clock — источник тиков для замеров времени

Замеры идут в целых тиках процессорного времени процесса, как clock()
в C: монотонно для одного процесса, не зависит от переключения задач.
"""

import time
from dataclasses import dataclass
from typing import Final, Protocol

NANOSECONDS_PER_SECOND: Final[int] = 1_000_000_000


class Clock(Protocol):
    """Часы с целочисленными тиками."""

    ticks_per_second: int

    def ticks(self) -> int:
        ...


@dataclass(frozen=True)
class ProcessClock:
    """CPU-время процесса в наносекундах (time.process_time_ns)."""

    ticks_per_second: int = NANOSECONDS_PER_SECOND

    def ticks(self) -> int:
        return time.process_time_ns()


@dataclass(frozen=True)
class MonotonicClock:
    """Wall-clock время (time.perf_counter_ns)."""

    ticks_per_second: int = NANOSECONDS_PER_SECOND

    def ticks(self) -> int:
        return time.perf_counter_ns()


DEFAULT_CLOCK: Final[ProcessClock] = ProcessClock()
