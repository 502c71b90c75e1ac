"""
Sweep — серия сравнений по диапазону n

Для каждого n из последовательности выполняется compare(n); в таблицу
попадает строка (n, тики int, тики float) в формате TSV:

    n	int	float
    1000	41000	530000
    2000	...

На первом n с расхождением sweep останавливается, дальнейшие n не
вычисляются, SweepReport.failed_at = этот n, exit_status = EX_SOFTWARE.
"""

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Iterator, Optional, TextIO, Union

from fibcalc.core.domain.results import ComparisonResult, SweepReport, SweepRow
from fibcalc.harness.clock import DEFAULT_CLOCK, Clock
from fibcalc.harness.comparison import compare

logger = logging.getLogger(__name__)

SWEEP_HEADER: Final[str] = "n\tint\tfloat"


@dataclass(frozen=True)
class SweepConfig:
    """
    Диапазон sweep: start, start + step, ..., не больше stop (включительно).

    Значения по умолчанию — полный диапазон графика 1000..1000000 с шагом 1000.
    """

    start: int = 1000
    stop: int = 1_000_000
    step: int = 1000

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.stop < self.start:
            raise ValueError(f"stop {self.stop} must be >= start {self.start}")

    def indices(self) -> range:
        """
        Examples:
            >>> list(SweepConfig(start=1000, stop=3000, step=1000).indices())
            [1000, 2000, 3000]
        """
        return range(self.start, self.stop + 1, self.step)


def _resolve_indices(indices: Union[SweepConfig, Iterable[int]]) -> Iterable[int]:
    if isinstance(indices, SweepConfig):
        return indices.indices()
    return indices


def iter_sweep(
    indices: Union[SweepConfig, Iterable[int]],
    **compare_kwargs,
) -> Iterator[ComparisonResult]:
    """
    Сравнения для каждого n; останавливается после первого расхождения.

    Args:
        indices: SweepConfig или последовательность n
        **compare_kwargs: Параметры compare (методы, clock, precision_policy, power)

    Yields:
        ComparisonResult; последний результат может иметь match == False
    """
    for n in _resolve_indices(indices):
        result = compare(n, **compare_kwargs)
        yield result
        if not result.match:
            return


def run_sweep(
    indices: Union[SweepConfig, Iterable[int]],
    *,
    stream: Optional[TextIO] = None,
    clock: Optional[Clock] = None,
    **compare_kwargs,
) -> SweepReport:
    """
    Полный sweep с необязательной потоковой записью TSV.

    Args:
        indices: SweepConfig или возрастающая последовательность n
        stream: Куда писать заголовок и строки по мере вычисления
        clock: Часы для замеров (default: ProcessClock)
        **compare_kwargs: Остальные параметры compare

    Returns:
        SweepReport со строками для совпавших n и failed_at

    Raises:
        InvalidIndexError: если какой-либо n невалиден
    """
    clock = clock or DEFAULT_CLOCK
    rows: list[SweepRow] = []
    failed_at: Optional[int] = None

    if stream is not None:
        stream.write(SWEEP_HEADER + "\n")

    for result in iter_sweep(indices, clock=clock, **compare_kwargs):
        if not result.match:
            failed_at = result.n
            logger.error("sweep halted: different results for fib(%d)", result.n)
            break

        row = SweepRow.from_comparison(result)
        rows.append(row)
        if stream is not None:
            stream.write(row.to_tsv() + "\n")

    logger.info("sweep finished: %d rows, failed_at=%s", len(rows), failed_at)

    return SweepReport(
        rows=tuple(rows),
        failed_at=failed_at,
        ticks_per_second=clock.ticks_per_second,
    )


def format_sweep_table(report: SweepReport) -> str:
    """
    TSV-таблица отчёта: заголовок + строка на каждый совпавший n.

    Examples:
        >>> report = SweepReport(
        ...     rows=(SweepRow(n=1000, int_ticks=1, float_ticks=9),),
        ...     ticks_per_second=1000,
        ... )
        >>> print(format_sweep_table(report))
        n	int	float
        1000	1	9
    """
    return "\n".join([SWEEP_HEADER, *(row.to_tsv() for row in report.rows)])
