"""
Results — модели результатов сравнения и sweep

Immutable Pydantic модели, которые harness отдаёт внешнему слою:
- TimingSample: пара замеров (целый метод, float метод) в тиках часов
- ComparisonResult: две десятичные строки + флаг совпадения + замеры
- SweepRow: одна строка таблицы sweep (n, тики int, тики float)
- SweepReport: все строки sweep + первый n с расхождением

Полная совместимость с JSON Schema (fibcalc/core/contracts/schema/).
"""

from typing import Any, Final, Optional

from pydantic import BaseModel, Field, field_validator

# sysexits.h: EX_OK / EX_SOFTWARE
EX_OK: Final[int] = 0
EX_SOFTWARE: Final[int] = 70


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MethodMismatchError(Exception):
    """
    Два метода дали разные fib(n).

    Означает логический дефект минимум в одном движке (или недостаток
    точности Binet). Повтор не поможет: все движки детерминированы.
    Sweep обязан остановиться на первом таком n.
    """

    def __init__(self, n: int, first_method: str, second_method: str):
        self.n = n
        self.first_method = first_method
        self.second_method = second_method
        super().__init__(
            f"different methods gave different results for fib({n}): "
            f"{first_method} != {second_method}"
        )


# =============================================================================
# TIMING
# =============================================================================


class TimingSample(BaseModel):
    """Замеры времени одного сравнения (в тиках часов)."""

    int_ticks: int = Field(..., ge=0, description="Тики целочисленного метода")
    float_ticks: int = Field(..., ge=0, description="Тики метода с плавающей точкой")
    ticks_per_second: int = Field(..., gt=0, description="Частота часов (тиков в секунду)")

    model_config = {"frozen": True}

    def int_seconds(self) -> float:
        """Время целочисленного метода в секундах."""
        return self.int_ticks / self.ticks_per_second

    def float_seconds(self) -> float:
        """Время метода с плавающей точкой в секундах."""
        return self.float_ticks / self.ticks_per_second


# =============================================================================
# COMPARISON RESULT
# =============================================================================


class ComparisonResult(BaseModel):
    """
    Результат сравнения двух методов на одном n.

    match == True тогда и только тогда, когда десятичные строки совпадают
    по длине и содержимому.
    """

    n: int = Field(..., ge=0, description="Индекс Фибоначчи")
    int_method: str = Field(..., min_length=1, description="Имя первого (целого) метода")
    float_method: str = Field(..., min_length=1, description="Имя второго (float) метода")
    int_value: str = Field(..., pattern=r"^[0-9]+$", description="fib(n) первым методом")
    float_value: str = Field(..., pattern=r"^[0-9]+$", description="fib(n) вторым методом")
    match: bool = Field(..., description="Совпадение десятичных строк")
    timing: TimingSample

    model_config = {"frozen": True}

    @field_validator("match")
    @classmethod
    def validate_match_consistent(cls, v: bool, info) -> bool:
        """Флаг match согласован со строками."""
        if "int_value" in info.data and "float_value" in info.data:
            expected = info.data["int_value"] == info.data["float_value"]
            if v != expected:
                raise ValueError(f"match={v} contradicts rendered values (expected {expected})")
        return v

    def raise_for_mismatch(self) -> None:
        """
        Raises:
            MethodMismatchError: если методы разошлись
        """
        if not self.match:
            raise MethodMismatchError(self.n, self.int_method, self.float_method)

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в форму контракта comparison_result."""
        return self.model_dump(mode="json")


# =============================================================================
# SWEEP
# =============================================================================


class SweepRow(BaseModel):
    """Строка таблицы sweep: n, тики int, тики float."""

    n: int = Field(..., ge=0, description="Индекс Фибоначчи")
    int_ticks: int = Field(..., ge=0, description="Тики целочисленного метода")
    float_ticks: int = Field(..., ge=0, description="Тики метода с плавающей точкой")

    model_config = {"frozen": True}

    @classmethod
    def from_comparison(cls, result: ComparisonResult) -> "SweepRow":
        return cls(
            n=result.n,
            int_ticks=result.timing.int_ticks,
            float_ticks=result.timing.float_ticks,
        )

    def to_tsv(self) -> str:
        """
        Examples:
            >>> SweepRow(n=1000, int_ticks=12, float_ticks=340).to_tsv()
            '1000\\t12\\t340'
        """
        return f"{self.n}\t{self.int_ticks}\t{self.float_ticks}"

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в форму контракта sweep_row."""
        return self.model_dump(mode="json")


class SweepReport(BaseModel):
    """
    Итог sweep.

    rows содержит только n, на которых методы совпали, в порядке обхода.
    failed_at — первый n с расхождением (sweep на нём остановлен).
    """

    rows: tuple[SweepRow, ...] = Field(default=(), description="Строки таблицы")
    failed_at: Optional[int] = Field(default=None, ge=0, description="Первый n с расхождением")
    ticks_per_second: int = Field(..., gt=0, description="Частота часов (тиков в секунду)")

    model_config = {"frozen": True}

    @field_validator("rows")
    @classmethod
    def validate_rows_increasing(cls, v: tuple[SweepRow, ...]) -> tuple[SweepRow, ...]:
        """Строки идут в порядке возрастания n."""
        for previous, current in zip(v, v[1:]):
            if current.n <= previous.n:
                raise ValueError(
                    f"sweep rows must be strictly increasing in n, got {previous.n} then {current.n}"
                )
        return v

    @property
    def ok(self) -> bool:
        """True если расхождений не было."""
        return self.failed_at is None

    @property
    def exit_status(self) -> int:
        """EX_OK если расхождений не было, иначе EX_SOFTWARE."""
        return EX_OK if self.ok else EX_SOFTWARE
