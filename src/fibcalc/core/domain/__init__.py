"""
Domain models and value objects.

Contains the immutable result models produced by the comparison harness.
"""

from fibcalc.core.domain.results import (
    EX_OK,
    EX_SOFTWARE,
    ComparisonResult,
    MethodMismatchError,
    SweepReport,
    SweepRow,
    TimingSample,
)

__all__ = [
    # Exit statuses
    "EX_OK",
    "EX_SOFTWARE",
    # Exceptions
    "MethodMismatchError",
    # Models
    "TimingSample",
    "ComparisonResult",
    "SweepRow",
    "SweepReport",
]
