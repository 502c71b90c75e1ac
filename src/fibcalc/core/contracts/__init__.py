"""
Contract Validation Module

Валидация выходных контрактов harness (comparison_result, sweep_row).
"""

from .validators import (
    ComparisonResultValidator,
    ContractValidator,
    SchemaLoader,
    SweepRowValidator,
    validate_comparison_result,
    validate_sweep_row,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComparisonResultValidator",
    "SweepRowValidator",
    # Functions
    "validate_comparison_result",
    "validate_sweep_row",
]
