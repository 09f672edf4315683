"""
Schema modules for engine outputs.

This package hosts lightweight dataclasses that define the contracts between
the share engine, the validator, and downstream collaborators.
"""

from succession.schemas.result_contract import (
    CalculationResult,
    ValidationError,
    RESULT_COLUMNS,
    ERROR_COLUMNS,
)

__all__ = [
    "result_contract",
    "CalculationResult",
    "ValidationError",
    "RESULT_COLUMNS",
    "ERROR_COLUMNS",
]
