"""
succession: statutory inheritance and reserved shares.

Computes each heir's exact share of an estate under a four-tier priority
statute with a spouse slot, renunciation, representation and re-transfer, and
validates heir lists supplied by an external editor.

Usage:
    from succession import Decedent, Heir, Relation, calculate_shares, validate

    results = calculate_shares(decedent, heirs)
    errors = validate(heirs, decedent)
"""

from succession.core import (
    Decedent,
    Heir,
    Relation,
    Status,
    Tier,
    Rational,
    RationalError,
    RationalOverflowError,
    ZeroDenominatorError,
    frac,
    to_percent,
    to_string,
    tier_of,
    count_descendants,
)
from succession.config import StatuteConfig
from succession.engine import (
    ShareInvariantError,
    calculate_shares,
    determine_active_tier,
    reserved_ratio,
)
from succession.evaluation import validate
from succession.schemas import CalculationResult, ValidationError
from succession.case import CaseReport, InheritanceCase, evaluate_case

__version__ = "0.1.0"

__all__ = [
    "Decedent",
    "Heir",
    "Relation",
    "Status",
    "Tier",
    "Rational",
    "RationalError",
    "RationalOverflowError",
    "ZeroDenominatorError",
    "frac",
    "to_percent",
    "to_string",
    "tier_of",
    "count_descendants",
    "StatuteConfig",
    "ShareInvariantError",
    "calculate_shares",
    "determine_active_tier",
    "reserved_ratio",
    "validate",
    "CalculationResult",
    "ValidationError",
    "CaseReport",
    "InheritanceCase",
    "evaluate_case",
]
