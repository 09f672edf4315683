"""
Succession Core: exact arithmetic, the heir data model, and classification.

Layer Architecture:
    Arithmetic Layer:  Rational (exact, overflow-checked)
                           ↓
    Ontology Layer:    Decedent, Heir, Relation, Status, Tier
                           ↓
    Classification:    relation -> tier
                           ↓
    Arena Layer:       HeirIndex (id-keyed back-reference lookups)

Usage:
    from succession.core import (
        Heir,
        Relation,
        Status,
        frac,
        tier_of,
    )
"""

from succession.core.rational import (
    # Errors
    RationalError,
    ZeroDenominatorError,
    RationalOverflowError,
    # Type and helpers
    Rational,
    simplify,
    frac,
    add,
    subtract,
    multiply,
    divide,
    equals,
    to_string,
    to_percent,
    ZERO,
    ONE,
)

from succession.core.core_types import (
    Relation,
    Status,
    Tier,
    DEAD_STATUSES,
    SPOUSE_RELATIONS,
    Decedent,
    Heir,
)

from succession.core.classifier import RELATION_TIERS, tier_of, is_spouse

from succession.core.lineage import HeirIndex, build_lineage_graph, count_descendants


__all__ = [
    # Arithmetic
    "RationalError",
    "ZeroDenominatorError",
    "RationalOverflowError",
    "Rational",
    "simplify",
    "frac",
    "add",
    "subtract",
    "multiply",
    "divide",
    "equals",
    "to_string",
    "to_percent",
    "ZERO",
    "ONE",
    # Ontology
    "Relation",
    "Status",
    "Tier",
    "DEAD_STATUSES",
    "SPOUSE_RELATIONS",
    "Decedent",
    "Heir",
    # Classification
    "RELATION_TIERS",
    "tier_of",
    "is_spouse",
    # Arena
    "HeirIndex",
    "build_lineage_graph",
    "count_descendants",
]
