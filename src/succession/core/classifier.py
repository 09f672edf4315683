"""
Heir classification: relation -> priority tier.

Spouse and child's-spouse belong to no tier. The spouse inherits alongside
whichever tier is active; a child's spouse only receives through re-transfer.
"""

from typing import Dict, Optional

from succession.core.core_types import Relation, Tier

RELATION_TIERS: Dict[Relation, Optional[Tier]] = {
    Relation.SPOUSE: None,
    Relation.CHILD: Tier.CHILDREN,
    Relation.CHILD_SPOUSE: None,
    Relation.FATHER: Tier.PARENTS,
    Relation.MOTHER: Tier.PARENTS,
    Relation.SIBLING: Tier.SIBLINGS,
    Relation.PATERNAL_GRANDFATHER: Tier.GRANDPARENTS,
    Relation.PATERNAL_GRANDMOTHER: Tier.GRANDPARENTS,
    Relation.MATERNAL_GRANDFATHER: Tier.GRANDPARENTS,
    Relation.MATERNAL_GRANDMOTHER: Tier.GRANDPARENTS,
}

_missing = set(Relation) - set(RELATION_TIERS)
if _missing:
    raise RuntimeError(f"Relations without a tier mapping: {sorted(r.value for r in _missing)}")


def tier_of(relation: Relation) -> Optional[Tier]:
    """Return the priority tier for a relation, or None for spouse-like relations."""
    return RELATION_TIERS[relation]


def is_spouse(relation: Relation) -> bool:
    return relation is Relation.SPOUSE


__all__ = ["RELATION_TIERS", "tier_of", "is_spouse"]
