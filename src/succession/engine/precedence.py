"""
Tier precedence: which priority group inherits.

Tiers are tried in order (children, parents, siblings, grandparents). A tier
is active when at least one of its root members can still take a share; an
exhausted tier falls through to the next one.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

from succession.core.classifier import tier_of
from succession.core.core_types import Heir, Status, Tier
from succession.core.lineage import HeirIndex

logger = logging.getLogger(__name__)


def is_root_member(heir: Heir, tier: Tier) -> bool:
    """Direct claimant of a tier: no back-reference and not a representation heir."""
    if tier_of(heir.relation) is not tier:
        return False
    if heir.status is Status.REPRESENTATION:
        return False
    return heir.is_root


def root_members(heirs: Sequence[Heir], tier: Tier) -> List[Heir]:
    return [h for h in heirs if is_root_member(h, tier)]


def has_living_descendant(
    heir_id: str,
    index: HeirIndex,
    visited: Optional[Set[str]] = None,
) -> bool:
    """
    Check whether someone alive can still step into heir_id's slot.

    Every heir referencing heir_id is examined: renounced heirs are dead ends,
    deceased heirs are searched recursively, anyone else counts as living.
    The visited set is shared across the walk so cycles terminate.
    """
    if visited is None:
        visited = set()
    if heir_id in visited:
        return False
    visited.add(heir_id)

    for child in index.successors(heir_id):
        if child.status is Status.RENOUNCED:
            continue
        if child.is_dead:
            if has_living_descendant(child.heir_id, index, visited):
                return True
            continue
        return True
    return False


def is_inheritable(heir: Heir, index: HeirIndex) -> bool:
    """Can this root member hold a slot in its tier?"""
    if heir.status is Status.RENOUNCED:
        return False
    if heir.is_dead:
        return has_living_descendant(heir.heir_id, index)
    if heir.status is Status.RE_TRANSFER and heir.is_root:
        return index.has_successors(heir.heir_id, Status.RE_TRANSFER)
    return True


def determine_active_tier(
    heirs: Sequence[Heir],
    index: Optional[HeirIndex] = None,
) -> Optional[Tier]:
    """
    Return the first tier with an inheritable root member.

    Returns None when no tier is active: the spouse inherits alone, or nobody
    in the modeled tiers inherits at all.
    """
    if index is None:
        index = HeirIndex(heirs)
    for tier in Tier:
        members = root_members(heirs, tier)
        if not members:
            continue
        if any(is_inheritable(member, index) for member in members):
            logger.debug(f"Active tier {tier.name} with {len(members)} root members")
            return tier
        logger.debug(f"Tier {tier.name} exhausted, falling through")
    return None


def slot_holders(
    heirs: Sequence[Heir],
    tier: Optional[Tier],
    index: Optional[HeirIndex] = None,
) -> List[Heir]:
    """Inheritable root members of the active tier, in input order."""
    if tier is None:
        return []
    if index is None:
        index = HeirIndex(heirs)
    return [h for h in root_members(heirs, tier) if is_inheritable(h, index)]


__all__ = [
    "is_root_member",
    "root_members",
    "has_living_descendant",
    "is_inheritable",
    "determine_active_tier",
    "slot_holders",
]
