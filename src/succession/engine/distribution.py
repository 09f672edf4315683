"""
Statutory share distribution.

Distributor Contract
1) Input: decedent record and the full heir list (never mutated)
2) Active tier: first tier with an inheritable root member (see precedence.py)
3) Spouse: equal slot with children; fixed 1/2 with parents or siblings;
   fixed 2/3 with grandparents; everything when no tier is active
4) Slots: remaining shares split equally among the active tier's slot holders
5) Descent: a deceased holder's slot passes to its representation heirs, a
   re-transfer origin's slot to its re-transfer heirs, recursively and in
   equal parts at every level
6) Cycles: a visited-id set is threaded through the descent; a revisited id
   gets zero and the walk stops there
7) Output: one CalculationResult per input heir, in input order
8) Failure: shares that do not sum to exactly 1 (or 0) raise
   ShareInvariantError
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from succession.config import StatuteConfig
from succession.core.core_types import Decedent, Heir, Relation, Status, Tier
from succession.core.lineage import HeirIndex
from succession.core.rational import (
    ONE,
    ZERO,
    Rational,
    add,
    divide,
    equals,
    frac,
    subtract,
    to_string,
)
from succession.engine.precedence import determine_active_tier, slot_holders
from succession.engine.reserved import reserved_share
from succession.schemas.result_contract import CalculationResult

logger = logging.getLogger(__name__)


class ShareInvariantError(RuntimeError):
    """Raised when computed shares do not sum to exactly 1 (or 0)."""
    pass


def find_current_spouse(heirs: Sequence[Heir]) -> Optional[Heir]:
    """First spouse record with normal status and no divorce date."""
    for heir in heirs:
        if (
            heir.relation is Relation.SPOUSE
            and heir.status is Status.NORMAL
            and heir.divorce_date is None
        ):
            return heir
    return None


def slot_shares(
    has_spouse: bool,
    active_tier: Optional[Tier],
    holder_count: int,
    config: Optional[StatuteConfig] = None,
) -> Tuple[Optional[Rational], Rational]:
    """
    Compute (spouse share, per-slot share) for the active tier.

    The spouse share is None when there is no current spouse.
    """
    config = config or StatuteConfig.civil_code()
    if active_tier is None:
        return (ONE if has_spouse else None), ZERO

    if not has_spouse:
        per_slot = frac(1, holder_count) if holder_count else ZERO
        return None, per_slot

    fixed = config.spouse_share(active_tier)
    if fixed is None:
        # Spouse takes one slot alongside the holders
        per_slot = frac(1, holder_count + 1)
        return per_slot, per_slot

    if not holder_count:
        return ONE, ZERO
    return fixed, divide(subtract(ONE, fixed), frac(holder_count))


def calculate_shares(
    decedent: Decedent,
    heirs: Sequence[Heir],
    config: Optional[StatuteConfig] = None,
) -> List[CalculationResult]:
    """
    Compute statutory and reserved shares for every heir.

    Args:
        decedent: The decedent. Shares do not depend on it.
        heirs: Full heir list, treated as an immutable snapshot.
        config: Statute fractions; defaults to StatuteConfig.civil_code().

    Returns:
        One CalculationResult per heir, in input order.

    Raises:
        ShareInvariantError: If shares do not sum to exactly 1 (or 0).
        RationalError: If a share cannot be represented exactly.
    """
    if not heirs:
        return []
    config = config or StatuteConfig.civil_code()

    index = HeirIndex(heirs)
    spouse = find_current_spouse(heirs)
    active_tier = determine_active_tier(heirs, index)
    holders = slot_holders(heirs, active_tier, index)
    spouse_share, per_slot = slot_shares(spouse is not None, active_tier, len(holders), config)

    shares: Dict[str, Rational] = {}
    visited: Set[str] = set()

    if spouse is not None and spouse_share is not None:
        shares[spouse.heir_id] = spouse_share
        visited.add(spouse.heir_id)

    for holder in holders:
        _assign_slot(holder, per_slot, index, shares, visited)

    results = _collect_results(heirs, shares, config)

    tier_name = active_tier.name if active_tier is not None else "none"
    logger.info(
        f"Computed {len(results)} shares for {decedent.name or decedent.decedent_id} "
        f"(active tier: {tier_name}, slots: {len(holders) + (1 if spouse else 0)})"
    )

    if config.check_invariant:
        check_share_invariant(results)
    return results


def _assign_slot(
    holder: Heir,
    slot_share: Rational,
    index: HeirIndex,
    shares: Dict[str, Rational],
    visited: Set[str],
) -> None:
    if holder.heir_id in visited:
        return
    visited.add(holder.heir_id)

    if holder.status is Status.NORMAL:
        shares[holder.heir_id] = slot_share
    elif holder.is_dead:
        _distribute(holder.heir_id, slot_share, Status.REPRESENTATION, index, shares, visited)
    elif holder.status is Status.RE_TRANSFER:
        _distribute(holder.heir_id, slot_share, Status.RE_TRANSFER, index, shares, visited)


def _distribute(
    predecessor_id: str,
    share: Rational,
    status: Status,
    index: HeirIndex,
    shares: Dict[str, Rational],
    visited: Set[str],
) -> None:
    """Split share equally among predecessor_id's direct successors of one status."""
    recipients = index.successors(predecessor_id, status)
    if not recipients:
        logger.debug(f"No {status.value} successors for {predecessor_id}")
        return

    per_heir = divide(share, frac(len(recipients)))
    for heir in recipients:
        if heir.heir_id in visited:
            logger.warning(f"Circular back-reference at {heir.heir_id}; share forced to zero")
            continue
        visited.add(heir.heir_id)

        if index.has_successors(heir.heir_id, status):
            _distribute(heir.heir_id, per_heir, status, index, shares, visited)
        else:
            shares[heir.heir_id] = per_heir


def _collect_results(
    heirs: Sequence[Heir],
    shares: Dict[str, Rational],
    config: StatuteConfig,
) -> List[CalculationResult]:
    results: List[CalculationResult] = []
    emitted: Set[str] = set()
    for heir in heirs:
        share = ZERO if heir.heir_id in emitted else shares.get(heir.heir_id, ZERO)
        emitted.add(heir.heir_id)
        results.append(CalculationResult(
            heir_id=heir.heir_id,
            name=heir.name,
            relation=heir.relation,
            statutory_share=share,
            reserved_share=reserved_share(heir.relation, share, config),
        ))
    return results


def check_share_invariant(results: Sequence[CalculationResult]) -> None:
    """
    Verify shares sum to exactly 1 when anyone inherits, else to exactly 0.

    Raises:
        ShareInvariantError: On any mismatch.
    """
    total = ZERO
    for result in results:
        total = add(total, result.statutory_share)
    expected = ONE if any(r.statutory_share.is_positive for r in results) else ZERO
    if not equals(total, expected):
        logger.error(f"Share invariant violated: total {to_string(total)}, expected {to_string(expected)}")
        raise ShareInvariantError(
            f"Inheritance share invariant violated: shares sum to {to_string(total)}, "
            f"expected {to_string(expected)}"
        )


__all__ = [
    "ShareInvariantError",
    "find_current_spouse",
    "slot_shares",
    "calculate_shares",
    "check_share_invariant",
]
