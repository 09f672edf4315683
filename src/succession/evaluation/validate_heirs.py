"""
Heir List Validator - Structural and date consistency checks.

Checks:
- HV1: Blank names
- HV2: At most one current spouse per back-reference context
- HV3: Representation heirs reference an existing, deceased heir
- HV4: Re-transfer origins die after the decedent
- HV5: Deceased heirs carry a death date
- HV6: No circular back-reference chains
- HV7: Representation only for the decedent's children who died first
- HV8: Re-transfer links; the decedent's spouse never carries a back-reference
- HV9: Unique heir ids

The validator never raises; every problem is returned as a ValidationError so
an editor can show live feedback on half-finished input.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set

from succession.constants import (
    CHECK_BLANK_NAME,
    CHECK_CIRCULAR_REFERENCE,
    CHECK_CURRENT_SPOUSE,
    CHECK_DEATH_DATE,
    CHECK_DUPLICATE_ID,
    CHECK_REPRESENTATION_SCOPE,
    CHECK_REPRESENTED_HEIR,
    CHECK_RE_TRANSFER_DEATH,
    CHECK_SUCCESSOR_LINK,
    ROOT_CONTEXT,
)
from succession.core.classifier import tier_of
from succession.core.core_types import Decedent, Heir, Relation, Status, Tier
from succession.core.lineage import HeirIndex
from succession.schemas.result_contract import ValidationError

logger = logging.getLogger(__name__)

# Statuses a re-transfer heir may step in for
RE_TRANSFER_PREDECESSOR_STATUSES = frozenset(
    {Status.RE_TRANSFER, Status.DECEASED, Status.DECEASED_WITHOUT_ISSUE}
)


def check_hv1_blank_name(heirs: Sequence[Heir]) -> List[ValidationError]:
    """HV1: Every heir needs a non-blank name."""
    return [
        ValidationError(h.heir_id, "name", "Name must not be empty", CHECK_BLANK_NAME)
        for h in heirs
        if not (h.name or "").strip()
    ]


def check_hv2_current_spouse(heirs: Sequence[Heir]) -> List[ValidationError]:
    """HV2: One current spouse at the root and in each branch."""
    errors = []
    counts: Dict[str, int] = defaultdict(int)
    for heir in heirs:
        if not heir.is_current_spouse_candidate:
            continue
        key = heir.represented_id or ROOT_CONTEXT
        counts[key] += 1
        if counts[key] > 1:
            errors.append(ValidationError(
                heir.heir_id, "relation",
                "At most one current spouse is allowed; record a divorce date for former spouses",
                CHECK_CURRENT_SPOUSE,
            ))
    return errors


def check_hv3_represented_heir(heirs: Sequence[Heir], index: HeirIndex) -> List[ValidationError]:
    """HV3: Representation heirs point at an existing, deceased heir."""
    errors = []
    for heir in heirs:
        if heir.status is not Status.REPRESENTATION:
            continue
        if not heir.represented_id:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                "A representation heir must name the heir being represented",
                CHECK_REPRESENTED_HEIR,
            ))
            continue
        predecessor = index.get(heir.represented_id)
        if predecessor is None:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                f"Represented heir '{heir.represented_id}' does not exist",
                CHECK_REPRESENTED_HEIR,
            ))
        elif not predecessor.is_dead:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                "The represented heir must be deceased",
                CHECK_REPRESENTED_HEIR,
            ))
        elif predecessor.status is Status.DECEASED_WITHOUT_ISSUE:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                f"Represented heir '{predecessor.name}' is marked deceased_without_issue "
                f"but has a representation heir",
                CHECK_REPRESENTED_HEIR,
            ))
    return errors


def check_hv4_re_transfer_death(
    heirs: Sequence[Heir],
    decedent: Optional[Decedent],
) -> List[ValidationError]:
    """HV4: A re-transfer origin died, and strictly after the decedent."""
    errors = []
    decedent_death = decedent.death_date if decedent is not None else None
    for heir in heirs:
        if heir.status is not Status.RE_TRANSFER or not heir.is_root:
            continue
        if heir.death_date is None:
            errors.append(ValidationError(
                heir.heir_id, "death_date",
                "A re-transfer origin must have a death date",
                CHECK_RE_TRANSFER_DEATH,
            ))
        elif decedent_death is not None and heir.death_date <= decedent_death:
            errors.append(ValidationError(
                heir.heir_id, "death_date",
                f"A re-transfer origin must die later than the decedent ({decedent_death.isoformat()})",
                CHECK_RE_TRANSFER_DEATH,
            ))
    return errors


def check_hv5_death_date(heirs: Sequence[Heir]) -> List[ValidationError]:
    """HV5: Deceased heirs need a death date."""
    return [
        ValidationError(
            h.heir_id, "death_date",
            "A deceased heir must have a death date",
            CHECK_DEATH_DATE,
        )
        for h in heirs
        if h.is_dead and h.death_date is None
    ]


def check_hv6_circular_reference(heirs: Sequence[Heir], index: HeirIndex) -> List[ValidationError]:
    """HV6: Walk each back-reference chain and flag the first repeat."""
    errors = []
    for heir in heirs:
        if not heir.represented_id:
            continue
        visited: Set[str] = set()
        current: Optional[str] = heir.heir_id
        while current:
            if current in visited:
                errors.append(ValidationError(
                    heir.heir_id, "represented_id",
                    "Back-references form a circular chain",
                    CHECK_CIRCULAR_REFERENCE,
                ))
                break
            visited.add(current)
            node = index.get(current)
            current = node.represented_id if node is not None else None
    return errors


def check_hv7_representation_scope(
    heirs: Sequence[Heir],
    index: HeirIndex,
    decedent: Optional[Decedent],
) -> List[ValidationError]:
    """HV7: Representation replaces a child of the decedent who died first."""
    errors = []
    decedent_death = decedent.death_date if decedent is not None else None
    for heir in heirs:
        if heir.status is not Status.REPRESENTATION:
            continue
        predecessor = index.get(heir.represented_id)
        if predecessor is None:
            continue
        if tier_of(predecessor.relation) is not Tier.CHILDREN:
            errors.append(ValidationError(
                heir.heir_id, "status",
                "Representation only applies to the decedent's children",
                CHECK_REPRESENTATION_SCOPE,
            ))
        elif (
            predecessor.is_dead
            and predecessor.death_date is not None
            and decedent_death is not None
            and predecessor.death_date > decedent_death
        ):
            errors.append(ValidationError(
                heir.heir_id, "status",
                "The represented heir died after the decedent; use re_transfer instead",
                CHECK_REPRESENTATION_SCOPE,
            ))
    return errors


def check_hv8_successor_link(heirs: Sequence[Heir], index: HeirIndex) -> List[ValidationError]:
    """HV8: Re-transfer heirs follow a valid predecessor; spouses reference nobody."""
    errors = []
    for heir in heirs:
        if heir.relation is Relation.SPOUSE and heir.represented_id:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                "The decedent's spouse inherits in own right and cannot step into another heir's slot",
                CHECK_SUCCESSOR_LINK,
            ))
            continue
        if heir.status is not Status.RE_TRANSFER or heir.is_root:
            continue
        predecessor = index.get(heir.represented_id)
        if predecessor is None:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                f"Re-transfer predecessor '{heir.represented_id}' does not exist",
                CHECK_SUCCESSOR_LINK,
            ))
        elif predecessor.status not in RE_TRANSFER_PREDECESSOR_STATUSES:
            errors.append(ValidationError(
                heir.heir_id, "represented_id",
                "A re_transfer heir must follow a re_transfer origin or a deceased heir",
                CHECK_SUCCESSOR_LINK,
            ))
    return errors


def check_hv9_duplicate_id(heirs: Sequence[Heir]) -> List[ValidationError]:
    """HV9: Heir ids are unique."""
    errors = []
    seen: Set[str] = set()
    for heir in heirs:
        if heir.heir_id in seen:
            errors.append(ValidationError(
                heir.heir_id, "id",
                f"Duplicate heir id '{heir.heir_id}'",
                CHECK_DUPLICATE_ID,
            ))
        seen.add(heir.heir_id)
    return errors


def validate(heirs: Sequence[Heir], decedent: Optional[Decedent] = None) -> List[ValidationError]:
    """Run all heir checks and return every diagnostic found."""
    index = HeirIndex(heirs)
    errors = [
        *check_hv1_blank_name(heirs),
        *check_hv2_current_spouse(heirs),
        *check_hv3_represented_heir(heirs, index),
        *check_hv4_re_transfer_death(heirs, decedent),
        *check_hv5_death_date(heirs),
        *check_hv6_circular_reference(heirs, index),
        *check_hv7_representation_scope(heirs, index, decedent),
        *check_hv8_successor_link(heirs, index),
        *check_hv9_duplicate_id(heirs),
    ]
    logger.debug(f"Validated {len(heirs)} heirs: {len(errors)} errors")
    return errors


def errors_by_heir(errors: Sequence[ValidationError]) -> Dict[str, List[ValidationError]]:
    """Group diagnostics by heir id, keeping check order."""
    grouped: Dict[str, List[ValidationError]] = defaultdict(list)
    for error in errors:
        grouped[error.heir_id].append(error)
    return dict(grouped)


__all__ = [
    "check_hv1_blank_name",
    "check_hv2_current_spouse",
    "check_hv3_represented_heir",
    "check_hv4_re_transfer_death",
    "check_hv5_death_date",
    "check_hv6_circular_reference",
    "check_hv7_representation_scope",
    "check_hv8_successor_link",
    "check_hv9_duplicate_id",
    "validate",
    "errors_by_heir",
]
