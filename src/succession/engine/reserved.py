"""Reserved (compulsory) shares as a fixed ratio of the statutory share."""

from __future__ import annotations

from typing import Optional

from succession.config import StatuteConfig
from succession.core.classifier import is_spouse, tier_of
from succession.core.core_types import Relation
from succession.core.rational import Rational, multiply


def reserved_ratio(relation: Relation, config: Optional[StatuteConfig] = None) -> Rational:
    """
    Ratio of the statutory share that is reserved for a relation.

    Spouse, children and parents keep 1/2; siblings and grandparents 1/3.
    A child's spouse has no reserved share of the decedent's estate.
    """
    config = config or StatuteConfig.civil_code()
    if is_spouse(relation):
        return config.spouse_reserved_ratio
    tier = tier_of(relation)
    if tier is None:
        return config.untiered_reserved_ratio
    return config.reserved_ratio_by_tier[tier]


def reserved_share(
    relation: Relation,
    statutory_share: Rational,
    config: Optional[StatuteConfig] = None,
) -> Rational:
    return multiply(statutory_share, reserved_ratio(relation, config))


__all__ = ["reserved_ratio", "reserved_share"]
