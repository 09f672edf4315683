"""
Statutory configuration for share computation.

This module defines the StatuteConfig dataclass that captures the fixed
fractions of the inheritance statute (spouse share per active tier, reserved
share ratios), instead of scattering literals through the engine.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from succession.core.core_types import Tier
from succession.core.rational import Rational, frac


def _default_spouse_shares() -> Dict[Tier, Optional[Rational]]:
    return {
        Tier.CHILDREN: None,  # equal share with every child slot
        Tier.PARENTS: frac(1, 2),
        Tier.SIBLINGS: frac(1, 2),
        Tier.GRANDPARENTS: frac(2, 3),
    }


def _default_reserved_ratios() -> Dict[Tier, Rational]:
    return {
        Tier.CHILDREN: frac(1, 2),
        Tier.PARENTS: frac(1, 2),
        Tier.SIBLINGS: frac(1, 3),
        Tier.GRANDPARENTS: frac(1, 3),
    }


@dataclass
class StatuteConfig:
    """
    Configuration for the share engine.

    Attributes:
        spouse_share_by_tier: Fixed spouse share when the given tier is active.
            None means the spouse takes one slot equal to each tier member.
        reserved_ratio_by_tier: Reserved share as a ratio of the statutory
            share for members of each tier.
        spouse_reserved_ratio: Reserved ratio for the spouse.
        untiered_reserved_ratio: Reserved ratio for relations outside every
            tier other than the spouse (a child's spouse).
        check_invariant: Verify that shares sum to exactly 1 (or 0).
    """

    spouse_share_by_tier: Dict[Tier, Optional[Rational]] = field(default_factory=_default_spouse_shares)
    reserved_ratio_by_tier: Dict[Tier, Rational] = field(default_factory=_default_reserved_ratios)
    spouse_reserved_ratio: Rational = field(default_factory=lambda: frac(1, 2))
    untiered_reserved_ratio: Rational = field(default_factory=lambda: frac(0))
    check_invariant: bool = True

    def __post_init__(self):
        """Fill in any tier left out of a partial override."""
        spouse_defaults = _default_spouse_shares()
        for tier in Tier:
            if tier not in self.spouse_share_by_tier:
                self.spouse_share_by_tier[tier] = spouse_defaults[tier]
        reserved_defaults = _default_reserved_ratios()
        for tier in Tier:
            if tier not in self.reserved_ratio_by_tier:
                self.reserved_ratio_by_tier[tier] = reserved_defaults[tier]

    def spouse_share(self, tier: Tier) -> Optional[Rational]:
        """Spouse share for the active tier; None signals an equal slot."""
        return self.spouse_share_by_tier[tier]

    @classmethod
    def civil_code(cls) -> "StatuteConfig":
        """
        Create configuration for the civil-code statute.

        - Spouse with children: equal share
        - Spouse with parents or siblings: 1/2
        - Spouse with grandparents: 2/3
        - Spouse alone: everything
        - Reserved: 1/2 for spouse, children, parents; 1/3 for siblings and
          grandparents

        Returns:
            StatuteConfig with the civil-code fractions.
        """
        return cls()


__all__ = ["StatuteConfig"]
