"""
Case facade: one distribution pass plus one validation pass.

The engine and the validator never call each other. This module is the caller
that runs both over the same heir snapshot and bundles the outcome.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from succession.config import StatuteConfig
from succession.core.core_types import Decedent, Heir, Tier
from succession.core.lineage import HeirIndex
from succession.engine.distribution import calculate_shares
from succession.engine.precedence import determine_active_tier
from succession.evaluation.validate_heirs import validate
from succession.schemas.result_contract import CalculationResult, ValidationError


@dataclass(frozen=True)
class InheritanceCase:
    """A decedent and the heir list describing the estate's succession."""
    decedent: Decedent
    heirs: List[Heir] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decedent": self.decedent.to_dict(),
            "heirs": [h.to_dict() for h in self.heirs],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InheritanceCase":
        return cls(
            decedent=Decedent.from_dict(data["decedent"]),
            heirs=[Heir.from_dict(h) for h in data.get("heirs", [])],
        )


@dataclass
class CaseReport:
    """Output of evaluate_case()."""
    results: List[CalculationResult]
    errors: List[ValidationError]
    active_tier: Optional[Tier] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def result_for(self, heir_id: str) -> Optional[CalculationResult]:
        for result in self.results:
            if result.heir_id == heir_id:
                return result
        return None


def evaluate_case(
    decedent: Decedent,
    heirs: List[Heir],
    config: Optional[StatuteConfig] = None,
) -> CaseReport:
    """
    Compute shares and diagnostics for one heir snapshot.

    Fatal engine errors (ShareInvariantError, RationalError) propagate;
    validation problems are returned in the report.
    """
    return CaseReport(
        results=calculate_shares(decedent, heirs, config),
        errors=validate(heirs, decedent),
        active_tier=determine_active_tier(heirs, HeirIndex(heirs)),
    )


__all__ = ["InheritanceCase", "CaseReport", "evaluate_case"]
