"""
Result contract definitions.

These dataclasses describe what the engine and the validator hand back to
collaborators (renderers, spreadsheet and document exporters, editors).
Keeping them centralized lets every consumer share a single source of truth
for field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from succession.core.core_types import Relation
from succession.core.rational import Rational, frac, multiply, to_percent, to_string

SchemaVersion = "succession_v1"


@dataclass(frozen=True)
class CalculationResult:
    """Statutory and reserved share computed for one heir."""

    heir_id: str
    name: str
    relation: Relation
    statutory_share: Rational
    reserved_share: Rational

    def estate_portion(self, estate_value: Optional[int]) -> Optional[Rational]:
        """Exact amount of the estate this share represents; never rounded."""
        if estate_value is None:
            return None
        return multiply(frac(estate_value), self.statutory_share)

    def to_dict(self) -> Dict[str, object]:
        """Convert to serialisable dict for DataFrame construction."""
        return {
            "heir_id": self.heir_id,
            "name": self.name,
            "relation": self.relation.value,
            "statutory_share": to_string(self.statutory_share),
            "statutory_percent": to_percent(self.statutory_share),
            "reserved_share": to_string(self.reserved_share),
            "reserved_percent": to_percent(self.reserved_share),
        }


@dataclass(frozen=True)
class ValidationError:
    """A user-facing diagnostic attached to one heir field."""

    heir_id: str
    field: str
    message: str
    check_id: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "heir_id": self.heir_id,
            "field": self.field,
            "message": self.message,
            "check_id": self.check_id,
        }


RESULT_COLUMNS: List[str] = [
    "heir_id",
    "name",
    "relation",
    "statutory_share",
    "statutory_percent",
    "reserved_share",
    "reserved_percent",
]

ERROR_COLUMNS: List[str] = ["heir_id", "field", "message", "check_id"]

__all__ = [
    "SchemaVersion",
    "CalculationResult",
    "ValidationError",
    "RESULT_COLUMNS",
    "ERROR_COLUMNS",
]
