"""
Core Ontology Types: The Heir Data Model.

These are the shapes exchanged with every collaborator (editor, importers,
exporters). The engine only ever reads them.

Layer: Ontology
- Relation: How an heir is related to the decedent
- Status: Where the heir stands in the succession
- Tier: Priority group of blood relatives
- Decedent: The person whose estate is divided
- Heir: One claimant record, optionally stepping into another's slot

The back-reference (`represented_id`) is an id into the same heir list, never
an object pointer. The list may contain cycles until it has been validated.
"""

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


# =============================================================================
# ENUMS
# =============================================================================

class Relation(Enum):
    """Relation of an heir to the decedent."""
    SPOUSE = "spouse"
    CHILD = "child"
    FATHER = "father"
    MOTHER = "mother"
    SIBLING = "sibling"
    PATERNAL_GRANDFATHER = "paternal_grandfather"
    PATERNAL_GRANDMOTHER = "paternal_grandmother"
    MATERNAL_GRANDFATHER = "maternal_grandfather"
    MATERNAL_GRANDMOTHER = "maternal_grandmother"
    CHILD_SPOUSE = "child_spouse"     # Spouse of a child; only inherits via re-transfer


class Status(Enum):
    """Succession status of an heir."""
    NORMAL = "normal"                                  # Inherits in own right
    DECEASED = "deceased"                              # Died before the decedent
    DECEASED_WITHOUT_ISSUE = "deceased_without_issue"  # Died before the decedent, no descendants
    RENOUNCED = "renounced"                            # Disclaimed the inheritance
    REPRESENTATION = "representation"                  # Steps into a predeceased heir's slot
    RE_TRANSFER = "re_transfer"                        # Origin died after the decedent, or heir of one


class Tier(Enum):
    """Priority groups of blood relatives, highest first."""
    CHILDREN = 1
    PARENTS = 2
    SIBLINGS = 3
    GRANDPARENTS = 4


DEAD_STATUSES = frozenset({Status.DECEASED, Status.DECEASED_WITHOUT_ISSUE})

# Relations counted by the one-current-spouse rule
SPOUSE_RELATIONS = frozenset({Relation.SPOUSE, Relation.CHILD_SPOUSE})


DateLike = Union[date, str, None]


def _parse_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# =============================================================================
# DECEDENT
# =============================================================================

@dataclass(frozen=True)
class Decedent:
    """
    The person whose estate is being divided.

    Only the death date takes part in validation; the estate value is carried
    for exact monetary display.
    """
    decedent_id: str
    name: str
    death_date: Optional[date] = None
    estate_value: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["death_date"] = _format_date(self.death_date)
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Decedent":
        estate = data.get("estate_value")
        return cls(
            decedent_id=str(data["decedent_id"]),
            name=str(data.get("name") or ""),
            death_date=_parse_date(data.get("death_date")),
            estate_value=int(estate) if estate is not None else None,
        )


# =============================================================================
# HEIR
# =============================================================================

@dataclass(frozen=True)
class Heir:
    """
    A claimant record as supplied by the editor.

    Attributes:
        heir_id: Unique identifier within the heir list.
        name: Display name.
        relation: Relation to the decedent.
        status: Succession status.
        birth_date, death_date, marriage_date, divorce_date: Optional dates.
        represented_id: Id of the heir whose slot this record steps into.
    """
    heir_id: str
    name: str
    relation: Relation
    status: Status = Status.NORMAL
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    marriage_date: Optional[date] = None
    divorce_date: Optional[date] = None
    represented_id: Optional[str] = None

    @property
    def is_root(self) -> bool:
        """True when the heir references nobody."""
        return not self.represented_id

    @property
    def is_dead(self) -> bool:
        return self.status in DEAD_STATUSES

    @property
    def is_current_spouse_candidate(self) -> bool:
        """Spouse-like record that is neither divorced nor deceased."""
        return (
            self.relation in SPOUSE_RELATIONS
            and self.divorce_date is None
            and not self.is_dead
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["relation"] = self.relation.value
        payload["status"] = self.status.value
        for key in ("birth_date", "death_date", "marriage_date", "divorce_date"):
            payload[key] = _format_date(getattr(self, key))
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Heir":
        """Build an heir from serialized state (enum values, ISO dates)."""
        return cls(
            heir_id=str(data["heir_id"]),
            name=str(data.get("name") or ""),
            relation=Relation(data["relation"]),
            status=Status(data.get("status") or Status.NORMAL.value),
            birth_date=_parse_date(data.get("birth_date")),
            death_date=_parse_date(data.get("death_date")),
            marriage_date=_parse_date(data.get("marriage_date")),
            divorce_date=_parse_date(data.get("divorce_date")),
            represented_id=data.get("represented_id") or None,
        )


__all__ = [
    "Relation",
    "Status",
    "Tier",
    "DEAD_STATUSES",
    "SPOUSE_RELATIONS",
    "Decedent",
    "Heir",
]
