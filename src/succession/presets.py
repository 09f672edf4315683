"""
Canonical Succession Scenarios.

Ready-made cases that editors offer as starting points. Each one is a
complete, valid heir list, so they double as end-to-end fixtures:

- Spouse + two children: everyone takes an equal third
- Spouse + parents (no children): spouse 1/2, each parent 1/4
- Representation: a predeceased child's share passes to its two children
- Re-transfer: a child dying after the decedent passes its share to its own
  spouse and child
- Multiple spouses: two former spouses take nothing, the current spouse and
  four children take a fifth each
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from succession.case import InheritanceCase
from succession.core.core_types import Decedent, Heir, Relation, Status


@dataclass(frozen=True)
class Preset:
    """A named scenario."""
    label: str
    description: str
    case: InheritanceCase


PRESET_SPOUSE_AND_CHILDREN = Preset(
    label="Spouse + 2 children",
    description="The most common case: spouse and children divide the estate equally",
    case=InheritanceCase(
        decedent=Decedent("preset_1_decedent", "Wang Da-ming", date(2024, 6, 15), 18_000_000),
        heirs=[
            Heir("preset_1_1", "Li Xiao-hua", Relation.SPOUSE,
                 birth_date=date(1965, 9, 12), marriage_date=date(1990, 11, 3)),
            Heir("preset_1_2", "Wang Yi-lang", Relation.CHILD, birth_date=date(1992, 3, 18)),
            Heir("preset_1_3", "Wang Er-lang", Relation.CHILD, birth_date=date(1995, 7, 22)),
        ],
    ),
)

PRESET_SPOUSE_AND_PARENTS = Preset(
    label="Spouse + parents (no children)",
    description="Without children, the spouse inherits together with the parents",
    case=InheritanceCase(
        decedent=Decedent("preset_2_decedent", "Chen Zhi-ming", date(2024, 3, 20), 12_000_000),
        heirs=[
            Heir("preset_2_1", "Lin Mei-ling", Relation.SPOUSE,
                 birth_date=date(1988, 4, 5), marriage_date=date(2015, 10, 10)),
            Heir("preset_2_2", "Chen Guo-hua", Relation.FATHER, birth_date=date(1958, 1, 30)),
            Heir("preset_2_3", "Zhang Xiu-ying", Relation.MOTHER, birth_date=date(1960, 8, 14)),
        ],
    ),
)

PRESET_REPRESENTATION = Preset(
    label="Representation (grandchildren represent a predeceased child)",
    description="A child died before the decedent; that child's children step into the slot",
    case=InheritanceCase(
        decedent=Decedent("preset_3_decedent", "Zhang Wen-xiong", date(2024, 8, 10), 30_000_000),
        heirs=[
            Heir("preset_3_1", "Huang Shu-fen", Relation.SPOUSE,
                 birth_date=date(1960, 12, 25), marriage_date=date(1985, 6, 8)),
            Heir("preset_3_2", "Zhang Da-hong", Relation.CHILD, birth_date=date(1987, 2, 14)),
            Heir("preset_3_3", "Zhang Da-wei", Relation.CHILD, Status.DECEASED,
                 birth_date=date(1989, 11, 3), death_date=date(2024, 1, 5)),
            Heir("preset_3_4", "Zhang Xiao-ming", Relation.CHILD, Status.REPRESENTATION,
                 birth_date=date(2015, 5, 20), represented_id="preset_3_3"),
            Heir("preset_3_5", "Zhang Xiao-hua", Relation.CHILD, Status.REPRESENTATION,
                 birth_date=date(2018, 9, 8), represented_id="preset_3_3"),
        ],
    ),
)

PRESET_RE_TRANSFER = Preset(
    label="Re-transfer (child dies after the decedent)",
    description="A child outlived the decedent but died before distribution; the slot passes to the child's heirs",
    case=InheritanceCase(
        decedent=Decedent("preset_4_decedent", "Liu Jian-guo", date(2024, 2, 14), 25_000_000),
        heirs=[
            Heir("preset_4_1", "Zhou Ya-qi", Relation.SPOUSE,
                 birth_date=date(1968, 6, 30), marriage_date=date(1993, 12, 18)),
            Heir("preset_4_2", "Liu Jia-hao", Relation.CHILD, birth_date=date(1995, 4, 12)),
            Heir("preset_4_3", "Liu Jia-wei", Relation.CHILD, Status.RE_TRANSFER,
                 birth_date=date(1997, 8, 25), death_date=date(2024, 5, 20),
                 marriage_date=date(2020, 3, 15)),
            Heir("preset_4_4", "Lin Jia-rong", Relation.CHILD_SPOUSE, Status.RE_TRANSFER,
                 birth_date=date(1998, 1, 10), marriage_date=date(2020, 3, 15),
                 represented_id="preset_4_3"),
            Heir("preset_4_5", "Liu Xiao-an", Relation.CHILD, Status.RE_TRANSFER,
                 birth_date=date(2021, 11, 28), represented_id="preset_4_3"),
        ],
    ),
)

PRESET_MULTIPLE_SPOUSES = Preset(
    label="Multiple spouses (two former, one current)",
    description="Divorced spouses take nothing; children of every marriage share with the current spouse",
    case=InheritanceCase(
        decedent=Decedent("preset_5_decedent", "Huang Jian-zhi", date(2024, 9, 1), 40_000_000),
        heirs=[
            Heir("preset_5_1", "Lin Shu-hui", Relation.SPOUSE,
                 birth_date=date(1962, 2, 11), marriage_date=date(1985, 5, 1),
                 divorce_date=date(1995, 8, 20)),
            Heir("preset_5_2", "Chen Ya-fang", Relation.SPOUSE,
                 birth_date=date(1968, 7, 3), marriage_date=date(1997, 3, 9),
                 divorce_date=date(2008, 10, 15)),
            Heir("preset_5_3", "Zhang Xiao-ping", Relation.SPOUSE,
                 birth_date=date(1975, 12, 2), marriage_date=date(2010, 6, 6)),
            Heir("preset_5_4", "Huang Zhi-hao", Relation.CHILD, birth_date=date(1987, 4, 4)),
            Heir("preset_5_5", "Huang Mei-ling", Relation.CHILD, birth_date=date(1990, 9, 17)),
            Heir("preset_5_6", "Huang Jun-jie", Relation.CHILD, birth_date=date(1999, 1, 23)),
            Heir("preset_5_7", "Huang Xiao-an", Relation.CHILD, birth_date=date(2012, 11, 30)),
        ],
    ),
)

PRESETS: List[Preset] = [
    PRESET_SPOUSE_AND_CHILDREN,
    PRESET_SPOUSE_AND_PARENTS,
    PRESET_REPRESENTATION,
    PRESET_RE_TRANSFER,
    PRESET_MULTIPLE_SPOUSES,
]


def get_preset(label: str) -> Optional[Preset]:
    """Look up a preset by its label, returning None if not found."""
    for preset in PRESETS:
        if preset.label == label:
            return preset
    return None


__all__ = [
    "Preset",
    "PRESET_SPOUSE_AND_CHILDREN",
    "PRESET_SPOUSE_AND_PARENTS",
    "PRESET_REPRESENTATION",
    "PRESET_RE_TRANSFER",
    "PRESET_MULTIPLE_SPOUSES",
    "PRESETS",
    "get_preset",
]
