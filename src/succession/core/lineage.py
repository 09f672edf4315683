"""
Back-reference arena over an heir list.

Heirs reference each other by id only. HeirIndex provides the lookups the
resolver and distributor need without ever assuming the graph is acyclic.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

import networkx as nx

from succession.core.core_types import Heir, Status


class HeirIndex:
    """
    Id-keyed view of an immutable heir list.

    The first heir carrying a given id wins lookups; successors keep input
    order so results stay deterministic.
    """

    def __init__(self, heirs: Sequence[Heir]):
        self._heirs: List[Heir] = list(heirs)
        self._by_id: Dict[str, Heir] = {}
        self._successors: Dict[str, List[Heir]] = defaultdict(list)
        for heir in self._heirs:
            self._by_id.setdefault(heir.heir_id, heir)
            if heir.represented_id:
                self._successors[heir.represented_id].append(heir)

    @property
    def heirs(self) -> List[Heir]:
        return list(self._heirs)

    def get(self, heir_id: Optional[str]) -> Optional[Heir]:
        if not heir_id:
            return None
        return self._by_id.get(heir_id)

    def contains(self, heir_id: str) -> bool:
        return heir_id in self._by_id

    def successors(self, heir_id: str, status: Optional[Status] = None) -> List[Heir]:
        """Heirs whose back-reference is heir_id, optionally filtered by status."""
        found = self._successors.get(heir_id, [])
        if status is None:
            return list(found)
        return [h for h in found if h.status is status]

    def has_successors(self, heir_id: str, status: Status) -> bool:
        return any(h.status is status for h in self._successors.get(heir_id, []))


def build_lineage_graph(heirs: Iterable[Heir]) -> nx.DiGraph:
    """Directed graph with an edge predecessor -> successor for every back-reference."""
    graph = nx.DiGraph()
    for heir in heirs:
        graph.add_node(heir.heir_id)
        if heir.represented_id:
            graph.add_edge(heir.represented_id, heir.heir_id)
    return graph


def count_descendants(heir_id: str, heirs: Iterable[Heir]) -> int:
    """
    Count every heir transitively stepping into heir_id's slot.

    Used by editors to warn how many records a removal would orphan. Safe on
    cyclic input: an heir inside a cycle is never counted as its own
    descendant.
    """
    graph = build_lineage_graph(heirs)
    if heir_id not in graph:
        return 0
    reachable = nx.descendants(graph, heir_id)
    reachable.discard(heir_id)
    return len(reachable)


__all__ = ["HeirIndex", "build_lineage_graph", "count_descendants"]
