"""In-memory adjacency list of the rail network.

This module defines the GraphStore used throughout the project. It is
built once from a list of edges and is read-only afterwards.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ..domain.models import EdgeLike

logger = logging.getLogger(__name__)

Neighbours = Tuple[Tuple[str, int], ...]


class GraphStore:
    """Adjacency list and vertex set of a directed weighted multigraph.

    A town without outgoing tracks has no adjacency entry at all:
    ``neighbours()`` returns ``None`` for it rather than an empty tuple,
    and the route engine treats that as a dead end.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Neighbours] = {}
        # dict keeps the order in which towns were first seen
        self._vertices: Dict[str, None] = {}

    @classmethod
    def build(cls, edges: Iterable[EdgeLike]) -> GraphStore:
        """Build a store from edges, keeping their insertion order.

        Parallel edges and self-loops are kept as they are.
        """
        store = cls()
        adjacency: Dict[str, List[Tuple[str, int]]] = {}
        for source, destination, distance in edges:
            adjacency.setdefault(source, []).append((destination, distance))
            store._vertices.setdefault(source)
            store._vertices.setdefault(destination)
        store._adjacency = {
            vertex: tuple(entries) for vertex, entries in adjacency.items()
        }

        logger.debug(
            "Graph built",
            extra={"vertices": len(store._vertices), "edges": store.edge_count},
        )
        return store

    def neighbours(self, vertex: str) -> Optional[Neighbours]:
        return self._adjacency.get(vertex)

    def vertices(self) -> FrozenSet[str]:
        return frozenset(self._vertices)

    def ordered_vertices(self) -> Tuple[str, ...]:
        """Vertices in the order they were first seen while building."""
        return tuple(self._vertices)

    def adjacency(self) -> Mapping[str, Neighbours]:
        return MappingProxyType(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(entries) for entries in self._adjacency.values())

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices
