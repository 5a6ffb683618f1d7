"""Graph ports - Abstractions for edge loading and route queries.

These protocols define the contracts for graph operations: loading the
rail network's edges and answering route queries over it.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.models import BoundType, Edge, RouteLength


class EdgeRepositoryPort(Protocol):
    """Port for loading edge data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for reading, validating and caching
    the edges of the rail network from persistent storage.
    """

    def load(self) -> Sequence[Edge]:
        """Load the edges of the network.

        Returns:
            Validated edges in the order they were declared.
        """
        ...


class RouteQueryPort(Protocol):
    """Port for route queries.

    Implementation: graph/route_engine.py (RouteEngine)
    """

    def route_distance(self, route: Sequence[str]) -> RouteLength:
        """Distance of an exact route, or NO_SUCH_ROUTE."""
        ...

    def count_routes(
        self,
        start: str,
        end: str,
        bound: int,
        bound_type: BoundType,
        exact: bool = False,
    ) -> int:
        """Number of routes from start to end within the bound."""
        ...

    def shortest_path_length(self, start: str, end: str) -> RouteLength:
        """Length of the shortest route or cycle, or UNREACHABLE."""
        ...
