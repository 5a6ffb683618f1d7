"""Route queries over the rail network.

This module answers the three kinds of questions asked about a
GraphStore:

- the distance of an exact route,
- the number of routes between two towns under a stop or distance bound,
- the length of the shortest route (or shortest cycle) between towns.

No-route outcomes are returned as RouteStatus sentinels, never raised.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..domain.models import NO_SUCH_ROUTE, UNREACHABLE, BoundType, RouteLength
from .store import GraphStore


def next_metric(curr: int, bound_type: BoundType, distance: int) -> int:
    """Advance the running metric of a route by one traversed edge."""
    if bound_type is BoundType.STOPS:
        return curr + 1
    return curr + distance


@dataclass
class RouteEngine:
    """Read-only query engine over a GraphStore.

    The engine keeps no state between queries, so calling a query twice
    with the same arguments gives the same result.

    Attributes:
        store: The graph to query. It is never modified.
    """

    store: GraphStore
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def route_distance(self, route: Sequence[str]) -> RouteLength:
        """Compute the total distance of an exact route.

        Args:
            route: Towns to visit in order, e.g. ``"ABC"`` or
                ``["A", "B", "C"]``.

        Returns:
            The summed distance, or NO_SUCH_ROUTE if a hop has no track.
            A total of zero is also reported as NO_SUCH_ROUTE, which
            covers single-town routes.
        """
        total = 0
        for current, following in zip(route, route[1:]):
            neighbours = self.store.neighbours(current)
            if neighbours is None:
                return NO_SUCH_ROUTE

            found = False
            for neighbour, distance in neighbours:
                if neighbour == following:
                    found = True
                    total += distance
            if not found:
                return NO_SUCH_ROUTE

        if total == 0:
            return NO_SUCH_ROUTE
        return total

    def count_routes(
        self,
        start: str,
        end: str,
        bound: int,
        bound_type: BoundType,
        exact: bool = False,
    ) -> int:
        """Count the routes from ``start`` to ``end`` within a bound.

        Routes may revisit towns. A STOPS bound is inclusive; a DISTANCE
        bound is exclusive (the route must be shorter than ``bound``).
        With ``exact`` only routes whose metric equals the bound count.

        Under a DISTANCE bound every edge reachable from ``start`` must
        have a positive distance, otherwise a zero-weight cycle never
        exceeds the bound and the search does not terminate.
        """
        if bound_type is BoundType.DISTANCE:
            bound -= 1

        total = 0
        # (town, metric so far, edges traversed)
        stack: List[Tuple[str, int, int]] = [(start, 0, 0)]
        while stack:
            town, curr, hops = stack.pop()
            if curr > bound:
                continue

            if town == end and hops > 0:
                if exact:
                    if curr == bound:
                        total += 1
                        continue
                else:
                    total += 1

            neighbours = self.store.neighbours(town)
            if neighbours is None:
                continue
            # reversed so the first neighbour is explored first
            for neighbour, distance in reversed(neighbours):
                stack.append(
                    (neighbour, next_metric(curr, bound_type, distance), hops + 1)
                )

        self._logger.debug(
            "Routes counted",
            extra={
                "start": start,
                "end": end,
                "bound": bound,
                "bound_type": bound_type.value,
                "exact": exact,
                "routes": total,
            },
        )
        return total

    def shortest_path_length(self, start: str, end: str) -> RouteLength:
        """Length of the shortest route from ``start`` to ``end``.

        When ``start == end`` this is the shortest cycle through
        ``start`` of at least one edge. Returns UNREACHABLE when no
        such route exists.
        """
        if start not in self.store:
            return UNREACHABLE

        distances = self._dijkstra(start)

        if start != end:
            length = distances.get(end, math.inf)
        else:
            length = self._shortest_cycle_length(distances, start)

        if math.isinf(length):
            return UNREACHABLE
        return int(length)

    def _dijkstra(self, start: str) -> Dict[str, float]:
        """Dense Dijkstra from ``start`` over every known town.

        Linear scan for the closest unvisited town, no priority queue.
        """
        vertices = self.store.ordered_vertices()
        distances: Dict[str, float] = {vertex: math.inf for vertex in vertices}
        distances[start] = 0
        visited: Set[str] = set()

        for _ in range(len(vertices) - 1):
            closest = self._closest_unvisited(distances, visited)
            if closest is None:
                break
            visited.add(closest)

            for destination, distance in self.store.neighbours(closest) or ():
                if distances[closest] + distance < distances[destination]:
                    distances[destination] = distances[closest] + distance

        return distances

    @staticmethod
    def _closest_unvisited(
        distances: Dict[str, float], visited: Set[str]
    ) -> Optional[str]:
        closest: Optional[str] = None
        min_so_far = math.inf
        for town, distance in distances.items():
            if town not in visited and distance < min_so_far:
                min_so_far = distance
                closest = town
        return closest

    def _shortest_cycle_length(self, distances: Dict[str, float], town: str) -> float:
        """Close the cheapest route back into ``town`` with one last edge."""
        min_distance = math.inf
        for vertex in self.store.ordered_vertices():
            if vertex == town:
                continue
            for neighbour, distance in self.store.neighbours(vertex) or ():
                if neighbour == town and distances[vertex] + distance < min_distance:
                    min_distance = distances[vertex] + distance
        return min_distance
