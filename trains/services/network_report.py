"""Network report service - Runs the standard queries on a network.

This service loads the edges from a repository, builds the graph and
route engine, and answers the ten standard questions asked about a
rail network:

1-5.  distances of fixed routes,
6-7.  route counts by number of stops,
8-9.  shortest route and shortest cycle,
10.   route count by total distance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..domain.models import BoundType, RouteStatus
from ..graph.route_engine import RouteEngine
from ..graph.store import GraphStore
from ..ports.graph import EdgeRepositoryPort, RouteQueryPort

QueryValue = Union[int, RouteStatus]


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Answer to one numbered query.

    Attributes:
        number: Position of the query in the report (1-based)
        description: What was asked, for logs and debugging
        value: Distance, count, or a RouteStatus sentinel
    """

    number: int
    description: str
    value: QueryValue

    def render(self) -> str:
        return f"Output #{self.number}: {self.value}"


Query = Tuple[str, Callable[[RouteQueryPort], QueryValue]]

STANDARD_QUERIES: Tuple[Query, ...] = (
    ("distance of route A-B-C", lambda engine: engine.route_distance("ABC")),
    ("distance of route A-D", lambda engine: engine.route_distance("AD")),
    ("distance of route A-D-C", lambda engine: engine.route_distance("ADC")),
    ("distance of route A-E-B-C-D", lambda engine: engine.route_distance("AEBCD")),
    ("distance of route A-E-D", lambda engine: engine.route_distance("AED")),
    (
        "routes C to C with at most 3 stops",
        lambda engine: engine.count_routes("C", "C", 3, BoundType.STOPS),
    ),
    (
        "routes A to C with exactly 4 stops",
        lambda engine: engine.count_routes("A", "C", 4, BoundType.STOPS, exact=True),
    ),
    ("shortest route A to C", lambda engine: engine.shortest_path_length("A", "C")),
    ("shortest route B to B", lambda engine: engine.shortest_path_length("B", "B")),
    (
        "routes C to C with distance less than 30",
        lambda engine: engine.count_routes("C", "C", 30, BoundType.DISTANCE),
    ),
)


def format_report(results: Sequence[QueryResult]) -> str:
    """Render results one per line, in query order."""
    return "\n".join(result.render() for result in results)


@dataclass
class NetworkReportService:
    """Builds the network once and runs the standard queries on it.

    Attributes:
        repository: Source of the network's edges
        engine_factory: Builds a query engine from a graph store
        queries: Queries to run, in report order
    """

    repository: EdgeRepositoryPort
    engine_factory: Callable[[GraphStore], RouteQueryPort] = RouteEngine
    queries: Sequence[Query] = STANDARD_QUERIES

    _engine: Optional[RouteQueryPort] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_engine(self) -> RouteQueryPort:
        """Load the edges and build the query engine on first use.

        Raises:
            GraphError: If the edges cannot be read.
            InputFormatError: If an edge token is malformed.
        """
        if self._engine is None:
            store = GraphStore.build(self.repository.load())
            self._logger.info(
                "Network built",
                extra={"towns": len(store), "tracks": store.edge_count},
            )
            self._engine = self.engine_factory(store)
        return self._engine

    def run(self) -> List[QueryResult]:
        """Answer every query in order."""
        engine = self.build_engine()

        results: List[QueryResult] = []
        for number, (description, query) in enumerate(self.queries, start=1):
            value = query(engine)
            self._logger.debug(
                "Query answered",
                extra={"number": number, "query": description, "value": str(value)},
            )
            results.append(QueryResult(number, description, value))
        return results

    def report(self) -> str:
        """Run the queries and format them as text."""
        return format_report(self.run())
