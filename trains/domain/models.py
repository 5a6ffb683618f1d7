"""Immutable domain models for the rail network.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts shared by the
graph store, the route engine and the adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union


class BoundType(Enum):
    """How a route-counting query limits the routes it explores.

    STOPS bounds the number of hops, DISTANCE bounds the cumulative
    edge weight.
    """

    STOPS = "stops"
    DISTANCE = "distance"


class RouteStatus(Enum):
    """Sentinel results returned by route queries instead of raising."""

    NO_SUCH_ROUTE = "NO_SUCH_ROUTE"
    UNREACHABLE = "UNREACHABLE"

    def __str__(self) -> str:
        return self.value


NO_SUCH_ROUTE = RouteStatus.NO_SUCH_ROUTE
UNREACHABLE = RouteStatus.UNREACHABLE


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection between two towns.

    Attributes:
        source: Label of the departure town (e.g. 'A')
        destination: Label of the arrival town
        distance: Non-negative integer distance of the track
    """

    source: str
    destination: str
    distance: int

    def __iter__(self) -> Iterator[Union[str, int]]:
        return iter((self.source, self.destination, self.distance))


# A plain (source, destination, distance) triple is accepted wherever an
# Edge is, so callers and tests can build graphs from literals.
EdgeLike = Union[Edge, Tuple[str, str, int]]

# Result of a distance query: a distance, or a sentinel.
RouteLength = Union[int, RouteStatus]
