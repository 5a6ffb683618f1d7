"""Graph-related utilities for representing the rail network.

This subpackage contains the in-memory graph store and the route engine
that answers distance, route-count and shortest-path queries on top of
that store.
"""

from .route_engine import RouteEngine, next_metric
from .store import GraphStore

__all__ = ["GraphStore", "RouteEngine", "next_metric"]
