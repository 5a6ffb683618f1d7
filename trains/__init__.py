"""Top-level package for the Trains project.

This package exposes the core modules used to answer route questions
about a small rail network: exact route distances, route counts under
stop or distance bounds, and shortest routes.
"""

from .domain.models import NO_SUCH_ROUTE, UNREACHABLE, BoundType, Edge, RouteStatus
from .graph import GraphStore, RouteEngine

__all__ = [
    "GraphStore",
    "RouteEngine",
    "Edge",
    "BoundType",
    "RouteStatus",
    "NO_SUCH_ROUTE",
    "UNREACHABLE",
]
