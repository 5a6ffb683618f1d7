"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import ConfigurationError, GraphError, InputFormatError, TrainsError
from .models import (
    NO_SUCH_ROUTE,
    UNREACHABLE,
    BoundType,
    Edge,
    EdgeLike,
    RouteLength,
    RouteStatus,
)

__all__ = [
    # Models
    "Edge",
    "EdgeLike",
    "BoundType",
    "RouteStatus",
    "RouteLength",
    "NO_SUCH_ROUTE",
    "UNREACHABLE",
    # Errors
    "TrainsError",
    "InputFormatError",
    "GraphError",
    "ConfigurationError",
]
