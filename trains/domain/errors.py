"""Typed domain errors for the rail network.

All errors inherit from TrainsError and can optionally wrap a root
cause exception for debugging.

Route queries never raise for a missing route or an unreachable town:
those outcomes are returned as RouteStatus sentinels. Errors here cover
reading, validating and wiring the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TrainsError(Exception):
    """Base error for the rail network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InputFormatError(TrainsError):
    """An edge token does not match <source><destination><distance>.

    Attributes:
        token: The offending token
    """

    token: str = ""


@dataclass
class GraphError(TrainsError):
    """The edge file could not be read.

    Attributes:
        file_path: Path to the edge file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(TrainsError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
