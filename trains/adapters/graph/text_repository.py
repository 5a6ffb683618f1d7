"""Text edge repository adapter.

Reads the rail network from a file of comma separated tokens such as
``AB5, BC4, CD8``. Each token is ``<source><destination><distance>``:
two one-letter towns followed by a single-digit distance.

This adapter adds:
- Configuration injection (path from config)
- Token validation with typed errors
- Caching of the loaded edges
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, InputFormatError
from ...domain.models import Edge

TOKEN_LENGTH = 3


def validate_tokens(tokens: Iterable[str]) -> None:
    """Check that every token is ``<source><destination><distance>``.

    Raises:
        InputFormatError: On the first token that is not exactly three
            characters long or whose third character is not a digit.
    """
    for token in tokens:
        if len(token) != TOKEN_LENGTH:
            raise InputFormatError(
                "Data should be in the format <source><destination><distance>",
                token=token,
            )
        if token[2] not in "0123456789":
            raise InputFormatError("distance should be an integer", token=token)


def parse_token(token: str) -> Edge:
    """Turn a validated token into an Edge."""
    source, destination, distance = token
    return Edge(source=source, destination=destination, distance=int(distance))


@dataclass
class TextEdgeRepository:
    """Edge repository that loads from a comma separated token file.

    This adapter implements EdgeRepositoryPort.

    Attributes:
        config: Graph configuration (data dir, file name, encoding)
        path: Explicit file to read; defaults to ``config.routes_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _edges: Optional[List[Edge]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def source_path(self) -> Path:
        return self.path if self.path is not None else self.config.routes_path

    def load(self) -> List[Edge]:
        """Load, validate and parse the edges of the network.

        Returns:
            Edges in the order they appear in the file.

        Raises:
            GraphError: If the file cannot be read.
            InputFormatError: If a token is malformed.
        """
        if self._edges is not None:
            return self._edges

        tokens = self.read_tokens()
        validate_tokens(tokens)
        edges = [parse_token(token) for token in tokens]

        self._edges = edges
        self._logger.info(
            "Edges loaded",
            extra={"path": str(self.source_path), "edges": len(edges)},
        )
        return edges

    def read_tokens(self) -> List[str]:
        """Read the raw tokens, trimmed of surrounding whitespace.

        Raises:
            GraphError: If the file cannot be read.
        """
        path = self.source_path
        self._logger.debug("Reading edge tokens", extra={"path": str(path)})

        try:
            data = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise GraphError(
                f"Failed to read edges from {path}",
                file_path=str(path),
                cause=e,
            )

        return [token.strip() for token in data.split(",")]

    def clear_cache(self) -> None:
        """Clear cached edges."""
        self._edges = None
        self._logger.debug("Edge cache cleared")
