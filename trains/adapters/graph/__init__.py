"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextEdgeRepository: Loads edges from a comma separated token file
"""

from .text_repository import TextEdgeRepository, parse_token, validate_tokens

__all__ = ["TextEdgeRepository", "parse_token", "validate_tokens"]
