"""Command-line entry point for the rail network report.

The pipeline is organized in a few stages:

1. Input acquisition (edge token file given on the command line).
2. Validation and graph construction.
3. The ten standard route queries.
4. Printing one ``Output #n: value`` line per query.

This module wires these stages together without implementing any
business logic. Each step delegates work to dedicated, testable
modules.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, TrainsError
from .logging_config import setup_logging
from .services import NetworkReportService

USAGE = "Usage: trains <path/to/file>"

logger = logging.getLogger(__name__)


def resolve_routes_path(
    argv: Sequence[str], config: Optional[AppConfig] = None
) -> Path:
    """Pick the edge file from the arguments, else from configuration.

    Raises:
        ConfigurationError: If no argument is given and the configured
            file does not exist, or if too many arguments are given.
    """
    if len(argv) > 1:
        raise ConfigurationError(USAGE, setting_name="argv")
    if argv:
        return Path(argv[0])

    config = config or get_config()
    default_path = config.graph.routes_path
    if not default_path.is_file():
        raise ConfigurationError(USAGE, setting_name="graph.routes_file")
    return default_path


def solve_network(routes_path: Path, config: Optional[AppConfig] = None) -> str:
    """Run the standard queries on the network stored at ``routes_path``.

    This helper is designed to be reused from other front-ends
    (CLI, tests, notebooks).

    Raises:
        GraphError: If the file cannot be read.
        InputFormatError: If an edge token is malformed.
    """
    container = Container.create_default(config, routes_path=routes_path)
    service: NetworkReportService = container.resolve(NetworkReportService)
    return service.report()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script: print the report for an edge file."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = get_config()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(config.observability)

    try:
        routes_path = resolve_routes_path(argv, config)
        print(solve_network(routes_path, config))
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 1
    except TrainsError as e:
        logger.error("Report failed", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
