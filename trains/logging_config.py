"""Root logger setup for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; this
module is the one place that installs a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config


def setup_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger with a single stderr handler.

    Calling it again replaces the previous handlers instead of stacking
    new ones. Results go to stdout, so logs stay on stderr.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.level.upper())
