"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the rulegen CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - checksum derivation and the run summary
    - Debug (RULEGEN_DEBUG=1): DEBUG level - every file written or skipped
    """
    debug = bool(os.environ.get("RULEGEN_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("rulegen")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
