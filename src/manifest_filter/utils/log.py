"""Logging setup shared by the CLI and the HTTP server.

Modules log through ``logging.getLogger(__name__)``; this module only
installs the root handler.  Rich is optional: without it a plain stderr
handler is used.
"""

from __future__ import annotations

import logging

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install a stderr handler on the root logger at *level*."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(level=level, format=_PLAIN_FORMAT, force=True)
        return

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
