"""Logging setup for the CLI.

Library modules only create loggers (`logging.getLogger(__name__)`); the
entry point decides where records go. Rich renders them on stderr so they
never mix with JSON written to stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once.

    Repeated calls (tests, several commands in one process) are no-ops.
    """

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    # httpx logs full request URLs at INFO, reset tokens included.
    logging.getLogger("httpx").setLevel(logging.WARNING)
