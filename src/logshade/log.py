"""Diagnostics logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "logshade"


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Route logshade diagnostics to stderr so they stay out of the rendered frame."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
