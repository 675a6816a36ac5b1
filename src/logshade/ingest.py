"""Ingestion loop: append each input line and re-render."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterable

    from logshade.render import Renderer
    from logshade.state import ViewerState

logger = logging.getLogger(__name__)


class IngestionLoop:
    """Consumes a line source until exhaustion, a read error, or a stop request."""

    def __init__(self, state: ViewerState, renderer: Renderer) -> None:
        self.state = state
        self.renderer = renderer

    def run(self, lines: Iterable[str], stop_event: threading.Event | None = None) -> bool:
        """Ingest lines, rendering after each one.

        Returns False if reading failed, True on end of input or stop.
        """
        try:
            for line in lines:
                if stop_event is not None and stop_event.is_set():
                    logger.debug("Ingestion stopped on request")
                    break
                self.state.buffer.append(line)
                self.renderer.render()
        except OSError as e:
            logger.error("Error reading logs: %s", e)
            return False

        logger.debug("Ingestion finished after %d line(s)", len(self.state.buffer))
        return True
