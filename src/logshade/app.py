"""Process wiring: state, initial load, poller and ingestion."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from logshade.config import ConfigLoader
from logshade.ingest import IngestionLoop
from logshade.poller import DEFAULT_INTERVAL, ConfigPoller
from logshade.reader import iter_lines
from logshade.render import Renderer
from logshade.state import ViewerState

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from rich.console import Console

logger = logging.getLogger(__name__)


class LogShadeApp:
    """A single viewer instance owning its state and background poller."""

    def __init__(
        self,
        config_path: Path,
        *,
        interval: float = DEFAULT_INTERVAL,
        console: Console | None = None,
        exit_on_eof: bool = False,
    ) -> None:
        self.state = ViewerState()
        self.renderer = Renderer(self.state, console)
        self.loader = ConfigLoader(config_path, self.state.rules)
        self.poller = ConfigPoller(self.loader, self.renderer, interval)
        self.ingestion = IngestionLoop(self.state, self.renderer)
        self.exit_on_eof = exit_on_eof
        self._stop_event = threading.Event()

    def run(self, source: Iterable[str]) -> bool:
        """Ingest the source, then keep watching the rules file until stopped.

        Returns the ingestion result (False if the input failed mid-read).
        """
        # A failed initial read leaves the empty default ruleset in place.
        self.loader.load()
        self.poller.start()
        try:
            ok = self.ingestion.run(iter_lines(source), self._stop_event)
            if not self.exit_on_eof:
                logger.debug("Input exhausted, watching %s for changes", self.loader.path)
                self.wait()
            return ok
        finally:
            self.poller.stop()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until stop() is called. Returns True if stopped."""
        return self._stop_event.wait(timeout)

    def stop(self) -> None:
        self._stop_event.set()
        self.poller.stop()
