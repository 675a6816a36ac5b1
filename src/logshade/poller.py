"""Background polling of the rules file."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logshade.config import ConfigLoader
    from logshade.render import Renderer

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 2.0


class ConfigPoller:
    """Reloads the rules file every ``interval`` seconds until stopped."""

    def __init__(self, loader: ConfigLoader, renderer: Renderer, interval: float = DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            msg = f"Polling interval must be positive, got {interval}"
            raise ValueError(msg)
        self.loader = loader
        self.renderer = renderer
        self.interval = interval
        self.reloads = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def tick(self) -> bool:
        """Run one reload; re-render against the unchanged buffer if rules changed."""
        if not self.loader.load():
            return False
        self.reloads += 1
        logger.info("Config file reloaded.")
        self.renderer.render()
        return True

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self.tick()
            if self._stop_event.wait(self.interval):
                break

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="logshade-config-poller", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Signal the poller to exit and wait for its thread."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
