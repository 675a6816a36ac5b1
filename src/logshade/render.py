"""Full-screen re-rendering of the filtered, highlighted log buffer."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from rich.console import Console

from logshade.highlight import highlight_line

if TYPE_CHECKING:
    from rich.text import Text

    from logshade.models import RuleSet
    from logshade.state import ViewerState


def render_lines(rules: RuleSet, lines: list[str]) -> list[Text]:
    """Filter lines in arrival order and highlight the survivors."""
    return [highlight_line(line, rules.highlights) for line in lines if rules.matches(line)]


class Renderer:
    """Clears the screen and re-emits every buffered line that passes the filter."""

    def __init__(self, state: ViewerState, console: Console | None = None) -> None:
        self.state = state
        self.console = console or Console()
        self._output_lock = threading.Lock()
        self.frames = 0

    def render(self) -> None:
        # Output lock first, then one data lock at a time; never nested otherwise.
        with self._output_lock:
            rules = self.state.rules.get()
            lines = self.state.buffer.snapshot()
            texts = render_lines(rules, lines)

            self.console.clear()
            for text in texts:
                self.console.print(text, soft_wrap=True)
            self.frames += 1
