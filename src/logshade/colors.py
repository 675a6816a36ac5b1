"""Keyword highlight color palette."""

from __future__ import annotations

from rich.style import Style

from logshade.models import Color

# Standard ANSI foreground colors; DEFAULT has no entry and renders unstyled.
_KEYWORD_STYLES: dict[Color, Style] = {
    Color.RED: Style(color="red"),
    Color.GREEN: Style(color="green"),
    Color.YELLOW: Style(color="yellow"),
    Color.BLUE: Style(color="blue"),
    Color.MAGENTA: Style(color="magenta"),
    Color.CYAN: Style(color="cyan"),
}


def keyword_style(color: Color) -> Style | None:
    """Return the highlight style for a keyword color, or None for DEFAULT."""
    return _KEYWORD_STYLES.get(color)
