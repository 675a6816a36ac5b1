"""Keyword matching and highlighting for log lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from logshade.colors import keyword_style

if TYPE_CHECKING:
    from collections.abc import Mapping

    from logshade.models import Color


def find_keyword(line: str, keyword: str) -> list[tuple[int, int]]:
    """Find non-overlapping case-insensitive literal occurrences, as (start, end) tuples."""
    results: list[tuple[int, int]] = []
    pattern = keyword.lower()
    pat_len = len(pattern)
    if pat_len == 0:
        return results

    text = line.lower()
    # lower() changes the length of a few characters; match case-sensitively then so offsets stay valid.
    if len(text) != len(line):
        text = line
        pattern = keyword

    start = 0
    while True:
        pos = text.find(pattern, start)
        if pos == -1:
            break
        results.append((pos, pos + pat_len))
        start = pos + pat_len
    return results


def find_highlights(line: str, highlights: Mapping[str, Color]) -> list[tuple[int, int, Color]]:
    """Resolve keyword matches into disjoint (start, end, color) spans.

    Earliest match wins; among matches starting at the same offset the
    longest wins. Matches overlapping an accepted span are dropped. Keywords
    differing only by case tie-break on the keyword text.
    """
    candidates: list[tuple[int, int, str, Color]] = []
    for keyword, color in highlights.items():
        candidates.extend((start, end, keyword, color) for start, end in find_keyword(line, keyword))
    candidates.sort(key=lambda m: (m[0], m[0] - m[1], m[2]))

    accepted: list[tuple[int, int, Color]] = []
    covered_to = 0
    for start, end, _keyword, color in candidates:
        if start < covered_to:
            continue
        accepted.append((start, end, color))
        covered_to = end
    return accepted


def highlight_line(line: str, highlights: Mapping[str, Color]) -> Text:
    """Build a rich Text for a line with every keyword occurrence styled."""
    text = Text(line, no_wrap=True)
    # Text drops control characters such as a bare CR; offsets must index the plain text.
    for start, end, color in find_highlights(text.plain, highlights):
        style = keyword_style(color)
        if style is not None:
            text.stylize(style, start, end)
    return text
