"""Input line sources (file or stdin)."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def open_input(path: Path | None) -> TextIO:
    """Open the input file, or return stdin when no path is given.

    Lines are split on LF only and undecodable bytes become U+FFFD, so any
    byte stream is readable. Raises OSError if an explicit path cannot be opened.
    """
    if path is None:
        stdin = sys.stdin
        if isinstance(stdin, io.TextIOWrapper):
            stdin.reconfigure(errors="replace", newline="\n")
        return stdin
    return path.open(encoding="utf-8", errors="replace", newline="\n")


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines without their trailing newline (LF or CRLF)."""
    for raw_line in stream:
        yield raw_line.removesuffix("\n").removesuffix("\r")
