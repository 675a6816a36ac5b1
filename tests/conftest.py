"""Shared test fixtures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

if TYPE_CHECKING:
    from pathlib import Path

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"
CLEAR = "\x1b[2J"

SAMPLE_LINES = [
    "2024-01-15 INFO: connection ok",
    "2024-01-15 ERROR: connection refused",
    "2024-01-15 DEBUG: Processing request",
    "2024-01-15 ERROR: Timeout occurred",
    "2024-01-15 WARN: High memory usage",
]


def make_console() -> Console:
    """An in-memory terminal that emits standard ANSI colors."""
    return Console(file=StringIO(), force_terminal=True, color_system="standard", no_color=False, width=200)


def console_output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture
def console() -> Console:
    return make_console()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a temporary rules file."""
    path = tmp_path / "config.txt"
    path.write_text("filter=ERROR\nconnection=red\n")
    return path


@pytest.fixture
def sample_log_file(tmp_path: Path) -> Path:
    """Create a temporary log file with sample content."""
    log_file = tmp_path / "test.log"
    log_file.write_text("\n".join(SAMPLE_LINES) + "\n")
    return log_file
