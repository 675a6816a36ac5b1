"""Shared utilities for logshade."""

from __future__ import annotations

import math
import re

_DURATION_UNITS: dict[str, float] = {
    "ms": 0.001,
    "s": 1.0,
    "sec": 1.0,
    "m": 60.0,
    "min": 60.0,
    "h": 3600.0,
}

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)([a-z]+)")


def _sum_duration_parts(value: str) -> float | None:
    """Sum ``<number><unit>`` parts covering the whole string, or None if any part is invalid."""
    pos = 0
    total = 0.0
    for match in _DURATION_PART_RE.finditer(value):
        unit = match.group(2)
        if match.start() != pos or unit not in _DURATION_UNITS:
            return None
        total += float(match.group(1)) * _DURATION_UNITS[unit]
        pos = match.end()
    if pos != len(value):
        return None
    return total


def parse_duration(value: str) -> float:
    """Parse a duration into seconds.

    Supports:
    - Bare numbers: 2, 0.5 (seconds)
    - Unit suffixes: 500ms, 2s, 1m, 1h
    - Compound values: 1m30s, 1.5s
    """
    stripped = value.strip().lower()

    seconds: float | None
    try:
        seconds = float(stripped)
    except ValueError:
        seconds = _sum_duration_parts(stripped) if stripped else None

    if seconds is None:
        msg = f"Cannot parse duration: {value!r}"
        raise ValueError(msg)
    if not math.isfinite(seconds) or seconds <= 0:
        msg = f"Duration must be positive: {value!r}"
        raise ValueError(msg)
    return seconds
