"""Shared viewer state: the active ruleset and the log history."""

from __future__ import annotations

from logshade.locks import ReadWriteLock
from logshade.models import RuleSet


class RuleStore:
    """Holds the current RuleSet; readers always see a fully built one."""

    def __init__(self, rules: RuleSet | None = None) -> None:
        self._lock = ReadWriteLock()
        self._rules = rules if rules is not None else RuleSet()

    def get(self) -> RuleSet:
        with self._lock.read():
            return self._rules

    def swap(self, rules: RuleSet) -> RuleSet:
        """Replace the ruleset, returning the previous one."""
        with self._lock.write():
            previous, self._rules = self._rules, rules
        return previous


class LogBuffer:
    """Append-only history of raw input lines in arrival order."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._lines: list[str] = []

    def append(self, line: str) -> int:
        """Store a line and return the new buffer length."""
        with self._lock.write():
            self._lines.append(line)
            return len(self._lines)

    def snapshot(self) -> list[str]:
        """Copy of all lines, taken under a shared lock."""
        with self._lock.read():
            return list(self._lines)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._lines)


class ViewerState:
    """Owned state handed to the loader, renderer, ingestion loop and poller."""

    def __init__(self, rules: RuleSet | None = None) -> None:
        self.rules = RuleStore(rules)
        self.buffer = LogBuffer()
