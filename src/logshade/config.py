"""Rules file loading: parse flat key=value lines into a RuleSet."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from logshade.models import Color, RuleSet
from logshade.state import RuleStore

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.txt")
FILTER_KEY = "filter"


def parse_rules(text: str) -> RuleSet:
    """Parse rules file content.

    Each line is split on the first ``=`` into a trimmed key and value.
    Lines without ``=`` are skipped. The ``filter`` key sets the filter
    substring; any other key is a highlight keyword mapped to a color.
    Later occurrences of a key win.
    """
    filter_text = ""
    highlights: dict[str, Color] = {}

    for raw_line in text.split("\n"):
        line = raw_line.removesuffix("\r")
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key, value = key.strip(), value.strip()

        if key == FILTER_KEY:
            filter_text = value
        elif key:
            highlights[key] = Color.parse(value)

    return RuleSet(filter=filter_text, highlights=highlights)


class ConfigLoader:
    """Reads the rules file and swaps a new RuleSet into the store on change."""

    def __init__(self, path: Path, store: RuleStore) -> None:
        self.path = path
        self.store = store
        self._last_content: bytes | None = None

    def load(self) -> bool:
        """Reload the rules file. Returns True only if the store was replaced."""
        try:
            content = self.path.read_bytes()
        except OSError as e:
            logger.error("Error reading config file %s: %s", self.path, e)
            return False

        if content == self._last_content:
            return False

        try:
            rules = parse_rules(content.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as e:
            logger.error("Error parsing config file %s: %s", self.path, e)
            return False

        self._last_content = content
        self.store.swap(rules)
        logger.debug(
            "Loaded rules from %s: filter=%r, %d highlight(s)", self.path, rules.filter, len(rules.highlights)
        )
        return True
