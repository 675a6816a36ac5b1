"""Pydantic models for logshade."""

from __future__ import annotations

from collections.abc import Mapping  # noqa: TC003 - Pydantic needs this at runtime for model field resolution
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(StrEnum):
    """Display color for a highlighted keyword."""

    DEFAULT = "default"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"

    @classmethod
    def parse(cls, name: str) -> Color:
        """Resolve a color name case-insensitively, falling back to DEFAULT."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.DEFAULT


class RuleSet(BaseModel):
    """Active filter substring plus keyword highlight rules.

    Instances are frozen and ``highlights`` is a read-only mapping; a reload
    builds a new RuleSet and swaps it in.
    """

    model_config = ConfigDict(frozen=True)

    filter: str = ""
    highlights: Mapping[str, Color] = Field(default_factory=dict, validate_default=True)

    @field_validator("highlights", mode="after")
    @classmethod
    def freeze_highlights(cls, value: Mapping[str, Color]) -> Mapping[str, Color]:
        return MappingProxyType(dict(value))

    def matches(self, line: str) -> bool:
        """Check whether a line passes the filter (case-insensitive substring)."""
        if not self.filter:
            return True
        return self.filter.lower() in line.lower()
