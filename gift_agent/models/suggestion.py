"""Gift suggestion data models."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any


@dataclass(frozen=True)
class GiftSuggestion:
    """A single parsed (name, feature) recommendation."""
    name: str
    feature: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "feature": self.feature}


@dataclass
class GenerationResult:
    """Outcome of one successful round trip."""
    suggestions: list[GiftSuggestion] = dataclass_field(default_factory=list)
    reply_text: str = ""

    @property
    def is_empty(self) -> bool:
        """True when the reply contained no parseable suggestion."""
        return not self.suggestions

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "gifts": [s.to_dict() for s in self.suggestions],
            "content": self.reply_text,
        }
