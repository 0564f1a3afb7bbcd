"""Endpoint configuration model."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field, replace
from typing import Any

from config import DEFAULT_API_KEY, DEFAULT_API_URL, DEFAULT_MODEL


@dataclass(frozen=True)
class EndpointConfig:
    """Connection details for the remote completion service."""
    url: str = DEFAULT_API_URL
    api_key: str = dataclass_field(default=DEFAULT_API_KEY, repr=False)
    model: str = DEFAULT_MODEL

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def masked_key(self) -> str:
        """API key with everything but the last four characters hidden."""
        if not self.has_api_key:
            return ""
        tail = self.api_key[-4:] if len(self.api_key) > 8 else ""
        return "*" * 8 + tail

    def with_updates(self, **changes: Any) -> "EndpointConfig":
        """Copy with the given non-empty fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v})

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted dictionary layout."""
        return {
            "apiUrl": self.url,
            "apiKey": self.api_key,
            "model": self.model,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EndpointConfig":
        """Create from dictionary; missing keys fall back to defaults."""
        return cls(
            url=data.get("apiUrl") or DEFAULT_API_URL,
            api_key=data.get("apiKey") or "",
            model=data.get("model") or DEFAULT_MODEL,
        )
