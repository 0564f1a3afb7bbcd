"""Settings Store - Persists the endpoint configuration as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from config import SETTINGS_PATH
from gift_agent.models import EndpointConfig

logger = logging.getLogger(__name__)


class SettingsStore:
    """Key-value store for the EndpointConfig, backed by one JSON file."""

    def __init__(self, path: Path | str = SETTINGS_PATH):
        self.path = Path(path)

    def load(self) -> EndpointConfig | None:
        """Load the saved config, or None if absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("[settings] failed to load %s: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            logger.error("[settings] ignoring %s: expected a JSON object", self.path)
            return None
        return EndpointConfig.from_dict(data)

    def save(self, config: EndpointConfig) -> None:
        """Write the config, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(config.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.info("[settings] saved url=%s model=%s", config.url, config.model)

    def load_or_default(self) -> EndpointConfig:
        return self.load() or EndpointConfig()
