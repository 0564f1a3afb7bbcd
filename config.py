"""Global configuration values."""

import os
from pathlib import Path

# Default chat completion endpoint (can be overridden via env)
DEFAULT_API_URL = os.environ.get("GIFT_API_URL", "https://api.siliconflow.cn/v1/chat/completions")

# Default model identifier sent with every request
DEFAULT_MODEL = os.environ.get("GIFT_MODEL", "Pro/deepseek-ai/DeepSeek-V3.2")

# API key fallback when nothing has been saved yet
DEFAULT_API_KEY = os.environ.get("GIFT_API_KEY", "")

# Where the endpoint settings are persisted
SETTINGS_PATH = Path(
    os.environ.get("GIFT_SETTINGS_PATH", str(Path.home() / ".gift_agent" / "config.json"))
).expanduser()

# Request limits
MAX_TOKENS = 512

# None keeps the requests default (no timeout)
_timeout = os.environ.get("GIFT_REQUEST_TIMEOUT", "").strip()
REQUEST_TIMEOUT = float(_timeout) if _timeout else None
