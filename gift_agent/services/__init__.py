"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .llm_service import (
    ConfigurationError,
    RecommendationClient,
    RecommendationError,
    RequestError,
    ResponseFormatError,
)
from .profile_service import ProfileService, ProfileValidationError
from .prompt_builder import SYSTEM_PROMPT, build_prompt, build_user_message
from .recommendation_service import RecommendationService, RecommendationServiceError
from .reply_parser import parse_reply
from .settings_store import SettingsStore

__all__ = [
    "RecommendationClient",
    "RecommendationError",
    "ConfigurationError",
    "RequestError",
    "ResponseFormatError",
    "ProfileService",
    "ProfileValidationError",
    "SYSTEM_PROMPT",
    "build_prompt",
    "build_user_message",
    "RecommendationService",
    "RecommendationServiceError",
    "parse_reply",
    "SettingsStore",
]
