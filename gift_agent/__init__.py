"""Gift Agent package."""

from .models import EndpointConfig, Gender, GiftSuggestion, GenerationResult, Profile
from .services import (
    RecommendationClient,
    RecommendationService,
    build_prompt,
    parse_reply,
)

__all__ = [
    "EndpointConfig",
    "Gender",
    "Profile",
    "GiftSuggestion",
    "GenerationResult",
    "RecommendationClient",
    "RecommendationService",
    "build_prompt",
    "parse_reply",
]
