"""Data models - Pure data structures with no business logic."""

from .endpoint import EndpointConfig
from .profile import Gender, Profile
from .suggestion import GenerationResult, GiftSuggestion

__all__ = [
    "EndpointConfig",
    "Gender",
    "Profile",
    "GiftSuggestion",
    "GenerationResult",
]
