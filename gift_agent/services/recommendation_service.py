"""Recommendation Service - One gift generation cycle.

This module handles:
- Running PromptBuilder -> RecommendationClient -> ReplyParser
- Remembering the last submitted profile for regeneration
- Holding the current suggestion list (replaced, never merged)

Interface Contract:
- generate(profile, config) -> GenerationResult
- regenerate(config) -> GenerationResult
- Pipeline failures propagate as RecommendationError subclasses;
  suggestions are cleared, the profile is kept
- regenerate() without a prior profile raises RecommendationServiceError
"""

from __future__ import annotations

import logging

from gift_agent.models import EndpointConfig, GenerationResult, GiftSuggestion, Profile
from gift_agent.services.llm_service import ConfigurationError
from gift_agent.services.prompt_builder import build_prompt
from gift_agent.services.reply_parser import parse_reply

logger = logging.getLogger(__name__)


class RecommendationServiceError(Exception):
    """Raised when the service is used out of order."""
    pass


class RecommendationService:
    """Service for generating and regenerating gift suggestions."""

    def __init__(self, client=None, last_profile: Profile | None = None):
        """Initialize with optional dependencies.

        Args:
            client: RecommendationClient to send through. If None, creates default.
            last_profile: Profile restored from a previous request (web session).
        """
        self._client = client
        self.last_profile = last_profile
        self.suggestions: list[GiftSuggestion] = []

    @property
    def client(self):
        """Lazy load the HTTP client."""
        if self._client is None:
            from gift_agent.services.llm_service import RecommendationClient
            self._client = RecommendationClient()
        return self._client

    def generate(self, profile: Profile, config: EndpointConfig) -> GenerationResult:
        """Generate suggestions for a newly submitted profile.

        Args:
            profile: Validated recipient profile
            config: Endpoint snapshot

        Returns:
            GenerationResult: Parsed suggestions plus the raw reply

        Raises:
            ConfigurationError: If no API key is configured
            RequestError: If the request fails
            ResponseFormatError: If the reply has an unexpected shape
        """
        self.last_profile = profile
        return self._run(profile, config)

    def regenerate(self, config: EndpointConfig) -> GenerationResult:
        """Rerun the pipeline with the last submitted profile.

        Raises:
            RecommendationServiceError: If nothing has been submitted yet
        """
        if self.last_profile is None:
            raise RecommendationServiceError("没有可用的收礼人信息，请先提交表单")
        return self._run(self.last_profile, config)

    def _run(self, profile: Profile, config: EndpointConfig) -> GenerationResult:
        self.suggestions = []
        if not config.has_api_key:
            raise ConfigurationError("请先配置API Key")

        prompt = build_prompt(profile)
        reply = self.client.generate(config, prompt.system, prompt.user)
        suggestions = parse_reply(reply)

        if suggestions:
            logger.info("[recommend] suggestions=%d", len(suggestions))
        else:
            logger.info("[recommend] could not parse reply: %s", reply)

        self.suggestions = suggestions
        return GenerationResult(suggestions=suggestions, reply_text=reply)
