"""Builds adapters and services from settings."""

import logging

from bookwise.adapters.identity.cognito import CognitoIdentityAdapter
from bookwise.adapters.identity.mock import MockIdentityAdapter
from bookwise.adapters.llm.bedrock import BedrockLLMAdapter
from bookwise.adapters.llm.mock import MockLLMAdapter
from bookwise.adapters.llm.ollama import OllamaLLMAdapter
from bookwise.adapters.llm.openai_adapter import OpenAILLMAdapter
from bookwise.adapters.recommender.keyword import KeywordRecommender
from bookwise.config import IdentityProvider, LLMProvider, Settings
from bookwise.domain.seed import MOCK_USERS
from bookwise.ports.identity import IdentityPort
from bookwise.ports.llm import LLMPort
from bookwise.services.recommendation import RecommendationService

logger = logging.getLogger(__name__)


def build_llm(settings: Settings) -> LLMPort:
    provider = settings.llm_provider
    if provider is LLMProvider.BEDROCK:
        return BedrockLLMAdapter(
            model_id=settings.bedrock_model_id,
            region=settings.aws_region,
            anthropic_version=settings.bedrock_anthropic_version,
        )
    if provider is LLMProvider.OPENAI:
        return OpenAILLMAdapter(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
        )
    if provider is LLMProvider.OLLAMA:
        return OllamaLLMAdapter(base_url=settings.ollama_base_url, model=settings.ollama_model)
    return MockLLMAdapter()


def build_identity(settings: Settings) -> IdentityPort:
    if settings.identity_provider is IdentityProvider.COGNITO:
        if not settings.cognito_client_id:
            raise ValueError("COGNITO_CLIENT_ID is required when IDENTITY_PROVIDER=cognito")
        return CognitoIdentityAdapter(
            client_id=settings.cognito_client_id,
            region=settings.cognito_region or settings.aws_region,
        )
    return MockIdentityAdapter(
        seed_users=list(MOCK_USERS), seed_password=settings.mock_user_password
    )


def build_recommendation_service(
    settings: Settings, llm: LLMPort | None = None
) -> RecommendationService:
    """Wire the recommendation service; ``llm`` overrides the configured provider."""
    return RecommendationService(
        llm=llm or build_llm(settings),
        fallback=KeywordRecommender(max_results=settings.max_recommendations),
        fallback_marker=settings.fallback_marker,
        max_results=settings.max_recommendations,
    )
