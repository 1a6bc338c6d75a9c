"""Application configuration using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMProvider(str, Enum):
    BEDROCK = "bedrock"
    OPENAI = "openai"
    OLLAMA = "ollama"
    MOCK = "mock"


class IdentityProvider(str, Enum):
    COGNITO = "cognito"
    MOCK = "mock"


class FallbackMarker(str, Enum):
    """When a fallback response carries ``"source": "fallback"``.

    ``legacy`` marks only responses produced after the model call itself
    failed; unparsable or invalid model output falls back silently.
    ``always`` marks every fallback response.
    """

    LEGACY = "legacy"
    ALWAYS = "always"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Bookwise"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Generative backend
    llm_provider: LLMProvider = LLMProvider.BEDROCK
    aws_region: str = "us-east-1"
    bedrock_model_id: str = "anthropic.claude-3-haiku-20240307-v1:0"
    bedrock_anthropic_version: str = "bedrock-2023-05-31"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"

    # Recommendations
    fallback_marker: FallbackMarker = FallbackMarker.LEGACY
    max_recommendations: int = Field(default=5, ge=1, le=5)

    # Identity
    identity_provider: IdentityProvider = IdentityProvider.MOCK
    cognito_region: str | None = None
    cognito_client_id: str | None = None
    mock_user_password: str = "bookwise-dev"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
