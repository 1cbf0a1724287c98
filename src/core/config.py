"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    azure_document_intelligence_endpoint: str | None = Field(
        default=None, validation_alias="AZURE_DOCUMENT_INTELLIGENCE_ENDPOINT"
    )
    azure_document_intelligence_key: SecretStr | None = Field(
        default=None, validation_alias="AZURE_DOCUMENT_INTELLIGENCE_KEY"
    )
    document_model_id: str = Field(
        default="prebuilt-layout", validation_alias="DOCUMENT_MODEL_ID"
    )
    document_analysis_timeout: float | None = Field(
        default=None, validation_alias="DOCUMENT_ANALYSIS_TIMEOUT"
    )

    azure_openai_endpoint: str | None = Field(
        default=None, validation_alias="AZURE_OPENAI_ENDPOINT"
    )
    azure_openai_key: SecretStr | None = Field(
        default=None, validation_alias="AZURE_OPENAI_KEY"
    )
    azure_openai_deployment: str | None = Field(
        default=None, validation_alias="AZURE_OPENAI_DEPLOYMENT"
    )
    azure_openai_api_version: str = Field(
        default="2024-02-01", validation_alias="AZURE_OPENAI_API_VERSION"
    )

    qa_model: str = Field(default="gpt-4o", validation_alias="QA_MODEL")
    qa_model_provider: str | None = Field(
        default="azure_openai", validation_alias="QA_MODEL_PROVIDER"
    )
    qa_temperature: float = Field(default=0.3, validation_alias="QA_TEMPERATURE")
    qa_max_tokens: int | None = Field(default=1500, validation_alias="QA_MAX_TOKENS")
    qa_timeout: float | None = Field(default=None, validation_alias="QA_TIMEOUT")
    qa_max_retries: int = Field(default=2, validation_alias="QA_MAX_RETRIES")

    geometry_prefix_match: Literal["first", "longest"] = Field(
        default="first", validation_alias="GEOMETRY_PREFIX_MATCH"
    )

    upload_dir: str = Field(default="uploads", validation_alias="UPLOAD_DIR")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"], validation_alias="CORS_ORIGINS"
    )

    langsmith_tracing: bool = Field(default=False, validation_alias="LANGSMITH_TRACING")
    langsmith_project: str = Field(
        default="contract-qa", validation_alias="LANGSMITH_PROJECT"
    )
    langsmith_endpoint: str | None = Field(
        default=None, validation_alias="LANGSMITH_ENDPOINT"
    )
    langsmith_api_key: SecretStr | None = Field(
        default=None, validation_alias="LANGSMITH_API_KEY"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["Settings", "get_settings"]
