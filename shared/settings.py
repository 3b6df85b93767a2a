"""Centralised application configuration.

Settings are loaded from environment variables or the `.env` file in the
project root. Using pydantic's BaseSettings provides convenient parsing
and type checking. The gateway resolves its Settings through a FastAPI
dependency so tests can swap in their own instance; the UI reads only
``api_url``.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Ask AI suggestion webhook (the Vite name is accepted for existing .env files)
    ask_ai_webhook_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ASK_AI_WEBHOOK_URL", "VITE_ASK_AI_WEBHOOK_URL", "ask_ai_webhook_url"
        ),
    )
    # None waits for the webhook to answer, however long it takes
    ask_ai_timeout_seconds: float | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "ASK_AI_TIMEOUT_SECONDS", "ask_ai_timeout_seconds"
        ),
    )

    # UI/CORS
    api_url: str = Field(
        default="http://localhost:8000",
        validation_alias=AliasChoices("API_URL", "api_url"),
    )
    streamlit_app_origin: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STREAMLIT_APP_ORIGIN", "streamlit_app_origin"),
    )

    # Logging/observability
    langfuse_enabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("LANGFUSE_ENABLED", "langfuse_enabled"),
    )
    langfuse_host: str = Field(
        default="", validation_alias=AliasChoices("LANGFUSE_HOST", "langfuse_host")
    )
    langfuse_public_key: str = Field(
        default="",
        validation_alias=AliasChoices("LANGFUSE_PUBLIC_KEY", "langfuse_public_key"),
    )
    langfuse_secret_key: str = Field(
        default="",
        validation_alias=AliasChoices("LANGFUSE_SECRET_KEY", "langfuse_secret_key"),
    )
    tracing_backend: str = Field(
        default="langfuse",
        validation_alias=AliasChoices("TRACING_BACKEND", "tracing_backend"),
    )
    trace_name: str = Field(
        default="prompt-studio-trace",
        validation_alias=AliasChoices("TRACE_NAME", "trace_name"),
    )


def get_settings() -> Settings:
    """FastAPI dependency returning a freshly loaded Settings instance."""
    return Settings()
