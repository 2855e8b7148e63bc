"""Centralised application configuration.

Settings are loaded from environment variables or the `.env` file in the
project root. Using pydantic's BaseSettings provides convenient parsing
and type checking. Each service instantiates its own Settings when it
starts up. Credential names used by the original frontend deployment
(``LF_PUBLIC_KEY``, ``NODE_ENV``) are accepted as aliases so the same
environment can be reused.
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
        populate_by_name=True,
    )

    # Deployment mode; "development" exposes error details in 500 responses
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "ENVIRONMENT", "NODE_ENV"),
    )

    # Gemini
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash",
        validation_alias=AliasChoices("GEMINI_MODEL", "GEMINI_FAST_MODEL"),
    )
    gemini_temperature: float | None = Field(
        default=None, validation_alias="GEMINI_TEMPERATURE"
    )
    gemini_max_output_tokens: int | None = Field(
        default=None, validation_alias="GEMINI_MAX_OUTPUT_TOKENS"
    )
    # No local timeout unless configured
    gemini_timeout_seconds: float | None = Field(
        default=None, validation_alias="GEMINI_TIMEOUT_SECONDS"
    )

    offline_mode: bool = Field(False, validation_alias="OFFLINE_MODE")

    # Logging/observability
    langfuse_enabled: bool = Field(True, validation_alias="LANGFUSE_ENABLED")
    langfuse_public_key: str = Field(
        "", validation_alias=AliasChoices("LANGFUSE_PUBLIC_KEY", "LF_PUBLIC_KEY")
    )
    langfuse_secret_key: str = Field(
        "", validation_alias=AliasChoices("LANGFUSE_SECRET_KEY", "LF_SECRET_KEY")
    )
    langfuse_host: str = Field(
        "https://cloud.langfuse.com", validation_alias="LANGFUSE_HOST"
    )
    trace_name: str = Field("search-triggered", validation_alias="TRACE_NAME")
    generation_name: str = Field("search-summary", validation_alias="GENERATION_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_prompts: bool = Field(True, validation_alias="LOG_PROMPTS")

    # Comma-separated list of allowed browser origins
    cors_origins: str = Field("", validation_alias="CORS_ORIGINS")

    @property
    def is_development(self) -> bool:
        return self.app_env.strip().lower() == "development"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip().rstrip("/") for o in self.cors_origins.split(",") if o.strip()]
