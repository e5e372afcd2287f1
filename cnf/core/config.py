"""
Application configuration using pydantic-settings.

All settings are loaded from environment variables or .env file.

Nested config（如 StepDefaults / HttpConfig）使用 ``__`` 分隔符：
    STEP__FACTS_URL=http://facts.example.com/random?job=${JOB_NAME}
    STEP__REGEX_PATTERN=^(.+)$
    STEP__VAR_NAME=CNF
    HTTP__FOLLOW_REDIRECTS=true
"""
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StepDefaults(BaseModel):
    """Default build step fields（CLI 未指定參數時使用）。"""

    facts_url: str = ""
    regex_pattern: str = ""
    var_name: str = ""


class HttpConfig(BaseModel):
    """Outbound GET behaviour.

    不設定 timeout：使用 httpx 的預設值。
    """

    follow_redirects: bool = True
    verify: bool = True
    user_agent: str = "cnf-build-step/1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Build step defaults
    step: StepDefaults = StepDefaults()

    # Outbound HTTP
    http: HttpConfig = HttpConfig()

    # Fact handling
    fallback_fact: str = Field(
        default="There is no fact today! Chuck Norris is on Holiday!",
        description="Fact used when fetching or extracting fails.",
    )
    fact_log_prefix: str = Field(
        default="Chuck Norris Daily Fact: ",
        description="Prefix of the build log line announcing the fact.",
    )
    body_excerpt_length: int = Field(
        default=500,
        ge=1,
        description="Max characters of a response body quoted in error messages.",
    )

    # Application
    app_name: str = Field(
        default="Chuck Norris Facts",
        description="Application name",
    )
    app_debug: bool = Field(default=False, description="Debug mode")
    api_prefix: str = Field(default="/api/v1", description="API prefix")
    log_level: str = Field(default="INFO", description="Root log level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (Singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
