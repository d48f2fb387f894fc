"""Application configuration via pydantic-settings."""

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Core
    env: Literal["development", "staging", "production"] = Field(
        default="development", alias="FINSIGHT_ENV"
    )
    debug: bool = Field(default=False, alias="FINSIGHT_DEBUG")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="FINSIGHT_LOG_LEVEL"
    )

    # HTTP server
    host: str = Field(default="0.0.0.0", alias="FINSIGHT_HOST")
    port: int = Field(default=3000, alias="FINSIGHT_PORT")

    # Base URL the terminal client talks to
    api_url: str = Field(default="http://localhost:3000", alias="FINSIGHT_API_URL")

    # SEC EDGAR (free API, requires an identifying User-Agent)
    sec_edgar_user_agent: str = Field(
        default="FinSight contact@example.com",
        description="User-Agent sent with every SEC request (name + contact email)",
    )
    sec_edgar_timeout: float | None = Field(
        default=None,
        description="Timeout in seconds for SEC requests (None = wait indefinitely)",
    )

    # Filing selection
    filings_lookback_days: int = Field(
        default=365,
        ge=1,
        description="Trailing window of filings to keep, in days",
    )
    filing_form_types: Annotated[list[str], NoDecode] = Field(
        default=["10-K", "10-Q", "8-K"],
        description="Form types kept in the filings response",
    )

    @field_validator("filing_form_types", mode="before")
    @classmethod
    def parse_filing_form_types(cls, v: str | list[str] | None) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                v = json.loads(v)
            else:
                v = [f.strip() for f in v.split(",") if f.strip()]
        return [f.upper() for f in v]

    # LLM Provider
    llm_provider: Literal["google", "anthropic", "openai"] = Field(default="google")

    # API Keys
    gemini_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
    )
    anthropic_api_key: SecretStr | None = Field(default=None)
    openai_api_key: SecretStr | None = Field(default=None)

    # OpenAI-compatible base URL
    openai_base_url: str | None = Field(default=None)

    # Model used for the web-search-grounded summary
    llm_model: str = Field(default="gemini-2.5-pro")

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    def get_llm_api_key(self) -> SecretStr | None:
        """Get the credential for the configured LLM provider."""
        if self.llm_provider == "google":
            return self.gemini_api_key
        if self.llm_provider == "anthropic":
            return self.anthropic_api_key
        return self.openai_api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
