"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    fdc_api_key: str
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_proxy_url: str | None = None
    search_cache_ttl_seconds: int = 3600
    food_cache_ttl_seconds: int = 86400
    cache_max_entries: int = 2048
    regional_bias_preferred: float = 0.8
    regional_bias_default: float = 0.3
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_csv_tokens(raw: str | None) -> tuple[str, ...]:
    """Split a comma separated string into lowercase tokens."""
    if raw is None:
        return ()
    tokens: list[str] = []
    for chunk in raw.lower().split(","):
        value = chunk.strip()
        if value:
            tokens.append(value)
    return tuple(tokens)
