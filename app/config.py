"""
Application settings - pydantic-settings configuration.

Values are read from environment variables prefixed with ``POKEDEX_``
(or a local ``.env`` file) and fall back to the defaults below.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Upstream PokeAPI
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    http_timeout: float = 5.0  # seconds, per upstream request
    max_concurrency: int = 10  # simultaneous detail fetches per list page

    # Placeholder login (not a security boundary)
    auth_username: str = "admin"
    auth_password: str = "admin"

    # HTTP surface
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Local server (pokedex-proxy console script)
    host: str = "127.0.0.1"
    port: int = 3001

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
