"""Application configuration, bound from environment variables (and an optional .env file)."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite+aiosqlite:///./boardgames.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # Comma-separated list of allowed origins
    CORS_ORIGINS: str = "*"

    # Name lookup / enrichment (BoardGameGeek XML API 2)
    LOOKUP_BASE_URL: str = "https://boardgamegeek.com/xmlapi2"
    LOOKUP_API_TOKEN: Optional[str] = None
    LOOKUP_TIMEOUT_SECONDS: float = 10.0

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
