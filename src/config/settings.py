"""
Lexicon Duel - Application Settings

Loads configuration from environment variables (and an optional .env file)
using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Dictionary service
    dictionary_url: str | None = None
    dictionary_api_key: str | None = None
    dictionary_timeout: float = 10.0

    # Local word list, used when no service URL is configured
    word_list_path: str | None = None

    # Reduced-trust mode: accept every word without checking
    allow_unvalidated_words: bool = False

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
