"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Site =====
    TITLE: str = os.getenv("TITLE", "pagemeta")
    DOMAIN: str = os.getenv("DOMAIN", "localhost:8000")
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en")

    # ===== Head Metadata =====
    TWITTER_CARD: str = os.getenv("TWITTER_CARD", "summary")
    DESCRIPTION_MAX_LENGTH: int = int(os.getenv("DESCRIPTION_MAX_LENGTH", "160"))

    # ===== Sitemap Settings =====
    SITEMAP_ENABLED: bool = os.getenv("SITEMAP_ENABLED", "true").lower() == "true"
    SITEMAP_INTERVAL_SECONDS: float = float(os.getenv("SITEMAP_INTERVAL_SECONDS", "5.0"))
    SITEMAP_CACHE_MS: int = int(os.getenv("SITEMAP_CACHE_MS", "600000"))  # 10 minutes
    SITEMAP_CHANGEFREQ: str = os.getenv("SITEMAP_CHANGEFREQ", "monthly")
    SITEMAP_GENERATION_TIMEOUT_SECONDS: float = float(os.getenv("SITEMAP_GENERATION_TIMEOUT_SECONDS", "30.0"))

    # ===== Logging & Debug =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def site_url(self) -> str:
        """Canonical https origin built from the configured domain."""
        return f"https://{self.DOMAIN}"

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
