"""Configuration management for Voice Fingerprint."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VFP_",
    )

    # Sample validation
    min_sample_words: int = Field(default=50, description="Reject samples shorter than this")
    max_sample_words: int = Field(default=5000, description="Reject samples longer than this")
    max_total_words: int = Field(default=60000, description="Hard cap on words per profile build")

    # Aggregation
    min_samples: int = Field(default=3, description="Samples required to activate a profile")
    optimal_samples: int = Field(default=5, description="Samples needed to lift the confidence ceiling")

    # Concurrency
    max_workers: int = Field(default=4, description="Threads used for per-sample analysis")
    analysis_timeout: float = Field(default=30.0, description="Seconds before profile creation is abandoned")

    # Lifecycle
    stale_after_days: int = Field(default=90, description="Inactivity window before a profile goes stale")

    log_level: str = Field(default="WARNING")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
