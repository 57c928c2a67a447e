"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults provided for all non-secret settings so docker-compose works out of the box
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://chirpolly:chirpolly@db:5432/chirpolly"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Anthropic (Polly tutor model)
    anthropic_api_key: str = "sk-ant-placeholder"
    anthropic_max_retries: int = 3
    anthropic_timeout_seconds: int = 60
    anthropic_base_delay_ms: int = 1000
    anthropic_max_delay_ms: int = 30_000
    tutor_model: str = "claude-sonnet-4-5"
    tutor_max_tokens: int = 1024

    # Google Cloud Speech-to-Text / Text-to-Speech
    speech_default_language: str = "en-US"
    speech_recognition_model: str = "default"
    tts_speaking_rate: float = 1.0
    tts_pitch: float = 0.0

    # Marketplace
    platform_fee_percent: float = 0.20
    currency: str = "USD"
    upcoming_bookings_limit: int = 5
    slot_step_minutes: int = 30

    # Community
    feed_page_size: int = 20

    # Seed demo tutors on startup (empty database only)
    seed_demo_data: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
