"""Application configuration."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from moodjournal.core import mood_policies


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "moodjournal"
    debug: bool = False
    database_url: str = "sqlite:///./moodjournal.db"
    # Comma separated in the environment, e.g. "http://a.test,http://b.test"
    allowed_cors_origins: Annotated[list[str], NoDecode] = []

    # Business rules
    max_consecutive_same_mood: int = Field(default=mood_policies.MAX_CONSECUTIVE_SAME_MOOD, ge=1)
    enthusiastic_wave_threshold: int = Field(default=mood_policies.ENTHUSIASTIC_WAVE_THRESHOLD, ge=0)
    matching_hellos_limit: int = Field(default=mood_policies.MATCHING_HELLOS_LIMIT, ge=1)
    stats_batch_size: int = Field(default=mood_policies.STATS_BATCH_SIZE, ge=1)
    default_take: int = Field(default=mood_policies.DEFAULT_TAKE, ge=1)

    @field_validator("allowed_cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


settings = Settings()
