"""Engine configuration settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PacerSettings(BaseSettings):
    """Pacing defaults loaded from environment variables (``SPRITZER_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="SPRITZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pacing
    default_wpm: int = Field(default=500, gt=0)

    # Layout
    max_word_length: int = Field(default=13, ge=2)
    chars_left_of_pivot: int = Field(default=3, ge=1)
    break_at_hyphens: bool = True
    pivot_color: str = "red"

    # Runtime
    loop_thread_name: str = "spritzer-loop"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in allowed:
            raise ValueError(f"Must be one of {allowed}")
        return level


@lru_cache
def get_settings() -> PacerSettings:
    """Return cached pacing settings."""
    return PacerSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
