"""
Runtime settings, overridable by environment variables prefixed with DFA_VALIDATORS_.
"""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DFA_VALIDATORS_",
        extra="ignore",
    )

    log_level: str = "WARNING"
    # render log lines as JSON instead of the console format
    log_json: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
