import logging
from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    random_seed: int | None = Field(default=None, alias="PITCH_RANDOM_SEED")
    simulated_latency_seconds: float = Field(default=0.0, ge=0.0, alias="PITCH_SIMULATED_LATENCY_SECONDS")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, alias="LOG_LEVEL")

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        self.log_level = self.log_level.strip().upper() or DEFAULT_LOG_LEVEL
        if self.log_level not in logging.getLevelNamesMapping():
            self.log_level = DEFAULT_LOG_LEVEL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
