"""Application configuration via Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RGB = tuple[int, int, int]

DEFAULT_PALETTE: list[RGB] = [
    (255, 80, 80),  # red
    (255, 160, 0),  # orange
    (255, 220, 0),  # yellow
    (0, 190, 255),  # sky
    (80, 220, 160),  # mint
    (180, 120, 255),  # purple
    (255, 100, 200),  # pink
]


class NetSettings(BaseSettings):
    """Reference net used for calibration."""

    model_config = SettingsConfigDict(env_prefix="NET_")

    # Men's beach volleyball net height in metres
    height_m: float = Field(default=2.43, gt=0, allow_inf_nan=False)


class RecordingSettings(BaseSettings):
    """Rep recording settings."""

    model_config = SettingsConfigDict(env_prefix="RECORDING_")

    palette: list[RGB] = Field(default_factory=lambda: list(DEFAULT_PALETTE))
    frame_step_s: float = Field(default=1 / 30, gt=0)

    @field_validator("palette")
    @classmethod
    def _palette_not_empty(cls, value: list[RGB]) -> list[RGB]:
        if not value:
            raise ValueError("palette must contain at least one colour")
        return value


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    net: NetSettings = Field(default_factory=NetSettings)
    recording: RecordingSettings = Field(default_factory=RecordingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance."""
    return Settings()
