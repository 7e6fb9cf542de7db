from __future__ import annotations

import json
from typing import Annotated, ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # env: dev|stage|prod
    APP_ENV: str = "dev"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    # Naive datetimes coming from forms are read in this zone
    DEFAULT_TIMEZONE: str = "UTC"

    # Session durations (minutes)
    SESSION_MIN_DURATION_MINUTES: int = 15
    SESSION_MAX_DURATION_MINUTES: int = 480  # 8h
    SESSION_DEFAULT_DURATION_MINUTES: int = 60
    SESSION_STATUS_WINDOW_MINUTES: int = 60
    DURATION_OPTIONS: Annotated[list[int], NoDecode] = Field(default_factory=lambda: [15, 30, 45, 60, 75, 90, 120, 150, 180])

    # Booking calendar
    SLOT_START_HOUR: int = 9
    SLOT_END_HOUR: int = 21
    SLOT_INTERVAL_MINUTES: int = 30
    BOOKING_BUFFER_MINUTES: int = 0

    ALLOWED_ENVS: ClassVar[set[str]] = {"dev", "stage", "prod"}

    @field_validator("APP_ENV")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        if value not in cls.ALLOWED_ENVS:
            raise ValueError(f"APP_ENV must be one of {cls.ALLOWED_ENVS}, got '{value}'")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL '{value}' is not a valid logging level")
        return level

    @field_validator("DEFAULT_TIMEZONE")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"DEFAULT_TIMEZONE '{value}' is not a valid IANA timezone") from exc
        return value

    @field_validator("SESSION_MAX_DURATION_MINUTES")
    @classmethod
    def validate_duration_bounds(cls, value: int, info: ValidationInfo) -> int:
        minimum = info.data.get("SESSION_MIN_DURATION_MINUTES")
        if minimum is not None and value < minimum:
            raise ValueError(
                f"SESSION_MAX_DURATION_MINUTES ({value}) must not be lower than "
                f"SESSION_MIN_DURATION_MINUTES ({minimum})"
            )
        return value

    @field_validator("SLOT_START_HOUR", "SLOT_END_HOUR")
    @classmethod
    def validate_hour(cls, value: int, info: ValidationInfo) -> int:
        if value < 0 or value > 24:
            raise ValueError(f"{info.field_name} must be between 0 and 24")
        return value

    @field_validator("DURATION_OPTIONS", mode="before")
    @classmethod
    def parse_duration_options(cls, value: str | list[int] | None) -> list[int]:
        """Parse duration options from a JSON array or a comma separated string."""
        if value is None:
            return []

        if isinstance(value, list):
            return value

        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return [int(item.strip()) for item in value.split(",") if item.strip()]


settings = Settings()
