from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flood_control.domain.errors import ConfigError
from flood_control.domain.models import FloodConfig


class SettingsError(ConfigError):
    pass


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Flood control
    flood_window_sec: float = Field(default=10.0, ge=0, alias="FLOOD_WINDOW_SEC")
    flood_max_checks: int = Field(default=5, ge=0, alias="FLOOD_MAX_CHECKS")

    # Telegram (optional: without a token the driver runs the demo burst)
    bot_token: Optional[str] = Field(default=None, alias="BOT_TOKEN")
    notify_on_throttle: bool = Field(default=True, alias="NOTIFY_ON_THROTTLE")

    # Demo driver
    demo_user_id: int = Field(default=123, alias="DEMO_USER_ID")
    demo_checks: int = Field(default=6, ge=1, alias="DEMO_CHECKS")
    demo_interval_sec: float = Field(default=1.0, ge=0, alias="DEMO_INTERVAL_SEC")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        allowed_levels = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if level not in allowed_levels:
            raise ValueError(f"Invalid LOG_LEVEL={value!r}. Allowed: {sorted(allowed_levels)}")
        return level

    @field_validator("bot_token")
    @classmethod
    def _check_bot_token(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        v = value.strip()
        if not v:
            return None
        if ":" not in v:
            raise ValueError("BOT_TOKEN looks invalid (expected Telegram token format)")
        return v

    def to_flood_config(self) -> FloodConfig:
        return FloodConfig(window_sec=self.flood_window_sec, max_checks=self.flood_max_checks)


def load_settings(**overrides) -> AppSettings:
    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
