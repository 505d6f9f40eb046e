"""12-factor configuration adapter using environment variables."""

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sncf_departures.adapters.navitia_api.constants import SNCF_BASE_URL


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SNCF API configuration
    sncf_api_key: str = Field(default="", description="SNCF (Navitia) API token")
    sncf_api_base_url: str = Field(
        default=SNCF_BASE_URL, description="Base URL of the Navitia coverage"
    )
    api_timeout_seconds: float = Field(
        default=10.0, description="Timeout for a single SNCF API request in seconds"
    )
    journeys_count: int = Field(
        default=10, description="Number of journeys requested per refresh"
    )

    # Live refresh
    refresh_interval_seconds: float = Field(
        default=30.0, description="Interval between journey refreshes in seconds"
    )
    channel_capacity: int = Field(
        default=5, description="Number of journey batches buffered for the UI loop"
    )
    tick_interval_ms: int = Field(default=100, description="UI refresh tick in milliseconds")

    # Station search
    search_debounce_ms: int = Field(
        default=350, description="Quiet period after the last keystroke before searching"
    )
    min_query_length: int = Field(
        default=2, description="Shortest query that triggers a station search"
    )

    # Saved route
    route_config_file: str = Field(
        default="config.toml", description="Path of the TOML file holding the saved route"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level name")
    log_file: str | None = Field(
        default=None, description="Write logs to this file instead of stderr"
    )

    @field_validator(
        "api_timeout_seconds", "refresh_interval_seconds", "tick_interval_ms", "journeys_count"
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate durations and counts are strictly positive."""
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @field_validator("channel_capacity", "min_query_length")
    @classmethod
    def validate_at_least_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @field_validator("search_debounce_ms")
    @classmethod
    def validate_debounce(cls, v: int) -> int:
        if v < 0:
            raise ValueError("search_debounce_ms must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @property
    def search_debounce_seconds(self) -> float:
        return self.search_debounce_ms / 1000

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a configuration that ignores any local ``.env`` file."""
        return cls(_env_file=None, **overrides)
