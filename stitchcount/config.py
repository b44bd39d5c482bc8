"""Configuration loading for the stitch counter.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stitchcount.core.models import GestureThresholds


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Run mode
    run_mode: Literal["web", "cli"] = Field(
        default="web",
        description="Run mode: browser page or interactive terminal",
    )
    input_mode: Literal["auto", "pointer", "touch"] = Field(
        default="auto",
        description="Input tier; auto follows the device's touch capability",
    )

    # State store configuration
    store_backend: Literal["sqlite", "json_file"] = Field(
        default="sqlite",
        description="State store backend type",
    )
    store_sqlite_path: str = Field(
        default="./data/stitchcount.db",
        description="SQLite database file path",
    )
    store_json_path: str = Field(
        default="./data/stitchcount.json",
        description="JSON state file path",
    )
    storage_key: str = Field(
        default="stitchCounter",
        description="Key of the slot holding the counter record",
    )

    # Gesture timing
    double_tap_window_ms: int = Field(
        default=300,
        description="Two taps closer than this reset the digit",
    )
    swipe_min_distance_px: float = Field(
        default=30,
        description="Vertical travel above which a touch is a swipe",
    )
    swipe_max_duration_ms: int = Field(
        default=300,
        description="Touches slower than this are never swipes",
    )
    tap_max_distance_px: float = Field(
        default=10,
        description="Vertical travel below which a touch is a tap",
    )
    flash_duration_ms: int = Field(
        default=100,
        description="How long a flashed element stays lit",
    )

    # Web configuration
    web_host: str = Field(
        default="127.0.0.1",
        description="Host to serve the counter page on",
    )
    web_port: int = Field(
        default=8080,
        description="Port to serve the counter page on",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator(
        "double_tap_window_ms",
        "swipe_min_distance_px",
        "swipe_max_duration_ms",
        "tap_max_distance_px",
        "flash_duration_ms",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Ensure timing and distance limits are positive."""
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("web_port")
    @classmethod
    def validate_web_port(cls, v: int) -> int:
        """Ensure web port is in valid range."""
        if v <= 0 or v > 65535:
            raise ValueError("web_port must be between 1 and 65535")
        return v

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("storage_key must be a non-empty string")
        return v

    @model_validator(mode="after")
    def validate_tap_below_swipe(self) -> "Settings":
        """A tap must travel less than a swipe."""
        if self.tap_max_distance_px > self.swipe_min_distance_px:
            raise ValueError("tap_max_distance_px cannot exceed swipe_min_distance_px")
        return self

    def gesture_thresholds(self) -> GestureThresholds:
        return GestureThresholds(
            double_tap_window_ms=self.double_tap_window_ms,
            swipe_min_distance_px=self.swipe_min_distance_px,
            swipe_max_duration_ms=self.swipe_max_duration_ms,
            tap_max_distance_px=self.tap_max_distance_px,
        )


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
