from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trainlog.metrics.constants import ACWR_HISTORY_WEEKS


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="Optional rotating log file for CLI runs",
    )
    log_rotation: str = Field(default="10 MB", validation_alias="LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="LOG_RETENTION")
    weekly_goal_km: float = Field(
        default=20.0,
        validation_alias="WEEKLY_GOAL_KM",
        description="Default weekly running goal used when --goal is not given",
    )
    weeks_back: int = Field(
        default=4,
        validation_alias="WEEKS_BACK",
        description="Default number of week buckets for weekly reports",
    )
    acwr_history_weeks: int = Field(
        default=ACWR_HISTORY_WEEKS,
        validation_alias="ACWR_HISTORY_WEEKS",
        description="Number of points in the ACWR trend chart",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("weekly_goal_km")
    @classmethod
    def validate_weekly_goal(cls, value: float) -> float:
        """Negative goals fall back to 0 (goal progress then reads 0%)."""
        if value < 0:
            logger.warning(f"WEEKLY_GOAL_KM must be >= 0, got {value}. Defaulting to 0.")
            return 0.0
        return value

    @field_validator("weeks_back", "acwr_history_weeks")
    @classmethod
    def validate_week_count(cls, value: int) -> int:
        """Week counts below 1 are clamped to 1."""
        if value < 1:
            logger.warning(f"Week count must be >= 1, got {value}. Using 1.")
            return 1
        return value


settings = Settings()
