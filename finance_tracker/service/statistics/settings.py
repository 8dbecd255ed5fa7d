"""
Statistics Settings for the dashboard aggregations.

Environment variables use the STATS_ prefix:
    STATS_MONTHLY_WINDOW=6
    STATS_PERCENTAGE_DECIMALS=2
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StatisticsSettings(BaseSettings):
    """
    Configurable parameters for the dashboard statistics.

    All settings can be overridden via environment variables with STATS_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    monthly_window: int = Field(
        default=6,
        ge=1,
        description="Number of most recent months kept in the monthly series",
    )
    percentage_decimals: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal places used when rounding percentages for display",
    )


@lru_cache
def get_statistics_settings() -> StatisticsSettings:
    """Get cached statistics settings instance."""
    return StatisticsSettings()


statistics_settings = get_statistics_settings()
