"""
Configuration Management for Personal Budget Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Display preferences (currency symbol, date formats) live here rather than
in the models so that stored data never depends on how it is shown.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from BUDGET_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )

    # Display
    currency_symbol: str = Field(
        default="₱",
        min_length=1,
        max_length=5,
        description="Symbol prefixed to every displayed amount"
    )
    date_input_format: str = Field(
        default="%Y-%m-%d",
        description="strptime format expected when entering a date"
    )
    date_display_format: str = Field(
        default="%m/%d/%Y",
        description="Short date form used in listings"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for audit log output"
    )
    log_json: bool = Field(
        default=False,
        description="Render audit logs as JSON instead of console lines"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Get the log level as a stdlib logging number."""
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()
