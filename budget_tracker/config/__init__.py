"""Configuration package."""

from budget_tracker.config.settings import (
    LedgerSettings,
    get_settings,
)

__all__ = [
    "LedgerSettings",
    "get_settings",
]
