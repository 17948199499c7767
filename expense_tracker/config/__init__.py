"""Configuration package."""

from expense_tracker.config.settings import (
    AppSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "Settings",
    "get_settings",
]
