"""Configuration package."""

from booklog.config.settings import (
    BillingSettings,
    LoggingSettings,
    Settings,
    StorageSettings,
    ViewerSettings,
    default_viewer_args,
    get_settings,
)

__all__ = [
    "BillingSettings",
    "LoggingSettings",
    "Settings",
    "StorageSettings",
    "ViewerSettings",
    "default_viewer_args",
    "get_settings",
]
