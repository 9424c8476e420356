"""Configuration for the kotlin-senior server."""

from kotlin_senior.config.settings import (
    LoggingSettings,
    ServerSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = ["LoggingSettings", "ServerSettings", "Settings", "get_settings", "reload_settings"]
