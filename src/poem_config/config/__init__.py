"""Library settings."""

from .settings import CONFIG_ENV, CONFIG_FILENAME, LogLevel, Settings, build_settings

__all__ = [
    "CONFIG_ENV",
    "CONFIG_FILENAME",
    "LogLevel",
    "Settings",
    "build_settings",
]
