"""Configuration module for the dictionary lookup application"""

from .settings import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
    OutputSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "ApiSettings",
    "OutputSettings",
    "LoggingSettings",
    "settings",
]
