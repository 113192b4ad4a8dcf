"""Configuration subpackage."""

from hipchat_resource.config.config import (
    AppSettings,
    BuildContext,
    HttpSettings,
    LoggingSettings,
    Settings,
    get_build_context,
    get_settings,
)

__all__ = [
    "AppSettings",
    "BuildContext",
    "HttpSettings",
    "LoggingSettings",
    "Settings",
    "get_build_context",
    "get_settings",
]
