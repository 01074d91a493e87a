"""Configuration module for bgp-query."""

from bgp_query.config.settings import (
    BGPSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "BGPSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
