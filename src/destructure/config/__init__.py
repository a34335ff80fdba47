"""Configuration package."""

from destructure.config.settings import (
    MatcherSettings,
    RewriteSettings,
    Settings,
    load_settings,
)

__all__ = [
    "MatcherSettings",
    "RewriteSettings",
    "Settings",
    "load_settings",
]
