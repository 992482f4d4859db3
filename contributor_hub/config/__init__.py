"""Configuration package."""

from contributor_hub.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
