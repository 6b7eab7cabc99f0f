"""Configuration: YAML settings and logging setup."""

from __future__ import annotations

from weightplan.config.logging_config import configure_logging
from weightplan.config.settings import Settings, get_settings, reload_settings

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "reload_settings",
]
