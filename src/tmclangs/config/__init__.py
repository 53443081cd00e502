"""Configuration loading for tmclangs."""

from .settings import ConfigError, LangsSettings, load_settings

__all__ = ["ConfigError", "LangsSettings", "load_settings"]
