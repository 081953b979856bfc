"""YAML settings for the calculator, trend sources and logging."""

from .settings_loader import DEFAULT_SETTINGS, SettingsLoader, load_settings

__all__ = [
    "DEFAULT_SETTINGS",
    "SettingsLoader",
    "load_settings",
]
