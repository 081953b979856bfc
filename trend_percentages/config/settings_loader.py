"""YAML settings loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from trend_percentages.errors import ConfigError

DEFAULT_SETTINGS: dict[str, dict[str, Any]] = {
    "trend_settings": {
        "percentage_decimals": 2,
        "default_lookback_hours": 24,
    },
    "csv_source": {
        "timestamp_formats": ["%Y-%m-%d %H:%M:%S.%f", "%Y-%m-%d %H:%M:%S"],
        "delimiter": ",",
        "columns": {
            "timestamp": "timestamp",
            "parameter": "parameter",
            "value": "value",
        },
    },
    "logging": {
        "level": "INFO",
        "format": "%(levelname)s:%(name)s:%(message)s",
    },
}


class SettingsLoader:
    """Loads and merges settings from YAML files."""

    @staticmethod
    def load(settings_path: str | Path) -> dict[str, Any]:
        """Load raw settings from a YAML file.

        Args:
            settings_path: Path to the YAML settings file.

        Returns:
            Parsed settings dictionary.

        Raises:
            FileNotFoundError: If settings file doesn't exist.
            ConfigError: If YAML is malformed, empty, or lacks ``trend_settings``.
        """
        path = Path(settings_path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed YAML in {settings_path}: {e}") from e

        if settings is None:
            raise ConfigError(f"Empty or invalid YAML file: {settings_path}")

        if not isinstance(settings, dict) or "trend_settings" not in settings:
            raise ConfigError("YAML must contain 'trend_settings' key")

        return settings

    @staticmethod
    def get_settings(raw: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Merge user settings over the defaults, section by section.

        Args:
            raw: Parsed settings dictionary.

        Returns:
            Settings dictionary with every known section present.
        """
        merged = {}
        for section, defaults in DEFAULT_SETTINGS.items():
            user_section = raw.get(section) or {}
            if not isinstance(user_section, dict):
                raise ConfigError(f"Section '{section}' must be a mapping")
            merged[section] = {**defaults, **user_section}

        # Column names are merged one level deeper so a file may rename one column.
        merged["csv_source"]["columns"] = {
            **DEFAULT_SETTINGS["csv_source"]["columns"],
            **((raw.get("csv_source") or {}).get("columns") or {}),
        }
        return merged


def load_settings(settings_path: str | Path | None = None) -> dict[str, dict[str, Any]]:
    """Load settings from a file, or return the defaults when no path is given."""
    if settings_path is None:
        return SettingsLoader.get_settings({})
    return SettingsLoader.get_settings(SettingsLoader.load(settings_path))
