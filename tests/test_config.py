"""Tests for the YAML settings loader."""

import tempfile
from pathlib import Path

import pytest

from trend_percentages.config import DEFAULT_SETTINGS, SettingsLoader, load_settings
from trend_percentages.errors import ConfigError


@pytest.fixture
def write_yaml():
    """Write raw YAML text to a temporary file, removed after the test."""
    paths = []

    def _write(content: str) -> str:
        with tempfile.NamedTemporaryFile(mode='w', delete=False, suffix='.yaml') as f:
            f.write(content)
            paths.append(f.name)
        return f.name

    yield _write

    for path in paths:
        Path(path).unlink()


class TestLoadSettings:
    """Test loading and merging settings."""

    def test_defaults_without_file(self):
        settings = load_settings()

        assert settings["trend_settings"]["percentage_decimals"] == 2
        assert settings["trend_settings"]["default_lookback_hours"] == 24
        assert settings["csv_source"]["columns"] == DEFAULT_SETTINGS["csv_source"]["columns"]
        assert settings["logging"]["level"] == "INFO"

    def test_user_values_override_defaults(self, settings_yaml_file):
        settings = load_settings(settings_yaml_file)

        assert settings["trend_settings"]["percentage_decimals"] == 1
        assert settings["trend_settings"]["default_lookback_hours"] == 24
        assert settings["logging"]["level"] == "DEBUG"

    def test_single_column_override_keeps_other_columns(self, settings_yaml_file):
        columns = load_settings(settings_yaml_file)["csv_source"]["columns"]

        assert columns == {"timestamp": "timestamp", "parameter": "param_id", "value": "value"}

    def test_defaults_are_not_mutated(self, settings_yaml_file):
        load_settings(settings_yaml_file)

        assert DEFAULT_SETTINGS["csv_source"]["columns"]["parameter"] == "parameter"
        assert DEFAULT_SETTINGS["trend_settings"]["percentage_decimals"] == 2


class TestSettingsLoaderErrors:
    """Test rejection of unusable settings files."""

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            SettingsLoader.load("/nonexistent/settings.yaml")

    def test_empty_file(self, write_yaml):
        with pytest.raises(ConfigError, match="Empty"):
            SettingsLoader.load(write_yaml(""))

    def test_missing_trend_settings_key(self, write_yaml):
        with pytest.raises(ConfigError, match="trend_settings"):
            SettingsLoader.load(write_yaml("logging:\n  level: INFO\n"))

    def test_malformed_yaml(self, write_yaml):
        with pytest.raises(ConfigError, match="Malformed"):
            SettingsLoader.load(write_yaml("trend_settings: [unclosed\n"))

    def test_section_must_be_mapping(self, write_yaml):
        raw = SettingsLoader.load(write_yaml("trend_settings:\n  - 1\n"))

        with pytest.raises(ConfigError, match="mapping"):
            SettingsLoader.get_settings(raw)

    def test_example_settings_file_loads(self):
        example = Path(__file__).parent.parent / "settings.yaml"

        settings = load_settings(example)

        assert settings == load_settings()
