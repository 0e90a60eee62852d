"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from weatherdash.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherdash.config.schema import DashboardConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.weather.forecast_days == 7
        assert config.display.hourly_window == 12

    def test_unspecified_sections_keep_defaults(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.weather.timezone == "auto"
        assert config.session.discard_stale_results is True

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config == DashboardConfig()

    def test_no_path_uses_defaults(self):
        assert load_config(None) == DashboardConfig()

    def test_shipped_default_config(self):
        path = Path(__file__).parents[3] / "configs" / "default.yaml"
        config = load_config(path)
        assert config.weather.forecast_days == 10
        assert config.server.port == 8777

    def test_invalid_yaml_value(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("weather:\n  forecast_days: 40\n")
        with pytest.raises(ValidationError):
            load_config(path)


class TestGetConfigValue:
    def test_dotted_key(self, default_config: DashboardConfig):
        assert get_config_value(default_config, "weather.forecast_days") == 10

    def test_top_level(self, default_config: DashboardConfig):
        val = get_config_value(default_config, "display")
        assert val.hourly_window == 24

    def test_invalid_key(self, default_config: DashboardConfig):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(default_config, "nonexistent.key")


class TestSetConfigValue:
    def test_set_and_revalidate(self, default_config: DashboardConfig):
        new_config = set_config_value(default_config, "display.hourly_window", 12)
        assert new_config.display.hourly_window == 12
        assert default_config.display.hourly_window == 24

    def test_set_string_coercion(self, default_config: DashboardConfig):
        new_config = set_config_value(default_config, "weather.forecast_days", "5")
        assert new_config.weather.forecast_days == 5

    def test_set_bool_from_string(self, default_config: DashboardConfig):
        new_config = set_config_value(
            default_config, "session.discard_stale_results", "false"
        )
        assert new_config.session.discard_stale_results is False

    def test_set_timeout_from_string(self, default_config: DashboardConfig):
        new_config = set_config_value(default_config, "weather.timeout", "2.5")
        assert new_config.weather.timeout == 2.5

    def test_unknown_key_raises(self, default_config: DashboardConfig):
        with pytest.raises(KeyError):
            set_config_value(default_config, "weather.bogus", "1")

    def test_invalid_value_raises(self, default_config: DashboardConfig):
        with pytest.raises(ValidationError):
            set_config_value(default_config, "weather.forecast_days", 0)


class TestSaveConfig:
    def test_round_trip(self, tmp_path: Path, default_config: DashboardConfig):
        path = tmp_path / "saved.yaml"
        updated = set_config_value(default_config, "weather.timeout", "2.5")
        save_config(updated, path)
        assert load_config(path) == updated

    def test_keeps_backup(self, config_yaml_path: Path):
        original = config_yaml_path.read_text()
        config = set_config_value(load_config(config_yaml_path), "server.port", "9000")
        save_config(config, config_yaml_path)
        assert config_yaml_path.with_suffix(".yaml.bak").read_text() == original
        assert load_config(config_yaml_path).server.port == 9000
