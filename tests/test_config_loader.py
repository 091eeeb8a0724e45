"""Tests for ConfigLoader."""

import json

import pytest

from mailwright.config import AppConfig, ConfigError, ConfigLoader


class TestConfigLoader:
    """Test configuration loading."""

    def test_load_defaults_when_file_missing(self, tmp_path):
        """Test defaults are used when the config file does not exist."""
        loader = ConfigLoader(tmp_path / "missing.json")
        config = loader.load_app_config()

        assert config == AppConfig()
        assert config.rendering.mime_version == "1.0"
        assert config.rendering.auto_boundary is True

    def test_load_from_file(self, tmp_path):
        """Test values from the config file override defaults."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text(
            json.dumps(
                {
                    "rendering": {"mime_version": "", "boundary_prefix": "b_", "boundary_length": 8},
                    "storage": {"audit_log_path": str(tmp_path / "audit.log")},
                }
            ),
            encoding="utf-8",
        )

        config = ConfigLoader(config_path).load_app_config()

        assert config.rendering.mime_version == ""
        assert config.rendering.boundary_prefix == "b_"
        assert config.rendering.boundary_length == 8
        assert config.storage.get_audit_log_path() == tmp_path / "audit.log"

    def test_config_is_cached(self, tmp_path):
        """Test the second call returns the cached instance."""
        loader = ConfigLoader(tmp_path / "missing.json")
        assert loader.load_app_config() is loader.load_app_config()

    def test_reload(self, tmp_path):
        """Test reload picks up file changes."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text(json.dumps({"rendering": {"boundary_length": 10}}), encoding="utf-8")
        loader = ConfigLoader(config_path)
        assert loader.load_app_config().rendering.boundary_length == 10

        config_path.write_text(json.dumps({"rendering": {"boundary_length": 12}}), encoding="utf-8")
        assert loader.reload().rendering.boundary_length == 12

    def test_invalid_json_raises(self, tmp_path):
        """Test malformed JSON raises ConfigError."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    @pytest.mark.parametrize(
        "rendering",
        [
            {"boundary_length": 0},
            {"boundary_length": 61},
            {"boundary_prefix": 'bad"prefix'},
            {"default_charset": "no-such-charset"},
        ],
    )
    def test_invalid_values_raise(self, tmp_path, rendering):
        """Test validation errors raise ConfigError."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text(json.dumps({"rendering": rendering}), encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    def test_empty_schema_version_raises(self, tmp_path):
        """Test schema_version is required."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text(json.dumps({"schema_version": ""}), encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    def test_prefix_and_length_exceeding_limit_raise(self, tmp_path):
        """Test prefix and random part together must fit in 70 characters."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text(
            json.dumps({"rendering": {"boundary_prefix": "=_a_long_prefix_value_", "boundary_length": 60}}),
            encoding="utf-8",
        )

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    def test_prefix_and_length_at_limit(self, tmp_path):
        """Test a combined length of exactly 70 is accepted."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text(
            json.dumps({"rendering": {"boundary_prefix": "p" * 10, "boundary_length": 60}}),
            encoding="utf-8",
        )

        config = ConfigLoader(config_path).load_app_config()
        assert len(config.rendering.boundary_prefix) + config.rendering.boundary_length == 70

    def test_non_object_json_raises(self, tmp_path):
        """Test a JSON document that is not an object raises ConfigError."""
        config_path = tmp_path / "app_config.json"
        config_path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigError):
            ConfigLoader(config_path).load_app_config()

    def test_environment_variable(self, tmp_path, monkeypatch):
        """Test $MAILWRIGHT_CONFIG is used when no explicit path is given."""
        config_path = tmp_path / "env_config.json"
        config_path.write_text(json.dumps({"rendering": {"boundary_length": 16}}), encoding="utf-8")
        monkeypatch.setenv("MAILWRIGHT_CONFIG", str(config_path))

        loader = ConfigLoader()

        assert loader.find_config_file() == config_path
        assert loader.load_app_config().rendering.boundary_length == 16

    def test_explicit_path_ignores_environment(self, tmp_path, monkeypatch):
        """Test an explicit path takes precedence over the environment."""
        monkeypatch.setenv("MAILWRIGHT_CONFIG", str(tmp_path / "env_config.json"))

        assert ConfigLoader(tmp_path / "app_config.json").candidate_paths() == [tmp_path / "app_config.json"]
