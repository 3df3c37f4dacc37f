"""
Tests for configuration loading and error types.
"""

import json
import os
from datetime import timedelta

import pytest

from utilkit.config import (
    Config,
    get_config,
    load_config_from_env,
    parse_duration_string,
    set_config,
)
from utilkit.errors import (
    ConfigError,
    ErrorCode,
    InvalidDateError,
    UnsupportedKindError,
    UtilKitError,
)


class TestDurations:
    """Duration parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("500ms", timedelta(milliseconds=500)),
        ("30s", timedelta(seconds=30)),
        ("1.5", timedelta(seconds=1.5)),
        ("5m", timedelta(minutes=5)),
        ("2h", timedelta(hours=2)),
        ("1d", timedelta(days=1)),
        (" 10 S ", timedelta(seconds=10)),
    ])
    def test_valid(self, text, expected):
        assert parse_duration_string(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-1s", "5 weeks"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_duration_string(text)


class TestConfig:
    """Config construction and validation."""

    def test_defaults(self):
        config = Config()
        assert config.debounce_wait == 1.0
        assert config.throttle_wait == 1.0
        assert config.date_format == "yyyy-MM-dd"
        assert config.storage_backend == "file"
        assert config.validate()

    def test_duration_strings(self):
        config = Config(debounce_wait="250ms", throttle_wait=2)
        assert config.debounce_wait == 0.25
        assert config.throttle_wait == 2.0

    def test_bad_duration(self):
        with pytest.raises(ConfigError) as exc_info:
            Config(debounce_wait="soon")
        assert exc_info.value.metadata["field"] == "debounce_wait"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("UTILKIT_DEBOUNCE_WAIT", "500ms")
        monkeypatch.setenv("UTILKIT_DATE_FORMAT", "dd/MM/yyyy")
        monkeypatch.setenv("UTILKIT_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("UTILKIT_UNRELATED", "ignored")

        config = Config.from_env()
        assert config.debounce_wait == 0.5
        assert config.date_format == "dd/MM/yyyy"
        assert config.storage_backend == "memory"
        assert config.storage_path == str(tmp_path / "local_storage.json")

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "utilkit.json"
        path.write_text(json.dumps({"throttle_wait": "3s", "storage_backend": "memory"}))
        config = Config.from_file(str(path))
        assert config.throttle_wait == 3.0
        assert config.storage_backend == "memory"

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "utilkit.yaml"
        path.write_text("debounce_wait: 0.2\nredis_url: redis://localhost:6379/1\nstorage_backend: redis\n")
        config = Config.from_file(str(path))
        assert config.debounce_wait == 0.2
        assert config.redis_url == "redis://localhost:6379/1"
        assert config.validate()

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert Config.from_file(str(path)) == Config()

    @pytest.mark.parametrize("name,content", [
        ("missing.json", None),
        ("config.toml", "a = 1"),
        ("broken.json", "{"),
        ("list.yaml", "- 1\n- 2\n"),
    ])
    def test_bad_files(self, tmp_path, name, content):
        path = tmp_path / name
        if content is not None:
            path.write_text(content)
        with pytest.raises(ConfigError):
            Config.from_file(str(path))

    @pytest.mark.parametrize("kwargs,field", [
        ({"debounce_wait": -1}, "debounce_wait"),
        ({"throttle_wait": -0.1}, "throttle_wait"),
        ({"date_format": ""}, "date_format"),
        ({"storage_backend": ""}, "storage_backend"),
        ({"storage_backend": "file", "storage_path": ""}, "storage_path"),
        ({"storage_backend": "redis"}, "redis_url"),
    ])
    def test_validate(self, kwargs, field):
        with pytest.raises(ConfigError) as exc_info:
            Config(**kwargs).validate()
        assert exc_info.value.metadata["field"] == field

    def test_backend_name_is_normalised(self, monkeypatch):
        """Backend names are case-insensitive, like the store factory."""
        assert Config(storage_backend=" Memory ").storage_backend == "memory"
        monkeypatch.setenv("UTILKIT_STORAGE_BACKEND", "REDIS")
        monkeypatch.setenv("UTILKIT_REDIS_URL", "redis://localhost:6379/0")
        assert get_config().storage_backend == "redis"

    def test_registered_backend_names_are_accepted(self):
        """Names outside the built-in backends are left to the factory registry."""
        config = Config(storage_backend="custom")
        assert config.validate()
        set_config(config)
        assert get_config() is config

    def test_to_dict(self):
        data = Config(storage_backend="memory").to_dict()
        assert data["storage_backend"] == "memory"
        assert Config.from_dict(data) == Config(storage_backend="memory")


class TestGlobalConfig:
    """Process-wide configuration."""

    def test_loaded_once_from_env(self, monkeypatch):
        monkeypatch.setenv("UTILKIT_THROTTLE_WAIT", "2s")
        config = get_config()
        assert config.throttle_wait == 2.0
        monkeypatch.setenv("UTILKIT_THROTTLE_WAIT", "5s")
        assert get_config() is config

    def test_set_config(self):
        custom = Config(date_format="yyyy", storage_backend="memory")
        set_config(custom)
        assert get_config() is custom
        set_config(None)
        assert get_config() is not custom

    def test_set_config_validates(self):
        with pytest.raises(ConfigError):
            set_config(Config(storage_backend="redis"))

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("UTILKIT_DEBOUNCE_WAIT", "soon")
        with pytest.raises(ConfigError):
            get_config()


class TestEnvHelpers:
    """Environment helpers."""

    def test_load_config_from_env(self, monkeypatch):
        monkeypatch.setenv("UTILKIT_KEY_PREFIX", "app:")
        assert load_config_from_env()["key_prefix"] == "app:"


class TestErrors:
    """Structured errors."""

    def test_hierarchy(self):
        assert issubclass(UnsupportedKindError, TypeError)
        assert issubclass(InvalidDateError, ValueError)
        assert issubclass(ConfigError, UtilKitError)

    def test_to_dict(self):
        cause = ValueError("bad")
        error = InvalidDateError("someday", cause=cause)
        data = error.to_dict()
        assert data["error"] == ErrorCode.INVALID_DATE.value
        assert data["caused_by"] == "bad"
        assert data["metadata"] == {"value": "'someday'"}
        assert "timestamp" in data

    def test_message(self):
        error = UnsupportedKindError("lock")
        assert "lock" in str(error)
        assert error.code == ErrorCode.UNSUPPORTED_KIND
