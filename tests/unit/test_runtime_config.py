"""
Runtime Configuration Unit Tests
Tests for core/config/runtime.py and api/deps.py config loading
"""
import json
import logging

import pytest

from api.deps import load_runtime_config
from core.config import RuntimeConfig, ServerConfig


class TestRuntimeConfigDefaults:

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080
        assert config.server.reload is False
        assert config.client.base_url == "http://localhost:8080"
        assert config.client.timeout == 30.0
        assert config.log_level == "INFO"


class TestFromDict:

    def test_partial_dict(self):
        config = RuntimeConfig.from_dict({"server": {"port": 9000}})

        assert config.server.port == 9000
        assert config.server.host == "0.0.0.0"
        assert config.client.base_url == "http://localhost:8080"

    def test_round_trip_through_to_dict(self):
        original = RuntimeConfig.from_dict({
            "server": {"host": "127.0.0.1", "port": 9000, "reload": True},
            "client": {"base_url": "http://api:9000", "timeout": 5.0},
            "log_level": "DEBUG",
        })

        assert RuntimeConfig.from_dict(original.to_dict()) == original


class TestFromYaml:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 8181\nlog_level: WARNING\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.server.port == 8181
        assert config.log_level == "WARNING"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_missing_yaml_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "nope.yaml")


class TestEnvOverrides:

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("RECEIPT_POINTS_PORT", "9090")
        monkeypatch.setenv("RECEIPT_POINTS_RELOAD", "true")
        monkeypatch.setenv("RECEIPT_POINTS_BASE_URL", "http://example:9090")
        monkeypatch.setenv("RECEIPT_POINTS_LOG_LEVEL", "DEBUG")

        config = RuntimeConfig.from_env()

        assert config.server.port == 9090
        assert config.server.reload is True
        assert config.client.base_url == "http://example:9090"
        assert config.log_level == "DEBUG"

    def test_env_overrides_file_values(self, monkeypatch):
        base = RuntimeConfig(server=ServerConfig(host="127.0.0.1", port=7000))
        monkeypatch.setenv("RECEIPT_POINTS_PORT", "7001")

        config = base.with_env_overrides()

        assert config.server.port == 7001
        assert config.server.host == "127.0.0.1"
        assert base.server.port == 7000

    def test_no_overrides_returns_same_config(self):
        base = RuntimeConfig()

        assert base.with_env_overrides() is base


class TestLoadRuntimeConfig:
    """Config file discovery used by the API and the serve command."""

    def test_no_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (tmp_path / "receipt_points.json",))

        assert load_runtime_config() == RuntimeConfig()

    def test_reads_local_file(self, tmp_path, monkeypatch):
        path = tmp_path / "receipt_points.json"
        path.write_text(json.dumps({"server": {"port": 8123}}))
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (path,))

        assert load_runtime_config().server.port == 8123

    def test_bad_file_falls_back_to_defaults(self, tmp_path, monkeypatch):
        path = tmp_path / "receipt_points.json"
        path.write_text("{broken")
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (path,))

        assert load_runtime_config() == RuntimeConfig()

    def test_env_wins_over_file(self, tmp_path, monkeypatch):
        path = tmp_path / "receipt_points.json"
        path.write_text(json.dumps({"server": {"port": 8123}}))
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (path,))
        monkeypatch.setenv("RECEIPT_POINTS_PORT", "8124")

        assert load_runtime_config().server.port == 8124

    def test_reads_yaml_file(self, tmp_path, monkeypatch):
        path = tmp_path / "receipt_points.yaml"
        path.write_text("server:\n  port: 8125\nlog_level: WARNING\n")
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (path,))

        config = load_runtime_config()

        assert config.server.port == 8125
        assert config.log_level == "WARNING"

    def test_first_existing_file_wins(self, tmp_path, monkeypatch):
        missing = tmp_path / "receipt_points.json"
        hidden = tmp_path / ".receipt_points.json"
        hidden.write_text(json.dumps({"server": {"port": 8126}}))
        home = tmp_path / "config.json"
        home.write_text(json.dumps({"server": {"port": 8127}}))
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (missing, hidden, home))

        assert load_runtime_config().server.port == 8126


class TestApiLogLevel:
    """The API log level follows the same config discovery as the server."""

    def test_log_level_from_hidden_config_file(self, tmp_path, monkeypatch):
        from api.app import _resolve_log_level

        path = tmp_path / ".receipt_points.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (tmp_path / "receipt_points.json", path))

        assert _resolve_log_level() == logging.DEBUG

    def test_log_level_from_home_config_file(self, tmp_path, monkeypatch):
        from api.app import _resolve_log_level

        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "warning"}))
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (path,))

        assert _resolve_log_level() == logging.WARNING

    def test_env_overrides_file_log_level(self, tmp_path, monkeypatch):
        from api.app import _resolve_log_level

        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))
        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", (path,))
        monkeypatch.setenv("RECEIPT_POINTS_LOG_LEVEL", "ERROR")

        assert _resolve_log_level() == logging.ERROR

    def test_unknown_level_defaults_to_info(self, tmp_path, monkeypatch):
        from api.app import _resolve_log_level

        monkeypatch.setattr("api.deps.CONFIG_SEARCH_PATHS", ())
        monkeypatch.setenv("RECEIPT_POINTS_LOG_LEVEL", "chatty")

        assert _resolve_log_level() == logging.INFO
