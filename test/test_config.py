"""Tests for environment-driven settings."""

import logging

import pytest

from app.config import get_settings, load_settings, reset_settings
from app.exceptions import ConfigurationError


class TestDefaults:

    def test_default_listen_address(self):
        settings = load_settings({})

        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 8080
        assert settings.server.url == "http://0.0.0.0:8080"

    def test_default_logging(self):
        settings = load_settings({})

        assert settings.log.level == "INFO"
        assert settings.log.level_number == logging.INFO
        assert settings.log.file is None
        assert settings.log.json_format is False

    def test_empty_values_fall_back_to_defaults(self):
        settings = load_settings({"HELLODEMO_HOST": "", "HELLODEMO_PORT": ""})

        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 8080


class TestOverrides:

    def test_host_and_port(self):
        settings = load_settings({"HELLODEMO_HOST": "127.0.0.1", "HELLODEMO_PORT": "9090"})

        assert settings.server.host == "127.0.0.1"
        assert settings.server.port == 9090

    def test_log_options(self, tmp_path):
        log_file = str(tmp_path / "demo.log")
        settings = load_settings({
            "HELLODEMO_LOG_LEVEL": "debug",
            "HELLODEMO_LOG_FILE": log_file,
            "HELLODEMO_LOG_JSON": "true",
        })

        assert settings.log.level == "DEBUG"
        assert settings.log.level_number == logging.DEBUG
        assert settings.log.file == log_file
        assert settings.log.json_format is True

    def test_unrelated_variables_ignored(self):
        settings = load_settings({"PORT": "1234", "WEB_PORT": "1"})

        assert settings.server.port == 8080


class TestInvalidValues:

    @pytest.mark.parametrize("port", ["not-a-port", "-1", "65536", "80.5"])
    def test_bad_port(self, port):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({"HELLODEMO_PORT": port})

        error = exc_info.value
        assert error.code == "CONFIGURATION_ERROR"
        assert [e["field"] for e in error.details["errors"]] == ["port"]

    def test_bad_log_level(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({"HELLODEMO_LOG_LEVEL": "chatty"})

        assert [e["field"] for e in exc_info.value.details["errors"]] == ["level"]

    def test_bad_json_flag(self):
        with pytest.raises(ConfigurationError):
            load_settings({"HELLODEMO_LOG_JSON": "sometimes"})


class TestCaching:

    def test_settings_cached_until_reset(self, monkeypatch):
        monkeypatch.setenv("HELLODEMO_PORT", "9001")
        first = get_settings()

        monkeypatch.setenv("HELLODEMO_PORT", "9002")
        assert get_settings() is first
        assert get_settings().server.port == 9001

        reset_settings()
        assert get_settings().server.port == 9002

    def test_reload(self, monkeypatch):
        monkeypatch.setenv("HELLODEMO_PORT", "9003")
        get_settings()

        monkeypatch.setenv("HELLODEMO_PORT", "9004")
        assert get_settings(reload=True).server.port == 9004
