"""Tests for configuration adapter."""

import logging
from pathlib import Path

import pytest

from webrtc_presence.adapters.config import AppConfig


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    for name in ("REDIS_URL", "PRESENCE_PREFIX", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig(_env_file=None)

    assert config.redis_url == "redis://localhost:6379/0"
    assert config.presence_prefix == "webrtc"
    assert config.redis_socket_timeout == 5.0
    assert config.redis_connect_timeout == 5.0
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("REDIS_URL", "redis://redis:6379/1")
    monkeypatch.setenv("PRESENCE_PREFIX", "staging")
    monkeypatch.setenv("REDIS_SOCKET_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)

    assert config.redis_url == "redis://redis:6379/1"
    assert config.presence_prefix == "staging"
    assert config.redis_socket_timeout == 2.5
    assert config.log_level == "DEBUG"
    assert config.log_level_number == logging.DEBUG


def test_config_validates_timeouts(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a non-positive timeout, when loading config, then validation error is raised."""
    monkeypatch.setenv("REDIS_CONNECT_TIMEOUT", "0")

    with pytest.raises(ValueError, match="Redis timeouts must be positive"):
        AppConfig(_env_file=None)


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(_env_file=None)


def test_config_reads_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a .env file, when loading config, then values are read from it."""
    monkeypatch.delenv("PRESENCE_PREFIX", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PRESENCE_PREFIX=from-file\n", encoding="utf-8")

    config = AppConfig(_env_file=env_file)

    assert config.presence_prefix == "from-file"
