"""Tests for configuration loading."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gcache.infra.config import Settings, get_settings


def test_default_values():
    """Settings have sensible defaults."""
    with patch.dict("os.environ", {}, clear=True):
        s = Settings(_env_file=None)
    assert s.host == "localhost"
    assert s.port == 5000
    assert s.max_size == 100
    assert s.log_level == "INFO"
    assert s.log_format == "json"
    assert s.log_file is None


def test_env_override():
    """Settings can be overridden via GCACHE_ environment variables."""
    env = {
        "GCACHE_HOST": "0.0.0.0",
        "GCACHE_PORT": "8080",
        "GCACHE_MAX_SIZE": "250",
        "GCACHE_LOG_LEVEL": "DEBUG",
        "GCACHE_LOG_FORMAT": "console",
        "GCACHE_LOG_FILE": "/tmp/gcache.log",
    }
    with patch.dict("os.environ", env, clear=True):
        s = Settings(_env_file=None)
    assert s.host == "0.0.0.0"
    assert s.port == 8080
    assert s.max_size == 250
    assert s.log_level == "DEBUG"
    assert s.log_format == "console"
    assert s.log_file == "/tmp/gcache.log"


def test_plain_host_and_port_aliases():
    """HOST and PORT are accepted without the prefix."""
    with patch.dict("os.environ", {"HOST": "127.0.0.1", "PORT": "9000"}, clear=True):
        s = Settings(_env_file=None)
    assert s.host == "127.0.0.1"
    assert s.port == 9000


@pytest.mark.parametrize("value", ["0", "-5"])
def test_max_size_must_be_positive(value):
    """A non-positive capacity is rejected at load time."""
    with patch.dict("os.environ", {"GCACHE_MAX_SIZE": value}, clear=True):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def test_get_settings_is_cached():
    """get_settings returns the same instance until the cache is cleared."""
    assert get_settings() is get_settings()


def test_log_level_is_normalized():
    """Lower-case level names are accepted and upper-cased."""
    with patch.dict("os.environ", {"GCACHE_LOG_LEVEL": "debug"}, clear=True):
        s = Settings(_env_file=None)
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["verbose", "trace", ""])
def test_unknown_log_level_rejected(value):
    """A misspelled level fails at load time instead of falling back to INFO."""
    with patch.dict("os.environ", {"GCACHE_LOG_LEVEL": value}, clear=True):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
