from __future__ import annotations

import logging

import pytest

from weatherapp.settings import (
    DEFAULT_BASE_URL,
    ImproperlyConfigured,
    configure_logging,
    env,
    load_settings,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "WEATHERAPI_KEY",
        "WEATHERAPI_BASE_URL",
        "WEATHERAPI_TIMEOUT",
        "WEATHERAPP_LOG_LEVEL",
        "WEATHERAPP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_api_key_is_reported(clean_env):
    with pytest.raises(ImproperlyConfigured, match="WEATHERAPI_KEY"):
        load_settings()


def test_empty_api_key_is_reported(clean_env):
    clean_env.setenv("WEATHERAPI_KEY", "")

    with pytest.raises(ImproperlyConfigured):
        load_settings()


def test_defaults(clean_env):
    clean_env.setenv("WEATHERAPI_KEY", "secret")

    settings = load_settings()

    assert settings.api_key == "secret"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 10.0
    assert settings.log_level == "INFO"
    assert "secret" not in repr(settings)


def test_overrides(clean_env):
    clean_env.setenv("WEATHERAPI_KEY", "secret")
    clean_env.setenv("WEATHERAPI_BASE_URL", "https://weather.test/v1/current.json")
    clean_env.setenv("WEATHERAPI_TIMEOUT", "3.5")
    clean_env.setenv("WEATHERAPP_LOG_LEVEL", "warning")

    settings = load_settings()

    assert settings.base_url == "https://weather.test/v1/current.json"
    assert settings.timeout == 3.5
    assert settings.log_level == "WARNING"


def test_debug_flag_forces_debug_logging(clean_env):
    clean_env.setenv("WEATHERAPI_KEY", "secret")
    clean_env.setenv("WEATHERAPP_LOG_LEVEL", "ERROR")
    clean_env.setenv("WEATHERAPP_DEBUG", "1")

    assert load_settings().log_level == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_invalid_timeout(clean_env, value):
    clean_env.setenv("WEATHERAPI_KEY", "secret")
    clean_env.setenv("WEATHERAPI_TIMEOUT", value)

    with pytest.raises(ImproperlyConfigured, match="WEATHERAPI_TIMEOUT"):
        load_settings()


def test_unknown_log_level(clean_env):
    clean_env.setenv("WEATHERAPI_KEY", "secret")
    clean_env.setenv("WEATHERAPP_LOG_LEVEL", "chatty")

    with pytest.raises(ImproperlyConfigured, match="CHATTY"):
        load_settings()


def test_env_default(clean_env):
    assert env("WEATHERAPP_UNSET_VARIABLE", "fallback") == "fallback"


def test_configure_logging_quiets_urllib3():
    configure_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING
