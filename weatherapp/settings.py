"""Environment-driven settings for the weather app."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://api.weatherapi.com/v1/current.json"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class ImproperlyConfigured(RuntimeError):
    """Raised when the environment does not describe a usable configuration."""


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None or value == "":
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    log_level: str = "INFO"

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, log_level={self.log_level!r})"
        )


def load_settings() -> Settings:
    timeout_raw = env("WEATHERAPI_TIMEOUT", "10")
    try:
        timeout = float(timeout_raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"WEATHERAPI_TIMEOUT must be a number, got {timeout_raw!r}") from exc
    if timeout <= 0:
        raise ImproperlyConfigured("WEATHERAPI_TIMEOUT must be positive")

    debug = os.environ.get("WEATHERAPP_DEBUG", "0") == "1"
    log_level = "DEBUG" if debug else env("WEATHERAPP_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ImproperlyConfigured(f"Unknown log level {log_level!r}")

    return Settings(
        api_key=env("WEATHERAPI_KEY"),
        base_url=env("WEATHERAPI_BASE_URL", DEFAULT_BASE_URL),
        timeout=timeout,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    # urllib3 logs full request lines, query string included
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["ImproperlyConfigured", "Settings", "configure_logging", "env", "load_settings"]
