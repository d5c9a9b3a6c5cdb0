"""Core abstractions for the weather search domain."""
from __future__ import annotations

from typing import Protocol

from weatherapp.entities import WeatherRecord


class WeatherClient(Protocol):
    """A data source capable of returning current weather for a city."""

    def fetch_weather(self, city: str) -> WeatherRecord:
        """Fetch current conditions, raising ``WeatherError`` on failure."""
        ...
