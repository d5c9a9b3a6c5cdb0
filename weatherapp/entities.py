from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .providers.base import WeatherError


@dataclass(frozen=True)
class WeatherRecord:
    """Normalized current-conditions snapshot for a city.

    Temperatures are in Celsius, wind speed in kilometres per hour and
    humidity in percent. The optional fields are ``None`` when the provider
    omits them.
    """

    city_name: str
    temperature_c: float
    description: str
    humidity: Optional[int] = None
    wind_kph: Optional[float] = None
    feels_like_c: Optional[float] = None


@dataclass
class SearchState:
    """Observable state behind the search window."""

    query: str = ""
    is_loading: bool = False
    weather: Optional[WeatherRecord] = None
    last_error: Optional["WeatherError"] = None

    def snapshot(self) -> "SearchState":
        return replace(self)


__all__ = ["WeatherRecord", "SearchState"]
