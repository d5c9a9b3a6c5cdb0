"""weatherapi.com current conditions provider."""
from __future__ import annotations

import math
from typing import Any, Optional
from urllib.parse import quote, urlencode

from requests import Response

from .base import DecodeError, EmptyResponse, HTTPWeatherProvider
from ..entities import WeatherRecord


class WeatherAPIClient(HTTPWeatherProvider):
    """Integration with the weatherapi.com ``current.json`` endpoint."""

    base_url = "https://api.weatherapi.com/v1/current.json"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url

    # Public API ---------------------------------------------------------
    def fetch_weather(self, city: str) -> WeatherRecord:
        url = self.build_url(city)
        self._log.debug("GET %s q=%r aqi=yes", self.base_url, city)
        response = self._request("GET", url)
        return self._decode(response)

    def build_url(self, city: str) -> str:
        """Return the request URL with every query value percent-encoded."""
        params = {"key": self.api_key, "q": city, "aqi": "yes"}
        return f"{self.base_url}?{urlencode(params, quote_via=quote)}"

    # helpers ------------------------------------------------------------
    def _decode(self, response: Response) -> WeatherRecord:
        if not response.content:
            raise EmptyResponse("empty response body")
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise DecodeError("invalid json") from exc

        try:
            location = data["location"]
            current = data["current"]
            name = location["name"]
            description = current["condition"]["text"]
            temperature = _as_float(current["temp_c"])
        except (KeyError, TypeError, ValueError) as exc:
            raise DecodeError(f"unexpected response schema: {exc!r}") from exc
        if not isinstance(name, str) or not isinstance(description, str):
            raise DecodeError("location name and condition text must be strings")

        return WeatherRecord(
            city_name=name,
            temperature_c=temperature,
            description=description,
            humidity=_optional_int(current.get("humidity")),
            wind_kph=_optional_float(current.get("wind_kph")),
            feels_like_c=_optional_float(current.get("feelslike_c")),
        )

    def _error_details(self, response: Response) -> tuple[str, Optional[int]]:
        # weatherapi wraps failures as {"error": {"code": 1006, "message": "..."}}
        try:
            error = response.json()["error"]
            return str(error.get("message") or ""), _optional_int(error.get("code"))
        except (ValueError, OverflowError, KeyError, TypeError, AttributeError):
            return super()._error_details(response)


def _as_float(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as exc:
        raise ValueError(f"number out of range: {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"expected a finite number, got {value!r}")
    return number


def _optional_float(value: object) -> Optional[float]:
    try:
        return _as_float(value)
    except ValueError:
        return None


def _optional_int(value: object) -> Optional[int]:
    number = _optional_float(value)
    return None if number is None else int(number)


__all__ = ["WeatherAPIClient"]
