from __future__ import annotations

from weatherapp.entities import SearchState, WeatherRecord
from weatherapp.providers.base import ApiError
from weatherapp.views import describe_state


def test_idle_prompt():
    assert describe_state(SearchState()) == "Enter a city to get weather"


def test_loading_takes_precedence_over_previous_weather():
    state = SearchState(query="Rome", is_loading=True, weather=WeatherRecord("Paris", 14.0, "overcast"))

    assert describe_state(state) == "Fetching weather..."


def test_weather_summary():
    record = WeatherRecord("Mumbai", 28.5, "partly cloudy", humidity=74, wind_kph=13.0, feels_like_c=31.4)

    text = describe_state(SearchState(query="Mumbai", weather=record))

    assert text.splitlines() == [
        "Mumbai",
        "28.5°",
        "Partly cloudy",
        "Humidity 74%  Wind 13.0 km/h  Feels like 31°",
    ]


def test_weather_summary_without_optional_fields():
    text = describe_state(SearchState(weather=WeatherRecord("Oslo", -3.0, "Snow")))

    assert text == "Oslo\n-3.0°\nSnow"


def test_error_is_distinct_from_never_searched():
    error = ApiError(400, "No matching location found.", code=1006)

    text = describe_state(SearchState(query="Atlantis", last_error=error))

    assert text == "Weather unavailable: HTTP 400: No matching location found."
