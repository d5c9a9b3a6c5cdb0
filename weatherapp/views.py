"""Text rendering of the search state."""
from __future__ import annotations

from weatherapp.entities import SearchState


def describe_state(state: SearchState) -> str:
    """Return the status text shown under the search bar."""
    if state.is_loading:
        return "Fetching weather..."
    weather = state.weather
    if weather is not None:
        lines = [weather.city_name, f"{weather.temperature_c:.1f}°", weather.description.capitalize()]
        details = []
        if weather.humidity is not None:
            details.append(f"Humidity {weather.humidity}%")
        if weather.wind_kph is not None:
            details.append(f"Wind {weather.wind_kph:.1f} km/h")
        if weather.feels_like_c is not None:
            details.append(f"Feels like {weather.feels_like_c:.0f}°")
        if details:
            lines.append("  ".join(details))
        return "\n".join(lines)
    if state.last_error is not None:
        return f"Weather unavailable: {state.last_error}"
    return "Enter a city to get weather"


__all__ = ["describe_state"]
