from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlsplit

import requests
from requests import Response


class WeatherError(RuntimeError):
    """Base error for weather lookups."""


class InvalidRequest(WeatherError):
    """Raised when the request URL cannot be built or is rejected as malformed."""


class TransportError(WeatherError):
    """Raised when the HTTP call itself fails (DNS, connection, timeout, TLS)."""


class EmptyResponse(WeatherError):
    """Raised when the provider answers without a body."""


class DecodeError(WeatherError):
    """Raised when the body is not JSON or does not match the expected schema."""


class ApiError(WeatherError):
    """Raised when the provider answers with an HTTP error status."""

    def __init__(self, status_code: int, message: str = "", code: Optional[int] = None) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        detail = f"HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


@dataclass
class RequestConfig:
    timeout: float = 10.0


class HTTPWeatherProvider:
    """Base class that adds timeouts and error mapping for HTTP providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _check_url(self, url: str) -> str:
        try:
            parts = urlsplit(url)
            host = parts.netloc
        except ValueError as exc:
            raise InvalidRequest("malformed request url") from exc
        if parts.scheme not in ("http", "https") or not host:
            raise InvalidRequest(f"malformed request url for host {host or '<none>'!r}")
        return url

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise ApiError(response.status_code, *self._error_details(response))
        return response

    def _error_details(self, response: Response) -> tuple[str, Optional[int]]:
        return response.reason or "", None

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        self._check_url(url)
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema) as exc:
            raise InvalidRequest("request url rejected") from exc
        except requests.Timeout as exc:
            self._log.error("Request timed out after %ss", self.request_config.timeout)
            raise TransportError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed: %s", exc.__class__.__name__)
            raise TransportError("request failed") from exc
        return self._handle_response(response)


__all__ = [
    "ApiError",
    "DecodeError",
    "EmptyResponse",
    "HTTPWeatherProvider",
    "InvalidRequest",
    "RequestConfig",
    "TransportError",
    "WeatherError",
]
