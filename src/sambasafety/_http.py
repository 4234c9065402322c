"""Low-level HTTP client wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from sambasafety._logging import log_api_call
from sambasafety.exceptions import (
    ApiConnectionError,
    ApiError,
    ApiTimeoutError,
    AuthenticationError,
    ResponseFormatError,
    ValidationError,
)

DEFAULT_BASE_URL = "https://api.sambasafety.com/v1"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "SambaSafety-Python-SDK/0.1.0"

JsonObject = dict[str, Any]


def _error_message(response: httpx.Response) -> str:
    """Pull ``message`` or ``error`` out of an error body."""
    try:
        body = response.json()
    except ValueError:
        return "Unknown error"
    if not isinstance(body, dict):
        return "Unknown error"
    message = body.get("message")
    if message is None:
        message = body.get("error")
    return "Unknown error" if message is None else str(message)


def _raise_for_status(response: httpx.Response) -> None:
    status = response.status_code
    if 200 <= status < 300:
        return
    message = _error_message(response)
    if status in (401, 403):
        raise AuthenticationError(message, status)
    if status in (400, 422):
        raise ValidationError(message, status)
    raise ApiError(message, status)


def _handle_response(response: httpx.Response) -> JsonObject:
    """Validate response status and return the decoded JSON object."""
    _raise_for_status(response)
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError as exc:
        raise ResponseFormatError(f"Invalid JSON response: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ResponseFormatError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return data


class HttpClient:
    """Synchronous JSON client for the SambaSafety REST API.

    Every request carries the bearer token, JSON content negotiation
    headers and the SDK user agent. A client built without an ``api_key``
    (used only to log in) sends no Authorization header. Keyword
    ``options`` not recognised here are handed to :class:`httpx.Client`
    unmodified.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        **options: Any,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"
        if headers:
            self._headers.update(headers)
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=timeout,
            headers=self._headers,
            **options,
        )

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        """A copy of the default request headers."""
        return dict(self._headers)

    def get(self, path: str, query: dict[str, Any] | None = None) -> JsonObject:
        """Perform a GET request and return the decoded JSON object."""
        return self._request("GET", path, params=query)

    def post(self, path: str, body: dict[str, Any] | None = None) -> JsonObject:
        """Perform a POST request with a JSON body."""
        return self._request("POST", path, json=body)

    def put(self, path: str, body: dict[str, Any] | None = None) -> JsonObject:
        """Perform a PUT request with a JSON body."""
        return self._request("PUT", path, json=body)

    def patch(self, path: str, body: dict[str, Any] | None = None) -> JsonObject:
        """Perform a PATCH request with a JSON body."""
        return self._request("PATCH", path, json=body)

    def delete(self, path: str) -> JsonObject:
        """Perform a DELETE request."""
        return self._request("DELETE", path)

    def close(self) -> None:
        self._client.close()

    @log_api_call
    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> JsonObject:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if json:
            kwargs["json"] = json
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise ApiTimeoutError(f"HTTP request failed: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ApiConnectionError(f"HTTP request failed: {exc}") from exc
        return _handle_response(response)
