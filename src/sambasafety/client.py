"""Public client classes for the SambaSafety API."""

from __future__ import annotations

import os
import time
from typing import Any

from sambasafety._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HttpClient
from sambasafety.exceptions import AuthenticationError
from sambasafety.models.responses import TokenBundle
from sambasafety.services.auth import AuthService
from sambasafety.services.drivers import DriverService
from sambasafety.services.fleets import FleetService
from sambasafety.services.license_discovery import LicenseDiscoveryService
from sambasafety.services.mvr import MvrService

API_KEY_ENV_VAR = "SAMBASAFETY_API_KEY"
BASE_URL_ENV_VAR = "SAMBASAFETY_BASE_URL"
TOKEN_EXPIRY_MARGIN = 300


class SambaSafetyClient:
    """Synchronous client for the SambaSafety API.

    Usage:
        client = SambaSafetyClient("my-api-key")
        drivers = client.drivers.list()
        client.close()

        # Or as a context manager:
        with SambaSafetyClient() as client:  # reads SAMBASAFETY_API_KEY
            record = client.mvr.get_latest_by_driver("drv_123")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        **options: Any,
    ) -> None:
        api_key = api_key or os.getenv(API_KEY_ENV_VAR)
        if not api_key:
            raise ValueError(
                f"SambaSafety API key is required. Pass api_key or set {API_KEY_ENV_VAR}."
            )
        base_url = base_url or os.getenv(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
        self._http = HttpClient(
            api_key, base_url=base_url, timeout=timeout, headers=headers, **options
        )
        self.drivers = DriverService(self._http)
        self.fleets = FleetService(self._http)
        self.mvr = MvrService(self._http)
        self.auth = AuthService(self._http)
        self.license_discovery = LicenseDiscoveryService(self._http)

    def __enter__(self) -> SambaSafetyClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def http(self) -> HttpClient:
        """The underlying HTTP client, for endpoints without a service method."""
        return self._http

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._http.close()


class SambaSafetyAuth:
    """Obtains credentials and hands back authenticated clients.

    Usage:
        auth = SambaSafetyAuth()
        client = auth.login("fleet-admin", "secret")
        ...
        if auth.is_token_expired():
            client = auth.refresh_token(auth.token_data.refresh_token)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        **options: Any,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._options = options
        self._token_data: TokenBundle | None = None
        self._received_at: float | None = None

    @property
    def token_data(self) -> TokenBundle | None:
        return self._token_data

    def login(self, username: str, password: str) -> SambaSafetyClient:
        with self._http(None) as http:
            tokens = AuthService(http).login(username, password)
        return self._store(tokens)

    def login_with_api_key(self, api_key: str) -> SambaSafetyClient:
        return self._client(api_key)

    def refresh_token(self, refresh_token: str) -> SambaSafetyClient:
        if self._token_data is None:
            raise AuthenticationError("No token data available for refresh")
        with self._http(self._token_data.access_token) as http:
            tokens = AuthService(http).refresh_token(refresh_token)
        return self._store(tokens)

    def is_token_expired(self) -> bool:
        """True without a token, or within five minutes of its expiry."""
        if self._token_data is None or self._received_at is None:
            return True
        expires_at = self._received_at + self._token_data.expires_in
        return time.monotonic() >= expires_at - TOKEN_EXPIRY_MARGIN

    def _store(self, tokens: TokenBundle) -> SambaSafetyClient:
        self._token_data = tokens
        self._received_at = time.monotonic()
        return self._client(tokens.access_token)

    def _http(self, api_key: str | None) -> HttpClient:
        return HttpClient(
            api_key, base_url=self._base_url, timeout=self._timeout, **self._options
        )

    def _client(self, api_key: str) -> SambaSafetyClient:
        return SambaSafetyClient(
            api_key, base_url=self._base_url, timeout=self._timeout, **self._options
        )
