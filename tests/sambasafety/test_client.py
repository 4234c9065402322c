"""Tests for the top-level client and login helper."""

from __future__ import annotations

import httpx
import pytest
import respx

from sambasafety import SambaSafetyAuth, SambaSafetyClient
from sambasafety.exceptions import AuthenticationError
from sambasafety.services import (
    AuthService,
    DriverService,
    FleetService,
    LicenseDiscoveryService,
    MvrService,
)
from tests.conftest import SAMPLE_DRIVER

BASE_URL = "https://api.sambasafety.com/v1"


class TestSambaSafetyClient:
    def test_services_constructed(self) -> None:
        with SambaSafetyClient("key") as client:
            assert isinstance(client.drivers, DriverService)
            assert isinstance(client.fleets, FleetService)
            assert isinstance(client.mvr, MvrService)
            assert isinstance(client.auth, AuthService)
            assert isinstance(client.license_discovery, LicenseDiscoveryService)

    def test_same_service_instance(self) -> None:
        with SambaSafetyClient("key") as client:
            assert client.drivers is client.drivers

    def test_api_key_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMBASAFETY_API_KEY", "env-key")
        with SambaSafetyClient() as client:
            assert client.http.headers["Authorization"] == "Bearer env-key"

    def test_missing_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SAMBASAFETY_API_KEY", raising=False)
        with pytest.raises(ValueError):
            SambaSafetyClient()

    def test_base_url_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAMBASAFETY_BASE_URL", "https://sandbox.example.com/v1/")
        with SambaSafetyClient("key") as client:
            assert client.http.base_url == "https://sandbox.example.com/v1"

    def test_default_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SAMBASAFETY_BASE_URL", raising=False)
        with SambaSafetyClient("key") as client:
            assert client.http.base_url == BASE_URL

    @respx.mock
    def test_end_to_end_list(self, client: SambaSafetyClient) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": [{"id": "1", "first_name": "A", "last_name": "B"}],
                    "meta": {"total": 1, "current_page": 1, "per_page": 10},
                },
            )
        )
        drivers = client.drivers.list()
        assert len(drivers) == 1
        assert drivers.first().full_name == "A B"
        assert drivers.has_next_page() is False


class TestSambaSafetyAuth:
    @respx.mock
    def test_login_returns_authenticated_client(self) -> None:
        login = respx.post(f"{BASE_URL}/auth/login").mock(
            return_value=httpx.Response(
                200,
                json={"access_token": "tok-1", "refresh_token": "ref-1", "expires_in": 7200},
            )
        )
        drivers = respx.get(f"{BASE_URL}/drivers/drv_1").mock(
            return_value=httpx.Response(200, json={"data": SAMPLE_DRIVER})
        )
        auth = SambaSafetyAuth()
        with auth.login("admin", "secret") as client:
            client.drivers.get("drv_1")
        assert "Authorization" not in login.calls.last.request.headers
        assert drivers.calls.last.request.headers["Authorization"] == "Bearer tok-1"
        assert auth.token_data.refresh_token == "ref-1"
        assert not auth.is_token_expired()

    @respx.mock
    def test_login_without_token(self) -> None:
        respx.post(f"{BASE_URL}/auth/login").mock(
            return_value=httpx.Response(200, json={"status": "ok"})
        )
        with pytest.raises(AuthenticationError):
            SambaSafetyAuth().login("admin", "secret")

    def test_refresh_requires_login(self) -> None:
        with pytest.raises(AuthenticationError):
            SambaSafetyAuth().refresh_token("ref-1")

    @respx.mock
    def test_refresh(self) -> None:
        respx.post(f"{BASE_URL}/auth/login").mock(
            return_value=httpx.Response(200, json={"access_token": "tok-1", "refresh_token": "ref-1"})
        )
        refresh = respx.post(f"{BASE_URL}/auth/refresh").mock(
            return_value=httpx.Response(200, json={"access_token": "tok-2"})
        )
        auth = SambaSafetyAuth()
        auth.login("admin", "secret").close()
        auth.refresh_token("ref-1").close()
        assert refresh.calls.last.request.headers["Authorization"] == "Bearer tok-1"
        assert auth.token_data.access_token == "tok-2"
        assert auth.token_data.refresh_token == "ref-1"

    def test_login_with_api_key(self) -> None:
        with SambaSafetyAuth().login_with_api_key("key-9") as client:
            assert client.http.headers["Authorization"] == "Bearer key-9"

    def test_expired_without_token(self) -> None:
        assert SambaSafetyAuth().is_token_expired()

    @respx.mock
    def test_expiry_margin(self) -> None:
        respx.post(f"{BASE_URL}/auth/login").mock(
            return_value=httpx.Response(200, json={"access_token": "tok", "expires_in": 120})
        )
        auth = SambaSafetyAuth()
        auth.login("admin", "secret").close()
        assert auth.is_token_expired()
