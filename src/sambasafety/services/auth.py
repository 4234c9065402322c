"""Authentication endpoints."""

from __future__ import annotations

import logging
from typing import Any

from sambasafety._parsing import parse_model
from sambasafety.exceptions import AuthenticationError
from sambasafety.models.responses import TokenBundle
from sambasafety.services._base import BaseService

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Login, token refresh and session checks."""

    def login(self, username: str, password: str) -> TokenBundle:
        response = self._client.post(
            "/auth/login", {"username": username, "password": password}
        )
        if not response.get("access_token"):
            raise AuthenticationError("Login failed: No access token received")
        return parse_model(TokenBundle, response)

    def refresh_token(self, refresh_token: str) -> TokenBundle:
        """Exchange a refresh token for a new bundle.

        The server may omit ``refresh_token`` from its reply, in which case the
        token that was sent stays in use.
        """
        response = self._client.post("/auth/refresh", {"refresh_token": refresh_token})
        if not response.get("access_token"):
            raise AuthenticationError("Token refresh failed: No access token received")
        return parse_model(
            TokenBundle,
            {**response, "refresh_token": response.get("refresh_token") or refresh_token},
        )

    def logout(self) -> bool:
        """Best effort: returns False instead of raising."""
        try:
            self._client.post("/auth/logout")
        except Exception as exc:
            logger.warning("Logout failed: %s", exc)
            return False
        return True

    def get_current_user(self) -> dict[str, Any]:
        return self._client.get("/auth/user")

    def validate_token(self) -> bool:
        """Best effort: returns False instead of raising."""
        try:
            self._client.get("/auth/validate")
        except Exception as exc:
            logger.warning("Token validation failed: %s", exc)
            return False
        return True
