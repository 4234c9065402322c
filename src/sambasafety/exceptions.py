"""Custom exceptions for the SambaSafety client."""

from __future__ import annotations


class SambaSafetyError(Exception):
    """Base exception for all SambaSafety client errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"HTTP {status_code}: {message}")


class ApiError(SambaSafetyError):
    """Raised for any non-2xx response without a more specific class."""


class ApiConnectionError(ApiError):
    """Raised when no response could be obtained from the API."""


class ApiTimeoutError(ApiConnectionError):
    """Raised when a request to the API times out."""


class AuthenticationError(SambaSafetyError):
    """Raised on 401/403 responses or when a login yields no access token."""


class ValidationError(SambaSafetyError):
    """Raised on 400/422 responses or when a payload fails local validation."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        field: str | None = None,
    ) -> None:
        self.field = field
        super().__init__(message, status_code)


class ResponseFormatError(SambaSafetyError):
    """Raised when a success response is not a JSON object or fails model validation."""
