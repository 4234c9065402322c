"""Shared plumbing for resource services."""

from __future__ import annotations

from sambasafety._http import HttpClient


class BaseService:
    """A resource-oriented set of operations bound to one HTTP client."""

    def __init__(self, client: HttpClient) -> None:
        self._client = client
