"""SambaSafety — Typed Python client for the SambaSafety driver compliance API."""

import logging

from sambasafety._query import DriverQuery, ListQuery
from sambasafety.client import SambaSafetyAuth, SambaSafetyClient
from sambasafety.collection import Collection, DriverCollection, MvrCollection
from sambasafety.exceptions import (
    ApiConnectionError,
    ApiError,
    ApiTimeoutError,
    AuthenticationError,
    ResponseFormatError,
    SambaSafetyError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ApiTimeoutError",
    "AuthenticationError",
    "Collection",
    "DriverCollection",
    "DriverQuery",
    "ListQuery",
    "MvrCollection",
    "ResponseFormatError",
    "SambaSafetyAuth",
    "SambaSafetyClient",
    "SambaSafetyError",
    "ValidationError",
]

__version__ = "0.1.0"
