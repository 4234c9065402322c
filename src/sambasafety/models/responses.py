"""Auxiliary response models: pagination, tokens and bulk validation results."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field

from sambasafety.models._base import SambaSafetyModel
from sambasafety.models.license_info import LicenseInfo


class PaginationMeta(SambaSafetyModel):
    """The ``meta`` block of a paginated list response."""

    total: int | None = None
    current_page: int | None = Field(
        default=None, validation_alias=AliasChoices("current_page", "currentPage")
    )
    per_page: int | None = Field(
        default=None, validation_alias=AliasChoices("per_page", "perPage")
    )


class TokenBundle(SambaSafetyModel):
    """Credentials returned by the login and refresh endpoints."""

    access_token: str
    refresh_token: str | None = None
    expires_in: int = 3600
    token_type: str = "Bearer"


class BulkValidationResult(SambaSafetyModel):
    """Per-license outcome of a bulk validation call, as reported by the server."""

    license_number: str = ""
    state: str = ""
    valid: bool = False
    license_info: LicenseInfo | None = None
    errors: list[Any] = Field(default_factory=list)
