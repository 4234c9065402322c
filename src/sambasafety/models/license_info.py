"""Driver's license model."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import AliasChoices, Field

from sambasafety.models._base import LenientDatetime, SambaSafetyModel

_SUSPENDED_STATUSES = frozenset({"suspended", "revoked", "cancelled"})
_COMMERCIAL_CLASSES = frozenset({"A", "B", "C"})


class LicenseInfo(SambaSafetyModel):
    """License details as reported by a state registry."""

    number: str = ""
    state: str = ""
    status: str = "active"
    license_class: str = Field(
        default="regular",
        validation_alias=AliasChoices("class", "license_class"),
        serialization_alias="class",
    )
    issue_date: LenientDatetime = Field(
        default=None, validation_alias=AliasChoices("issue_date", "issueDate")
    )
    expiration_date: LenientDatetime = Field(
        default=None,
        validation_alias=AliasChoices("expiration_date", "expirationDate"),
    )
    endorsements: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.status.lower() == "active"

    @property
    def is_suspended(self) -> bool:
        """True for suspended, revoked or cancelled licenses."""
        return self.status.lower() in _SUSPENDED_STATUSES

    @property
    def is_expired(self) -> bool:
        if self.expiration_date is None:
            return False
        return self.expiration_date < datetime.now(UTC)

    def is_expiring_soon(self, days: int = 30) -> bool:
        """True if the license expires within ``days`` from now (or already has)."""
        if self.expiration_date is None:
            return False
        return self.expiration_date <= datetime.now(UTC) + timedelta(days=days)

    def has_endorsement(self, endorsement: str) -> bool:
        return endorsement.upper() in {e.upper() for e in self.endorsements}

    def has_restriction(self, restriction: str) -> bool:
        return restriction.upper() in {r.upper() for r in self.restrictions}

    @property
    def is_commercial(self) -> bool:
        license_class = self.license_class.upper()
        return license_class.startswith("CDL") or license_class in _COMMERCIAL_CLASSES
