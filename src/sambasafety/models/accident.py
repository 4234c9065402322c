"""Accident model."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from sambasafety.models._base import LenientDatetime, SambaSafetyModel
from sambasafety.models.violation import MAJOR_SEVERITIES


class Accident(SambaSafetyModel):
    """An accident entry on a motor vehicle record."""

    id: str = ""
    date: LenientDatetime = None
    type: str = "unknown"
    severity: str = "minor"
    location: str | None = None
    fatalities: int | None = None
    injuries: int | None = None
    damage_amount: float | None = None
    at_fault: bool = False
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_fatal(self) -> bool:
        return (self.fatalities or 0) > 0

    @property
    def has_injuries(self) -> bool:
        return (self.injuries or 0) > 0

    @property
    def is_preventable(self) -> bool:
        """Whether the reporting source flagged the accident as preventable."""
        return bool(self.metadata.get("preventable", False))

    @property
    def is_major(self) -> bool:
        return (
            self.severity.lower() in MAJOR_SEVERITIES
            or self.is_fatal
            or self.has_injuries
        )
