"""Traffic violation model."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from sambasafety.models._base import LenientDatetime, SambaSafetyModel

MAJOR_SEVERITIES = frozenset({"major", "serious", "severe"})
MOVING_VIOLATION_KEYWORDS = ("speeding", "reckless", "following", "lane")


class Violation(SambaSafetyModel):
    """A violation entry on a motor vehicle record."""

    id: str = ""
    code: str = ""
    description: str = ""
    severity: str = "minor"
    date: LenientDatetime = None
    location: str | None = None
    fine_amount: float | None = None
    conviction: bool = False
    points: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_major(self) -> bool:
        return self.severity.lower() in MAJOR_SEVERITIES

    @property
    def is_dui(self) -> bool:
        description = self.description.lower()
        return "dui" in description or "dwi" in description or "dui" in self.code.lower()

    @property
    def is_moving_violation(self) -> bool:
        description = self.description.lower()
        return any(keyword in description for keyword in MOVING_VIOLATION_KEYWORDS)
