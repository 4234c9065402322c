"""Motor vehicle record model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field

from sambasafety.models._base import LenientDatetime, SambaSafetyModel
from sambasafety.models.accident import Accident
from sambasafety.models.license_info import LicenseInfo
from sambasafety.models.violation import Violation


class MvrRecord(SambaSafetyModel):
    """A motor vehicle record report with its violations, accidents and license."""

    id: str = ""
    driver_id: str = Field(
        default="", validation_alias=AliasChoices("driver_id", "driverId")
    )
    state: str = ""
    license_number: str = Field(
        default="", validation_alias=AliasChoices("license_number", "licenseNumber")
    )
    status: str = "pending"
    request_date: LenientDatetime = Field(
        default=None, validation_alias=AliasChoices("request_date", "requestDate")
    )
    report_date: LenientDatetime = Field(
        default=None, validation_alias=AliasChoices("report_date", "reportDate")
    )
    violations: list[Violation] = Field(default_factory=list)
    accidents: list[Accident] = Field(default_factory=list)
    license_info: LicenseInfo | None = Field(
        default=None, validation_alias=AliasChoices("license_info", "licenseInfo")
    )
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    @property
    def has_accidents(self) -> bool:
        return bool(self.accidents)

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    @property
    def accident_count(self) -> int:
        return len(self.accidents)
