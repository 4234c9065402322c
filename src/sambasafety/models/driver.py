"""Driver model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field

from sambasafety.models._base import SambaSafetyModel


class Driver(SambaSafetyModel):
    """A driver enrolled under the account."""

    id: str = ""
    first_name: str = Field(
        default="", validation_alias=AliasChoices("first_name", "firstName")
    )
    last_name: str = Field(
        default="", validation_alias=AliasChoices("last_name", "lastName")
    )
    license_number: str | None = Field(
        default=None, validation_alias=AliasChoices("license_number", "licenseNumber")
    )
    email: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def status(self) -> str | None:
        """Driver status as reported in the metadata map, if any."""
        return self.metadata_value("status")

    def metadata_value(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)
