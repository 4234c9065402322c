"""Fleet model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field

from sambasafety.models._base import LenientDatetime, SambaSafetyModel


class Fleet(SambaSafetyModel):
    """An organizational grouping of drivers under one account."""

    id: str = ""
    name: str = ""
    description: str | None = None
    status: str = "active"
    settings: dict[str, Any] = Field(default_factory=dict)
    created_at: LenientDatetime = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    updated_at: LenientDatetime = Field(
        default=None, validation_alias=AliasChoices("updated_at", "updatedAt")
    )
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.status.lower() == "active"

    def get_setting(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)
