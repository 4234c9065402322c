"""Shared base for SambaSafety response models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator


def _lenient_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, or return None when it cannot be parsed.

    Naive timestamps are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


LenientDatetime = Annotated[datetime | None, BeforeValidator(_lenient_datetime)]


class SambaSafetyModel(BaseModel):
    """Immutable record parsed from a loosely-typed JSON object."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Explicit nulls fall back to the declared defaults.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with snake_case keys."""
        return self.model_dump(mode="json", by_alias=True)
