"""Helpers that turn decoded response bodies into models and collections."""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic

from sambasafety.collection import Collection
from sambasafety.exceptions import ResponseFormatError
from sambasafety.models.responses import PaginationMeta

T = TypeVar("T", bound=pydantic.BaseModel)
C = TypeVar("C", bound=Collection[Any])


def unwrap(response: dict[str, Any], key: str = "data") -> Any:
    """Return ``response[key]`` when present, else the whole body."""
    value = response.get(key)
    return response if value is None else value


def parse_model(model: type[T], data: Any) -> T:
    """Validate a single object against a model."""
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ResponseFormatError(
            f"Failed to validate {model.__name__} response: {exc}"
        ) from exc


def parse_list(model: type[T], data: Any) -> list[T]:
    """Validate a list of objects against a model."""
    try:
        adapter = pydantic.TypeAdapter(list[model])  # type: ignore[valid-type]
        return adapter.validate_python(data or [])
    except pydantic.ValidationError as exc:
        raise ResponseFormatError(
            f"Failed to validate {model.__name__} response: {exc}"
        ) from exc


def parse_collection(
    model: type[T],
    response: dict[str, Any],
    collection_cls: type[C] = Collection,  # type: ignore[assignment]
) -> C:
    """Build a collection from a ``{data: [...], meta?: {...}}`` list response."""
    items = parse_list(model, response.get("data"))
    raw_meta = response.get("meta")
    meta = parse_model(PaginationMeta, raw_meta) if isinstance(raw_meta, dict) else None
    return collection_cls(items, meta)
