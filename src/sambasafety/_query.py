"""Fluent query builder for list endpoints."""

from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

import pydantic

from sambasafety._http import HttpClient
from sambasafety._parsing import parse_collection
from sambasafety.collection import Collection, DriverCollection
from sambasafety.models.driver import Driver


T = TypeVar("T", bound=pydantic.BaseModel)


class ListQuery(Generic[T]):
    """Accumulates filters, sorts, paging and includes for a list endpoint.

    Each builder method mutates the query and returns it, so calls chain.
    Nothing is sent until :meth:`get`, :meth:`first` or :meth:`count`.

    Usage:
        fleets = client.fleets.query().where("status", "active").per_page(50).get()
    """

    def __init__(
        self,
        client: HttpClient,
        path: str,
        model: type[T],
        collection_cls: type[Collection[Any]] = Collection,
    ) -> None:
        self._client = client
        self._path = path
        self._model = model
        self._collection_cls = collection_cls
        self._filters: dict[str, Any] = {}
        self._sorts: dict[str, str] = {}
        self._page: int | None = None
        self._per_page: int | None = None
        self._includes: list[str] = []

    # ── Filters ────────────────────────────────────────────────

    def where(self, field: str, value: Any) -> Self:
        self._filters[field] = value
        return self

    def where_in(self, field: str, values: list[Any]) -> Self:
        return self.where(field, ",".join(str(v) for v in values))

    def where_like(self, field: str, value: str) -> Self:
        return self.where(f"{field}_like", value)

    def where_created_after(self, date: str) -> Self:
        return self.where("created_after", date)

    def where_created_before(self, date: str) -> Self:
        return self.where("created_before", date)

    # ── Sorting, paging, includes ──────────────────────────────

    def sort_by(self, field: str, direction: str = "asc") -> Self:
        self._sorts[field] = direction
        return self

    def sort_by_created_at(self, direction: str = "desc") -> Self:
        return self.sort_by("created_at", direction)

    def page(self, page: int) -> Self:
        self._page = page
        return self

    def per_page(self, per_page: int) -> Self:
        self._per_page = per_page
        return self

    def include(self, *relations: str) -> Self:
        self._includes.extend(relations)
        return self

    # ── Execution ──────────────────────────────────────────────

    def to_params(self) -> dict[str, Any]:
        """Compile the accumulated state into query parameters."""
        params = dict(self._filters)
        if self._sorts:
            params["sort"] = ",".join(
                f"-{field}" if direction.lower() == "desc" else field
                for field, direction in self._sorts.items()
            )
        if self._page is not None:
            params["page"] = self._page
        if self._per_page is not None:
            params["per_page"] = self._per_page
        if self._includes:
            params["include"] = ",".join(self._includes)
        return params

    def get(self) -> Collection[T]:
        return self._fetch(self.to_params())

    def first(self) -> T | None:
        params = self.to_params()
        params["per_page"] = 1
        return self._fetch(params).first()

    def count(self) -> int:
        params = self.to_params()
        params["count_only"] = True
        response = self._client.get(self._path, params)
        return int(response.get("count") or 0)

    def _fetch(self, params: dict[str, Any]) -> Collection[T]:
        response = self._client.get(self._path, params)
        return parse_collection(self._model, response, self._collection_cls)


class DriverQuery(ListQuery[Driver]):
    """Query over ``/drivers`` with driver-specific shortcuts.

    Usage:
        drivers = (
            client.drivers.query()
            .where_active()
            .where_state("CA")
            .sort_by_name()
            .per_page(25)
            .get()
        )
    """

    def __init__(self, client: HttpClient) -> None:
        super().__init__(client, "/drivers", Driver, DriverCollection)

    def where_status(self, status: str) -> Self:
        return self.where("status", status)

    def where_active(self) -> Self:
        return self.where_status("active")

    def where_inactive(self) -> Self:
        return self.where_status("inactive")

    def where_state(self, state: str) -> Self:
        return self.where("state", state)

    def where_email(self, email: str) -> Self:
        return self.where("email", email)

    def where_license_number(self, license_number: str) -> Self:
        return self.where("license_number", license_number)

    def sort_by_name(self, direction: str = "asc") -> Self:
        return self.sort_by("name", direction)

    def include_mvr(self) -> Self:
        return self.include("mvr")

    def include_fleet(self) -> Self:
        return self.include("fleet")

    def get(self) -> DriverCollection:
        return super().get()  # type: ignore[return-value]
