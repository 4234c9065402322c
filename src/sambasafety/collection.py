"""Paginated collections returned by list endpoints."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Generic, Self, TypeVar

from sambasafety.models.driver import Driver
from sambasafety.models.mvr_record import MvrRecord
from sambasafety.models.responses import PaginationMeta


T = TypeVar("T")
U = TypeVar("U")


class Collection(Generic[T]):
    """An ordered, iterable page of models plus optional pagination metadata.

    Usage:
        drivers = client.drivers.list()
        for driver in drivers:
            print(driver.full_name)
        if drivers.has_next_page():
            ...
    """

    def __init__(self, items: Sequence[T] = (), meta: PaginationMeta | None = None) -> None:
        self._items: list[T] = list(items)
        self._meta = meta

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, meta={self._meta!r})"

    def count(self) -> int:
        return len(self._items)

    def first(self) -> T | None:
        return self._items[0] if self._items else None

    def last(self) -> T | None:
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return bool(self._items)

    def to_list(self) -> list[Any]:
        """Serialize every item that supports it to a plain dict."""
        return [
            item.to_dict() if hasattr(item, "to_dict") else item
            for item in self._items
        ]

    # ── Transformations ────────────────────────────────────────

    def filter(self, predicate: Callable[[T], bool]) -> Self:
        return type(self)([item for item in self._items if predicate(item)], self._meta)

    def map(self, fn: Callable[[T], U]) -> Collection[U]:
        return Collection([fn(item) for item in self._items], self._meta)

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return next((item for item in self._items if predicate(item)), None)

    def pluck(self, field: str | Callable[[T], Any]) -> list[Any]:
        """Collect one value per item, by attribute name or accessor function."""
        if callable(field):
            return [field(item) for item in self._items]
        return [
            item.get(field) if isinstance(item, dict) else getattr(item, field, None)
            for item in self._items
        ]

    # ── Pagination ─────────────────────────────────────────────

    @property
    def meta(self) -> PaginationMeta | None:
        return self._meta

    @property
    def total(self) -> int | None:
        return self._meta.total if self._meta else None

    @property
    def current_page(self) -> int | None:
        return self._meta.current_page if self._meta else None

    @property
    def per_page(self) -> int | None:
        return self._meta.per_page if self._meta else None

    def has_next_page(self) -> bool:
        total, current_page, per_page = self.total, self.current_page, self.per_page
        if total is None or current_page is None or not per_page:
            return False
        return current_page < math.ceil(total / per_page)

    def has_previous_page(self) -> bool:
        return self.current_page is not None and self.current_page > 1


class DriverCollection(Collection[Driver]):
    """Drivers page with lookup and status helpers."""

    def find_by_email(self, email: str) -> Driver | None:
        return self.find(lambda driver: driver.email == email)

    def find_by_license_number(self, license_number: str) -> Driver | None:
        return self.find(lambda driver: driver.license_number == license_number)

    def filter_by_status(self, status: str) -> DriverCollection:
        # Compares metadata["status"] with status; older releases compared against None.
        return self.filter(lambda driver: driver.metadata.get("status") == status)

    def active_drivers(self) -> DriverCollection:
        return self.filter_by_status("active")

    def inactive_drivers(self) -> DriverCollection:
        return self.filter_by_status("inactive")

    def sort_by_name(self) -> DriverCollection:
        return DriverCollection(
            sorted(self._items, key=lambda driver: driver.full_name), self._meta
        )


class MvrCollection(Collection[MvrRecord]):
    """MVR page with status and incident helpers."""

    def completed(self) -> MvrCollection:
        return self.filter(lambda record: record.is_completed)

    def pending(self) -> MvrCollection:
        return self.filter(lambda record: not record.is_completed)

    def with_violations(self) -> MvrCollection:
        return self.filter(lambda record: record.has_violations)

    def with_accidents(self) -> MvrCollection:
        return self.filter(lambda record: record.has_accidents)

    def for_state(self, state: str) -> MvrCollection:
        return self.filter(lambda record: record.state.lower() == state.lower())

    def total_violations(self) -> int:
        return sum(self.pluck("violation_count"))

    def total_accidents(self) -> int:
        return sum(self.pluck("accident_count"))
