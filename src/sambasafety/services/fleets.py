"""Fleet resource operations."""

from __future__ import annotations

from typing import Any

from sambasafety._parsing import parse_collection, parse_model, unwrap
from sambasafety._query import ListQuery
from sambasafety.collection import Collection, DriverCollection
from sambasafety.models.driver import Driver
from sambasafety.models.fleet import Fleet
from sambasafety.services._base import BaseService


class FleetService(BaseService):
    """CRUD and driver roster management for fleets."""

    def query(self) -> ListQuery[Fleet]:
        return ListQuery(self._client, "/fleets", Fleet)

    def list(self, filters: dict[str, Any] | None = None) -> Collection[Fleet]:
        response = self._client.get("/fleets", filters)
        return parse_collection(Fleet, response)

    def get(self, fleet_id: str) -> Fleet:
        response = self._client.get(f"/fleets/{fleet_id}")
        return parse_model(Fleet, unwrap(response))

    def create(self, fleet_data: dict[str, Any]) -> Fleet:
        response = self._client.post("/fleets", fleet_data)
        return parse_model(Fleet, unwrap(response))

    def update(self, fleet_id: str, fleet_data: dict[str, Any]) -> Fleet:
        response = self._client.put(f"/fleets/{fleet_id}", fleet_data)
        return parse_model(Fleet, unwrap(response))

    def delete(self, fleet_id: str) -> bool:
        self._client.delete(f"/fleets/{fleet_id}")
        return True

    # ── Roster ─────────────────────────────────────────────────

    def get_drivers(
        self, fleet_id: str, filters: dict[str, Any] | None = None
    ) -> DriverCollection:
        response = self._client.get(f"/fleets/{fleet_id}/drivers", filters)
        return parse_collection(Driver, response, DriverCollection)

    def add_driver(self, fleet_id: str, driver_id: str) -> bool:
        self._client.post(f"/fleets/{fleet_id}/drivers", {"driver_id": driver_id})
        return True

    def remove_driver(self, fleet_id: str, driver_id: str) -> bool:
        self._client.delete(f"/fleets/{fleet_id}/drivers/{driver_id}")
        return True
