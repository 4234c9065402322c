"""Driver resource operations."""

from __future__ import annotations

from typing import Any

from sambasafety._parsing import parse_collection, parse_model, unwrap
from sambasafety._query import DriverQuery
from sambasafety._validation import validate_create_data, validate_update_data
from sambasafety.collection import DriverCollection, MvrCollection
from sambasafety.models.driver import Driver
from sambasafety.models.mvr_record import MvrRecord
from sambasafety.services._base import BaseService


class DriverService(BaseService):
    """CRUD, status transitions and MVR access for drivers.

    Create and update payloads are checked locally before any request is
    made; see :func:`sambasafety._validation.validate_create_data`.
    """

    def query(self) -> DriverQuery:
        """Start a fluent query over ``/drivers``."""
        return DriverQuery(self._client)

    def list(self, filters: dict[str, Any] | None = None) -> DriverCollection:
        response = self._client.get("/drivers", filters)
        return parse_collection(Driver, response, DriverCollection)

    def get(self, driver_id: str) -> Driver:
        response = self._client.get(f"/drivers/{driver_id}")
        return parse_model(Driver, unwrap(response))

    def create(self, driver_data: dict[str, Any]) -> Driver:
        validate_create_data(driver_data)
        response = self._client.post("/drivers", driver_data)
        return parse_model(Driver, unwrap(response))

    def update(self, driver_id: str, driver_data: dict[str, Any]) -> Driver:
        validate_update_data(driver_data)
        response = self._client.put(f"/drivers/{driver_id}", driver_data)
        return parse_model(Driver, unwrap(response))

    def delete(self, driver_id: str) -> bool:
        self._client.delete(f"/drivers/{driver_id}")
        return True

    # ── Status transitions ─────────────────────────────────────

    def activate(self, driver_id: str) -> Driver:
        return self._set_status(driver_id, {"status": "active"})

    def deactivate(self, driver_id: str) -> Driver:
        return self._set_status(driver_id, {"status": "inactive"})

    def suspend(self, driver_id: str, reason: str | None = None) -> Driver:
        body: dict[str, Any] = {"status": "suspended"}
        if reason is not None:
            body["reason"] = reason
        return self._set_status(driver_id, body)

    def _set_status(self, driver_id: str, body: dict[str, Any]) -> Driver:
        response = self._client.patch(f"/drivers/{driver_id}/status", body)
        return parse_model(Driver, unwrap(response))

    # ── Motor vehicle records ──────────────────────────────────

    def get_mvr(self, driver_id: str) -> MvrRecord:
        response = self._client.get(f"/drivers/{driver_id}/mvr")
        return parse_model(MvrRecord, unwrap(response))

    def request_mvr(self, driver_id: str, options: dict[str, Any] | None = None) -> MvrRecord:
        response = self._client.post(f"/drivers/{driver_id}/mvr", options)
        return parse_model(MvrRecord, unwrap(response))

    def get_mvr_history(
        self, driver_id: str, filters: dict[str, Any] | None = None
    ) -> MvrCollection:
        response = self._client.get(f"/drivers/{driver_id}/mvr/history", filters)
        return parse_collection(MvrRecord, response, MvrCollection)
