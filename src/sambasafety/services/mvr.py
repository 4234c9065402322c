"""Motor vehicle record operations."""

from __future__ import annotations

from typing import Any

from sambasafety._parsing import parse_collection, parse_model, unwrap
from sambasafety.collection import MvrCollection
from sambasafety.models.mvr_record import MvrRecord
from sambasafety.services._base import BaseService


class MvrService(BaseService):
    """Ordering, lookup and lifecycle management of MVR reports."""

    def list(self, filters: dict[str, Any] | None = None) -> MvrCollection:
        response = self._client.get("/mvr-records", filters)
        return parse_collection(MvrRecord, response, MvrCollection)

    def get(self, record_id: str) -> MvrRecord:
        response = self._client.get(f"/mvr-records/{record_id}")
        return parse_model(MvrRecord, unwrap(response))

    def request(self, request_data: dict[str, Any]) -> MvrRecord:
        """Order a new MVR report from a raw request payload."""
        response = self._client.post("/mvr-records", request_data)
        return parse_model(MvrRecord, unwrap(response))

    def request_for_driver(
        self, driver_id: str, options: dict[str, Any] | None = None
    ) -> MvrRecord:
        return self.request({"driver_id": driver_id, **(options or {})})

    def get_by_driver(
        self, driver_id: str, filters: dict[str, Any] | None = None
    ) -> MvrCollection:
        return self.list({**(filters or {}), "driver_id": driver_id})

    def get_latest_by_driver(self, driver_id: str) -> MvrRecord | None:
        """Most recently created report for a driver, or None if there is none."""
        records = self.get_by_driver(driver_id, {"per_page": 1, "sort": "-created_at"})
        return records.first()

    def get_pending_records(self) -> MvrCollection:
        return self.list({"status": "pending"})

    def get_completed_records(self) -> MvrCollection:
        return self.list({"status": "completed"})

    def cancel(self, record_id: str) -> bool:
        self._client.patch(f"/mvr-records/{record_id}", {"status": "cancelled"})
        return True

    def refresh(self, record_id: str) -> MvrRecord:
        response = self._client.post(f"/mvr-records/{record_id}/refresh")
        return parse_model(MvrRecord, unwrap(response))
