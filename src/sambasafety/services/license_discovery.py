"""License discovery: locating license records from personal information."""

from __future__ import annotations

from typing import Any

from sambasafety._parsing import parse_list, parse_model
from sambasafety.models.driver import Driver
from sambasafety.models.license_info import LicenseInfo
from sambasafety.models.responses import BulkValidationResult
from sambasafety.services._base import BaseService


class LicenseDiscoveryService(BaseService):
    """Search, validation and driver-linking operations for licenses.

    Search endpoints reply with ``{"licenses": [...]}``; an absent or empty
    key yields an empty list.
    """

    def discover_by_personal_info(self, personal_info: dict[str, Any]) -> list[LicenseInfo]:
        return self._licenses(self._client.post("/license-discovery/personal", personal_info))

    def discover_by_driver_info(
        self,
        first_name: str,
        last_name: str,
        date_of_birth: str,
        state: str | None = None,
    ) -> list[LicenseInfo]:
        data = {
            "first_name": first_name,
            "last_name": last_name,
            "date_of_birth": date_of_birth,
        }
        if state is not None:
            data["state"] = state
        return self.discover_by_personal_info(data)

    def discover_by_ssn(self, ssn: str, state: str | None = None) -> list[LicenseInfo]:
        data = {"ssn": ssn}
        if state is not None:
            data["state"] = state
        return self._licenses(self._client.post("/license-discovery/ssn", data))

    def discover_multiple_states(
        self, personal_info: dict[str, Any], states: list[str]
    ) -> list[LicenseInfo]:
        data = {**personal_info, "states": states}
        return self._licenses(self._client.post("/license-discovery/multi-state", data))

    def search_all_states(self, personal_info: dict[str, Any]) -> list[LicenseInfo]:
        return self._licenses(
            self._client.post("/license-discovery/all-states", personal_info)
        )

    def validate_license(self, license_number: str, state: str) -> LicenseInfo | None:
        """Look up a single license; None when the registry has no match."""
        response = self._client.post(
            "/license-discovery/validate",
            {"license_number": license_number, "state": state},
        )
        if not response.get("license"):
            return None
        return parse_model(LicenseInfo, response["license"])

    def get_license_history(self, license_number: str, state: str) -> list[LicenseInfo]:
        response = self._client.get(f"/license-discovery/history/{state}/{license_number}")
        return self._licenses(response, key="history")

    def find_expired_licenses(self, filters: dict[str, Any] | None = None) -> list[LicenseInfo]:
        return self._licenses(self._client.get("/license-discovery/expired", filters))

    def find_expiring_soon(self, days: int = 30) -> list[LicenseInfo]:
        return self._licenses(
            self._client.get("/license-discovery/expiring-soon", {"days": days})
        )

    def find_suspended_licenses(
        self, filters: dict[str, Any] | None = None
    ) -> list[LicenseInfo]:
        return self._licenses(self._client.get("/license-discovery/suspended", filters))

    def bulk_validation(self, licenses: list[dict[str, Any]]) -> list[BulkValidationResult]:
        """Validate many licenses at once; per-item outcomes come from the server as-is."""
        response = self._client.post(
            "/license-discovery/bulk-validate", {"licenses": licenses}
        )
        return parse_list(BulkValidationResult, response.get("results"))

    def discover_for_existing_driver(self, driver_id: str) -> list[LicenseInfo]:
        return self._licenses(self._client.post(f"/drivers/{driver_id}/license-discovery"))

    def link_license_to_driver(
        self, driver_id: str, license_number: str, state: str
    ) -> Driver:
        response = self._client.post(
            f"/drivers/{driver_id}/licenses",
            {"license_number": license_number, "state": state},
        )
        return parse_model(Driver, response.get("driver") or response)

    def unlink_license_from_driver(
        self, driver_id: str, license_number: str, state: str
    ) -> bool:
        self._client.delete(f"/drivers/{driver_id}/licenses/{state}/{license_number}")
        return True

    @staticmethod
    def _licenses(response: dict[str, Any], key: str = "licenses") -> list[LicenseInfo]:
        return parse_list(LicenseInfo, response.get(key))
