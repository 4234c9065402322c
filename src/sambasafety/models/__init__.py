"""SambaSafety data models."""

from sambasafety.models.accident import Accident
from sambasafety.models.driver import Driver
from sambasafety.models.fleet import Fleet
from sambasafety.models.license_info import LicenseInfo
from sambasafety.models.mvr_record import MvrRecord
from sambasafety.models.responses import BulkValidationResult, PaginationMeta, TokenBundle
from sambasafety.models.violation import Violation

__all__ = [
    "Accident",
    "BulkValidationResult",
    "Driver",
    "Fleet",
    "LicenseInfo",
    "MvrRecord",
    "PaginationMeta",
    "TokenBundle",
    "Violation",
]
