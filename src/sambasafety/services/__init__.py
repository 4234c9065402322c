"""Resource services composed by :class:`sambasafety.SambaSafetyClient`."""

from sambasafety.services.auth import AuthService
from sambasafety.services.drivers import DriverService
from sambasafety.services.fleets import FleetService
from sambasafety.services.license_discovery import LicenseDiscoveryService
from sambasafety.services.mvr import MvrService

__all__ = [
    "AuthService",
    "DriverService",
    "FleetService",
    "LicenseDiscoveryService",
    "MvrService",
]
