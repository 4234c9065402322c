"""Shared test fixtures and sample API responses."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from sambasafety import SambaSafetyClient
from sambasafety._http import HttpClient

BASE_URL = "https://api.sambasafety.com/v1"
API_KEY = "test-api-key"


SAMPLE_DRIVER = {
    "id": "drv_1",
    "first_name": "Jane",
    "last_name": "Doe",
    "license_number": "D1234567",
    "email": "jane.doe@example.com",
    "metadata": {"status": "active", "hire_date": "2021-04-01"},
}

SAMPLE_FLEET = {
    "id": "flt_1",
    "name": "West Coast Haulers",
    "description": "Long-haul division",
    "status": "Active",
    "settings": {"mvr_frequency": "annual"},
    "created_at": "2023-01-15T08:30:00+00:00",
    "updated_at": "2024-02-01T12:00:00+00:00",
    "metadata": {},
}

SAMPLE_LICENSE = {
    "number": "D1234567",
    "state": "CA",
    "status": "active",
    "class": "CDL-A",
    "issue_date": "2019-06-01T00:00:00+00:00",
    "expiration_date": "2027-06-01T00:00:00+00:00",
    "endorsements": ["H", "N"],
    "restrictions": ["L"],
    "metadata": {},
}

SAMPLE_VIOLATION = {
    "id": "vio_1",
    "code": "SP20",
    "description": "Speeding 20 mph over limit",
    "severity": "major",
    "date": "2023-08-12T14:00:00+00:00",
    "location": "Fresno, CA",
    "fine_amount": 350.0,
    "conviction": True,
    "points": 2,
    "metadata": {},
}

SAMPLE_ACCIDENT = {
    "id": "acc_1",
    "date": "2022-11-03T09:15:00+00:00",
    "type": "collision",
    "severity": "minor",
    "location": "Sacramento, CA",
    "fatalities": 0,
    "injuries": 1,
    "damage_amount": 4200.5,
    "at_fault": True,
    "description": "Rear-end collision",
    "metadata": {"preventable": True},
}

SAMPLE_MVR = {
    "id": "mvr_1",
    "driver_id": "drv_1",
    "state": "CA",
    "license_number": "D1234567",
    "status": "completed",
    "request_date": "2024-03-01T10:00:00+00:00",
    "report_date": "2024-03-02T10:00:00+00:00",
    "violations": [SAMPLE_VIOLATION],
    "accidents": [SAMPLE_ACCIDENT],
    "license_info": SAMPLE_LICENSE,
    "metadata": {},
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def http() -> Iterator[HttpClient]:
    client = HttpClient(API_KEY, base_url=BASE_URL)
    yield client
    client.close()


@pytest.fixture
def client() -> Iterator[SambaSafetyClient]:
    with SambaSafetyClient(API_KEY, base_url=BASE_URL) as sdk:
        yield sdk
