"""Pre-flight validation of driver create/update payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from email_validator import EmailNotValidError, validate_email

from sambasafety.exceptions import ValidationError

REQUIRED_CREATE_FIELDS = ("first_name", "last_name")
DRIVER_STATUSES = ("active", "inactive", "suspended")
DATE_FORMATS = ("%Y-%m-%d", "%Y-%m-%d %H:%M:%S")
LICENSE_NUMBER_MIN_LENGTH = 3
LICENSE_NUMBER_MAX_LENGTH = 50


def _is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_valid_date(value: Any) -> bool:
    """Accept ``YYYY-MM-DD``, ``YYYY-MM-DD HH:MM:SS`` or ISO-8601 with an offset."""
    if not isinstance(value, str):
        return False
    for fmt in DATE_FORMATS:
        try:
            datetime.strptime(value, fmt)
        except ValueError:
            continue
        return True
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return False
    return parsed.tzinfo is not None


def _validate_license_number(value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("License number cannot be empty", field="license_number")
    if len(value) < LICENSE_NUMBER_MIN_LENGTH:
        raise ValidationError(
            f"License number must be at least {LICENSE_NUMBER_MIN_LENGTH} characters long",
            field="license_number",
        )
    if len(value) > LICENSE_NUMBER_MAX_LENGTH:
        raise ValidationError(
            f"License number cannot exceed {LICENSE_NUMBER_MAX_LENGTH} characters",
            field="license_number",
        )


def _validate_common(data: dict[str, Any]) -> None:
    if data.get("email") is not None and not _is_valid_email(data["email"]):
        raise ValidationError("Invalid email format", field="email")

    if data.get("license_number") is not None:
        _validate_license_number(data["license_number"])

    if data.get("date_of_birth") is not None and not _is_valid_date(data["date_of_birth"]):
        raise ValidationError(
            "Invalid date_of_birth format. Use ISO 8601 format (YYYY-MM-DD)",
            field="date_of_birth",
        )


def validate_create_data(data: dict[str, Any]) -> None:
    """Raise ValidationError on the first problem in a driver create payload."""
    for field in REQUIRED_CREATE_FIELDS:
        if not data.get(field):
            raise ValidationError(f"Field '{field}' is required", field=field)
    _validate_common(data)


def validate_update_data(data: dict[str, Any]) -> None:
    """Raise ValidationError on the first problem in a partial driver update."""
    _validate_common(data)
    if data.get("status") is not None and data["status"] not in DRIVER_STATUSES:
        raise ValidationError(
            f"Invalid status. Must be one of: {', '.join(DRIVER_STATUSES)}",
            field="status",
        )
