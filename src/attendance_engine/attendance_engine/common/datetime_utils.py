from __future__ import annotations

from datetime import datetime, time
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_datetime(value: Any, field_name: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; empty values come back as None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValidationError(f"{field_name} is not a valid ISO-8601 timestamp") from exc


def minutes_from_midnight(value: time | datetime) -> int:
    """Whole minutes since midnight of a wall-clock value (seconds ignored)."""
    return value.hour * 60 + value.minute


def format_clock(value: time | datetime) -> str:
    return value.strftime("%H:%M:%S")
