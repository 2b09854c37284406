# This project was developed with assistance from AI tools.
"""Date helpers shared by deadline evaluation and display formatting.

All timezone handling and day rounding lives here. Naive datetimes are
treated as UTC; calendar dates are rendered in ``settings.DISPLAY_TIMEZONE``.
"""

import math
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from ..core.config import settings

_ONE_DAY = timedelta(days=1)


class DeadlineValidationError(ValueError):
    """Raised when a timestamp cannot be interpreted."""

    def __init__(self, value: object, field: str = "deadline"):
        self.field = field
        self.value = value
        super().__init__(f"Invalid timestamp: {value!r}")


def ensure_tz(dt: datetime) -> datetime:
    """Ensure a datetime is timezone-aware (UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def parse_timestamp(value: datetime | date | str | None) -> datetime | None:
    """Coerce a datetime, date or ISO-8601 string to an aware datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_tz(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # fromisoformat on 3.11+ accepts the trailing "Z" form
        try:
            return ensure_tz(datetime.fromisoformat(text))
        except ValueError as exc:
            raise DeadlineValidationError(value) from exc
    raise DeadlineValidationError(value)


def days_remaining(deadline: datetime, now: datetime) -> int:
    """Whole days until ``deadline``; any partial day counts as a full day."""
    delta = ensure_tz(deadline) - ensure_tz(now)
    return math.ceil(delta / _ONE_DAY)


def _local(dt: datetime) -> datetime:
    return ensure_tz(dt).astimezone(ZoneInfo(settings.DISPLAY_TIMEZONE))


def format_date(value: datetime | date | str | None) -> str:
    """Render as ``Mar 31, 2026``; ``N/A`` when absent."""
    dt = parse_timestamp(value)
    if dt is None:
        return "N/A"
    local = _local(dt)
    return f"{local:%b} {local.day}, {local.year}"


def format_date_time(value: datetime | date | str | None) -> str:
    """Render as ``Mar 31, 2026 4:05 PM``; ``N/A`` when absent."""
    dt = parse_timestamp(value)
    if dt is None:
        return "N/A"
    local = _local(dt)
    hour = local.hour % 12 or 12
    return f"{local:%b} {local.day}, {local.year} {hour}:{local:%M %p}"
