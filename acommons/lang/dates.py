"""Date helpers.

All helpers accept naive datetimes and treat them as UTC. Parsing and
calendar arithmetic use python-dateutil.
"""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta
from email.utils import format_datetime, parsedate_to_datetime

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from acommons.core.exceptions import ArgumentException


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_iso_string(dt: datetime) -> str:
    """Format as ISO 8601 UTC with millisecond precision and a ``Z`` suffix.

    Example:
        >>> to_iso_string(datetime(2024, 5, 1, 12, 30, tzinfo=UTC))
        '2024-05-01T12:30:00.000Z'
    """
    return _as_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def from_iso_string(text: str) -> datetime:
    """Parse an ISO 8601 string into an aware datetime.

    Offsets are preserved; strings without one are taken as UTC.

    Raises:
        ArgumentException: If the text is not a valid ISO 8601 date.
    """
    try:
        parsed = isoparse(text.strip())
    except (ValueError, OverflowError) as e:
        raise ArgumentException(
            detail=f"Invalid ISO 8601 date: {text!r}",
            extra={"value": text},
        ) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def to_http_date(dt: datetime) -> str:
    """Format as an HTTP date (IMF-fixdate), e.g. ``Wed, 01 May 2024 12:30:00 GMT``."""
    return format_datetime(_as_utc(dt).replace(microsecond=0), usegmt=True)


def from_http_date(text: str) -> datetime:
    """Parse an HTTP date into an aware UTC datetime.

    Raises:
        ArgumentException: If the text is not a valid HTTP date.
    """
    try:
        parsed = parsedate_to_datetime(text.strip())
    except (TypeError, ValueError, IndexError) as e:
        raise ArgumentException(
            detail=f"Invalid HTTP date: {text!r}",
            extra={"value": text},
        ) from e
    return _as_utc(parsed)


def start_of_day(dt: datetime) -> datetime:
    """Midnight of the same day, in the datetime's own timezone."""
    return datetime.combine(dt.date(), time.min, tzinfo=dt.tzinfo)


def end_of_day(dt: datetime) -> datetime:
    """Last microsecond of the same day, in the datetime's own timezone."""
    return datetime.combine(dt.date(), time.max, tzinfo=dt.tzinfo)


def add_days(dt: datetime, days: int) -> datetime:
    """Add (or subtract) whole days."""
    return dt + timedelta(days=days)


def add_months(dt: datetime, months: int) -> datetime:
    """Add months, clamping to the last valid day (Jan 31 + 1 month = Feb 28/29)."""
    return dt + relativedelta(months=months)


def days_between(a: datetime, b: datetime) -> int:
    """Signed number of UTC calendar days from ``a`` to ``b``."""
    return (_as_utc(b).date() - _as_utc(a).date()).days


def is_same_day(a: datetime, b: datetime) -> bool:
    """Return True if both datetimes fall on the same UTC calendar day."""
    return days_between(a, b) == 0


def is_today(dt: datetime, *, now: datetime | None = None) -> bool:
    """Return True if ``dt`` falls on the current UTC day."""
    return is_same_day(dt, now or utc_now())
