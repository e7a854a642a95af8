"""Unit tests for date helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from acommons.core.exceptions import ArgumentException
from acommons.lang import dates

PLUS_TWO = timezone(timedelta(hours=2))


@pytest.mark.unit
class TestIsoConversion:
    """Test suite for ISO 8601 formatting and parsing."""

    def test_to_iso_string_milliseconds(self):
        """Test millisecond precision with a Z suffix."""
        dt = datetime(2024, 5, 1, 12, 30, 0, 123456, tzinfo=UTC)

        assert dates.to_iso_string(dt) == "2024-05-01T12:30:00.123Z"

    def test_to_iso_string_converts_offset(self):
        """Test aware datetimes are converted to UTC."""
        dt = datetime(2024, 5, 1, 14, 0, tzinfo=PLUS_TWO)

        assert dates.to_iso_string(dt) == "2024-05-01T12:00:00.000Z"

    def test_to_iso_string_naive_is_utc(self):
        """Test naive datetimes are taken as UTC."""
        assert dates.to_iso_string(datetime(2024, 5, 1)) == "2024-05-01T00:00:00.000Z"

    def test_from_iso_string_with_z(self):
        """Test parsing of a Z-suffixed timestamp."""
        parsed = dates.from_iso_string("2024-05-01T12:30:00.123Z")

        assert parsed == datetime(2024, 5, 1, 12, 30, 0, 123000, tzinfo=UTC)
        assert parsed.utcoffset() == timedelta(0)

    def test_from_iso_string_keeps_offset(self):
        """Test explicit offsets are preserved."""
        parsed = dates.from_iso_string("2024-05-01T14:00:00+02:00")

        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

    def test_from_iso_string_date_only(self):
        """Test a bare date becomes UTC midnight."""
        assert dates.from_iso_string("2024-05-01") == datetime(2024, 5, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01"])
    def test_from_iso_string_invalid(self, value):
        """Test invalid input raises ArgumentException."""
        with pytest.raises(ArgumentException) as exc_info:
            dates.from_iso_string(value)

        assert exc_info.value.extra == {"value": value}


@pytest.mark.unit
class TestHttpDates:
    """Test suite for HTTP date helpers."""

    def test_to_http_date(self):
        """Test IMF-fixdate output."""
        dt = datetime(2024, 5, 1, 12, 30, 15, 999999, tzinfo=UTC)

        assert dates.to_http_date(dt) == "Wed, 01 May 2024 12:30:15 GMT"

    def test_to_http_date_converts_offset(self):
        """Test aware datetimes are rendered in GMT."""
        dt = datetime(2024, 5, 1, 14, 30, tzinfo=PLUS_TWO)

        assert dates.to_http_date(dt) == "Wed, 01 May 2024 12:30:00 GMT"

    def test_from_http_date(self):
        """Test HTTP dates parse into aware UTC datetimes."""
        parsed = dates.from_http_date("Wed, 01 May 2024 12:30:00 GMT")

        assert parsed == datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
        assert parsed.utcoffset() == timedelta(0)

    def test_from_http_date_invalid(self):
        """Test invalid input raises ArgumentException."""
        with pytest.raises(ArgumentException):
            dates.from_http_date("not a date")


@pytest.mark.unit
class TestCalendarHelpers:
    """Test suite for day boundaries and arithmetic."""

    def test_start_and_end_of_day_keep_timezone(self):
        """Test boundaries are computed in the datetime's timezone."""
        dt = datetime(2024, 5, 1, 15, 45, tzinfo=PLUS_TWO)

        assert dates.start_of_day(dt) == datetime(2024, 5, 1, tzinfo=PLUS_TWO)
        end = dates.end_of_day(dt)
        assert (end.hour, end.minute, end.second, end.microsecond) == (23, 59, 59, 999999)
        assert end.tzinfo is PLUS_TWO

    def test_add_days(self):
        """Test adding and subtracting days."""
        dt = datetime(2024, 2, 28, tzinfo=UTC)

        assert dates.add_days(dt, 1) == datetime(2024, 2, 29, tzinfo=UTC)
        assert dates.add_days(dt, -28) == datetime(2024, 1, 31, tzinfo=UTC)

    def test_add_months_clamps(self):
        """Test month arithmetic clamps to the last day."""
        assert dates.add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
        assert dates.add_months(datetime(2023, 1, 31), 1) == datetime(2023, 2, 28)
        assert dates.add_months(datetime(2024, 3, 31), -1) == datetime(2024, 2, 29)

    def test_days_between(self):
        """Test signed calendar day difference."""
        a = datetime(2024, 5, 1, 23, 0, tzinfo=UTC)
        b = datetime(2024, 5, 3, 1, 0, tzinfo=UTC)

        assert dates.days_between(a, b) == 2
        assert dates.days_between(b, a) == -2

    def test_is_same_day_uses_utc(self):
        """Test comparison happens on the UTC calendar."""
        local = datetime(2024, 5, 2, 1, 0, tzinfo=PLUS_TWO)  # 2024-05-01 23:00 UTC

        assert dates.is_same_day(local, datetime(2024, 5, 1, 8, 0, tzinfo=UTC))
        assert not dates.is_same_day(local, datetime(2024, 5, 2, 8, 0, tzinfo=UTC))

    def test_is_today(self):
        """Test is_today against an explicit clock."""
        now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

        assert dates.is_today(datetime(2024, 5, 1, 0, 0, tzinfo=UTC), now=now)
        assert not dates.is_today(datetime(2024, 4, 30, 23, 59, tzinfo=UTC), now=now)
        assert dates.is_today(dates.utc_now())

    def test_utc_now_is_aware(self):
        """Test utc_now returns an aware datetime."""
        assert dates.utc_now().utcoffset() == timedelta(0)
