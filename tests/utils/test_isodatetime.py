"""Tests for isodatetime module."""

from datetime import UTC, datetime, timedelta

from itemkeeper.utils import isodatetime


class TestToTimestamp:
    """Tests for to_timestamp function."""

    def test_converts_naive_datetime_to_utc(self):
        """Naive datetime should be treated as UTC."""
        dt = datetime(2025, 12, 23, 10, 30, 0)
        assert isodatetime.to_timestamp(dt) == "2025-12-23T10:30:00.000Z"

    def test_keeps_milliseconds(self):
        """Microseconds are truncated to milliseconds."""
        dt = datetime(2025, 12, 23, 10, 30, 0, 123456, tzinfo=UTC)
        assert isodatetime.to_timestamp(dt) == "2025-12-23T10:30:00.123Z"

    def test_converts_other_timezones(self):
        """Aware datetimes in other zones are shifted to UTC."""
        from datetime import timezone

        dt = datetime(2025, 12, 23, 18, 30, 0, tzinfo=timezone(timedelta(hours=8)))
        assert isodatetime.to_timestamp(dt) == "2025-12-23T10:30:00.000Z"


class TestToDatetime:
    """Tests for to_datetime function."""

    def test_converts_z_suffix(self):
        """Should parse timestamp with Z suffix."""
        result = isodatetime.to_datetime("2025-12-23T10:30:00.123Z")
        assert result == datetime(2025, 12, 23, 10, 30, 0, 123000, tzinfo=UTC)


class TestNow:
    """Tests for now and now_unix."""

    def test_now_is_parseable_and_recent(self):
        """now() should be a current ISO 8601 UTC timestamp."""
        result = isodatetime.now()
        assert result.endswith("Z")
        assert abs(datetime.now(UTC) - isodatetime.to_datetime(result)) < timedelta(seconds=2)

    def test_now_unix_is_integer(self):
        """now_unix() should be whole seconds."""
        result = isodatetime.now_unix()
        assert isinstance(result, int)
        assert abs(result - datetime.now(UTC).timestamp()) < 2
