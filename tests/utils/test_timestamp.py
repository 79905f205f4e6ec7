"""Test suite for timestamp utility."""
from datetime import datetime, timedelta, timezone

from imscale.utils.timestamp import fromModifiedTime, toHttpDate, toRfc3339

# ============================================================================
# Test Class 1: fromModifiedTime
# ============================================================================


class TestFromModifiedTime:
    """Test fromModifiedTime (epoch seconds -> aware UTC datetime)."""

    def test_epoch_seconds(self) -> None:
        # 2024-01-01 00:00:00 UTC = 1704067200
        dt = fromModifiedTime(1704067200)

        assert dt == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert dt.tzinfo == timezone.utc

    def test_fractional_seconds(self) -> None:
        dt = fromModifiedTime(1704067200.5)
        assert dt.microsecond == 500000


# ============================================================================
# Test Class 2: Formatting
# ============================================================================


class TestFormatting:
    """Test RFC 3339 and HTTP-date formatting."""

    def test_rfc3339_utc(self) -> None:
        dt = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert toRfc3339(dt) == "2024-05-01T12:00:00+00:00"

    def test_rfc3339_converts_offset_to_utc(self) -> None:
        offset = timezone(timedelta(hours=5, minutes=30))
        dt = datetime(2024, 5, 1, 17, 30, 0, tzinfo=offset)
        assert toRfc3339(dt) == "2024-05-01T12:00:00+00:00"

    def test_rfc3339_naive_is_local(self) -> None:
        """Naive datetimes are treated as local time (exact value depends on system timezone)."""
        result = datetime.fromisoformat(toRfc3339(datetime(2024, 5, 1, 12, 0, 0)))
        assert result.utcoffset() == timedelta(0)

    def test_http_date(self) -> None:
        dt = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert toHttpDate(dt) == "Wed, 01 May 2024 12:00:00 GMT"

    def test_http_date_converts_offset(self) -> None:
        offset = timezone(timedelta(hours=-5))
        dt = datetime(2024, 5, 1, 7, 0, 0, tzinfo=offset)
        assert toHttpDate(dt) == "Wed, 01 May 2024 12:00:00 GMT"
