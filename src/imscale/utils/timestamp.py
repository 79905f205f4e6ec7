from datetime import datetime, timezone
from email.utils import format_datetime


def fromModifiedTime(mtime: float) -> datetime:
    """
    Converts a filesystem modification time (seconds since epoch) to a
    timezone-aware UTC datetime object.
    """
    return datetime.fromtimestamp(mtime, tz=timezone.utc)


def toRfc3339(utc_dt: datetime) -> str:
    """
    Formats a datetime as RFC 3339, e.g. 2024-05-01T12:00:00+00:00.
    Naive datetimes are assumed to be in the system's local timezone.
    """
    if utc_dt.tzinfo is None or utc_dt.tzinfo.utcoffset(utc_dt) is None:
        utc_dt = utc_dt.astimezone()
    return utc_dt.astimezone(timezone.utc).isoformat()


def toHttpDate(utc_dt: datetime) -> str:
    """
    Formats a datetime for HTTP headers such as Last-Modified,
    e.g. Wed, 01 May 2024 12:00:00 GMT.
    """
    if utc_dt.tzinfo is None or utc_dt.tzinfo.utcoffset(utc_dt) is None:
        utc_dt = utc_dt.astimezone()
    return format_datetime(utc_dt.astimezone(timezone.utc), usegmt=True)
