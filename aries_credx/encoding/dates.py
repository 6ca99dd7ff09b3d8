"""RFC3339 date parsing for date attribute encodings."""

import re

from datetime import datetime, timedelta, timezone
from typing import Union

from .error import MalformedInputError

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
DAYS_EPOCH = datetime(1900, 1, 1, tzinfo=timezone.utc)

RFC3339_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))",
    re.ASCII,
)


def parse_rfc3339(value: Union[str, datetime]) -> datetime:
    """Parse an RFC3339 date-time string into an aware UTC datetime.

    A leap second (`:60`) is folded onto the last microsecond of the
    preceding second. Naive datetime objects are taken to be in UTC.

    Args:
        value: RFC3339 string, or a datetime to allow automatic conversion

    Raises:
        MalformedInputError: the value is not a valid RFC3339 date-time

    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if not isinstance(value, str):
        raise MalformedInputError(
            f"Expected an RFC3339 string, got {type(value).__name__}"
        )

    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        raise MalformedInputError(f"Invalid RFC3339 date: '{value}'")
    year, month, day, hour, minute, second = (int(match[i]) for i in range(1, 7))
    fraction = match[7] or ""
    microsecond = int(fraction[:6].ljust(6, "0"))
    if second == 60:
        second, microsecond = 59, 999999

    try:
        if match[8]:
            tz = timezone.utc
        else:
            offset = timedelta(hours=int(match[10]), minutes=int(match[11]))
            if offset >= timedelta(days=1) or int(match[11]) > 59:
                raise ValueError(f"UTC offset out of range: {match[9]}{offset}")
            tz = timezone(offset if match[9] == "+" else -offset)
        result = datetime(year, month, day, hour, minute, second, microsecond, tz)
        return result.astimezone(timezone.utc)
    except (OverflowError, ValueError) as err:
        raise MalformedInputError(f"Invalid RFC3339 date: '{value}'") from err


def epoch_seconds(dt: datetime) -> int:
    """Whole seconds since the Unix epoch, rounded toward negative infinity."""
    return (dt - UNIX_EPOCH) // timedelta(seconds=1)


def days_since_1900(dt: datetime) -> int:
    """Whole days since 1900-01-01T00:00:00Z, truncated toward zero."""
    micros = (dt - DAYS_EPOCH) // timedelta(microseconds=1)
    days = abs(micros) // (86400 * 1_000_000)
    return -days if micros < 0 else days
