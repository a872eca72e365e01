"""Datetime utilities for the Mailosaur client."""

from __future__ import annotations

import re
from datetime import datetime

_FRACTION_PATTERN = re.compile(r"\.(\d+)")


def parse_iso_timestamp(timestamp_str: str) -> datetime:
    """Parse an ISO 8601 timestamp string to datetime.

    Handles the 'Z' suffix and fractional seconds of any precision
    (the API may send up to 7 digits). The timestamp must carry a UTC offset.

    Args:
        timestamp_str: ISO 8601 formatted timestamp string.

    Returns:
        A datetime object.

    Raises:
        ValueError: If the string is not a valid timestamp or has no UTC offset.
    """
    if timestamp_str.endswith("Z"):
        timestamp_str = timestamp_str[:-1] + "+00:00"
    timestamp_str = _FRACTION_PATTERN.sub(
        lambda m: "." + m.group(1)[:6].ljust(6, "0"), timestamp_str, count=1
    )
    parsed = datetime.fromisoformat(timestamp_str)
    if parsed.tzinfo is None:
        raise ValueError(f"Timestamp has no UTC offset: {timestamp_str!r}")
    return parsed


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as an RFC 3339 timestamp with second precision.

    UTC is written as 'Z', any other offset as '+HH:MM' or '-HH:MM'.
    Naive datetimes are treated as UTC.

    Args:
        value: The datetime to format.

    Returns:
        A string such as '2006-01-02T15:04:05Z' or '2006-01-02T15:04:05-07:00'.
    """
    offset = value.utcoffset()
    base = value.replace(microsecond=0, tzinfo=None).isoformat()
    if not offset:
        return base + "Z"
    total_minutes = int(offset.total_seconds() / 60)
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"
