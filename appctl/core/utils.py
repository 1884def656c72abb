"""
Core Utilities.

Shared utility functions used across the client.
"""

from datetime import datetime, timedelta, timezone

ZERO_INSTANT = datetime(1, 1, 1, tzinfo=timezone.utc)


def format_instant(value: datetime) -> str:
    """
    Render an instant as ``YYYY-MM-DD HH:MM:SS[.fraction] ±hhmm ZONE``.

    This is the form the service's log consumers expect, e.g.
    ``2014-01-01 00:00:00 +0000 UTC``. Sub-second digits are printed only
    when non-zero, with trailing zeros trimmed. The zone name is ``UTC``
    for a zero offset and the numeric offset otherwise. Naive datetimes
    are assumed to be UTC.

    Args:
        value: The instant to render

    Returns:
        Formatted timestamp string
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)

    # strftime drops the zero padding of years below 1000 on some platforms
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")

    offset = value.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    numeric = f"{sign}{minutes // 60:02d}{minutes % 60:02d}"
    zone = "UTC" if offset == timedelta(0) else numeric
    return f"{text} {numeric} {zone}"
