"""Timestamp formatting shared by the projectors.

Every projector needs "the first non-zero of these timestamps, formatted",
each with its own ordering and layout. ``any_time_format`` is that rule.

A timestamp is *zero* when it is ``None`` or ``datetime.min``. Naive
datetimes are read as UTC.

Example:
    >>> from datetime import UTC, datetime
    >>> from feedsmith.utils.timefmt import any_time_format, rfc3339, rfc1123z
    >>> created = datetime(2020, 1, 2, tzinfo=UTC)
    >>> any_time_format(rfc3339, None, created)
    '2020-01-02T00:00:00Z'
    >>> any_time_format(rfc1123z, created)
    'Thu, 02 Jan 2020 00:00:00 +0000'
    >>> any_time_format(rfc3339, None, None)
    ''
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from email.utils import format_datetime

TimeLayout = str | Callable[[datetime], str]


def is_zero(value: datetime | None) -> bool:
    """Return True for an unset timestamp.

    Example:
        >>> from datetime import datetime
        >>> is_zero(None), is_zero(datetime.min), is_zero(datetime(2024, 1, 1))
        (True, True, False)
    """
    return value is None or value.replace(tzinfo=None) == datetime.min


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, leave aware ones alone."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _offset_minutes(value: datetime) -> int:
    offset = value.utcoffset()
    return int(offset.total_seconds() // 60) if offset else 0


def _clock(value: datetime) -> str:
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def date_only(value: datetime) -> str:
    """``YYYY-MM-DD`` in the timestamp's own zone."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def rfc3339(value: datetime) -> str:
    """RFC 3339 with second precision; zero offsets print as ``Z``.

    Example:
        >>> from datetime import datetime, timedelta, timezone
        >>> rfc3339(datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone(timedelta(hours=-5))))
        '2024-05-06T07:08:09-05:00'
    """
    value = ensure_aware(value)
    minutes = _offset_minutes(value)
    if minutes == 0:
        zone = "Z"
    else:
        sign = "-" if minutes < 0 else "+"
        hours, mins = divmod(abs(minutes), 60)
        zone = f"{sign}{hours:02d}:{mins:02d}"
    return f"{date_only(value)}T{_clock(value)}{zone}"


def rfc3339_nano(value: datetime) -> str:
    """RFC 3339 keeping fractional seconds, trailing zeros trimmed.

    Example:
        >>> from datetime import UTC, datetime
        >>> rfc3339_nano(datetime(2024, 5, 6, 7, 8, 9, 120000, tzinfo=UTC))
        '2024-05-06T07:08:09.12Z'
        >>> rfc3339_nano(datetime(2024, 5, 6, 7, 8, 9, tzinfo=UTC))
        '2024-05-06T07:08:09Z'
    """
    value = ensure_aware(value)
    text = rfc3339(value)
    if not value.microsecond:
        return text
    fraction = f".{value.microsecond:06d}".rstrip("0")
    return f"{text[:19]}{fraction}{text[19:]}"


def rfc1123z(value: datetime) -> str:
    """RFC 1123 with a numeric zone, e.g. ``Mon, 02 Jan 2006 15:04:05 -0700``.

    Day and month names are always English, independent of locale.
    """
    return format_datetime(ensure_aware(value))


def format_time(layout: TimeLayout, value: datetime) -> str:
    """Format one timestamp with a layout callable or strftime pattern."""
    if callable(layout):
        return layout(value)
    return ensure_aware(value).strftime(layout)


def any_time_format(layout: TimeLayout, *times: datetime | None) -> str:
    """Format the first non-zero timestamp, or return ``""`` if all are zero.

    Args:
        layout: A formatter (``rfc3339``, ``rfc1123z``, ``date_only``) or a
            strftime pattern.
        *times: Candidates in priority order.

    Returns:
        The formatted timestamp, or an empty string.

    Example:
        >>> from datetime import datetime
        >>> any_time_format("%Y", None, datetime(1999, 12, 31), datetime(2001, 1, 1))
        '1999'
    """
    for value in times:
        if not is_zero(value):
            return format_time(layout, value)
    return ""
