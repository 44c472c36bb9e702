"""feedsmith utilities."""

from feedsmith.utils.timefmt import (
    TimeLayout,
    any_time_format,
    date_only,
    ensure_aware,
    format_time,
    is_zero,
    rfc1123z,
    rfc3339,
    rfc3339_nano,
)

__all__ = [
    "TimeLayout",
    "any_time_format",
    "date_only",
    "ensure_aware",
    "format_time",
    "is_zero",
    "rfc1123z",
    "rfc3339",
    "rfc3339_nano",
]
