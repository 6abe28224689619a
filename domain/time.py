"""
Domain time utilities (pure).

Fixed wire pattern for contract timestamps:

    yyyy-MM-dd'T'HH:mm:ss.SSSSSSZ

- 4-digit year, 2-digit month/day/hour/minute/second.
- Exactly six fractional digits (microseconds).
- Explicit numeric zone offset as +HHMM or -HHMM (no colon, no 'Z').

Parsing is strict: anything that does not match the pattern exactly is a
ContractFormatError, including well-formed ISO-8601 variants.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from .errors import ContractFormatError, ContractShapeError

TIMESTAMP_PATTERN = "yyyy-MM-dd'T'HH:mm:ss.SSSSSSZ"

_TIMESTAMP_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})\.(?P<micro>[0-9]{6})"
    r"(?P<sign>[+-])(?P<off_h>[0-9]{2})(?P<off_m>[0-9]{2})"
)


def require_timezone_aware(name: str, value: datetime) -> None:
    """
    Enforces that a contract timestamp carries a zone offset.

    Naive datetimes cannot be rendered with the fixed pattern.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ContractShapeError(name, value, "a timezone-aware datetime")


def parse_contract_timestamp(name: str, text: str) -> datetime:
    """
    Parse a wire timestamp, keeping its original offset.

    Raises ContractFormatError identifying the field and the raw value.
    """

    match = _TIMESTAMP_RE.fullmatch(text)
    if match is None:
        raise ContractFormatError(name, text, TIMESTAMP_PATTERN)

    parts = match.groupdict()
    if int(parts["off_m"]) > 59:
        raise ContractFormatError(name, text, TIMESTAMP_PATTERN)
    offset = timedelta(hours=int(parts["off_h"]), minutes=int(parts["off_m"]))
    if parts["sign"] == "-":
        offset = -offset

    try:
        return datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            int(parts["hour"]),
            int(parts["minute"]),
            int(parts["second"]),
            int(parts["micro"]),
            tzinfo=timezone(offset),
        )
    except ValueError as exc:
        # Matches the pattern but names an impossible instant (month 13, offset 25:00).
        raise ContractFormatError(name, text, TIMESTAMP_PATTERN) from exc


def format_contract_timestamp(name: str, value: datetime) -> str:
    """Render a timezone-aware datetime using the fixed wire pattern."""

    require_timezone_aware(name, value)

    # Offset seconds are truncated toward zero, so -00:00:30 renders as +0000.
    total_minutes = int(value.utcoffset().total_seconds() / 60)
    sign = "+" if total_minutes >= 0 else "-"
    off_h, off_m = divmod(abs(total_minutes), 60)

    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{value.microsecond:06d}"
        f"{sign}{off_h:02d}{off_m:02d}"
    )


__all__ = [
    "TIMESTAMP_PATTERN",
    "require_timezone_aware",
    "parse_contract_timestamp",
    "format_contract_timestamp",
]
