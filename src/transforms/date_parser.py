"""Flexible timestamp parsing.

This module reads loosely formatted catalog dates against an ordered
list of layouts and re-expresses them in one canonical UTC form.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import re

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_HOUR = r"(?P<hour>\d{1,2})"
_MINUTES = r":(?P<minute>\d{2})"
_SECONDS = r":(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?"
_OFFSET = r"(?P<offset>Z|[+-]\d{2}:\d{2})"


class DateParseError(ValueError):
    """Raised when a timestamp matches none of the accepted layouts."""


@dataclass(frozen=True)
class _DateLayout:
    """One accepted timestamp layout."""

    name: str
    pattern: re.Pattern[str]
    local_time: bool = False


def _layout(name: str, regex: str, local_time: bool = False) -> _DateLayout:
    return _DateLayout(name, re.compile(regex, re.ASCII), local_time)


# Hours may be one or two digits in every layout. The local-time layout is
# tried last and only sees strings the UTC minute layout already rejected;
# its interpretation intentionally differs.
DATE_LAYOUTS: tuple[_DateLayout, ...] = (
    _layout("rfc3339", _DATE + "T" + _HOUR + _MINUTES + _SECONDS + _OFFSET),
    _layout("utc_marker", _DATE + "T" + _HOUR + _MINUTES + _SECONDS + "Z"),
    _layout("no_zone", _DATE + "T" + _HOUR + _MINUTES + _SECONDS),
    _layout("minutes", _DATE + "T" + _HOUR + _MINUTES),
    _layout("space_separator", _DATE + " " + _HOUR + _MINUTES + _SECONDS),
    _layout("date_only", _DATE),
    _layout("local_minutes", _DATE + "T" + _HOUR + _MINUTES, local_time=True),
)

# Parsing stops at the first matching layout; landing on this instant still
# counts as no match.
ZERO_INSTANT = datetime(1, 1, 1, tzinfo=timezone.utc)


def parse_flexible_time(text: str) -> datetime:
    """Parse a timestamp using the first matching layout.

    Args:
        text: Raw date text; surrounding whitespace is ignored.

    Returns:
        Timezone-aware instant in UTC.

    Raises:
        DateParseError: If no layout matches, or the first match is
            ``0001-01-01T00:00:00Z``.
    """
    candidate = text.strip()
    for layout in DATE_LAYOUTS:
        match = layout.pattern.fullmatch(candidate)
        if match is None:
            continue
        try:
            instant = _build_instant(match, layout.local_time)
        except (ValueError, OverflowError, OSError):
            continue
        if instant == ZERO_INSTANT:
            break
        return instant
    raise DateParseError(f"no layout matches date value {text!r}")


def format_canonical(instant: datetime) -> str:
    """Format an instant as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC."""
    utc = instant.astimezone(timezone.utc)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}Z"
    )


def canonicalize_date(text: str) -> str:
    """Return the canonical UTC form of a date, or the text unchanged.

    Args:
        text: Raw date text.

    Returns:
        Canonical date string, or ``text`` verbatim when unparseable.
    """
    try:
        instant = parse_flexible_time(text)
    except DateParseError:
        return text
    return format_canonical(instant)


def _build_instant(match: re.Match[str], local_time: bool) -> datetime:
    """Build a UTC instant from layout match groups.

    Raises:
        ValueError: If a component is out of range.
        OverflowError: If UTC conversion leaves the supported year range.
    """
    groups = match.groupdict()
    naive = datetime(
        int(groups["year"]),
        int(groups["month"]),
        int(groups["day"]),
        int(groups.get("hour") or 0),
        int(groups.get("minute") or 0),
        int(groups.get("second") or 0),
        _microseconds(groups.get("fraction")),
    )
    if local_time:
        return naive.astimezone().astimezone(timezone.utc)
    zone = _parse_offset(groups.get("offset"))
    return naive.replace(tzinfo=zone).astimezone(timezone.utc)


def _microseconds(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _parse_offset(offset: str | None) -> timezone:
    """Parse ``Z`` or ``±HH:MM``; missing offsets read as UTC."""
    if offset is None or offset == "Z":
        return timezone.utc
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours >= 24 or minutes >= 60:
        raise ValueError(f"offset out of range: {offset}")
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if offset[0] == "-" else delta)
