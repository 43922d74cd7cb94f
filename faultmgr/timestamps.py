"""Conversion between Unix seconds and ISO 8601 UTC timestamps.

Timestamps are written as ``YYYY-MM-DDThh:mm:ssZ``. Only that exact form
is read back; anything else, and any date before the Unix epoch, reads as 0.
"""

from __future__ import annotations

_MAX_SECS = 253_402_300_799
"""9999-12-31T23:59:59Z in Unix seconds; later instants are clamped to it."""
_MAX_TIMESTAMP = "9999-12-31T23:59:59Z"

_SECS_PER_DAY = 86_400
_SECS_PER_HOUR = 3_600
_SECS_PER_MINUTE = 60

_TIMESTAMP_LENGTH = 20


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a ``(year, month, day)`` tuple."""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    year = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    if month <= 2:
        year += 1
    return year, month, day


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    Dates before the epoch give 0.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    doy = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    days = era * 146_097 + doe - 719_468
    return max(days, 0)


def format_unix_timestamp(secs: int) -> str:
    """Format Unix seconds as ``YYYY-MM-DDThh:mm:ssZ``.

    Instants after the end of year 9999 are clamped to its last second.
    """
    if secs < 0:
        raise ValueError(f"timestamp must not be negative: {secs}")
    if secs > _MAX_SECS:
        return _MAX_TIMESTAMP

    days, day_secs = divmod(secs, _SECS_PER_DAY)
    hours, rest = divmod(day_secs, _SECS_PER_HOUR)
    minutes, seconds = divmod(rest, _SECS_PER_MINUTE)
    year, month, day = civil_from_days(days)
    return f"{year:04}-{month:02}-{day:02}T{hours:02}:{minutes:02}:{seconds:02}Z"


def _parse_digits(field: bytes) -> int:
    """Read ASCII decimal digits; any other byte makes the whole field 0."""
    if not all(0x30 <= b <= 0x39 for b in field):
        return 0
    return int(field) if field else 0


def parse_iso_timestamp(text: str | None) -> int:
    """Read a timestamp written by :func:`format_unix_timestamp`.

    Returns Unix seconds, or 0 for ``None``, malformed input, out-of-range
    fields and dates before 1970-01-01.
    """
    if text is None:
        return 0
    raw = text.encode("utf-8")
    if len(raw) != _TIMESTAMP_LENGTH or not text.endswith("Z"):
        return 0

    year = _parse_digits(raw[0:4])
    month = _parse_digits(raw[5:7])
    day = _parse_digits(raw[8:10])
    hour = _parse_digits(raw[11:13])
    minute = _parse_digits(raw[14:16])
    second = _parse_digits(raw[17:19])

    if year < 1970 or month == 0 or day == 0:
        return 0
    if month > 12 or day > 31:
        return 0
    if hour >= 24 or minute >= 60 or second >= 60:
        return 0

    return (
        days_from_civil(year, month, day) * _SECS_PER_DAY
        + hour * _SECS_PER_HOUR
        + minute * _SECS_PER_MINUTE
        + second
    )