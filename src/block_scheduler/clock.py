"""Boundary: "HH:MM" strings and datetimes <-> integer minutes of day."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

MINUTES_PER_DAY = 24 * 60


def parse_time(s: str) -> int:
    """Parse an 'HH:MM' string to minutes from midnight.

    Raises ValueError for anything that is not two integer fields with a
    valid minute. Hours are not capped at 23 so that placements running past
    midnight still round-trip through format_minutes.
    """
    parts = s.split(":")
    if len(parts) != 2:
        raise ValueError(f"expected 'HH:MM', got {s!r}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"expected 'HH:MM', got {s!r}") from None
    if hours < 0 or not 0 <= minutes < 60:
        raise ValueError(f"time out of range: {s!r}")
    return hours * 60 + minutes


def format_minutes(minutes: int) -> str:
    """Minutes from midnight -> zero-padded 'HH:MM'."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def minute_of_day(dt: datetime) -> int:
    return dt.hour * 60 + dt.minute


def as_date(value: date | datetime) -> date:
    """Accept either a date or a datetime and return the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_of_week(d: date) -> int:
    """Weekday number with 0 = Sunday, 6 = Saturday.

    Python's date.weekday() counts from Monday; blocks count from Sunday.
    """
    return (d.weekday() + 1) % 7


def day_start(d: date) -> datetime:
    """Naive midnight of ``d``."""
    return datetime.combine(d, time(0, 0))


def at_minutes(d: date, minutes: int) -> datetime:
    """Wall-clock datetime ``minutes`` after midnight of ``d``.

    Values past 24:00 roll into the following day.
    """
    return day_start(d) + timedelta(minutes=minutes)


def _format_12h(label: str) -> str:
    minutes = parse_time(label)
    hours, mins = divmod(minutes, 60)
    suffix = "PM" if hours % 24 >= 12 else "AM"
    display = hours % 12 or 12
    if mins == 0:
        return f"{display} {suffix}"
    return f"{display}:{mins:02d} {suffix}"


def format_time_range(start_time: str, end_time: str) -> str:
    """Human display of a range: ('09:00', '10:30') -> '9 AM - 10:30 AM'."""
    return f"{_format_12h(start_time)} - {_format_12h(end_time)}"
