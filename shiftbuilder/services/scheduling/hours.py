"""
Time-of-day arithmetic for shift windows.
All windows are intraday and half-open: [start, end).
"""

from datetime import date, time
from typing import Union

from .errors import InvalidTimeRange


TimeLike = Union[time, str]


def parse_time(value: TimeLike) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a time. Seconds are dropped."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    if not isinstance(value, str):
        raise InvalidTimeRange(f"Expected HH:MM time, got {value!r}")

    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() and len(p) == 2 for p in parts):
        raise InvalidTimeRange(f"Malformed time string: {value!r}")

    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise InvalidTimeRange(f"Time out of range: {value!r}")
    return time(hour, minute)


def to_minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def duration_hours(start: time, end: time) -> float:
    """
    Length of [start, end) in hours, fractional (e.g. 7.5).

    Raises:
        InvalidTimeRange: if end is not after start. Overnight windows are
        not supported and are never wrapped or clamped.
    """
    start_minutes, end_minutes = to_minutes(start), to_minutes(end)
    if end_minutes <= start_minutes:
        raise InvalidTimeRange(
            f"End time {format_time(end)} must be after start time {format_time(start)}"
        )
    return (end_minutes - start_minutes) / 60


def times_overlap(
    start1: time, end1: time,
    start2: time, end2: time
) -> bool:
    """Check if two same-day windows overlap. Touching endpoints do not."""
    return to_minutes(start1) < to_minutes(end2) and to_minutes(start2) < to_minutes(end1)


def format_time(t: time) -> str:
    return t.strftime("%H:%M")


def format_slot(start: time, end: time) -> str:
    return f"{format_time(start)} - {format_time(end)}"


def sunday_based_weekday(d: date) -> int:
    # 0 = Sunday ... 6 = Saturday
    return (d.weekday() + 1) % 7
