# ============================================================================
# app/services/scheduling/time_slot_service.py
# Pure slot arithmetic - no database or FastAPI dependencies
# ============================================================================
"""
Time-of-day parsing and booking overlap checks.

Booking times travel as 12-hour clock strings ("2:30 PM"). Everything here
converts them to minutes since midnight and compares half-open intervals
[start, start + duration), so a booking ending at 2:45 PM and one starting at
2:45 PM do not collide.
"""
from typing import Iterable, List, Optional, Tuple, TypeVar

MINUTES_PER_DAY = 24 * 60

T = TypeVar("T")


def parse_time_string(time_str: str) -> Tuple[int, int]:
    """
    Convert "h:mm AM/PM" to a 24-hour (hour, minute) pair.

    "12:xx AM" becomes hour 0 and "12:xx PM" stays 12. A string without a
    period is taken as already being on the 24-hour clock.

    Raises:
        ValueError: on anything else, including an unknown period, trailing
            text, or an hour outside 1-12 (with a period) or 0-23 (without)
    """
    parts = time_str.strip().split()
    if not parts or len(parts) > 2:
        raise ValueError(f"Invalid time: {time_str!r}")

    hour_str, sep, minute_str = parts[0].partition(":")
    if not sep or not hour_str.isdigit() or not minute_str.isdigit():
        raise ValueError(f"Invalid time: {time_str!r}")

    hour = int(hour_str)
    minute = int(minute_str)
    period = parts[1].upper() if len(parts) == 2 else ""

    if period not in ("", "AM", "PM"):
        raise ValueError(f"Invalid period in time: {time_str!r}")
    if minute > 59:
        raise ValueError(f"Minute out of range in time: {time_str!r}")
    if period and not 1 <= hour <= 12:
        raise ValueError(f"Hour out of range in time: {time_str!r}")
    if not period and hour > 23:
        raise ValueError(f"Hour out of range in time: {time_str!r}")

    if period == "PM" and hour != 12:
        hour += 12
    elif period == "AM" and hour == 12:
        hour = 0

    return hour, minute


def to_minutes(time_str: str) -> int:
    """Minutes since midnight for a booking time string"""
    hour, minute = parse_time_string(time_str)
    return hour * 60 + minute


def format_time(total_minutes: int) -> str:
    """Format minutes since midnight as "h:mm AM/PM" (wraps past midnight)"""
    total_minutes %= MINUTES_PER_DAY
    hours, minutes = divmod(total_minutes, 60)
    period = "PM" if hours >= 12 else "AM"
    hours = hours % 12 or 12
    return f"{hours}:{minutes:02d} {period}"


def booking_interval(time_str: str, duration_minutes: int) -> Tuple[int, int]:
    """Half-open [start, end) interval in minutes for a booking"""
    start = to_minutes(time_str)
    return start, start + int(duration_minutes)


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """True when [start_a, end_a) and [start_b, end_b) share at least one minute"""
    return start_a < end_b and end_a > start_b


def find_conflict(time_str: str, duration_minutes: int, existing: Iterable[T]) -> Optional[T]:
    """
    Return the first existing booking whose interval intersects the candidate.

    `existing` holds objects exposing `time` and `duration` attributes, already
    narrowed to the same date and to non-cancelled bookings.
    """
    start, end = booking_interval(time_str, duration_minutes)

    for booking in existing:
        existing_start, existing_end = booking_interval(booking.time, booking.duration)
        if intervals_overlap(start, end, existing_start, existing_end):
            return booking

    return None


def conflict_message(booking) -> str:
    """Human-readable description of the slot a conflicting booking occupies"""
    _, end = booking_interval(booking.time, booking.duration)
    return (
        f"Time slot conflicts with an existing appointment "
        f"from {booking.time} to {format_time(end)}"
    )


def generate_time_slots(open_hour: int = 10, close_hour: int = 17, interval_minutes: int = 15) -> List[str]:
    """
    Bookable start times from open_hour up to (not including) close_hour.

    generate_time_slots() -> ["10:00 AM", "10:15 AM", ..., "4:45 PM"]
    """
    return [
        format_time(minute)
        for minute in range(open_hour * 60, close_hour * 60, interval_minutes)
    ]
