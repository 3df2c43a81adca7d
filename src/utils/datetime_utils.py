"""
Datetime utilities for consistent date and time handling across the application.

All records carry dates as "YYYY-MM-DD" strings and times of day as 24-hour
"HH:MM" strings in local machine time. This module converts between those
strings and datetime objects so that comparisons never depend on string
ordering.
"""

import logging
from datetime import datetime, date, time, timedelta

from core.constants import DATE_FORMAT, TIME_FORMAT

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def local_now() -> datetime:
    """
    Get the current local datetime.

    Returns:
        Current naive datetime in local machine time
    """
    return datetime.now()


def parse_date_string(date_str: str) -> date:
    """
    Parse a date string in YYYY-MM-DD format.

    Args:
        date_str: Date string in YYYY-MM-DD format

    Returns:
        date object

    Raises:
        ValueError: If date string is not in YYYY-MM-DD format
    """
    return datetime.strptime(date_str, DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime(DATE_FORMAT)


def parse_time_string(time_str: str) -> time:
    """
    Parse a 24-hour time string in HH:MM format.

    Args:
        time_str: Time string such as "09:30"

    Returns:
        time object

    Raises:
        ValueError: If the string is not a valid HH:MM time
    """
    return datetime.strptime(time_str, TIME_FORMAT).time()


def format_time(value: time) -> str:
    """Format a time as zero-padded HH:MM."""
    return value.strftime(TIME_FORMAT)


def time_to_minutes(time_str: str) -> int:
    """
    Convert an HH:MM string to minutes since midnight.

    Example:
        >>> time_to_minutes("09:30")
        570
    """
    parsed = parse_time_string(time_str)
    return parsed.hour * 60 + parsed.minute


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes since midnight to an HH:MM string.

    Args:
        minutes: Minutes since midnight, 0 <= minutes < 1440

    Raises:
        ValueError: If minutes falls outside a single day
    """
    if minutes < 0 or minutes >= MINUTES_PER_DAY:
        raise ValueError(f"Minutes {minutes} outside of a single day")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def validate_time_string(v: str) -> str:
    """
    Validate that a value is a zero-padded 24-hour HH:MM time.

    Raises:
        ValueError: If the value is not HH:MM
    """
    try:
        parsed = parse_time_string(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid time format: {v}. Must be HH:MM (24-hour format)") from e
    # strptime accepts "9:5"; the stored form must compare correctly as text too
    if format_time(parsed) != v:
        raise ValueError(f"Invalid time format: {v}. Must be HH:MM (24-hour format)")
    return v


def validate_date_string(v: str) -> str:
    """
    Validate that a value is a YYYY-MM-DD calendar date.

    Raises:
        ValueError: If the value is not YYYY-MM-DD
    """
    try:
        parsed = parse_date_string(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date format: {v}. Must be YYYY-MM-DD") from e
    if format_date(parsed) != v:
        raise ValueError(f"Invalid date format: {v}. Must be YYYY-MM-DD")
    return v


def current_time_string(now: datetime) -> str:
    """HH:MM of the given datetime, seconds dropped."""
    return format_time(now.time())


def add_days(value: date, days: int) -> date:
    """Shift a date by a number of days."""
    return value + timedelta(days=days)
