"""
Calendar helpers.

Days of week are Sunday-first throughout the package:
0 = Sunday, 1 = Monday, ..., 6 = Saturday.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from gym_traffic.exceptions import InvalidArgumentError

DateLike = Union[date, str]

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
DAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def parse_date(value: DateLike) -> date:
    """
    Accept a date (or datetime) or an ISO "YYYY-MM-DD" string.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            raise InvalidArgumentError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None
    raise InvalidArgumentError(f"Invalid date {value!r}")


def parse_datetime(value: Union[datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidArgumentError(f"Invalid datetime {value!r}, expected ISO format") from None
    raise InvalidArgumentError(f"Invalid datetime {value!r}")


def validate_hour(hour: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour < 24:
        raise InvalidArgumentError(f"Hour must be an integer in [0, 24), got {hour!r}")
    return hour


def validate_day_of_week(day_of_week: int) -> int:
    if isinstance(day_of_week, bool) or not isinstance(day_of_week, int) or not 0 <= day_of_week <= 6:
        raise InvalidArgumentError(f"Day of week must be an integer in [0, 6], got {day_of_week!r}")
    return day_of_week


def day_of_week(d: date) -> int:
    """Sunday-first day index (date.weekday() is Monday-first)."""
    return (d.weekday() + 1) % 7


def week_start_for(d: date) -> date:
    """The Sunday on or before d."""
    return d - timedelta(days=day_of_week(d))
