"""
12-hour display labels.

format_hour / parse_hour_label are exact inverses over [0, 24):
callers re-derive the hour from chart labels.
"""

import re
from datetime import date

from gym_traffic.exceptions import InvalidArgumentError
from gym_traffic.utils.dates import validate_hour

HOUR_LABEL_PATTERN = re.compile(r"^\s*(\d{1,2}):00\s*(AM|PM)\s*$")


def format_hour(hour: int) -> str:
    """0 -> "12:00 AM", 12 -> "12:00 PM", 13 -> "1:00 PM"."""
    validate_hour(hour)
    if hour == 0:
        return "12:00 AM"
    if hour == 12:
        return "12:00 PM"
    if hour < 12:
        return f"{hour}:00 AM"
    return f"{hour - 12}:00 PM"


def parse_hour_label(label: str) -> int:
    match = HOUR_LABEL_PATTERN.match(label or "")
    if not match:
        raise InvalidArgumentError(f"Unrecognized hour label {label!r}")

    hour = int(match.group(1))
    period = match.group(2)
    if not 1 <= hour <= 12:
        raise InvalidArgumentError(f"Unrecognized hour label {label!r}")

    if period == "AM" and hour == 12:
        return 0
    if period == "PM" and hour != 12:
        return hour + 12
    return hour


def format_hours_range(open_hour: int, close_hour: int) -> str:
    """Operating window label; a close hour of 24 is midnight."""
    return f"{format_hour(open_hour)} - {format_hour(close_hour % 24)}"


def format_date_label(d: date) -> str:
    return d.strftime("%m/%d")
