"""
Traffic Pattern Domain Logic

Rules:
- Pure functions only
- No randomness
- No clock reads (callers pass "now")
"""

from datetime import datetime

from gym_traffic.traffic.facility_models import Facility
from gym_traffic.utils.dates import DAY_NAMES, day_of_week, validate_day_of_week, validate_hour
from gym_traffic.utils.hours import format_hour


# ----------------------------
# Hour-of-day bands
# ----------------------------

def base_occupancy(hour: int) -> int:
    """
    Step function by hour of day, independent of facility.

    - Morning rush 7-9   -> 60
    - Lunch 12-14        -> 80
    - Evening peak 17-21 -> 120
    - Late night >= 22   -> 30
    - Otherwise          -> 20
    """
    validate_hour(hour)
    if 7 <= hour <= 9:
        return 60
    if 12 <= hour <= 14:
        return 80
    if 17 <= hour <= 21:
        return 120
    if hour >= 22:
        return 30
    return 20


def day_multiplier(dow: int) -> float:
    """Weekend 0.6, Friday 1.2, otherwise 1.0 (0 = Sunday)."""
    validate_day_of_week(dow)
    if dow in (0, 6):
        return 0.6
    if dow == 5:
        return 1.2
    return 1.0


def expected_occupancy(hour: int, dow: int) -> float:
    return base_occupancy(hour) * day_multiplier(dow)


# ----------------------------
# Operating hours
# ----------------------------

def is_open(facility: Facility, hour: int, dow: int) -> bool:
    validate_hour(hour)
    return facility.weekly_schedule.hours_for(dow).contains(hour)


def next_open_time(facility: Facility, now: datetime) -> str:
    """
    Human label for the next opening:
    "Today at 7:00 AM" before today's opening, else the next day's opening.
    """
    dow = day_of_week(now.date())
    today = facility.weekly_schedule.hours_for(dow)

    if now.hour < today.open_hour:
        return f"Today at {format_hour(today.open_hour)}"

    next_dow = (dow + 1) % 7
    tomorrow = facility.weekly_schedule.hours_for(next_dow)
    return f"{DAY_NAMES[next_dow]} at {format_hour(tomorrow.open_hour)}"
