"""
Occupancy Domain Logic

Rules:
- Pure functions only
- No randomness
- No printing
"""

import math
from typing import List, Optional

from gym_traffic.exceptions import InvalidArgumentError
from gym_traffic.traffic.occupancy_models import WeekSeries, WeeklySummary


# ----------------------------
# Rounding / capacity
# ----------------------------

def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_occupancy(occupancy: int, max_capacity: int) -> int:
    return max(0, min(max_capacity, occupancy))


def calculate_capacity_percentage(occupancy: int, max_capacity: int) -> int:
    return round_half_up(100 * occupancy / max_capacity) if max_capacity else 0


# ----------------------------
# Status card classification
# ----------------------------

def traffic_status(occupancy: int, max_capacity: int) -> str:
    """
    - very-high >= 90%
    - high      >= 70%
    - medium    >= 40%
    - low otherwise
    """
    pct = (occupancy / max_capacity) * 100 if max_capacity else 0
    if pct >= 90:
        return "very-high"
    if pct >= 70:
        return "high"
    if pct >= 40:
        return "medium"
    return "low"


def wait_time(occupancy: int, max_capacity: int) -> str:
    pct = (occupancy / max_capacity) * 100 if max_capacity else 0
    if pct >= 90:
        return "20-30 min"
    if pct >= 80:
        return "15-20 min"
    if pct >= 70:
        return "10-15 min"
    if pct >= 60:
        return "5-10 min"
    return "0 min"


# ----------------------------
# Weekly summary
# ----------------------------

def classify_week(capacity_pct: int, light_pct: int = 40, busy_pct: int = 70) -> str:
    """Strict bounds: exactly light_pct is not light, exactly busy_pct is not busy."""
    if capacity_pct < light_pct:
        return "Light Week"
    if capacity_pct > busy_pct:
        return "Busy Week"
    return "Normal Week"


def busiest_day_index(values: List[Optional[int]]) -> int:
    """Index of the max value; ties go to the first (Sunday-first order)."""
    best = None
    for i, v in enumerate(values):
        if v is None:
            continue
        if best is None or v > values[best]:
            best = i
    if best is None:
        raise InvalidArgumentError("Week has no values")
    return best


def weekly_summary(
    week: WeekSeries,
    light_pct: int = 40,
    busy_pct: int = 70,
) -> WeeklySummary:
    values = [v for v in week.values if v is not None]
    if not values:
        raise InvalidArgumentError(f"No open days in week starting {week.week_start}")

    average = sum(values) / len(values)
    pct = calculate_capacity_percentage(average, week.max_capacity)

    return WeeklySummary(
        average_occupancy=average,
        average_capacity_percentage=pct,
        busiest_day=week.labels[busiest_day_index(week.values)],
        classification=classify_week(pct, light_pct, busy_pct),
    )
