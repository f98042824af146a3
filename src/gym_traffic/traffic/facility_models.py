"""
Facility Domain Models

Rules:
- Immutable, created once at process start
- Validation only, no estimation logic
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from gym_traffic.exceptions import InvalidArgumentError
from gym_traffic.utils.dates import DAY_LABELS, validate_day_of_week


def _short_hour(hour: int) -> str:
    hour = hour % 24
    if hour == 0:
        return "12am"
    if hour == 12:
        return "12pm"
    if hour < 12:
        return f"{hour}am"
    return f"{hour - 12}pm"


# -------------------------------------------------
# Operating window for one day
# -------------------------------------------------

@dataclass(frozen=True)
class OperatingHours:
    open_hour: int
    close_hour: int

    def __post_init__(self):
        if not 0 <= self.open_hour < 24:
            raise InvalidArgumentError(f"open_hour must be in [0, 24), got {self.open_hour}")
        if not 0 < self.close_hour <= 24:
            raise InvalidArgumentError(f"close_hour must be in (0, 24], got {self.close_hour}")
        if self.open_hour >= self.close_hour:
            raise InvalidArgumentError(
                f"open_hour ({self.open_hour}) must be before close_hour ({self.close_hour})"
            )

    def contains(self, hour: int) -> bool:
        return self.open_hour <= hour < self.close_hour

    @property
    def hours(self) -> range:
        return range(self.open_hour, self.close_hour)

    def describe(self) -> str:
        return f"{_short_hour(self.open_hour)}-{_short_hour(self.close_hour)}"


# -------------------------------------------------
# Week of operating windows (0 = Sunday)
# -------------------------------------------------

@dataclass(frozen=True)
class WeeklySchedule:
    days: Tuple[OperatingHours, ...]

    def __post_init__(self):
        if len(self.days) != 7:
            raise InvalidArgumentError(f"WeeklySchedule needs 7 days, got {len(self.days)}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, Tuple[int, int]]) -> "WeeklySchedule":
        """Build from {day_of_week: (open_hour, close_hour)} covering all 7 days."""
        missing = [d for d in range(7) if d not in mapping]
        if missing:
            raise InvalidArgumentError(f"WeeklySchedule missing days: {missing}")
        return cls(tuple(OperatingHours(*mapping[d]) for d in range(7)))

    def hours_for(self, day_of_week: int) -> OperatingHours:
        return self.days[validate_day_of_week(day_of_week)]

    def describe(self) -> str:
        """Monday-first summary grouping consecutive days with equal hours."""
        order = [1, 2, 3, 4, 5, 6, 0]
        groups = []
        for dow in order:
            if groups and groups[-1][2] == self.days[dow]:
                groups[-1][1] = dow
            else:
                groups.append([dow, dow, self.days[dow]])

        parts = []
        for first, last, window in groups:
            days = DAY_LABELS[first] if first == last else f"{DAY_LABELS[first]}-{DAY_LABELS[last]}"
            parts.append(f"{days}: {window.describe()}")
        return " | ".join(parts)


# -------------------------------------------------
# Facility
# -------------------------------------------------

@dataclass(frozen=True)
class Facility:
    id: str
    name: str
    max_capacity: int
    location: str
    weekly_schedule: WeeklySchedule

    def __post_init__(self):
        if not self.id:
            raise InvalidArgumentError("Facility id must be non-empty")
        if self.max_capacity <= 0:
            raise InvalidArgumentError(
                f"max_capacity must be positive for {self.id!r}, got {self.max_capacity}"
            )

    @property
    def hours_text(self) -> str:
        return self.weekly_schedule.describe()
