"""
Occupancy Domain Models

Rules:
- No logic beyond derived views
- No clock reads
- Pure data containers, computed per query
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from gym_traffic.utils.hours import format_hour


# -------------------------------------------------
# Single hour estimate
# -------------------------------------------------

@dataclass(frozen=True)
class OccupancySample:
    facility_id: str
    date: date
    hour: int
    occupancy: int
    max_capacity: int
    capacity_percentage: int
    is_open: bool
    is_historical: bool

    @property
    def label(self) -> str:
        return format_hour(self.hour)


# -------------------------------------------------
# Day view (hourly, split historical / predicted)
# -------------------------------------------------

@dataclass(frozen=True)
class DaySeries:
    facility_id: str
    facility_name: str
    date: date
    day_name: str
    hours_label: str
    samples: List[OccupancySample]

    # Index-aligned with samples; None marks "no value"
    historical: List[Optional[int]]
    predicted: List[Optional[int]]

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self.samples]

    @property
    def values(self) -> List[int]:
        return [s.occupancy for s in self.samples]

    @property
    def overlap_index(self) -> Optional[int]:
        """Index holding a value in both arrays (line join), if any."""
        for i, (h, p) in enumerate(zip(self.historical, self.predicted)):
            if h is not None and p is not None:
                return i
        return None


# -------------------------------------------------
# Week view (one aggregate per day, Sunday first)
# -------------------------------------------------

@dataclass(frozen=True)
class WeekDay:
    date: date
    label: str
    value: Optional[int]
    is_historical: bool


@dataclass(frozen=True)
class WeekSeries:
    facility_id: str
    facility_name: str
    week_start: date
    max_capacity: int
    days: List[WeekDay]

    @property
    def labels(self) -> List[str]:
        return [d.label for d in self.days]

    @property
    def values(self) -> List[Optional[int]]:
        return [d.value for d in self.days]

    @property
    def historical(self) -> List[Optional[int]]:
        return [d.value if d.is_historical else None for d in self.days]

    @property
    def predicted(self) -> List[Optional[int]]:
        return [None if d.is_historical else d.value for d in self.days]


@dataclass(frozen=True)
class WeeklySummary:
    average_occupancy: float
    average_capacity_percentage: int
    busiest_day: str
    classification: str


# -------------------------------------------------
# Dashboard cards
# -------------------------------------------------

@dataclass(frozen=True)
class StatusCard:
    facility_name: str
    sample: OccupancySample
    status: str
    wait_time: str
    timestamp: datetime
    next_open_time: Optional[str] = None


@dataclass(frozen=True)
class Outlook:
    facility_id: str
    facility_name: str
    samples: List[OccupancySample] = field(default_factory=list)

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self.samples]

    @property
    def values(self) -> List[int]:
        return [s.occupancy for s in self.samples]
