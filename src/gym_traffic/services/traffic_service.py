"""
Dashboard query surface.

Application-layer orchestration over the estimator and series use cases:
- resolves defaults (today, current week, "now")
- the clock is injected, so callers and tests can pin "now"
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from gym_traffic.traffic.estimator import TrafficEstimator
from gym_traffic.traffic.facilities import FacilityRegistry, default_registry
from gym_traffic.traffic.facility_models import Facility
from gym_traffic.traffic.occupancy_domain import traffic_status, wait_time, weekly_summary
from gym_traffic.traffic.occupancy_models import (
    DaySeries,
    Outlook,
    StatusCard,
    WeekSeries,
    WeeklySummary,
)
from gym_traffic.traffic.pattern_domain import next_open_time
from gym_traffic.traffic.series_usecase import (
    build_day_series,
    build_outlook,
    build_week_series,
)
from gym_traffic.utils.config import AppConfig, load_config
from gym_traffic.utils.dates import DateLike, parse_date, parse_datetime, week_start_for

Clock = Callable[[], datetime]


class TrafficService:

    def __init__(
        self,
        registry: Optional[FacilityRegistry] = None,
        config: Optional[AppConfig] = None,
        estimator: Optional[TrafficEstimator] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or load_config()
        self.registry = registry or (estimator.registry if estimator else default_registry())
        self.estimator = estimator or TrafficEstimator(self.registry)
        self._clock = clock or self._default_clock

    def _default_clock(self) -> datetime:
        return datetime.now(ZoneInfo(self.config.timezone))

    def _now(self, reference_now: Optional[datetime]) -> datetime:
        return parse_datetime(reference_now) if reference_now is not None else self._clock()

    # ------------------------------------------------------------
    # Facilities
    # ------------------------------------------------------------

    def list_facilities(self) -> List[Facility]:
        return self.registry.list()

    def get_facility(self, facility_id: str) -> Facility:
        return self.registry.get(facility_id)

    # ------------------------------------------------------------
    # Status card
    # ------------------------------------------------------------

    def get_current_occupancy(
        self,
        facility_id: str,
        reference_now: Optional[datetime] = None,
    ) -> StatusCard:
        now = self._now(reference_now)
        facility = self.registry.get(facility_id)
        # The card reports the hour in progress; queried at its start it is "now" (live noise)
        hour_start = now.replace(minute=0, second=0, microsecond=0)
        sample = self.estimator.estimate(facility.id, now.date(), now.hour, hour_start)

        return StatusCard(
            facility_name=facility.name,
            sample=sample,
            status=traffic_status(sample.occupancy, facility.max_capacity),
            wait_time=wait_time(sample.occupancy, facility.max_capacity),
            timestamp=now,
            next_open_time=None if sample.is_open else next_open_time(facility, now),
        )

    # ------------------------------------------------------------
    # Series
    # ------------------------------------------------------------

    def get_day_series(
        self,
        facility_id: str,
        day: Optional[DateLike] = None,
        reference_now: Optional[datetime] = None,
    ) -> DaySeries:
        now = self._now(reference_now)
        target = parse_date(day) if day is not None else now.date()
        return build_day_series(self.estimator, facility_id, target, now)

    def get_week_series(
        self,
        facility_id: str,
        week_start: Optional[DateLike] = None,
        reference_now: Optional[datetime] = None,
    ) -> WeekSeries:
        now = self._now(reference_now)
        start = parse_date(week_start) if week_start is not None else week_start_for(now.date())
        return build_week_series(self.estimator, facility_id, start, now)

    def get_weekly_summary(
        self,
        facility_id: str,
        week_start: Optional[DateLike] = None,
        reference_now: Optional[datetime] = None,
    ) -> WeeklySummary:
        week = self.get_week_series(facility_id, week_start, reference_now)
        return self.summarize_week(week)

    def summarize_week(self, week: WeekSeries) -> WeeklySummary:
        return weekly_summary(
            week,
            light_pct=self.config.light_week_pct,
            busy_pct=self.config.busy_week_pct,
        )

    def get_outlook(
        self,
        facility_id: str,
        hours: Optional[int] = None,
        reference_now: Optional[datetime] = None,
    ) -> Outlook:
        now = self._now(reference_now)
        return build_outlook(
            self.estimator,
            facility_id,
            now,
            hours=hours if hours is not None else self.config.outlook_hours,
        )
