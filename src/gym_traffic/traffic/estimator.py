"""
Hourly occupancy estimator.

Historical hours (strictly before reference_now) use SeededNoise and are
reproducible; the current and future hours use LiveNoise. A single estimate
never mixes the two.
"""

from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from gym_traffic.traffic.facilities import FacilityRegistry
from gym_traffic.traffic.facility_models import Facility
from gym_traffic.traffic.noise import LiveNoise, SeededNoise
from gym_traffic.traffic.occupancy_domain import (
    calculate_capacity_percentage,
    clamp_occupancy,
    round_half_up,
)
from gym_traffic.traffic.occupancy_models import OccupancySample
from gym_traffic.traffic.pattern_domain import expected_occupancy, is_open
from gym_traffic.utils.dates import DateLike, day_of_week, parse_date, parse_datetime, validate_hour
from gym_traffic.utils.logger import get_logger

logger = get_logger(__name__)


class TrafficEstimator:

    def __init__(
        self,
        registry: FacilityRegistry,
        seeded_noise: Optional[SeededNoise] = None,
        live_noise: Optional[LiveNoise] = None,
    ) -> None:
        self.registry = registry
        self.seeded_noise = seeded_noise or SeededNoise()
        self.live_noise = live_noise or LiveNoise()

    def facility(self, facility_id: str) -> Facility:
        return self.registry.get(facility_id)

    def estimate(
        self,
        facility_id: str,
        day: DateLike,
        hour: int,
        reference_now: datetime,
    ) -> OccupancySample:
        facility = self.registry.get(facility_id)
        d = parse_date(day)
        validate_hour(hour)
        reference_now = parse_datetime(reference_now)

        dow = day_of_week(d)
        # Same tz-awareness as reference_now so the comparison is valid
        instant = datetime.combine(d, time(hour), tzinfo=reference_now.tzinfo)
        is_historical = instant < reference_now

        if not is_open(facility, hour, dow):
            return OccupancySample(
                facility_id=facility.id,
                date=d,
                hour=hour,
                occupancy=0,
                max_capacity=facility.max_capacity,
                capacity_percentage=0,
                is_open=False,
                is_historical=is_historical,
            )

        expected = expected_occupancy(hour, dow)

        if is_historical:
            seed = self.seeded_noise.seed(facility.id, d.isoformat(), hour)
            factor = self.seeded_noise.factor(seed)
        else:
            factor = self.live_noise.factor()

        logger.debug(
            "estimate | facility=%s | %s %02d:00 | historical=%s | expected=%.1f | factor=%.4f",
            facility.id,
            d,
            hour,
            is_historical,
            expected,
            factor,
        )

        occupancy = clamp_occupancy(round_half_up(expected * factor), facility.max_capacity)

        return OccupancySample(
            facility_id=facility.id,
            date=d,
            hour=hour,
            occupancy=occupancy,
            max_capacity=facility.max_capacity,
            capacity_percentage=calculate_capacity_percentage(occupancy, facility.max_capacity),
            is_open=True,
            is_historical=is_historical,
        )
