"""
Occupancy Series Use Cases

Purpose:
- Day view: one sample per open hour, split historical / predicted
- Week view: one aggregate per day (Sunday first), day-level classification
- Outlook: the next N open hours from "now"

Important:
- reference_now is always passed in; nothing here reads the clock
- every hour goes through TrafficEstimator.estimate exactly once
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List, Optional

import pandas as pd

from gym_traffic.exceptions import InvalidArgumentError
from gym_traffic.traffic.estimator import TrafficEstimator
from gym_traffic.traffic.occupancy_domain import round_half_up
from gym_traffic.traffic.occupancy_models import (
    DaySeries,
    OccupancySample,
    Outlook,
    WeekDay,
    WeekSeries,
)
from gym_traffic.traffic.pattern_domain import is_open
from gym_traffic.utils.dates import (
    DAY_LABELS,
    DAY_NAMES,
    DateLike,
    day_of_week,
    parse_date,
    parse_datetime,
)
from gym_traffic.utils.hours import format_hours_range
from gym_traffic.utils.logger import get_logger

logger = get_logger(__name__)


def split_historical_predicted(samples: List[OccupancySample]):
    """
    Index-aligned historical / predicted arrays (None = no value).

    When both kinds are present, the last historical value is repeated in the
    predicted array at the same index so a line chart joins the two segments.
    This one-sample overlap is intentional. With reference_now exactly on the
    hour, that hour is not yet historical, so the overlap sits on the hour before.
    """
    historical: List[Optional[int]] = [None] * len(samples)
    predicted: List[Optional[int]] = [None] * len(samples)

    last_historical = None
    for i, sample in enumerate(samples):
        if sample.is_historical:
            historical[i] = sample.occupancy
            last_historical = i
        else:
            predicted[i] = sample.occupancy

    has_predicted = any(v is not None for v in predicted)
    if last_historical is not None and has_predicted:
        predicted[last_historical] = historical[last_historical]

    return historical, predicted


def build_day_series(
    estimator: TrafficEstimator,
    facility_id: str,
    day: DateLike,
    reference_now: datetime,
) -> DaySeries:
    facility = estimator.facility(facility_id)
    d = parse_date(day)
    reference_now = parse_datetime(reference_now)

    window = facility.weekly_schedule.hours_for(day_of_week(d))

    samples = [
        estimator.estimate(facility.id, d, hour, reference_now)
        for hour in window.hours
    ]
    historical, predicted = split_historical_predicted(samples)

    logger.info(
        "Built day series | facility=%s | date=%s | hours=%s | historical=%s",
        facility.id,
        d,
        len(samples),
        sum(1 for s in samples if s.is_historical),
    )

    return DaySeries(
        facility_id=facility.id,
        facility_name=facility.name,
        date=d,
        day_name=DAY_NAMES[day_of_week(d)],
        hours_label=format_hours_range(window.open_hour, window.close_hour),
        samples=samples,
        historical=historical,
        predicted=predicted,
    )


def build_week_series(
    estimator: TrafficEstimator,
    facility_id: str,
    week_start: DateLike,
    reference_now: datetime,
) -> WeekSeries:
    facility = estimator.facility(facility_id)
    start = parse_date(week_start)
    reference_now = parse_datetime(reference_now)

    if day_of_week(start) != 0:
        raise InvalidArgumentError(
            f"Week must start on a Sunday, got {start} ({DAY_NAMES[day_of_week(start)]})"
        )

    dates = [start + timedelta(days=i) for i in range(7)]

    # ------------------------------------------------------------
    # Hourly estimates for every open hour of the week
    # ------------------------------------------------------------
    rows = []
    for d in dates:
        for hour in facility.weekly_schedule.hours_for(day_of_week(d)).hours:
            sample = estimator.estimate(facility.id, d, hour, reference_now)
            rows.append({"date": d, "hour": hour, "occupancy": sample.occupancy})

    df = pd.DataFrame(rows, columns=["date", "hour", "occupancy"])

    # ------------------------------------------------------------
    # Daily mean (days without open hours stay None)
    # ------------------------------------------------------------
    daily_mean: Dict = df.groupby("date")["occupancy"].mean().to_dict()

    today = reference_now.date()
    days: List[WeekDay] = []
    for d in dates:
        mean = daily_mean.get(d)
        days.append(
            WeekDay(
                date=d,
                label=DAY_LABELS[day_of_week(d)],
                value=round_half_up(mean) if mean is not None else None,
                is_historical=d < today,
            )
        )

    logger.info(
        "Built week series | facility=%s | week_start=%s | historical_days=%s",
        facility.id,
        start,
        sum(1 for day in days if day.is_historical),
    )

    return WeekSeries(
        facility_id=facility.id,
        facility_name=facility.name,
        week_start=start,
        max_capacity=facility.max_capacity,
        days=days,
    )


def build_outlook(
    estimator: TrafficEstimator,
    facility_id: str,
    reference_now: datetime,
    hours: int = 12,
) -> Outlook:
    """
    Up to `hours` open-hour samples, walking forward from the current hour
    for at most one day (crossing midnight when needed).
    """
    facility = estimator.facility(facility_id)
    reference_now = parse_datetime(reference_now)

    if isinstance(hours, bool) or not isinstance(hours, int) or hours <= 0:
        raise InvalidArgumentError(f"hours must be a positive integer, got {hours!r}")

    start = reference_now.replace(minute=0, second=0, microsecond=0)

    samples: List[OccupancySample] = []
    for offset in range(24):
        if len(samples) >= hours:
            break
        instant = start + timedelta(hours=offset)
        d = instant.date()
        if not is_open(facility, instant.hour, day_of_week(d)):
            continue
        samples.append(estimator.estimate(facility.id, d, instant.hour, reference_now))

    logger.info(
        "Built outlook | facility=%s | from=%s | samples=%s",
        facility.id,
        start,
        len(samples),
    )

    return Outlook(
        facility_id=facility.id,
        facility_name=facility.name,
        samples=samples,
    )
