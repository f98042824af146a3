"""
Tests for the dashboard query surface.
"""

from datetime import date, datetime

import numpy as np
import pytest

from gym_traffic.exceptions import InvalidArgumentError, NotFoundError
from gym_traffic.services.traffic_service import TrafficService
from gym_traffic.traffic.estimator import TrafficEstimator
from gym_traffic.traffic.noise import LiveNoise
from gym_traffic.utils.config import load_config

from conftest import LONG_AFTER, MONDAY, MONDAY_AFTERNOON, SUNDAY, FixedLiveNoise


class TestCurrentOccupancy:

    def test_open_card(self, service):
        card = service.get_current_occupancy("activity-center")
        assert card.sample.is_open
        assert card.sample.hour == 14
        assert card.sample.date == MONDAY
        assert card.next_open_time is None
        assert card.timestamp == MONDAY_AFTERNOON
        assert card.facility_name == "Activity Center"
        assert card.status in {"low", "medium", "high", "very-high"}

    def test_current_hour_uses_live_noise(self, registry, config):
        live = FixedLiveNoise(1.0)
        service = TrafficService(
            registry=registry,
            config=config,
            estimator=TrafficEstimator(registry, live_noise=live),
            clock=lambda: MONDAY_AFTERNOON,
        )
        card = service.get_current_occupancy("activity-center")
        assert card.sample.is_historical is False
        assert live.calls == 1
        # Monday 2 PM: lunch band 80 x weekday 1.0 x pinned factor 1.0
        assert card.sample.occupancy == 80

    def test_repeated_calls_can_differ(self, registry, config):
        estimator = TrafficEstimator(registry, live_noise=LiveNoise(np.random.default_rng(7)))
        service = TrafficService(
            registry=registry,
            config=config,
            estimator=estimator,
            clock=lambda: MONDAY_AFTERNOON,
        )
        values = {service.get_current_occupancy("activity-center").sample.occupancy for _ in range(20)}
        assert len(values) > 1

    def test_closed_card(self, service):
        card = service.get_current_occupancy("activity-center", datetime(2025, 3, 3, 5, 0))
        assert not card.sample.is_open
        assert card.sample.occupancy == 0
        assert card.next_open_time == "Today at 7:00 AM"

    def test_unknown_facility(self, service):
        with pytest.raises(NotFoundError):
            service.get_current_occupancy("pool")


class TestSeries:

    def test_day_defaults_to_today(self, service):
        series = service.get_day_series("activity-center")
        assert series.date == MONDAY
        assert series.overlap_index == series.labels.index("2:00 PM")

    def test_day_accepts_iso_string(self, service):
        series = service.get_day_series("activity-center", "2025-03-03", LONG_AFTER)
        assert series.date == MONDAY

    def test_day_rejects_malformed_date(self, service):
        with pytest.raises(InvalidArgumentError):
            service.get_day_series("activity-center", "March 3rd")

    def test_week_defaults_to_current_sunday(self, service):
        week = service.get_week_series("activity-center")
        assert week.week_start == SUNDAY
        assert [d.is_historical for d in week.days] == [True, False, False, False, False, False, False]

    def test_week_rejects_non_sunday(self, service):
        with pytest.raises(InvalidArgumentError):
            service.get_week_series("activity-center", MONDAY)

    def test_weekly_summary_future_week(self, service):
        # Pinned live noise: [47, 68, 68, 68, 68, 88, 45] -> 64.6 avg, 43%
        summary = service.get_weekly_summary("activity-center", date(2025, 3, 9))
        assert summary.average_capacity_percentage == 43
        assert summary.busiest_day == "Fri"
        assert summary.classification == "Normal Week"

    def test_summary_thresholds_come_from_config(self, registry, flat_estimator):
        service = TrafficService(
            registry=registry,
            config=load_config(light_week_pct=50),
            estimator=flat_estimator,
            clock=lambda: MONDAY_AFTERNOON,
        )
        assert service.get_weekly_summary("activity-center", date(2025, 3, 9)).classification == "Light Week"

    def test_outlook_uses_configured_hours(self, registry, flat_estimator):
        service = TrafficService(
            registry=registry,
            config=load_config(outlook_hours=3),
            estimator=flat_estimator,
            clock=lambda: MONDAY_AFTERNOON,
        )
        outlook = service.get_outlook("activity-center")
        assert [s.hour for s in outlook.samples] == [14, 15, 16]
        assert len(service.get_outlook("activity-center", hours=5).samples) == 5


class TestFacilities:

    def test_list_facilities(self, service):
        assert [f.id for f in service.list_facilities()] == ["activity-center", "rec-center-west"]

    def test_get_facility(self, service):
        assert service.get_facility("rec-center-west").name == "Rec Center West"

    def test_default_construction(self):
        service = TrafficService()
        assert len(service.list_facilities()) == 2
        card = service.get_current_occupancy("activity-center")
        assert 0 <= card.sample.occupancy <= 150


class TestConfig:

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GYM_DEFAULT_FACILITY", "rec-center-west")
        monkeypatch.setenv("GYM_BUSY_WEEK_PCT", "80")
        config = load_config()
        assert config.default_facility == "rec-center-west"
        assert config.busy_week_pct == 80

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GYM_DEFAULT_FACILITY", raising=False)
        config = load_config()
        assert config.light_week_pct == 40
        assert config.outlook_hours == 12
