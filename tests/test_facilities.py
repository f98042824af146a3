"""
Tests for facility models and the registry.
"""

import pytest

from gym_traffic.exceptions import InvalidArgumentError, NotFoundError
from gym_traffic.traffic.facilities import CAMPUS_SCHEDULE, FacilityRegistry, default_registry
from gym_traffic.traffic.facility_models import Facility, OperatingHours, WeeklySchedule


def make_facility(facility_id="gym", capacity=50):
    return Facility(
        id=facility_id,
        name="Test Gym",
        max_capacity=capacity,
        location="Somewhere",
        weekly_schedule=CAMPUS_SCHEDULE,
    )


class TestOperatingHours:

    def test_half_open_window(self):
        window = OperatingHours(7, 22)
        assert window.contains(7)
        assert window.contains(21)
        assert not window.contains(22)
        assert not window.contains(6)
        assert list(window.hours) == list(range(7, 22))

    @pytest.mark.parametrize("open_hour, close_hour", [(10, 10), (12, 8), (-1, 5), (5, 25), (24, 24)])
    def test_invalid_window_raises(self, open_hour, close_hour):
        with pytest.raises(InvalidArgumentError):
            OperatingHours(open_hour, close_hour)


class TestWeeklySchedule:

    def test_campus_hours_per_day(self):
        assert CAMPUS_SCHEDULE.hours_for(0) == OperatingHours(12, 24)
        for dow in range(1, 5):
            assert CAMPUS_SCHEDULE.hours_for(dow) == OperatingHours(7, 24)
        assert CAMPUS_SCHEDULE.hours_for(5) == OperatingHours(7, 22)
        assert CAMPUS_SCHEDULE.hours_for(6) == OperatingHours(8, 22)

    def test_describe_groups_consecutive_days(self):
        assert CAMPUS_SCHEDULE.describe() == (
            "Mon-Thu: 7am-12am | Fri: 7am-10pm | Sat: 8am-10pm | Sun: 12pm-12am"
        )

    def test_missing_days_rejected(self):
        with pytest.raises(InvalidArgumentError):
            WeeklySchedule.from_mapping({0: (8, 20)})

    def test_day_out_of_range_rejected(self):
        with pytest.raises(InvalidArgumentError):
            CAMPUS_SCHEDULE.hours_for(7)


class TestFacility:

    def test_capacity_must_be_positive(self):
        with pytest.raises(InvalidArgumentError):
            make_facility(capacity=0)

    def test_facility_is_immutable(self):
        facility = make_facility()
        with pytest.raises(AttributeError):
            facility.max_capacity = 10


class TestFacilityRegistry:

    def test_default_registry_contents(self, registry):
        ids = [f.id for f in registry.list()]
        assert ids == ["activity-center", "rec-center-west"]
        assert registry.get("activity-center").max_capacity == 150
        assert registry.get("rec-center-west").max_capacity == 100

    def test_unknown_facility_raises_not_found(self, registry):
        with pytest.raises(NotFoundError):
            registry.get("pool")

    def test_insertion_order_preserved(self):
        reg = FacilityRegistry([make_facility("b"), make_facility("a"), make_facility("c")])
        assert [f.id for f in reg.list()] == ["b", "a", "c"]
        assert len(reg) == 3
        assert "a" in reg

    def test_duplicate_ids_rejected(self):
        with pytest.raises(InvalidArgumentError):
            FacilityRegistry([make_facility("a"), make_facility("a")])

    def test_list_returns_a_copy(self):
        reg = default_registry()
        reg.list().clear()
        assert len(reg.list()) == 2
