"""
Facility registry.

Static facility table; read-only after construction.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from gym_traffic.exceptions import InvalidArgumentError, NotFoundError
from gym_traffic.traffic.facility_models import Facility, WeeklySchedule

# Sun 12pm-12am | Mon-Thu 7am-12am | Fri 7am-10pm | Sat 8am-10pm
CAMPUS_SCHEDULE = WeeklySchedule.from_mapping({
    0: (12, 24),
    1: (7, 24),
    2: (7, 24),
    3: (7, 24),
    4: (7, 24),
    5: (7, 22),
    6: (8, 22),
})


class FacilityRegistry:
    """
    Ordered, immutable lookup of facilities by id.
    """

    def __init__(self, facilities: Iterable[Facility]) -> None:
        table: Dict[str, Facility] = {}
        for facility in facilities:
            if facility.id in table:
                raise InvalidArgumentError(f"Duplicate facility id: {facility.id!r}")
            table[facility.id] = facility
        self._facilities = table

    def get(self, facility_id: str) -> Facility:
        try:
            return self._facilities[facility_id]
        except KeyError:
            raise NotFoundError(f"Unknown facility: {facility_id!r}") from None

    def list(self) -> List[Facility]:
        return list(self._facilities.values())

    def __contains__(self, facility_id: object) -> bool:
        return facility_id in self._facilities

    def __len__(self) -> int:
        return len(self._facilities)


def default_registry() -> FacilityRegistry:
    """The two campus gyms."""
    return FacilityRegistry([
        Facility(
            id="activity-center",
            name="Activity Center",
            max_capacity=150,
            location="UTD Campus",
            weekly_schedule=CAMPUS_SCHEDULE,
        ),
        Facility(
            id="rec-center-west",
            name="Rec Center West",
            max_capacity=100,
            location="UTD Campus",
            weekly_schedule=CAMPUS_SCHEDULE,
        ),
    ])
