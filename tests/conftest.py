"""
Pytest configuration and shared fixtures.
"""

from datetime import date, datetime

import numpy as np
import pytest

from gym_traffic.traffic.estimator import TrafficEstimator
from gym_traffic.traffic.facilities import default_registry
from gym_traffic.traffic.noise import LiveNoise
from gym_traffic.services.traffic_service import TrafficService
from gym_traffic.utils.config import load_config

# 2025-03-02 is a Sunday
SUNDAY = date(2025, 3, 2)
MONDAY = date(2025, 3, 3)
FRIDAY = date(2025, 3, 7)
SATURDAY = date(2025, 3, 8)

# Monday afternoon; used as "now" for split tests
MONDAY_AFTERNOON = datetime(2025, 3, 3, 14, 30)

# Far enough back that every hour of the test week is historical
LONG_AFTER = datetime(2030, 1, 1, 12, 0)
# Far enough ahead that every hour of the test week is predicted
LONG_BEFORE = datetime(2020, 1, 1, 12, 0)


class FixedLiveNoise(LiveNoise):
    """Live noise pinned to a constant factor."""

    def __init__(self, value: float = 1.0) -> None:
        super().__init__()
        self.value = value
        self.calls = 0

    def factor(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def estimator(registry):
    """Estimator with a seeded live generator so failures are reproducible."""
    return TrafficEstimator(registry, live_noise=LiveNoise(np.random.default_rng(1234)))


@pytest.fixture
def flat_estimator(registry):
    """Estimator whose live noise is exactly 1.0 (predicted = expected)."""
    return TrafficEstimator(registry, live_noise=FixedLiveNoise(1.0))


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def service(registry, flat_estimator, config):
    return TrafficService(
        registry=registry,
        config=config,
        estimator=flat_estimator,
        clock=lambda: MONDAY_AFTERNOON,
    )
