import random

import pytest

from simulator.market import MarketDataSimulator, reset_default_simulator
from tests.test_utils import FIXED_NOW, UNIT_RADIUS_DRAW, cycling_source


@pytest.fixture
def fixed_clock():
    """Provides a clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def simulator_factory(fixed_clock):
    """Factory fixture for simulators with a frozen clock and a chosen uniform source."""

    def _factory(random_source=None, **kwargs) -> MarketDataSimulator:
        if random_source is None:
            random_source = random.Random(1234).random
        return MarketDataSimulator(
            random_source=random_source, clock=fixed_clock, **kwargs
        )

    return _factory


@pytest.fixture
def up_one_sigma_simulator(simulator_factory) -> MarketDataSimulator:
    """Every normal draw is +1 standard deviation."""
    return simulator_factory(cycling_source(UNIT_RADIUS_DRAW, 0.0))


@pytest.fixture
def down_one_sigma_simulator(simulator_factory) -> MarketDataSimulator:
    """Every normal draw is -1 standard deviation."""
    return simulator_factory(cycling_source(UNIT_RADIUS_DRAW, 0.5))


@pytest.fixture
def flat_simulator(simulator_factory) -> MarketDataSimulator:
    """Every normal draw is (numerically) zero, so prices sit on their center."""
    return simulator_factory(cycling_source(UNIT_RADIUS_DRAW, 0.25))


@pytest.fixture
def crash_simulator(simulator_factory) -> MarketDataSimulator:
    """Every normal draw is about -7.4 standard deviations."""
    return simulator_factory(cycling_source(1.0 - 1e-12, 0.5))


@pytest.fixture(autouse=True)
def fresh_default_simulator():
    """Ensures each test starts and ends without a shared default simulator."""
    reset_default_simulator()
    yield
    reset_default_simulator()
