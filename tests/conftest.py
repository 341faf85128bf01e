import pytest

from mruv_sim.config import IntervalSpec, SimulationParameters


def make_params(s0, v0, *pairs):
    return SimulationParameters(
        s0=s0,
        v0=v0,
        intervals=tuple(IntervalSpec(acceleration=a, duration=d) for a, d in pairs),
    )


@pytest.fixture
def braking_params():
    """v0=5 braked at -10 m/s^2 for 1 s, then two 1 s coasting intervals."""
    return make_params(0.0, 5.0, (-10.0, 1.0), (0.0, 1.0), (0.0, 1.0))


@pytest.fixture
def no_reversal_params():
    return make_params(0.0, 10.0, (-2.0, 3.0), (0.0, 2.0), (2.0, 2.0))


@pytest.fixture
def constant_velocity_params():
    return make_params(0.0, 4.0, (0.0, 1.0), (0.0, 1.0), (0.0, 1.0))
