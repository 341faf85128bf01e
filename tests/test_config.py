import math

import pytest

from mruv_sim import config
from mruv_sim.config import IntervalSpec, PlaybackConfig, SimulationParameters, parameters_from_values
from mruv_sim.errors import InvalidParameters


def test_parameters_from_numeric_strings():
    params = parameters_from_values("1.5", " -2 ", "0", "3", "1e-1", "2", "4", "0.5")

    assert params.s0 == 1.5
    assert params.v0 == -2.0
    assert params.intervals[1] == IntervalSpec(acceleration=0.1, duration=2.0)
    assert params.total_duration == pytest.approx(5.5)
    assert params.start_times == pytest.approx((0.0, 3.0, 5.0))


def test_non_numeric_value_names_the_field():
    with pytest.raises(InvalidParameters) as exc:
        parameters_from_values(0, "abc", 0, 1, 0, 1, 0, 1)
    assert exc.value.fields == ("v0",)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), None, "", True])
def test_non_finite_or_missing_values_rejected(bad):
    with pytest.raises(InvalidParameters):
        parameters_from_values(0, 0, bad, 1, 0, 1, 0, 1)


@pytest.mark.parametrize("duration", [0, -1.0, "0"])
def test_non_positive_duration_rejected(duration):
    with pytest.raises(InvalidParameters) as exc:
        parameters_from_values(0, 0, 0, 1, 0, duration, 0, 1)
    assert exc.value.fields == ("dt2",)


def test_invalid_parameters_is_a_value_error():
    assert issubclass(InvalidParameters, ValueError)


def test_validate_requires_three_intervals():
    params = SimulationParameters(s0=0.0, v0=0.0, intervals=(IntervalSpec(1.0, 1.0),))
    with pytest.raises(InvalidParameters):
        params.validate()


def test_validate_rejects_non_numeric_acceleration():
    params = SimulationParameters(
        s0=0.0,
        v0=0.0,
        intervals=(IntervalSpec("x", 1.0), IntervalSpec(0.0, 1.0), IntervalSpec(0.0, 1.0)),
    )
    with pytest.raises(InvalidParameters) as exc:
        params.validate()
    assert exc.value.fields == ("a1",)


@pytest.mark.parametrize("intervals", [None, 3.0, ((0.0, 1.0),) * 3, [IntervalSpec(0.0, 1.0), (0.0, 1.0), IntervalSpec(0.0, 1.0)]])
def test_validate_rejects_malformed_intervals(intervals):
    params = SimulationParameters(s0=0.0, v0=1.0, intervals=intervals)
    with pytest.raises(InvalidParameters) as exc:
        params.validate()
    assert exc.value.fields == ("intervals",)


def test_interval_list_is_frozen_into_tuple():
    intervals = [IntervalSpec(0.0, 1.0), IntervalSpec(0.0, 1.0), IntervalSpec(0.0, 1.0)]
    params = SimulationParameters(s0=0.0, v0=1.0, intervals=intervals)

    intervals[2] = IntervalSpec(0.0, 100.0)

    assert isinstance(params.intervals, tuple)
    assert params.total_duration == 3.0
    params.validate()


def test_config_defaults_share_module_constants():
    cfg = PlaybackConfig()
    assert cfg.max_step == config.MAX_TICK_STEP
    assert cfg.scale_step == config.SCALE_STEP
    assert cfg.reversal_epsilon == config.REVERSAL_EPSILON
    assert cfg.margin_fraction == config.MARGIN_FRACTION
    assert cfg.degenerate_epsilon == config.DEGENERATE_EPSILON


def test_playback_config_defaults():
    cfg = PlaybackConfig()
    assert cfg.max_step == 0.05
    assert cfg.scale_step == 0.05
    assert cfg.margin_fraction == 0.1
    assert math.isclose(cfg.reversal_epsilon, 1e-6)
