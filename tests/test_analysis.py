import itertools

import pytest

from mruv_sim.analysis import analyze, find_reversal
from mruv_sim.kinematics import interval_boundaries, velocity_at

from conftest import make_params


def test_braking_reverses_once(braking_params):
    summary = analyze(braking_params)

    assert len(summary.reversals) == 1
    reversal = summary.reversals[0]
    assert reversal.interval_index == 0
    assert reversal.global_time == pytest.approx(0.5)
    assert reversal.local_time == pytest.approx(0.5)
    assert reversal.position == pytest.approx(1.25)
    assert summary.total_distance == pytest.approx(1.25 + 1.25 + 5.0 + 5.0)
    assert summary.displacement == pytest.approx(-10.0)
    assert summary.final_velocity == pytest.approx(-5.0)
    assert summary.total_duration == pytest.approx(3.0)


def test_zero_velocity_time_beyond_interval_is_not_a_reversal(no_reversal_params):
    # t_inv = 5 s lies outside the 3 s first interval
    summary = analyze(no_reversal_params)

    assert summary.reversals == ()
    assert summary.final_position == pytest.approx(41.0)
    assert summary.displacement == pytest.approx(41.0)
    assert summary.total_distance == pytest.approx(41.0)


def test_constant_velocity(constant_velocity_params):
    summary = analyze(constant_velocity_params)

    assert summary.displacement == pytest.approx(12.0)
    assert summary.total_distance == pytest.approx(12.0)
    assert summary.reversals == ()


def test_zero_crossing_at_interval_end_is_excluded():
    params = make_params(0.0, 5.0, (-5.0, 1.0), (-5.0, 1.0), (0.0, 1.0))
    summary = analyze(params)

    # velocity hits zero exactly at t=1, the edge of both intervals
    assert summary.reversals == ()
    assert summary.total_distance == pytest.approx(2.5 + 2.5 + 5.0)
    assert summary.displacement == pytest.approx(2.5 - 2.5 - 5.0)


def test_zero_crossing_at_interval_start_is_excluded():
    params = make_params(0.0, 0.0, (2.0, 1.0), (0.0, 1.0), (0.0, 1.0))
    boundary = interval_boundaries(params)[0]
    assert find_reversal(boundary, 0) is None


def test_reversal_in_later_interval_uses_global_time():
    params = make_params(0.0, 2.0, (0.0, 1.0), (0.0, 0.5), (-4.0, 1.0))
    summary = analyze(params)

    assert summary.reversal_times == pytest.approx((2.0,))
    assert summary.reversals[0].interval_index == 2
    assert summary.reversals[0].local_time == pytest.approx(0.5)


def test_reversal_velocity_changes_sign(braking_params):
    for reversal in analyze(braking_params).reversals:
        t = reversal.global_time
        assert velocity_at(braking_params, t) == pytest.approx(0.0, abs=1e-9)
        before = velocity_at(braking_params, t - 1e-3)
        after = velocity_at(braking_params, t + 1e-3)
        assert before * after < 0


def test_distance_never_below_displacement_magnitude():
    values = (-3.0, 0.0, 2.5)
    durations = (0.5, 2.0)
    for v0, a1, a2, a3, d in itertools.product(values, values, values, values, durations):
        params = make_params(1.0, v0, (a1, d), (a2, 1.0), (a3, d))
        summary = analyze(params)
        assert summary.total_distance >= abs(summary.displacement) - 1e-12
        for reversal in summary.reversals:
            boundary = summary.boundaries[reversal.interval_index]
            assert 0.0 < reversal.local_time < boundary.duration
