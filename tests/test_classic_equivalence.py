"""
A controller built from the classic factory behaves like a textbook PID
"""

import numpy as np
import pytest

from ffpid import ClassicPID, PIDController

GAINS = [
    (1.3, 0.4, 0.7),
    (0.0, 1.0, 0.0),
    (5.0, 0.0, 2.5),
    (0.2, 0.05, 0.0),
]


def _pair(kp, ki, kd):
    pid = PIDController.classic(kp, ki, kd, 5.0, -5.0, 10.0, -10.0)
    ref = ClassicPID(kp, ki, kd, integral_limits=(-5.0, 5.0), output_limits=(-10.0, 10.0))
    return pid, ref


@pytest.mark.parametrize("gains", GAINS)
def test_positional_matches_textbook(gains):
    rng = np.random.default_rng(7)
    pid, ref = _pair(*gains)
    for _ in range(200):
        setpoint, measurement = rng.normal(0, 4), rng.normal(0, 4)
        assert pid.positional(setpoint, measurement) == pytest.approx(ref.update(setpoint, measurement), abs=1e-9)
        assert pid.integral == pytest.approx(ref.integral, abs=1e-12)


@pytest.mark.parametrize("gains", GAINS)
def test_incremental_matches_textbook(gains):
    rng = np.random.default_rng(11)
    pid, ref = _pair(*gains)
    for _ in range(200):
        setpoint, measurement = rng.normal(0, 4), rng.normal(0, 4)
        assert pid.incremental(setpoint, measurement) == pytest.approx(
            ref.update_incremental(setpoint, measurement), abs=1e-9)


def test_textbook_reset():
    ref = ClassicPID(1.0, 1.0, 1.0)
    ref.update(3.0, 1.0)
    ref.reset()
    assert (ref.integral, ref.output, ref.prev_error, ref.prev_prev_error) == (0.0, 0.0, 0.0, 0.0)
    assert ref.update(2.0, 0.0) == 2.0 + 1.0 + 2.0
