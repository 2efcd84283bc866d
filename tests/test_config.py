"""
Configuration, classic factory and the optional validation layer
"""

import math
import warnings

import pytest

from ffpid import PIDConfig, PIDController


def test_defaults_are_zero():
    assert all(v == 0.0 for v in PIDConfig().as_dict().values())


def test_classic_sets_feedforward_from_kd():
    cfg = PIDConfig.classic(1.0, 2.0, 3.0, 10.0, -10.0, 20.0, -20.0)
    assert cfg.kff == 3.0
    assert cfg.kffb == 0.0
    assert cfg.kff_alpha == 0.0
    assert cfg.kffb_beta == 0.0
    assert (cfg.integ_max, cfg.integ_min, cfg.out_max, cfg.out_min) == (10.0, -10.0, 20.0, -20.0)


def test_round_trip_through_dict():
    cfg = PIDConfig(kp=1.5, kff=0.3, kff_alpha=0.2, out_max=5.0, out_min=-5.0)
    assert PIDConfig(**cfg.as_dict()) == cfg


def test_controller_exposes_config():
    cfg = PIDConfig(kp=1.0, ki=0.5, kd=0.1, kff=0.2, kffb=0.05, kff_alpha=0.3, kffb_beta=0.4,
                    integ_max=3.0, integ_min=-3.0, out_max=9.0, out_min=-9.0)
    pid = PIDController(cfg)
    assert pid.config == cfg
    pid.kp = 4.0
    assert pid.config.kp == 4.0
    assert cfg.kp == 1.0


def test_valid_config_has_no_problems():
    cfg = PIDConfig.classic(1.0, 0.1, 0.0, 10.0, -10.0, 10.0, -10.0)
    assert cfg.problems() == []
    assert cfg.validate() == []


@pytest.mark.parametrize("changes,fragment", [
    (dict(integ_min=1.0, integ_max=-1.0), "integ_min"),
    (dict(out_min=1.0, out_max=-1.0), "out_min"),
    (dict(kff_alpha=1.5), "kff_alpha"),
    (dict(kffb_beta=-0.1), "kffb_beta"),
    (dict(kp=math.inf, out_max=math.inf), "finite"),
])
def test_problems_are_reported(changes, fragment):
    cfg = PIDConfig(**changes)
    with pytest.raises(ValueError, match=fragment):
        cfg.validate(strict=True)
    with pytest.warns(UserWarning, match=fragment):
        found = cfg.validate(strict=False)
    assert any(fragment in p for p in found)


def test_controller_check_modes():
    bad = PIDConfig(out_min=1.0, out_max=-1.0)
    with pytest.raises(ValueError):
        PIDController(bad, check="raise")
    with pytest.warns(UserWarning):
        PIDController(bad, check="warn")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        PIDController(bad)


def test_unknown_check_mode():
    with pytest.raises(ValueError, match="check"):
        PIDController(PIDConfig(), check="loud")


def test_classic_constructor_shortcut():
    pid = PIDController.classic(1.0, 2.0, 3.0, 10.0, -10.0, 20.0, -20.0)
    assert pid.config == PIDConfig.classic(1.0, 2.0, 3.0, 10.0, -10.0, 20.0, -20.0)
