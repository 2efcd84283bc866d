# ffpid/core/pid_controller.py
from typing import Optional

from ffpid.core.config import PIDConfig
from ffpid.core.history import SignalHistory

CHECK_MODES = ("off", "warn", "raise")


def clamp(value: float, upper: float, lower: float) -> float:
    # upper is tested first, so inverted bounds pin to lower and NaN falls through both
    if value > upper:
        value = upper
    if value < lower:
        value = lower
    return value


class PIDController:
    """
    PID controller with derivative on feedback, trapezoidal anti-windup
    integral, and decoupled feedforward / feedforward-boost terms, each with an
    optional one-pole smoothing filter.

    Two laws share the rolling history: ``positional`` returns the absolute
    command, ``incremental`` adds a rate-limited delta to the held output.
    Built from ``PIDConfig.classic`` (kff == kd, no boost, no smoothing) both
    laws reduce to a textbook PID.

    An instance is not reentrant: every call reads and rewrites its history,
    so all calls on one instance must come from a single control loop.
    Gains and limits are plain attributes and may be changed between calls.
    """

    def __init__(self, config: Optional[PIDConfig] = None, check: str = "off"):
        if check not in CHECK_MODES:
            raise ValueError(f"check must be one of {CHECK_MODES}, got {check!r}")
        if config is None:
            config = PIDConfig()
        if check != "off":
            config.validate(strict=check == "raise")

        self.kp = config.kp
        self.ki = config.ki
        self.kd = config.kd
        self.kff = config.kff
        self.kffb = config.kffb
        self.kff_alpha = config.kff_alpha
        self.kffb_beta = config.kffb_beta

        self.integ_max = config.integ_max
        self.integ_min = config.integ_min
        self.out_max = config.out_max
        self.out_min = config.out_min

        self._input = SignalHistory()
        self._feedback = SignalHistory()
        self._error = SignalHistory()
        self._diff_term = SignalHistory()
        self._ff_term = SignalHistory()
        self._ffb_term = SignalHistory()
        self._integral = 0.0
        self._output = 0.0
        self._delta = 0.0

    @classmethod
    def classic(cls, kp: float, ki: float, kd: float,
                integ_max: float, integ_min: float,
                out_max: float, out_min: float, check: str = "off") -> "PIDController":
        return cls(PIDConfig.classic(kp, ki, kd, integ_max, integ_min, out_max, out_min), check=check)

    @property
    def config(self) -> PIDConfig:
        return PIDConfig(kp=self.kp, ki=self.ki, kd=self.kd,
                         kff=self.kff, kffb=self.kffb,
                         kff_alpha=self.kff_alpha, kffb_beta=self.kffb_beta,
                         integ_max=self.integ_max, integ_min=self.integ_min,
                         out_max=self.out_max, out_min=self.out_min)

    @property
    def output(self) -> float:
        return self._output

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def integral(self) -> float:
        return self._integral

    def _push_samples(self, input_value: float, feedback: float):
        self._input.push(input_value)
        self._feedback.push(feedback)
        self._error.push(self._input.current - self._feedback.current)

    def _update_terms(self, differential_error: Optional[float]):
        if differential_error is None:
            self._diff_term.push(self.kd * self._feedback.first_difference())
        else:
            self._diff_term.push(self.kd * differential_error)

        # one-pole smoothing: the term's newest value becomes "previous" after the push
        ff_raw = (1 - self.kff_alpha) * self.kff * self._input.first_difference()
        self._ff_term.push(ff_raw + self.kff_alpha * self._ff_term.current)

        ffb_raw = (1 - self.kffb_beta) * self.kffb * self._input.second_difference()
        self._ffb_term.push(ffb_raw + self.kffb_beta * self._ffb_term.current)

    def _trapezoid_increment(self) -> float:
        increment = self.ki * (self._error.current + self._error.previous) * 0.5
        return clamp(increment, self.integ_max, self.integ_min)

    def positional(self, input_value: float, feedback: float,
                   differential_error: Optional[float] = None) -> float:
        """
        Absolute command for this sample.

        Leave ``differential_error`` as None to take the derivative from the
        feedback history, or pass a measured rate (e.g. a gyro reading for an
        angle loop) to use it instead.
        """
        self._push_samples(input_value, feedback)

        prop_term = self.kp * self._error.current

        increment = self._trapezoid_increment()
        self._integral = clamp(self._integral + increment,
                               self.integ_max, self.integ_min)

        self._update_terms(differential_error)

        output = (prop_term + self._integral - self._diff_term.current
                  + self._ff_term.current + self._ffb_term.current)
        self._output = clamp(output, self.out_max, self.out_min)
        return self._output

    def incremental(self, input_value: float, feedback: float,
                    differential_error: Optional[float] = None) -> float:
        """
        Add this sample's delta to the held output and return the result.

        The delta is limited to [integ_min, integ_max] before it is applied,
        so the integral bounds double as an output slew limit.
        """
        self._push_samples(input_value, feedback)

        prop_term = self.kp * self._error.first_difference()
        integ_term = self._trapezoid_increment()

        self._update_terms(differential_error)

        delta = (prop_term + integ_term
                 - self._diff_term.first_difference()
                 + self._ff_term.first_difference()
                 + self._ffb_term.first_difference())
        self._delta = clamp(delta, self.integ_max, self.integ_min)

        self._output = clamp(self._output + self._delta, self.out_max, self.out_min)
        return self._output

    def set_output(self, value: float) -> float:
        """Seed the held output, e.g. for a bumpless manual-to-automatic hand-off."""
        self._output = clamp(value, self.out_max, self.out_min)
        return self._output

    def reset_history(self):
        for history in (self._input, self._feedback, self._error,
                        self._diff_term, self._ff_term, self._ffb_term):
            history.reset()
        self._integral = 0.0
        self._output = 0.0
        self._delta = 0.0

    def clear(self):
        """
        Full reset: history, held output and the integral/output limits.

        The limits end up at zero, which clamps every later output to 0 until
        they are set again. Use ``reset_history`` to keep them.
        """
        self.reset_history()
        self.integ_max = 0.0
        self.integ_min = 0.0
        self.out_max = 0.0
        self.out_min = 0.0
