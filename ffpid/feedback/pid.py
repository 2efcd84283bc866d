# ffpid/feedback/pid.py
import numpy as np
from typing import Tuple


class ClassicPID:
    """Textbook discrete PID: trapezoidal integral with anti-windup, derivative on error."""

    def __init__(self, kp: float = 1.0, ki: float = 0.0, kd: float = 0.0,
                 integral_limits: Tuple[float, float] = (-np.inf, np.inf),
                 output_limits: Tuple[float, float] = (-np.inf, np.inf)):
        self.kp = kp
        self.ki = ki
        self.kd = kd

        self.integral = 0.0
        self.output = 0.0
        self.prev_error = 0.0
        self.prev_prev_error = 0.0
        self.integral_limits = integral_limits
        self.output_limits = output_limits

    def reset(self):
        self.integral = 0.0
        self.output = 0.0
        self.prev_error = 0.0
        self.prev_prev_error = 0.0

    def _clip_integral(self, value: float) -> float:
        return float(np.clip(value, self.integral_limits[0], self.integral_limits[1]))

    def _clip_output(self, value: float) -> float:
        return float(np.clip(value, self.output_limits[0], self.output_limits[1]))

    def _shift(self, error: float):
        self.prev_prev_error = self.prev_error
        self.prev_error = error

    def update(self, setpoint: float, measurement: float) -> float:
        error = setpoint - measurement
        step = self._clip_integral(self.ki * (error + self.prev_error) / 2)
        self.integral = self._clip_integral(self.integral + step)
        derivative = error - self.prev_error

        self.output = self._clip_output(self.kp * error + self.integral + self.kd * derivative)
        self._shift(error)
        return self.output

    def update_incremental(self, setpoint: float, measurement: float) -> float:
        error = setpoint - measurement
        step = self._clip_integral(self.ki * (error + self.prev_error) / 2)
        curvature = error - 2 * self.prev_error + self.prev_prev_error

        delta = self.kp * (error - self.prev_error) + step + self.kd * curvature
        self.output = self._clip_output(self.output + self._clip_integral(delta))
        self._shift(error)
        return self.output
