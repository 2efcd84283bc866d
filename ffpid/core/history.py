# ffpid/core/history.py
from typing import Tuple


class SignalHistory:
    """Newest three samples of one signal: current, previous, previous_previous."""

    __slots__ = ("current", "previous", "previous_previous")

    def __init__(self):
        self.current = 0.0
        self.previous = 0.0
        self.previous_previous = 0.0

    def push(self, value: float) -> float:
        self.previous_previous = self.previous
        self.previous = self.current
        self.current = value
        return value

    def first_difference(self) -> float:
        return self.current - self.previous

    def second_difference(self) -> float:
        return self.current - 2.0 * self.previous + self.previous_previous

    def reset(self):
        self.current = 0.0
        self.previous = 0.0
        self.previous_previous = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.current, self.previous, self.previous_previous

    def __repr__(self) -> str:
        return f"SignalHistory({self.current!r}, {self.previous!r}, {self.previous_previous!r})"
