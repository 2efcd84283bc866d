# ffpid/core/config.py
import math
import warnings
from dataclasses import asdict, dataclass, fields
from typing import Dict, List


@dataclass
class PIDConfig:
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    kff: float = 0.0
    kffb: float = 0.0
    kff_alpha: float = 0.0
    kffb_beta: float = 0.0
    integ_max: float = 0.0
    integ_min: float = 0.0
    out_max: float = 0.0
    out_min: float = 0.0

    @classmethod
    def classic(cls, kp: float, ki: float, kd: float,
                integ_max: float, integ_min: float,
                out_max: float, out_min: float) -> "PIDConfig":
        """Plain PID: feedforward carries the derivative gain, boost and smoothing are off."""
        return cls(kp=kp, ki=ki, kd=kd,
                   kff=kd, kffb=0.0, kff_alpha=0.0, kffb_beta=0.0,
                   integ_max=integ_max, integ_min=integ_min,
                   out_max=out_max, out_min=out_min)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def problems(self) -> List[str]:
        found = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                found.append(f"{f.name} must be finite, got {value}")
        if self.integ_min > self.integ_max:
            found.append(f"integ_min ({self.integ_min}) is above integ_max ({self.integ_max})")
        if self.out_min > self.out_max:
            found.append(f"out_min ({self.out_min}) is above out_max ({self.out_max})")
        if not (0.0 <= self.kff_alpha <= 1.0):
            found.append(f"kff_alpha should be in [0, 1], got {self.kff_alpha}")
        if not (0.0 <= self.kffb_beta <= 1.0):
            found.append(f"kffb_beta should be in [0, 1], got {self.kffb_beta}")
        return found

    def validate(self, strict: bool = True) -> List[str]:
        found = self.problems()
        if found and strict:
            raise ValueError("Invalid PID configuration: " + "; ".join(found))
        for problem in found:
            warnings.warn(f"PID configuration: {problem}")
        return found
