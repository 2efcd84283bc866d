# benchmarks/metrics/step_response.py
import numpy as np
import matplotlib.pyplot as plt
from scipy.integrate import trapezoid
from typing import Dict, Optional, Sequence


def compute_step_metrics(t: Sequence[float], y: Sequence[float], target: float,
                         initial: float = 0.0, settling_band: float = 0.02) -> Dict[str, float]:
    t = np.asarray(t, dtype=float)
    y = np.asarray(y, dtype=float)
    span = target - initial
    if span == 0:
        raise ValueError("Target must differ from the initial value")

    # normalised so the step always goes 0 -> 1
    progress = (y - initial) / span
    error = target - y

    above_10 = np.nonzero(progress >= 0.1)[0]
    above_90 = np.nonzero(progress >= 0.9)[0]
    if len(above_10) and len(above_90):
        rise_time = float(t[above_90[0]] - t[above_10[0]])
    else:
        rise_time = float('nan')

    overshoot = max(0.0, float(np.max(progress)) - 1.0) * 100.0

    outside = np.nonzero(np.abs(progress - 1.0) > settling_band)[0]
    if len(outside) == 0:
        settling_time = float(t[0])
    elif outside[-1] + 1 < len(t):
        settling_time = float(t[outside[-1] + 1])
    else:
        settling_time = float('nan')

    return {
        "rise_time": rise_time,
        "overshoot_pct": overshoot,
        "settling_time": settling_time,
        "steady_state_error": float(error[-1]),
        "iae": float(trapezoid(np.abs(error), t)),
        "ise": float(trapezoid(error ** 2, t)),
    }


def plot_step_response(t: Sequence[float], y: Sequence[float], reference: Sequence[float],
                       control: Optional[Sequence[float]] = None,
                       save_path: str = None, config_label: str = ""):
    rows = 2 if control is not None else 1
    plt.figure(figsize=(10, 3 * rows + 1))
    plt.subplot(rows, 1, 1)
    plt.plot(t, y, label=f"Response {config_label}")
    plt.plot(t, reference, 'k--', label="Reference")
    plt.ylabel("Output")
    plt.grid(True)
    plt.legend()

    if control is not None:
        plt.subplot(rows, 1, 2)
        plt.plot(t[:len(control)], control, color="tab:orange", label="Command")
        plt.ylabel("Command")
        plt.grid(True)
        plt.legend()
    plt.xlabel("Time (s)")

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches="tight")
    else:
        plt.show()
    plt.close()
