# benchmarks/metrics/error_analysis.py
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Dict

def compute_error_statistics(errors: List[float]) -> Dict[str, float]:
    arr = np.asarray(errors, dtype=float)
    if arr.size == 0:
        raise ValueError("No tracking errors to analyse")
    abs_arr = np.abs(arr)
    return {
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "rms": float(np.sqrt(np.mean(arr ** 2))),
        "max_abs": float(np.max(abs_arr)),
        "median_abs": float(np.median(abs_arr)),
        "q95_abs": float(np.percentile(abs_arr, 95)),
    }

def plot_error_distribution(errors: List[float], save_path: str = None, config_label: str = ""):
    arr = np.asarray(errors, dtype=float)
    mean = float(np.mean(arr))
    std = float(np.std(arr))

    plt.figure(figsize=(6, 4))
    plt.hist(arr, bins=30, alpha=0.7, color="skyblue", edgecolor="black")
    plt.axvline(mean, color='red', linestyle='--', label=f"Mean = {mean:.4f}")
    plt.axvline(mean + std, color='green', linestyle=':', label=f"+1 STD = {mean+std:.4f}")
    plt.axvline(mean - std, color='green', linestyle=':', label=f"-1 STD = {mean-std:.4f}")

    plt.title(f"Tracking Error Distribution {config_label}")
    plt.xlabel("Error")
    plt.ylabel("Samples")
    plt.grid(True)
    plt.legend()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches="tight")
    else:
        plt.show()
    plt.close()
