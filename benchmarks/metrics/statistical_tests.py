# benchmarks/metrics/statistical_tests.py
import numpy as np
from scipy import stats
from typing import Dict, List


class StatisticalValidator:
    def __init__(self, alpha: float = 0.05, confidence: float = 0.95):
        if not (0 < alpha < 1):
            raise ValueError("alpha should be in (0, 1)")
        self.alpha = alpha
        self.confidence = confidence

    def summarize(self, values: List[float]) -> Dict:
        if not values:
            return {'error': 'No values'}
        data = np.asarray(values, dtype=float)
        return {
            'mean': float(np.mean(data)),
            'std': float(np.std(data)),
            'median': float(np.median(data)),
            'min': float(np.min(data)),
            'max': float(np.max(data)),
            'ci_95': self._confidence_interval(data)
        }

    def _confidence_interval(self, data: np.ndarray):
        mean = float(np.mean(data))
        if len(data) < 2 or np.std(data) == 0:
            return mean, mean
        h = stats.sem(data) * stats.t.ppf((1 + self.confidence) / 2., len(data) - 1)
        return mean - float(h), mean + float(h)

    def compare(self, metric_a: List[float], metric_b: List[float]) -> Dict:
        """Lower is better: `better` names the sample with the smaller mean when the difference is significant."""
        a = np.asarray(metric_a, dtype=float)
        b = np.asarray(metric_b, dtype=float)
        if len(a) < 2 or len(b) < 2:
            raise ValueError("Need at least two trials per configuration")

        if np.std(a) > 0 or np.std(b) > 0:
            t_stat, t_p = stats.ttest_ind(a, b, equal_var=False)
            u_stat, u_p = stats.mannwhitneyu(a, b, alternative='two-sided')
        else:
            t_stat, t_p, u_stat, u_p = np.nan, np.nan, np.nan, np.nan

        pooled_std = np.sqrt(((len(a) - 1) * np.var(a) + (len(b) - 1) * np.var(b)) /
                             (len(a) + len(b) - 2))
        cohens_d = (np.mean(a) - np.mean(b)) / pooled_std if pooled_std > 0 else np.nan

        significant = bool(t_p < self.alpha) if not np.isnan(t_p) else False
        if significant:
            better = 'a' if np.mean(a) < np.mean(b) else 'b'
        else:
            better = None
        return {
            't_test': {'statistic': float(t_stat), 'p_value': float(t_p)},
            'mann_whitney': {'statistic': float(u_stat), 'p_value': float(u_p)},
            'cohens_d': float(cohens_d),
            'significant': significant,
            'better': better
        }
