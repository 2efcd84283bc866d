import numpy as np
from scipy.integrate import solve_ivp
from ffpid.core.config import PIDConfig
from ffpid.core.pid_controller import PIDController
from benchmarks.metrics.step_response import compute_step_metrics, plot_step_response
from benchmarks.metrics.error_analysis import compute_error_statistics, plot_error_distribution
from benchmarks.metrics.statistical_tests import StatisticalValidator
import os
import json
from typing import Dict, List, Optional

LAWS = ("positional", "incremental")

CLASSIC_CONFIG = PIDConfig.classic(kp=50.0, ki=2.0, kd=0.0,
                                   integ_max=24.0, integ_min=-24.0,
                                   out_max=24.0, out_min=-24.0).as_dict()

FEEDFORWARD_CONFIG = dict(CLASSIC_CONFIG, kff=300.0, kffb=100.0, kff_alpha=0.5, kffb_beta=0.8)


class DCMotor:
    def __init__(self, J: float = 0.01, b: float = 0.1, K: float = 0.01, R: float = 1.0, L: float = 0.5):
        self.J = J
        self.b = b
        self.K = K
        self.R = R
        self.L = L

    def dynamics(self, state: np.ndarray, t: float, voltage: float) -> np.ndarray:
        if not np.isscalar(voltage):
            raise ValueError(f"Voltage must be scalar, got shape {np.shape(voltage)}")
        speed, current = state
        dspeed = (self.K * current - self.b * speed) / self.J
        dcurrent = (voltage - self.R * current - self.K * speed) / self.L
        return np.array([dspeed, dcurrent])

    def simulate(self, voltage: float, state: np.ndarray, dt: float) -> np.ndarray:
        sol = solve_ivp(lambda t, y: self.dynamics(y, t, voltage), [0, dt], state, method="RK45", t_eval=[dt])
        return sol.y[:, -1]

    def steady_state_speed(self, voltage: float) -> float:
        return self.K * voltage / (self.b * self.R + self.K ** 2)


def step_reference(t: np.ndarray, target: float = 1.0, t_step: float = 0.0) -> np.ndarray:
    return np.where(t >= t_step, target, 0.0)


def ramp_reference(t: np.ndarray, slope: float = 1.0, t_start: float = 0.0) -> np.ndarray:
    return slope * np.maximum(t - t_start, 0.0)


class MotorBenchmark:
    def __init__(self, n_trials: int = 10, dt: float = 0.01, T: float = 3.0, noise_std: float = 0.002,
                 results_dir: Optional[str] = "benchmarks/results", figures_dir: Optional[str] = "docs/figures"):
        if n_trials <= 0:
            raise ValueError("Number of trials must be positive")
        if dt <= 0 or T <= dt:
            raise ValueError("Need 0 < dt < T")
        self.n_trials = n_trials
        self.dt = dt
        self.T = T
        self.noise_std = noise_std
        self.results_dir = results_dir
        self.figures_dir = figures_dir
        self.motor = DCMotor()

    def run_single_trial(self, trial_id: int, config: Dict, law: str = "positional",
                         reference: str = "step", target: float = 1.0) -> Dict:
        if law not in LAWS:
            raise ValueError(f"Unknown control law {law!r}, expected one of {LAWS}")
        rng = np.random.default_rng(42 + trial_id)
        controller = PIDController(PIDConfig(**config), check="warn")
        control_step = controller.positional if law == "positional" else controller.incremental

        n_steps = int(round(self.T / self.dt))
        t = np.arange(n_steps + 1) * self.dt
        if reference == "step":
            ref = step_reference(t, target)
        elif reference == "ramp":
            ref = ramp_reference(t, target)
        else:
            raise ValueError(f"Unknown reference {reference!r}")

        state = np.zeros(2)
        speed_history = [0.0]
        control_history = []
        error_history = []

        for k in range(n_steps):
            measured = state[0] + rng.normal(0, self.noise_std)
            voltage = control_step(ref[k], measured)
            state = self.motor.simulate(voltage, state, self.dt)
            speed_history.append(float(state[0]))
            control_history.append(voltage)
            error_history.append(float(ref[k + 1] - state[0]))

        result = {
            'trial_id': trial_id,
            'law': law,
            'reference': reference,
            'final_error': error_history[-1],
            'error_statistics': compute_error_statistics(error_history),
            'iae': float(np.sum(np.abs(error_history)) * self.dt),
            'time': t.tolist(),
            'speed_history': speed_history,
            'control_history': control_history
        }
        if reference == "step":
            result['step_metrics'] = compute_step_metrics(t, speed_history, target)

        if self.figures_dir and trial_id % 5 == 0:
            os.makedirs(self.figures_dir, exist_ok=True)
            plot_step_response(t, speed_history, ref, control_history,
                               save_path=os.path.join(self.figures_dir, f"motor_{reference}_{law}_{trial_id}.png"),
                               config_label=f"({law})")
            plot_error_distribution(error_history,
                                    save_path=os.path.join(self.figures_dir, f"motor_{reference}_{law}_{trial_id}_errors.png"),
                                    config_label=f"({law}, {reference})")
        return result

    def run_benchmark(self, config: Dict, law: str = "positional", reference: str = "step") -> Dict:
        print(f"Running {law} {reference} benchmark with {self.n_trials} trials...")
        results = [self.run_single_trial(trial, config, law, reference) for trial in range(self.n_trials)]
        validator = StatisticalValidator()
        return {
            'iae': validator.summarize([r['iae'] for r in results]),
            'final_error': validator.summarize([abs(r['final_error']) for r in results]),
            'raw_results': results
        }

    def compare_configurations(self, config1: Dict, config2: Dict, config1_name: str = "Classic",
                               config2_name: str = "Feedforward", law: str = "positional",
                               reference: str = "ramp") -> Dict:
        print(f"Comparing {config1_name} and {config2_name} ({law}, {reference})")
        results1 = self.run_benchmark(config1, law, reference)
        results2 = self.run_benchmark(config2, law, reference)

        iae1 = [r['iae'] for r in results1['raw_results']]
        iae2 = [r['iae'] for r in results2['raw_results']]
        comparison = StatisticalValidator().compare(iae1, iae2)
        names = {'a': config1_name, 'b': config2_name, None: None}
        comparison['better'] = names[comparison['better']]

        return {
            config1_name: results1,
            config2_name: results2,
            'statistical_tests': {f'{config1_name}_vs_{config2_name}': comparison}
        }

    def save(self, name: str, payload: Dict):
        if not self.results_dir:
            return
        os.makedirs(self.results_dir, exist_ok=True)
        with open(os.path.join(self.results_dir, f"{name}.json"), "w") as f:
            json.dump(payload, f, indent=2, default=str)


def _strip_raw(results: Dict) -> Dict:
    return {k: ({kk: vv for kk, vv in v.items() if kk != 'raw_results'} if isinstance(v, dict) else v)
            for k, v in results.items()}


def run_statistical_benchmark(n_trials: int = 10):
    benchmark = MotorBenchmark(n_trials=n_trials)

    tracking = benchmark.compare_configurations(CLASSIC_CONFIG, FEEDFORWARD_CONFIG, "Classic", "Feedforward",
                                                law="positional", reference="ramp")
    benchmark.save("motor_ramp_tracking", _strip_raw(tracking))

    laws: Dict[str, Dict] = {}
    for law in LAWS:
        laws[law] = benchmark.run_benchmark(CLASSIC_CONFIG, law, "step")
    benchmark.save("motor_step_laws", _strip_raw(laws))

    summary = tracking['statistical_tests']['Classic_vs_Feedforward']
    print("Statistical benchmark completed")
    print(f"Classic vs Feedforward significant difference: {summary['significant']} (better: {summary['better']})")
    for law, results in laws.items():
        print(f"{law}: mean IAE = {results['iae']['mean']:.4f}")


if __name__ == "__main__":
    run_statistical_benchmark()
