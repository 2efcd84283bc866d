import os
from benchmarks.systems.motor import run_statistical_benchmark as run_motor

def main():
    print("Starting Feedforward PID Experiments")
    os.makedirs("docs/figures", exist_ok=True)
    os.makedirs("benchmarks/results", exist_ok=True)

    print("\nRunning DC Motor Benchmark...")
    run_motor()

    print("\nExperiments completed. Results saved in benchmarks/results/ and plots in docs/figures/.")

if __name__ == "__main__":
    main()
