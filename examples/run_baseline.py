#!/usr/bin/env python3
"""Run a baseline Outbreak Sandbox simulation and print results."""

from outbreak.core.config import SimulationConfig
from outbreak.core.state import State
from outbreak.experiment.runner import ExperimentRunner


def main():
    config = SimulationConfig(
        experiment_name="baseline",
        population_size=500,
        ticks_to_run=3000,
        random_seed=42,
    )

    print(f"=== Outbreak Sandbox: {config.experiment_name} ===")
    print(f"Population: {config.population_size}")
    print(f"Ticks: {config.ticks_to_run} (sample every {config.log_interval})")
    print(f"Masks: coverage={config.mask_coverage:.0%} "
          f"effectiveness={config.mask_effectiveness:.0%}")
    print()

    result = ExperimentRunner().run_experiment(config)

    print(f"{'Sample':>6} {'Tick':>6} {'Susc':>5} {'Inf':>5} {'Rec':>5} {'Dead':>5}")
    print("-" * 40)
    for i, counts in enumerate(result.history):
        print(
            f"{i:6d} {(i + 1) * config.log_interval:6d} "
            f"{counts[State.SUSCEPTIBLE]:5d} {counts[State.INFECTED]:5d} "
            f"{counts[State.RECOVERED]:5d} {counts[State.DEAD]:5d}"
        )

    print()
    print(f"=== Final State (tick {result.ticks_run}) ===")
    for state, count in result.final_counts.items():
        print(f"  {state.value:12s}: {count:5d}")
    print(f"Peak infected: {result.peak_infected}")
    print(f"Total dead: {result.total_dead}")
    print(f"Affected fraction: {result.affected_fraction:.1%}")


if __name__ == "__main__":
    main()
