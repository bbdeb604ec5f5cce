"""
Experiment Runner — batch execution, A/B comparisons, and parameter sweeps.

Drives worlds headlessly: tick every step, sample the log every
``log_interval`` ticks, and summarize the outbreak once the run ends.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from outbreak.core.config import SimulationConfig
from outbreak.core.state import State
from outbreak.core.tick_engine import tick
from outbreak.core.world import World, generate_world
from outbreak.metrics.log import Log, LogEntry, count_states, update_log


def advance(world: World, log: Log, ticks: int, log_interval: int) -> list[LogEntry]:
    """Run ``ticks`` ticks, sampling the log whenever time hits the interval.

    Returns the entries appended during this call, including ones that
    have since slid out of the log's window.
    """
    sampled: list[LogEntry] = []
    for _ in range(ticks):
        tick(world)
        if log_interval > 0 and world.time % log_interval == 0:
            sampled.append(update_log(world, log))
    return sampled


@dataclass
class ExperimentResult:
    """Result of a single experiment run."""
    config: SimulationConfig
    log: Log
    history: list[dict[State, int]]  # Every sample, not just the log window
    final_counts: dict[State, int]
    ticks_run: int
    peak_infected: int
    total_dead: int
    affected_fraction: float  # Infected, recovered or dead at the end


@dataclass
class ComparisonResult:
    """Result of comparing two or more experiments."""
    results: dict[str, ExperimentResult]
    config_diffs: dict[str, Any]


class ExperimentRunner:
    """
    Run, compare, and sweep outbreak experiments.
    """

    def run_experiment(
        self,
        config: SimulationConfig,
        ticks: int | None = None,
    ) -> ExperimentResult:
        """Run a single experiment and return results."""
        ticks = ticks if ticks is not None else config.ticks_to_run
        world = generate_world(config)
        log = Log(max_size=config.log_size)

        sampled = advance(world, log, ticks, config.log_interval)
        history = [dict(entry.counts) for entry in sampled]
        final_counts = count_states(world)

        infected_series = [h[State.INFECTED] for h in history]
        infected_series.append(final_counts[State.INFECTED])
        population = max(world.population_size, 1)
        affected = (
            final_counts[State.INFECTED]
            + final_counts[State.RECOVERED]
            + final_counts[State.DEAD]
        )

        return ExperimentResult(
            config=config,
            log=log,
            history=history,
            final_counts=final_counts,
            ticks_run=world.time,
            peak_infected=int(np.max(infected_series)),
            total_dead=final_counts[State.DEAD],
            affected_fraction=affected / population,
        )

    def compare_experiments(
        self,
        configs: dict[str, SimulationConfig],
        ticks: int | None = None,
    ) -> ComparisonResult:
        """Run multiple experiments and compare results."""
        results: dict[str, ExperimentResult] = {}
        for name, config in configs.items():
            results[name] = self.run_experiment(config, ticks)

        config_names = list(configs.keys())
        diffs: dict[str, Any] = {}
        if len(config_names) >= 2:
            base = configs[config_names[0]]
            for name in config_names[1:]:
                diffs[f"{config_names[0]}_vs_{name}"] = base.diff(configs[name])

        return ComparisonResult(results=results, config_diffs=diffs)

    def run_ab_test(
        self,
        config_a: SimulationConfig,
        config_b: SimulationConfig,
        label_a: str = "A",
        label_b: str = "B",
        ticks: int | None = None,
    ) -> ComparisonResult:
        """Run an A/B test between two configurations."""
        return self.compare_experiments({label_a: config_a, label_b: config_b}, ticks)

    def run_parameter_sweep(
        self,
        base_config: SimulationConfig,
        param_name: str,
        values: list[Any],
        ticks: int | None = None,
    ) -> dict[str, ExperimentResult]:
        """Run one world per value of ``param_name``, keyed ``"<param>=<value>"``.

        Unknown parameter names raise ``TypeError``.
        """
        return {
            f"{param_name}={val}": self.run_experiment(
                variant(base_config, f"sweep_{param_name}={val}", **{param_name: val}),
                ticks,
            )
            for val in values
        }

    def run_multi_seed(
        self,
        config: SimulationConfig,
        seeds: list[int],
        ticks: int | None = None,
    ) -> list[ExperimentResult]:
        """Replay one configuration under several seeds."""
        return [
            self.run_experiment(
                variant(config, f"{config.experiment_name}_seed{seed}", random_seed=seed),
                ticks,
            )
            for seed in seeds
        ]


def variant(config: SimulationConfig, experiment_name: str, **overrides: Any) -> SimulationConfig:
    """Copy ``config`` under a new name with some parameters replaced."""
    return replace(config, experiment_name=experiment_name, **overrides)
