"""Tests for ExperimentRunner and the headless driver loop."""

import pytest

from outbreak.core.config import SimulationConfig
from outbreak.core.state import State
from outbreak.core.world import generate_world
from outbreak.experiment.runner import (
    ComparisonResult,
    ExperimentResult,
    ExperimentRunner,
    advance,
    variant,
)
from outbreak.metrics.log import Log


def _small_config(**overrides) -> SimulationConfig:
    defaults = dict(
        population_size=60,
        random_seed=42,
        starting_infection_rate=0.1,
        infection_duration=40,
        incubation_time=20,
        immunity_duration=80,
        ticks_to_run=240,
    )
    defaults.update(overrides)
    return SimulationConfig(**defaults)


class TestAdvance:
    def test_samples_every_interval(self):
        config = _small_config()
        world = generate_world(config)
        log = Log()
        sampled = advance(world, log, 130, log_interval=60)
        assert world.time == 130
        assert len(sampled) == 2
        assert len(log) == 3  # baseline + 2 samples

    def test_zero_interval_disables_logging(self):
        world = generate_world(_small_config())
        log = Log()
        advance(world, log, 10, log_interval=0)
        assert world.time == 10
        assert len(log) == 0


class TestRunExperiment:
    def test_basic_run(self):
        result = ExperimentRunner().run_experiment(_small_config())
        assert isinstance(result, ExperimentResult)
        assert result.ticks_run == 240
        assert len(result.history) == 4
        assert sum(result.final_counts.values()) == 60

    def test_ticks_override(self):
        result = ExperimentRunner().run_experiment(_small_config(), ticks=60)
        assert result.ticks_run == 60
        assert len(result.history) == 1

    def test_history_outlives_log_window(self):
        config = _small_config(log_interval=1, log_size=10)
        result = ExperimentRunner().run_experiment(config, ticks=50)
        assert len(result.history) == 50
        assert len(result.log) == 10

    def test_summary_fields(self):
        result = ExperimentRunner().run_experiment(_small_config())
        assert result.peak_infected >= result.final_counts[State.INFECTED]
        assert result.total_dead == result.final_counts[State.DEAD]
        assert 0.0 <= result.affected_fraction <= 1.0

    def test_deterministic_with_seed(self):
        runner = ExperimentRunner()
        a = runner.run_experiment(_small_config())
        b = runner.run_experiment(_small_config())
        assert a.final_counts == b.final_counts
        assert a.history == b.history

    def test_empty_population(self):
        result = ExperimentRunner().run_experiment(_small_config(population_size=0), ticks=120)
        assert result.peak_infected == 0
        assert result.affected_fraction == 0.0


class TestComparisons:
    def test_compare_experiments(self):
        comp = ExperimentRunner().compare_experiments({
            "low": _small_config(mask_coverage=0.0),
            "high": _small_config(mask_coverage=1.0),
        }, ticks=60)
        assert isinstance(comp, ComparisonResult)
        assert set(comp.results) == {"low", "high"}
        assert "mask_coverage" in comp.config_diffs["low_vs_high"]

    def test_ab_test_labels(self):
        comp = ExperimentRunner().run_ab_test(
            _small_config(), _small_config(chance_of_death=0.5), ticks=60,
        )
        assert set(comp.results) == {"A", "B"}

    def test_parameter_sweep(self):
        results = ExperimentRunner().run_parameter_sweep(
            _small_config(), "chance_of_death", [0.0, 1.0], ticks=120,
        )
        assert set(results) == {"chance_of_death=0.0", "chance_of_death=1.0"}
        assert results["chance_of_death=0.0"].total_dead == 0
        assert results["chance_of_death=1.0"].config.experiment_name == "sweep_chance_of_death=1.0"

    def test_multi_seed(self):
        results = ExperimentRunner().run_multi_seed(_small_config(), [1, 2], ticks=60)
        assert [r.config.random_seed for r in results] == [1, 2]

    def test_sweep_unknown_parameter(self):
        with pytest.raises(TypeError):
            ExperimentRunner().run_parameter_sweep(_small_config(), "num_people", [5], ticks=1)


class TestVariant:
    def test_copies_and_overrides(self):
        base = _small_config(mask_coverage=0.3)
        copy = variant(base, "copy", chance_of_death=0.9)
        assert copy.experiment_name == "copy"
        assert copy.chance_of_death == 0.9
        assert copy.mask_coverage == 0.3
        assert base.chance_of_death != 0.9
        assert base.diff(copy).keys() == {"experiment_name", "chance_of_death"}
