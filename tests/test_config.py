"""Tests for SimulationConfig."""

import pytest

from outbreak.core.config import SimulationConfig


class TestConfigDefaults:
    def test_default_experiment_name(self):
        c = SimulationConfig()
        assert c.experiment_name == "default"

    def test_demo_disease_parameters(self):
        c = SimulationConfig()
        assert c.population_size == 2000
        assert c.infection_duration == 750
        assert c.immunity_duration == 2250
        assert c.incubation_time == 375
        assert c.chance_of_infection == 0.012
        assert c.chance_of_death == 0.1
        assert c.infection_radius == 0.01

    def test_default_mask_sliders(self):
        c = SimulationConfig()
        assert c.mask_coverage == 0.5
        assert c.mask_effectiveness == 0.5

    def test_default_log_window(self):
        c = SimulationConfig()
        assert c.log_interval == 60
        assert c.log_size == 100


class TestSerialization:
    def test_to_dict_roundtrip(self):
        c = SimulationConfig(experiment_name="test", population_size=50)
        c2 = SimulationConfig.from_dict(c.to_dict())
        assert c2 == c

    def test_to_json_roundtrip(self):
        c = SimulationConfig(experiment_name="json_test", random_seed=3)
        c2 = SimulationConfig.from_json(c.to_json())
        assert c2.experiment_name == "json_test"
        assert c2.random_seed == 3

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            SimulationConfig.from_dict({"num_people": 10})

    def test_diff(self):
        c1 = SimulationConfig(experiment_name="a", mask_coverage=0.5)
        c2 = SimulationConfig(experiment_name="b", mask_coverage=0.9)
        diffs = c1.diff(c2)
        assert diffs["mask_coverage"] == (0.5, 0.9)
        assert "experiment_name" in diffs
        assert "population_size" not in diffs
