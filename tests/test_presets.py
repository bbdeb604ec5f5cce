"""Tests for experiment presets."""

import pytest

from outbreak.core.config import SimulationConfig
from outbreak.experiment.presets import PRESETS, get_preset, list_presets


class TestPresets:
    def test_all_presets_build(self):
        for name in list_presets():
            config = get_preset(name)
            assert isinstance(config, SimulationConfig)
            assert config.experiment_name == name

    def test_list_matches_registry(self):
        assert list_presets() == list(PRESETS.keys())

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            get_preset("nonexistent")

    def test_presets_return_fresh_configs(self):
        a = get_preset("baseline")
        a.population_size = 1
        assert get_preset("baseline").population_size == 2000

    def test_universal_masks(self):
        c = get_preset("universal_masks")
        assert c.mask_coverage == 1.0

    def test_seeded_outbreak_starts_infected(self):
        assert get_preset("seeded_outbreak").starting_infection_rate > 0
