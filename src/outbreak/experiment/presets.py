"""
Experiment presets — pre-configured world templates.

Each preset returns a SimulationConfig set up to explore one question
about the outbreak: how much masks help, what a deadlier strain does,
how quickly waning immunity brings the next wave.
"""

from __future__ import annotations

from typing import Callable

from outbreak.core.config import SimulationConfig


def baseline() -> SimulationConfig:
    """Default demo parameters; the wet market is the only seed."""
    return SimulationConfig(experiment_name="baseline")


def seeded_outbreak() -> SimulationConfig:
    """5% of the population starts infected, as in the first demo."""
    return SimulationConfig(
        experiment_name="seeded_outbreak",
        starting_infection_rate=0.05,
    )


def universal_masks() -> SimulationConfig:
    """Everyone masks, with highly effective masks."""
    return SimulationConfig(
        experiment_name="universal_masks",
        mask_coverage=1.0,
        mask_effectiveness=0.8,
    )


def no_masks() -> SimulationConfig:
    """Nobody masks."""
    return SimulationConfig(
        experiment_name="no_masks",
        mask_coverage=0.0,
    )


def deadly_strain() -> SimulationConfig:
    """Higher transmission and three times the fatality rate."""
    return SimulationConfig(
        experiment_name="deadly_strain",
        chance_of_infection=0.02,
        chance_of_death=0.3,
    )


def short_immunity() -> SimulationConfig:
    """Immunity wanes shortly after recovery, driving repeat waves."""
    return SimulationConfig(
        experiment_name="short_immunity",
        immunity_duration=750 + 300,
    )


PRESETS: dict[str, Callable[[], SimulationConfig]] = {
    "baseline": baseline,
    "seeded_outbreak": seeded_outbreak,
    "universal_masks": universal_masks,
    "no_masks": no_masks,
    "deadly_strain": deadly_strain,
    "short_immunity": short_immunity,
}


def get_preset(name: str) -> SimulationConfig:
    """Get a preset config by name."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset: '{name}'. Available: {list(PRESETS.keys())}")
    return PRESETS[name]()


def list_presets() -> list[str]:
    """Return list of available preset names."""
    return list(PRESETS.keys())
