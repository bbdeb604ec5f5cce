"""
Master configuration for the Outbreak Sandbox.

Every tunable parameter of a world lives here. Defaults reproduce the
interactive demo: 2000 people, a 750-tick infection, waning immunity,
and sliders for mask coverage and effectiveness at 50%.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_DEFAULT_INFECTION_DURATION = 750


@dataclass
class SimulationConfig:
    """
    Parameter bundle for building a World.

    Everything except ``population_size`` and ``starting_infection_rate``
    is copied onto the World verbatim. Use ``to_dict()`` / ``from_dict()``
    for serialization and comparison.
    """

    # === Experiment identity ===
    experiment_name: str = "default"
    random_seed: int | None = None

    # === Population ===
    population_size: int = 2000
    starting_infection_rate: float = 0.0

    # === Masks ===
    mask_coverage: float = 0.5
    mask_effectiveness: float = 0.5

    # === Rendering (carried for draw only) ===
    person_radius: float = 4

    # === Disease ===
    infection_radius: float = 1 / 100
    chance_of_infection: float = 0.012
    infection_duration: int = _DEFAULT_INFECTION_DURATION
    immunity_duration: int = _DEFAULT_INFECTION_DURATION + 1500
    incubation_time: float = 0.5 * _DEFAULT_INFECTION_DURATION
    chance_of_death: float = 0.1

    # === Movement ===
    speed: float = 1 / 750

    # === Zones ===
    wet_market_size: float = 0.01
    hotspot_size: float = 0.1
    hotspot_count: int = 3
    hotspot_escape_chance: float = 0.2  # Chance a hotspot fails to reflect an exit

    # === Lockdown ===
    lockdown_compliance_threshold: float = 0.7  # Above this, agents stop entirely

    # === Log ===
    log_interval: int = 60  # Ticks between log samples
    log_size: int = 100

    # === Runner ===
    ticks_to_run: int = 3000

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> SimulationConfig:
        """Deserialize from a dict. Unknown keys raise ``TypeError``."""
        return cls(**{k: v for k, v in d.items() if not k.startswith("_")})

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    @classmethod
    def from_json(cls, s: str) -> SimulationConfig:
        return cls.from_dict(json.loads(s))

    def diff(self, other: SimulationConfig) -> dict[str, tuple[Any, Any]]:
        """Return parameters that differ between two configs."""
        diffs: dict[str, tuple[Any, Any]] = {}
        for k in self.to_dict():
            v1 = getattr(self, k)
            v2 = getattr(other, k)
            if v1 != v2:
                diffs[k] = (v1, v2)
        return diffs
