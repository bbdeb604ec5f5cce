"""
Pydantic models for API request/response validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Any

from outbreak.core.config import SimulationConfig

_DEFAULTS = SimulationConfig()


# === Simulation ===

class SimulationConfigRequest(BaseModel):
    """Typed, bounded mirror of SimulationConfig for request bodies.

    Numeric fields are strict so ``"5"`` is rejected rather than coerced.
    Unknown keys are rejected too.
    """

    model_config = ConfigDict(extra="forbid")

    experiment_name: str = _DEFAULTS.experiment_name
    random_seed: int | None = Field(default=_DEFAULTS.random_seed, strict=True)

    population_size: int = Field(default=_DEFAULTS.population_size, strict=True, ge=0)
    starting_infection_rate: float = Field(default=_DEFAULTS.starting_infection_rate, strict=True, ge=0, le=1)

    mask_coverage: float = Field(default=_DEFAULTS.mask_coverage, strict=True, ge=0, le=1)
    mask_effectiveness: float = Field(default=_DEFAULTS.mask_effectiveness, strict=True, ge=0, le=1)

    person_radius: float = Field(default=_DEFAULTS.person_radius, strict=True, ge=0)

    infection_radius: float = Field(default=_DEFAULTS.infection_radius, strict=True, ge=0, le=1)
    chance_of_infection: float = Field(default=_DEFAULTS.chance_of_infection, strict=True, ge=0, le=1)
    infection_duration: int = Field(default=_DEFAULTS.infection_duration, strict=True, ge=0)
    immunity_duration: int = Field(default=_DEFAULTS.immunity_duration, strict=True, ge=0)
    incubation_time: float = Field(default=_DEFAULTS.incubation_time, strict=True, ge=0)
    chance_of_death: float = Field(default=_DEFAULTS.chance_of_death, strict=True, ge=0, le=1)

    speed: float = Field(default=_DEFAULTS.speed, strict=True, ge=0)

    wet_market_size: float = Field(default=_DEFAULTS.wet_market_size, strict=True, ge=0, le=1)
    hotspot_size: float = Field(default=_DEFAULTS.hotspot_size, strict=True, ge=0, le=1)
    hotspot_count: int = Field(default=_DEFAULTS.hotspot_count, strict=True, ge=0)
    hotspot_escape_chance: float = Field(default=_DEFAULTS.hotspot_escape_chance, strict=True, ge=0, le=1)

    lockdown_compliance_threshold: float = Field(
        default=_DEFAULTS.lockdown_compliance_threshold, strict=True, ge=0, le=1,
    )

    log_interval: int = Field(default=_DEFAULTS.log_interval, strict=True, ge=1)
    log_size: int = Field(default=_DEFAULTS.log_size, strict=True, ge=1)

    ticks_to_run: int = Field(default=_DEFAULTS.ticks_to_run, strict=True, ge=0)


class CreateSessionRequest(BaseModel):
    config: SimulationConfigRequest | None = None
    preset: str | None = None
    name: str | None = None


class StepRequest(BaseModel):
    n: int = Field(default=1, ge=1)


class MaskCoverageRequest(BaseModel):
    mask_coverage: float = Field(ge=0.0, le=1.0)


class SessionSummary(BaseModel):
    id: str
    name: str
    status: str
    current_tick: int
    population_size: int


class SessionResponse(SessionSummary):
    lockdown: bool
    hotspots_active: bool
    mask_coverage: float
    counts: dict[str, int]
    config: dict[str, Any]


# === World (render snapshot) ===

class ZoneResponse(BaseModel):
    x: float
    y: float
    width: float
    height: float


class PersonResponse(BaseModel):
    x: float
    y: float
    state: str
    colour: str
    mask: bool
    isolating: bool


class WorldResponse(BaseModel):
    time: int
    lockdown: bool
    person_radius: float
    infection_radius: float
    wet_market: ZoneResponse
    hotspots: list[ZoneResponse]
    people: list[PersonResponse]


# === Metrics ===

class LogEntryResponse(BaseModel):
    counts: dict[str, int]
    new_entries: dict[str, int]


class TimeSeriesResponse(BaseModel):
    state: str
    field: str
    samples: list[int]
    values: list[int]


# === Experiments ===

class PresetInfo(BaseModel):
    name: str
    config: dict[str, Any]
