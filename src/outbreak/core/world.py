"""
World state and global interventions.

A World is the single mutable aggregate a driver owns: the population,
the clock, the zones, and the parameters fixed at construction. The
intervention commands (lockdown, hotspots, masks) mutate it in place and
are invoked between ticks, never from inside one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from outbreak.core.agent import DEFAULT_SPEED, Agent, derive_mask, generate_agent
from outbreak.core.config import SimulationConfig
from outbreak.core.state import State
from outbreak.core.zone import Zone, generate_zone

logger = logging.getLogger(__name__)


@dataclass
class World:
    """Aggregate simulation state, mutated in place by the tick engine."""

    people: list[Agent]
    wet_market: Zone
    time: int = 0
    hotspots: list[Zone] = field(default_factory=list)
    lockdown: bool = False

    # === Masks (coverage changes at runtime, effectiveness does not) ===
    mask_coverage: float = 0.5
    mask_effectiveness: float = 0.5

    # === Fixed for the World's lifetime ===
    person_radius: float = 4
    infection_radius: float = 1 / 100
    chance_of_infection: float = 0.012
    infection_duration: int = 750
    immunity_duration: int = 2250
    incubation_time: float = 375
    chance_of_death: float = 0.1
    speed: float = DEFAULT_SPEED
    hotspot_size: float = 0.1
    hotspot_count: int = 3
    hotspot_escape_chance: float = 0.2
    lockdown_compliance_threshold: float = 0.7

    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False, compare=False,
    )

    @property
    def population_size(self) -> int:
        return len(self.people)

    def living(self) -> list[Agent]:
        return [p for p in self.people if not p.is_dead]

    def in_state(self, state: State) -> list[Agent]:
        return [p for p in self.people if p.state is state]


def generate_world(config: SimulationConfig) -> World:
    """Build a fresh World from a parameter bundle."""
    rng = np.random.default_rng(config.random_seed)
    people = [
        generate_agent(
            config.mask_coverage,
            rng,
            speed=config.speed,
            starting_infection_rate=config.starting_infection_rate,
        )
        for _ in range(config.population_size)
    ]
    wet_market = generate_zone(config.wet_market_size, rng)

    return World(
        people=people,
        wet_market=wet_market,
        mask_coverage=config.mask_coverage,
        mask_effectiveness=config.mask_effectiveness,
        person_radius=config.person_radius,
        infection_radius=config.infection_radius,
        chance_of_infection=config.chance_of_infection,
        infection_duration=config.infection_duration,
        immunity_duration=config.immunity_duration,
        incubation_time=config.incubation_time,
        chance_of_death=config.chance_of_death,
        speed=config.speed,
        hotspot_size=config.hotspot_size,
        hotspot_count=config.hotspot_count,
        hotspot_escape_chance=config.hotspot_escape_chance,
        lockdown_compliance_threshold=config.lockdown_compliance_threshold,
        rng=rng,
    )


# ---------------------------------------------------------------------------
# Interventions
# ---------------------------------------------------------------------------

def toggle_lockdown(world: World) -> None:
    """Flip lockdown and re-derive every living agent's velocity.

    Entering lockdown scales velocity by ``1 - respects_authority`` and
    stops compliant agents outright. Leaving it draws fresh velocities
    rather than undoing the scaling.
    """
    world.lockdown = not world.lockdown
    for person in world.people:
        if person.is_dead:
            continue

        if world.lockdown:
            person.vx *= 1 - person.respects_authority
            person.vy *= 1 - person.respects_authority
            if person.respects_authority > world.lockdown_compliance_threshold:
                person.stop()
        else:
            person.redraw_velocity(world.rng, world.speed)

    logger.debug("Lockdown %s at t=%d", "on" if world.lockdown else "off", world.time)


def toggle_hotspots(world: World) -> None:
    """All-or-nothing: clear existing hotspots, or generate a fresh set."""
    if world.hotspots:
        world.hotspots = []
    else:
        world.hotspots = [
            generate_zone(world.hotspot_size, world.rng)
            for _ in range(world.hotspot_count)
        ]
    logger.debug("Hotspots now %d at t=%d", len(world.hotspots), world.time)


def update_masks(world: World) -> None:
    """Re-derive each living agent's mask from the current coverage."""
    for person in world.people:
        if person.is_dead:
            continue
        person.mask = derive_mask(person.respects_authority, world.mask_coverage)


def set_mask_coverage(world: World, coverage: float) -> None:
    world.mask_coverage = coverage
    update_masks(world)
