"""
Tick engine — advances a World by one discrete time step.

Each tick runs five phases in a fixed order over the same World:

1. Movement (hotspot containment, then outer-wall reflection)
2. Contact infection
3. Judgement (isolation, then death or recovery)
4. Wet-market forced infection
5. Immunity decay

There is no snapshot between phases: each phase sees every mutation made
by the phases before it in the same tick. ``world.time`` advances by
exactly one once all phases have run.
"""

from __future__ import annotations

from outbreak.core.agent import Agent
from outbreak.core.state import State
from outbreak.core.world import World


def tick(world: World) -> None:
    """Advance ``world`` by one tick, in place."""
    update_positions(world)
    detect_collisions(world)
    judgement(world)
    market(world)
    immunity(world)
    world.time += 1


# ---------------------------------------------------------------------------
# Phase 1: movement
# ---------------------------------------------------------------------------

def update_positions(world: World) -> None:
    for person in world.people:
        if person.is_dead:
            continue

        new_x = person.x + person.vx
        new_y = person.y + person.vy

        for hotspot in world.hotspots:
            if not hotspot.contains(person.x, person.y):
                continue
            if world.rng.random() < world.hotspot_escape_chance:
                continue
            if not hotspot.contains_x(new_x):
                person.vx *= -1
            if not hotspot.contains_y(new_y):
                person.vy *= -1

        # Outer walls: commit in-bounds axes, bounce the rest without moving
        if 0 <= new_x <= 1:
            person.x = new_x
        else:
            person.vx *= -1

        if 0 <= new_y <= 1:
            person.y = new_y
        else:
            person.vy *= -1


# ---------------------------------------------------------------------------
# Phase 2: contact infection
# ---------------------------------------------------------------------------

def infection_probability(world: World, infected: Agent, susceptible: Agent) -> float:
    """Per-contact chance, discounted once for each masked party."""
    chance = world.chance_of_infection
    if susceptible.mask:
        chance *= 1 - world.mask_effectiveness
    if infected.mask:
        chance *= 1 - world.mask_effectiveness
    return chance


def within_infection_radius(world: World, a: Agent, b: Agent) -> bool:
    """Axis-independent (square) proximity test, not Euclidean."""
    radius = world.infection_radius
    return abs(a.x - b.x) <= radius and abs(a.y - b.y) <= radius


def detect_collisions(world: World) -> None:
    """Brute-force pairwise contact check between spreaders and targets.

    Both subsets are fixed at phase entry. A target infected earlier in
    the pass is skipped for the remaining spreaders.
    """
    spreaders = [
        p for p in world.people
        if p.state is State.INFECTED and not p.isolating
    ]
    targets = [
        p for p in world.people
        if p.state is State.SUSCEPTIBLE and not p.isolating
    ]

    for infected in spreaders:
        for susceptible in targets:
            if susceptible.state is not State.SUSCEPTIBLE:
                continue
            if not within_infection_radius(world, infected, susceptible):
                continue
            chance = infection_probability(world, infected, susceptible)
            if world.rng.random() < chance:
                susceptible.infect(world.time)


# ---------------------------------------------------------------------------
# Phase 3: judgement
# ---------------------------------------------------------------------------

def judgement(world: World) -> None:
    for person in world.in_state(State.INFECTED):
        if person.infection_time + world.incubation_time < world.time:
            person.isolating = True
            person.stop()

        if person.infection_time + world.infection_duration < world.time:
            if world.rng.random() < world.chance_of_death:
                person.die()
            else:
                person.recover(world.rng, world.speed)


# ---------------------------------------------------------------------------
# Phase 4: wet market
# ---------------------------------------------------------------------------

def market(world: World) -> None:
    for person in world.in_state(State.SUSCEPTIBLE):
        if world.wet_market.contains(person.x, person.y):
            person.infect(world.time)


# ---------------------------------------------------------------------------
# Phase 5: immunity decay
# ---------------------------------------------------------------------------

def immunity(world: World) -> None:
    for person in world.in_state(State.RECOVERED):
        if person.infection_time + world.immunity_duration < world.time:
            person.state = State.SUSCEPTIBLE
