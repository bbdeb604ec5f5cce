"""
Serializers for converting simulation objects to JSON-safe dicts.

Handles enums and numpy scalars from the World and its agents.
"""

from __future__ import annotations

from typing import Any

from outbreak.api.sessions import SimulationSession
from outbreak.core.agent import Agent
from outbreak.core.state import colour_for_state
from outbreak.core.world import World
from outbreak.metrics.log import count_states


def serialize_counts(world: World) -> dict[str, int]:
    return {state.value: int(n) for state, n in count_states(world).items()}


def serialize_person(person: Agent) -> dict[str, Any]:
    """Only what a renderer draws."""
    return {
        "x": round(float(person.x), 6),
        "y": round(float(person.y), 6),
        "state": person.state.value,
        "colour": colour_for_state(person.state),
        "mask": bool(person.mask),
        "isolating": bool(person.isolating),
    }


def serialize_world(world: World) -> dict[str, Any]:
    return {
        "time": int(world.time),
        "lockdown": world.lockdown,
        "person_radius": float(world.person_radius),
        "infection_radius": float(world.infection_radius),
        "wet_market": world.wet_market.to_dict(),
        "hotspots": [h.to_dict() for h in world.hotspots],
        "people": [serialize_person(p) for p in world.people],
    }


def serialize_session(session: SimulationSession) -> dict[str, Any]:
    world = session.world
    return {
        "id": session.id,
        "name": session.name,
        "status": session.status,
        "current_tick": session.current_tick,
        "population_size": world.population_size,
        "lockdown": world.lockdown,
        "hotspots_active": bool(world.hotspots),
        "mask_coverage": float(world.mask_coverage),
        "counts": serialize_counts(world),
        "config": session.config.to_dict(),
    }
