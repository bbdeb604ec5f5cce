"""
Disease states an agent moves through.

susceptible -> infected -> recovered | dead, and recovered -> susceptible
once immunity wanes. Dead is terminal.
"""

from __future__ import annotations

from enum import Enum


class State(str, Enum):
    """Disease state of a single agent."""
    SUSCEPTIBLE = "susceptible"
    INFECTED = "infected"
    RECOVERED = "recovered"
    DEAD = "dead"


# Display colours consumed by renderers
STATE_COLOURS: dict[State, str] = {
    State.SUSCEPTIBLE: "white",
    State.INFECTED: "yellow",
    State.RECOVERED: "green",
    State.DEAD: "red",
}


def colour_for_state(state: State) -> str:
    return STATE_COLOURS.get(state, "")
