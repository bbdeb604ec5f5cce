"""
Core agent dataclass for the Outbreak Sandbox.

Each agent is a point moving through the unit square with a disease
state, a mask flag, and a fixed ``respects_authority`` trait that drives
both mask adoption and lockdown compliance.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from outbreak.core.state import State

DEFAULT_SPEED = 1 / 750


def random_velocity(rng: np.random.Generator, speed: float = DEFAULT_SPEED) -> float:
    """One velocity component, uniform in (-speed, speed)."""
    return speed * (rng.random() * 2 - 1)


def derive_mask(respects_authority: float, mask_coverage: float) -> bool:
    """Whether an agent masks under the given coverage.

    An agent masks once coverage exceeds ``1 - respects_authority``, so
    the agents most likely to comply with lockdown are also the first to
    mask as coverage rises.
    """
    return (1.0 - respects_authority) < mask_coverage


@dataclass
class Agent:
    """A simulated person."""

    # === Position / velocity (normalized space) ===
    x: float
    y: float
    vx: float
    vy: float

    # === Behaviour ===
    respects_authority: float
    mask: bool = False
    isolating: bool = False

    # === Disease ===
    state: State = State.SUSCEPTIBLE
    infection_time: int = 0  # Only meaningful while infected or recovered

    @property
    def is_dead(self) -> bool:
        return self.state is State.DEAD

    @property
    def is_stationary(self) -> bool:
        return self.vx == 0 and self.vy == 0

    def stop(self) -> None:
        self.vx = 0.0
        self.vy = 0.0

    def redraw_velocity(self, rng: np.random.Generator, speed: float = DEFAULT_SPEED) -> None:
        self.vx = random_velocity(rng, speed)
        self.vy = random_velocity(rng, speed)

    def infect(self, time: int) -> None:
        self.state = State.INFECTED
        self.infection_time = time

    def die(self) -> None:
        self.state = State.DEAD
        self.isolating = False
        self.stop()

    def recover(self, rng: np.random.Generator, speed: float = DEFAULT_SPEED) -> None:
        """Leave infection alive: stop isolating and start moving again."""
        self.state = State.RECOVERED
        self.isolating = False
        self.redraw_velocity(rng, speed)


def generate_agent(
    mask_coverage: float,
    rng: np.random.Generator,
    speed: float = DEFAULT_SPEED,
    starting_infection_rate: float = 0.0,
) -> Agent:
    """Create an agent at a random position with a random heading."""
    respects_authority = float(rng.random())
    x = float(rng.random())
    y = float(rng.random())
    vx = random_velocity(rng, speed)
    vy = random_velocity(rng, speed)

    state = State.SUSCEPTIBLE
    if starting_infection_rate > 0 and rng.random() < starting_infection_rate:
        state = State.INFECTED

    return Agent(
        x=x,
        y=y,
        vx=vx,
        vy=vy,
        respects_authority=respects_authority,
        mask=derive_mask(respects_authority, mask_coverage),
        state=state,
    )
