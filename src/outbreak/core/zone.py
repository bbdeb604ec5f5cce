"""
Axis-aligned rectangular zones in normalized [0, 1] space.

Used for the wet market (forced infection) and hotspots (leaky
containment). All containment checks are inclusive on every edge.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Zone:
    """A rectangle anchored at its lower corner (x, y)."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Inclusive point-in-rectangle test."""
        return self.contains_x(x) and self.contains_y(y)

    def contains_x(self, x: float) -> bool:
        return self.x <= x <= self.x + self.width

    def contains_y(self, y: float) -> bool:
        return self.y <= y <= self.y + self.height

    def to_dict(self) -> dict[str, float]:
        return {
            "x": float(self.x),
            "y": float(self.y),
            "width": float(self.width),
            "height": float(self.height),
        }


def generate_zone(size: float, rng: np.random.Generator) -> Zone:
    """Random square zone of side ``size`` lying fully inside the unit square."""
    return Zone(
        x=float(rng.random() * (1.0 - size)),
        y=float(rng.random() * (1.0 - size)),
        width=size,
        height=size,
    )
