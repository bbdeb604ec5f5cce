"""
Session manager for interactive outbreak worlds.

Each session owns one World and its Log and stands in for a single
browser tab of the original demo: step the clock, flip interventions,
move the mask-coverage slider, or reset to a brand-new world. Sessions
live in memory only.

All mutation and every API read of a session go through its lock, so
readers never see a half-applied tick and an intervention arriving on
another request thread never interleaves with the phases of a tick.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Any

from outbreak.core.config import SimulationConfig
from outbreak.core.world import (
    World,
    generate_world,
    set_mask_coverage,
    toggle_hotspots,
    toggle_lockdown,
)
from outbreak.experiment.runner import advance
from outbreak.metrics.log import Log

logger = logging.getLogger(__name__)


@dataclass
class SimulationSession:
    """A live world plus its rolling log."""

    id: str
    name: str
    config: SimulationConfig
    world: World
    log: Log
    status: str = "created"  # created | running
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def current_tick(self) -> int:
        return self.world.time


class SessionManager:
    """Manages multiple in-memory simulation sessions.

    Parameters
    ----------
    max_step_ticks : int
        Upper bound on ticks a single ``step`` call may run.
    """

    def __init__(self, max_step_ticks: int = 10_000):
        self.sessions: dict[str, SimulationSession] = {}
        self.max_step_ticks = max_step_ticks

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_session(
        self,
        config: SimulationConfig | None = None,
        name: str | None = None,
    ) -> SimulationSession:
        """Create a new simulation session."""
        if config is None:
            config = SimulationConfig()

        session_id = uuid.uuid4().hex[:8]
        session = SimulationSession(
            id=session_id,
            name=name or config.experiment_name,
            config=config,
            world=generate_world(config),
            log=Log(max_size=config.log_size),
        )
        self.sessions[session_id] = session
        logger.info(
            "Created session %s (%s) with %d people",
            session_id, session.name, config.population_size,
        )
        return session

    def get_session(self, session_id: str) -> SimulationSession:
        """Get a session by ID.

        Raises KeyError if not found.
        """
        if session_id in self.sessions:
            return self.sessions[session_id]
        raise KeyError(f"Session '{session_id}' not found")

    def step(self, session_id: str, n: int = 1) -> SimulationSession:
        """Advance a session by N ticks, sampling the log on schedule."""
        session = self.get_session(session_id)
        n = min(n, self.max_step_ticks)

        with session.lock:
            session.status = "running"
            advance(session.world, session.log, n, session.config.log_interval)
        return session

    def reset_session(self, session_id: str) -> SimulationSession:
        """Replace the session's world and log with brand-new ones."""
        session = self.get_session(session_id)
        with session.lock:
            session.world = generate_world(session.config)
            session.log = Log(max_size=session.config.log_size)
            session.status = "created"
        logger.info("Reset session %s", session_id)
        return session

    def delete_session(self, session_id: str) -> None:
        """Delete a session from memory."""
        if session_id not in self.sessions:
            raise KeyError(f"Session '{session_id}' not found")
        del self.sessions[session_id]
        logger.info("Deleted session %s", session_id)

    # ------------------------------------------------------------------
    # Interventions
    # ------------------------------------------------------------------

    def toggle_lockdown(self, session_id: str) -> SimulationSession:
        session = self.get_session(session_id)
        with session.lock:
            toggle_lockdown(session.world)
            logger.info("Session %s lockdown=%s", session_id, session.world.lockdown)
        return session

    def toggle_hotspots(self, session_id: str) -> SimulationSession:
        session = self.get_session(session_id)
        with session.lock:
            toggle_hotspots(session.world)
            logger.info("Session %s hotspots=%d", session_id, len(session.world.hotspots))
        return session

    def set_mask_coverage(self, session_id: str, coverage: float) -> SimulationSession:
        session = self.get_session(session_id)
        with session.lock:
            set_mask_coverage(session.world, coverage)
        logger.info("Session %s mask_coverage=%.2f", session_id, coverage)
        return session

    def list_sessions(self) -> list[dict[str, Any]]:
        """List all sessions as summary dicts."""
        summaries = []
        for s in list(self.sessions.values()):
            with s.lock:
                summaries.append({
                    "id": s.id,
                    "name": s.name,
                    "status": s.status,
                    "current_tick": s.current_tick,
                    "population_size": s.world.population_size,
                })
        return summaries
