"""
Rolling state-count log.

Samples the World every ``log_interval`` ticks, storing the census of
each state and the signed change since the previous sample. The log is a
sliding window: once it grows past ``max_size`` the oldest entries are
dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from outbreak.core.state import State
from outbreak.core.world import World

LOG_SIZE = 100


def _zero_counts() -> dict[State, int]:
    return {s: 0 for s in State}


@dataclass
class LogEntry:
    """One sample: absolute counts plus deltas since the previous sample."""
    counts: dict[State, int] = field(default_factory=_zero_counts)
    new_entries: dict[State, int] = field(default_factory=_zero_counts)

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {
            "counts": {s.value: int(n) for s, n in self.counts.items()},
            "new_entries": {s.value: int(n) for s, n in self.new_entries.items()},
        }


@dataclass
class Log:
    """Size-bounded, oldest-first sequence of samples."""
    logs: list[LogEntry] = field(default_factory=list)
    max_size: int = LOG_SIZE

    def __len__(self) -> int:
        return len(self.logs)

    @property
    def latest(self) -> LogEntry | None:
        return self.logs[-1] if self.logs else None

    def get_time_series(self, state: State, field_name: str = "counts") -> list[int]:
        """Extract one state's series from ``counts`` or ``new_entries``."""
        if field_name not in ("counts", "new_entries"):
            raise ValueError(f"Unknown log field: '{field_name}'")
        return [getattr(entry, field_name).get(state, 0) for entry in self.logs]

    def export_for_visualization(self) -> list[dict[str, Any]]:
        """Export all entries as JSON-serializable dicts."""
        return [entry.to_dict() for entry in self.logs]


def count_states(world: World) -> dict[State, int]:
    """Census of the population; every state is present, zero-filled."""
    counts = _zero_counts()
    for person in world.people:
        counts[person.state] += 1
    return counts


def update_log(world: World, log: Log) -> LogEntry:
    """Append a sample for the current World and return it.

    The first call seeds a baseline of an all-susceptible population so
    the first real sample already has deltas. Gross new infections are
    reconstructed from the net infected change plus the outflow to
    recovered and dead, which the raw infected count cannot show.
    """
    counts = count_states(world)

    if not log.logs:
        baseline = _zero_counts()
        baseline[State.SUSCEPTIBLE] = world.population_size
        log.logs.append(LogEntry(counts=baseline, new_entries=_zero_counts()))

    previous = log.logs[-1].counts

    new_recovered = counts[State.RECOVERED] - previous.get(State.RECOVERED, 0)
    new_dead = counts[State.DEAD] - previous.get(State.DEAD, 0)
    new_infected = (
        counts[State.INFECTED] - previous.get(State.INFECTED, 0)
        + new_recovered + new_dead
    )

    new_entries = _zero_counts()
    new_entries[State.INFECTED] = new_infected
    new_entries[State.RECOVERED] = new_recovered
    new_entries[State.DEAD] = new_dead

    entry = LogEntry(counts=counts, new_entries=new_entries)
    log.logs.append(entry)

    if len(log.logs) > log.max_size:
        log.logs = log.logs[len(log.logs) - log.max_size:]

    return entry
