"""Tests for the rolling state-count log."""

import numpy as np
import pytest

from outbreak.core.agent import Agent
from outbreak.core.state import State
from outbreak.core.world import World
from outbreak.core.zone import Zone
from outbreak.metrics.log import Log, LogEntry, count_states, update_log


def _make_world(states: list[State]) -> World:
    people = [
        Agent(x=0.5, y=0.5, vx=0.0, vy=0.0, respects_authority=0.5, state=s)
        for s in states
    ]
    return World(
        people=people,
        wet_market=Zone(0.9, 0.9, 0.01, 0.01),
        rng=np.random.default_rng(0),
    )


def _counts(susceptible=0, infected=0, recovered=0, dead=0) -> dict[State, int]:
    return {
        State.SUSCEPTIBLE: susceptible,
        State.INFECTED: infected,
        State.RECOVERED: recovered,
        State.DEAD: dead,
    }


class TestCountStates:
    def test_zero_filled(self):
        counts = count_states(_make_world([State.INFECTED, State.INFECTED]))
        assert counts == _counts(infected=2)

    def test_empty_world(self):
        assert count_states(_make_world([])) == _counts()


class TestBaseline:
    def test_first_call_seeds_baseline(self):
        world = _make_world([State.SUSCEPTIBLE] * 10)
        log = Log()
        update_log(world, log)
        assert len(log) == 2
        assert log.logs[0].counts == _counts(susceptible=10)
        assert all(v == 0 for v in log.logs[0].new_entries.values())

    def test_empty_population_seeds_all_zero(self):
        log = Log()
        entry = update_log(_make_world([]), log)
        assert len(log) == 2
        assert log.logs[0].counts == _counts()
        assert entry.counts == _counts()
        assert entry.new_entries[State.INFECTED] == 0

    def test_first_sample_deltas_against_baseline(self):
        world = _make_world([State.SUSCEPTIBLE] * 7 + [State.INFECTED] * 3)
        log = Log()
        entry = update_log(world, log)
        assert entry.new_entries[State.INFECTED] == 3
        assert entry.new_entries[State.RECOVERED] == 0
        assert entry.new_entries[State.DEAD] == 0


class TestDeltas:
    def test_gross_infections_reconstructed(self):
        log = Log(logs=[LogEntry(counts=_counts(susceptible=8, infected=10, recovered=2))])
        world = _make_world(
            [State.SUSCEPTIBLE] * 8 + [State.INFECTED] * 8 + [State.RECOVERED] * 4
        )
        entry = update_log(world, log)
        assert entry.new_entries[State.INFECTED] == 0
        assert entry.new_entries[State.RECOVERED] == 2
        assert entry.new_entries[State.DEAD] == 0

    def test_deaths_count_as_outflow(self):
        log = Log(logs=[LogEntry(counts=_counts(susceptible=10, infected=5))])
        world = _make_world(
            [State.SUSCEPTIBLE] * 6 + [State.INFECTED] * 6 + [State.DEAD] * 3
        )
        entry = update_log(world, log)
        # 4 new infections offset by 3 deaths
        assert entry.new_entries[State.INFECTED] == 4
        assert entry.new_entries[State.DEAD] == 3

    def test_recovered_delta_can_be_negative(self):
        log = Log(logs=[LogEntry(counts=_counts(susceptible=5, recovered=5))])
        world = _make_world([State.SUSCEPTIBLE] * 8 + [State.RECOVERED] * 2)
        entry = update_log(world, log)
        assert entry.new_entries[State.RECOVERED] == -3
        assert entry.new_entries[State.INFECTED] == -3


class TestWindow:
    def test_bounded_to_most_recent(self):
        states = [State.SUSCEPTIBLE] * 150
        world = _make_world(states)
        log = Log()
        for i in range(150):
            world.people[i].state = State.INFECTED
            update_log(world, log)

        assert len(log) == 100
        infected = log.get_time_series(State.INFECTED)
        assert infected == list(range(51, 151))

    def test_custom_size(self):
        world = _make_world([State.SUSCEPTIBLE])
        log = Log(max_size=5)
        for _ in range(20):
            update_log(world, log)
        assert len(log) == 5

    def test_latest(self):
        log = Log()
        assert log.latest is None
        entry = update_log(_make_world([State.DEAD]), log)
        assert log.latest is entry


class TestExport:
    def test_time_series_new_entries(self):
        world = _make_world([State.SUSCEPTIBLE] * 4)
        log = Log()
        update_log(world, log)
        world.people[0].state = State.INFECTED
        update_log(world, log)
        assert log.get_time_series(State.INFECTED, "new_entries") == [0, 0, 1]

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            Log().get_time_series(State.INFECTED, "bogus")

    def test_export_is_json_safe(self):
        log = Log()
        update_log(_make_world([State.RECOVERED]), log)
        exported = log.export_for_visualization()
        assert len(exported) == 2
        assert exported[1]["counts"]["recovered"] == 1
        assert set(exported[1]["new_entries"]) == {"susceptible", "infected", "recovered", "dead"}
