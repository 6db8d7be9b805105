"""Tests for the GateMachine — allowed transitions and terminal states."""

from __future__ import annotations

import pytest

from bundlegate.core.gate_machine import GateMachine, InvalidTransitionError
from bundlegate.models.gate import GateState


class TestGateMachine:
    def test_starts_at_source_check(self):
        machine = GateMachine()
        assert machine.state == GateState.CHECK_SOURCES_AVAILABLE
        assert machine.history == []

    def test_rebuild_path(self):
        machine = GateMachine()
        for target in (
            GateState.CHECK_CACHE,
            GateState.REBUILD,
            GateState.PERSIST,
            GateState.DONE,
        ):
            machine.transition(target)
        assert machine.state == GateState.DONE
        assert [t.to_state for t in machine.history] == [
            GateState.CHECK_CACHE,
            GateState.REBUILD,
            GateState.PERSIST,
            GateState.DONE,
        ]

    def test_up_to_date_path(self):
        machine = GateMachine()
        machine.transition(GateState.CHECK_CACHE)
        record = machine.transition(GateState.UP_TO_DATE, "fingerprint match")
        assert record.from_state == GateState.CHECK_CACHE
        assert record.reason == "fingerprint match"
        machine.transition(GateState.DONE)
        assert machine.is_terminal

    def test_short_circuit_to_done(self):
        machine = GateMachine()
        machine.transition(GateState.DONE, "sources missing")
        assert machine.state == GateState.DONE

    def test_cannot_skip_cache_check(self):
        machine = GateMachine()
        with pytest.raises(InvalidTransitionError):
            machine.transition(GateState.REBUILD)

    def test_cannot_persist_from_up_to_date(self):
        machine = GateMachine()
        machine.transition(GateState.CHECK_CACHE)
        machine.transition(GateState.UP_TO_DATE)
        with pytest.raises(InvalidTransitionError):
            machine.transition(GateState.PERSIST)

    def test_done_is_terminal(self):
        machine = GateMachine()
        machine.transition(GateState.DONE)
        with pytest.raises(InvalidTransitionError):
            machine.transition(GateState.CHECK_CACHE)

    def test_fail_from_rebuild(self):
        machine = GateMachine()
        machine.transition(GateState.CHECK_CACHE)
        machine.transition(GateState.REBUILD)
        record = machine.fail("tsc exited with code 2")
        assert record is not None
        assert machine.state == GateState.FAILED
        assert machine.is_terminal

    def test_fail_when_terminal_is_noop(self):
        machine = GateMachine()
        machine.transition(GateState.DONE)
        assert machine.fail("late") is None
        assert machine.state == GateState.DONE

    def test_history_is_a_copy(self):
        machine = GateMachine()
        machine.history.append("junk")  # type: ignore[arg-type]
        assert machine.history == []
