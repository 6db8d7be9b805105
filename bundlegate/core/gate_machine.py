"""Gate state machine.

Enforces:
- Valid state transitions only (VALID_TRANSITIONS table)
- DONE and FAILED are terminal
- Every transition recorded in order
"""

from __future__ import annotations

import logging

from bundlegate.models.gate import VALID_TRANSITIONS, GateState, GateTransition

logger = logging.getLogger(__name__)


class InvalidTransitionError(RuntimeError):
    """Raised when a requested state transition is not valid."""


class GateMachine:
    """Tracks one gate invocation from CHECK_SOURCES_AVAILABLE to DONE or FAILED."""

    def __init__(self) -> None:
        self._state = GateState.CHECK_SOURCES_AVAILABLE
        self._history: list[GateTransition] = []

    @property
    def state(self) -> GateState:
        """Return the current state."""
        return self._state

    @property
    def history(self) -> list[GateTransition]:
        """Return a copy of the transitions taken so far."""
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        return not VALID_TRANSITIONS[self._state]

    def transition(self, target_state: GateState, reason: str = "") -> GateTransition:
        """Move to ``target_state`` and record the change.

        Raises InvalidTransitionError if the move is not allowed from the
        current state.
        """
        allowed = VALID_TRANSITIONS.get(self._state, set())
        if target_state not in allowed:
            raise InvalidTransitionError(
                f"Cannot transition from {self._state.value} to {target_state.value}. "
                f"Allowed: {sorted(s.value for s in allowed)}"
            )

        record = GateTransition(
            from_state=self._state, to_state=target_state, reason=reason
        )
        self._history.append(record)
        logger.debug("%s -> %s %s", self._state.value, target_state.value, reason)
        self._state = target_state
        return record

    def fail(self, reason: str = "") -> GateTransition | None:
        """Move to FAILED unless already terminal.

        Returns None when the machine had already finished.
        """
        if self.is_terminal:
            return None
        return self.transition(GateState.FAILED, reason)
