"""Gate state machine models — states, allowed transitions, run results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class GateState(str, Enum):
    """States of a single gate invocation."""

    CHECK_SOURCES_AVAILABLE = "check_sources_available"
    CHECK_CACHE = "check_cache"
    UP_TO_DATE = "up_to_date"
    REBUILD = "rebuild"
    PERSIST = "persist"
    DONE = "done"
    FAILED = "failed"


# Enforced by GateMachine. DONE and FAILED are terminal.
VALID_TRANSITIONS: dict[GateState, set[GateState]] = {
    GateState.CHECK_SOURCES_AVAILABLE: {GateState.CHECK_CACHE, GateState.DONE, GateState.FAILED},
    GateState.CHECK_CACHE: {GateState.UP_TO_DATE, GateState.REBUILD, GateState.FAILED},
    GateState.UP_TO_DATE: {GateState.DONE, GateState.FAILED},
    GateState.REBUILD: {GateState.PERSIST, GateState.FAILED},
    GateState.PERSIST: {GateState.DONE, GateState.FAILED},
    GateState.DONE: set(),
    GateState.FAILED: set(),
}


class GateOutcome(str, Enum):
    """How a successful invocation finished."""

    KEPT_PREBUILT = "kept_prebuilt"
    UP_TO_DATE = "up_to_date"
    REBUILT = "rebuilt"


class GateTransition(BaseModel):
    """One recorded state change."""

    model_config = ConfigDict(frozen=True)

    from_state: GateState
    to_state: GateState
    reason: str = ""


class GateResult(BaseModel):
    """Summary of a completed gate run."""

    model_config = ConfigDict(frozen=True)

    outcome: GateOutcome
    fingerprint: str | None = None  # None when sources were missing
    steps_run: list[str] = []
    transitions: list[GateTransition] = []


class GateStatus(BaseModel):
    """Read-only snapshot of the gate's inputs and cache."""

    model_config = ConfigDict(frozen=True)

    sources_available: bool
    artifact_present: bool
    recorded_fingerprint: str | None = None
    current_fingerprint: str | None = None

    @property
    def up_to_date(self) -> bool:
        """Whether a run right now would skip the build."""
        return (
            self.artifact_present
            and self.current_fingerprint is not None
            and self.recorded_fingerprint == self.current_fingerprint
        )
