"""Bundle gate orchestrator — decides whether the bundle must be rebuilt.

The BundleGate wires together the source check, fingerprint engine,
fingerprint cache and step runner, and drives the GateMachine:

    CHECK_SOURCES_AVAILABLE -> CHECK_CACHE -> UP_TO_DATE | REBUILD -> PERSIST -> DONE

with FAILED reachable from every non-terminal state. The source check
runs before any hashing and never touches the cache, so checkouts that
ship only the prebuilt bundle are left alone.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from bundlegate.core.cache_store import FingerprintCache
from bundlegate.core.gate_machine import GateMachine
from bundlegate.core.hasher import compute_fingerprint
from bundlegate.core.step_runner import run_step
from bundlegate.models.gate import GateOutcome, GateResult, GateState, GateStatus
from bundlegate.models.layout import BundleLayout

logger = logging.getLogger(__name__)

StepRunner = Callable[[str, Sequence[str], Path], None]


class BundleGate:
    """Fingerprint-gated rebuild of a single bundle.

    Parameters
    ----------
    layout:
        Resolved project paths.
    runner:
        Executes one external step. Defaults to ``run_step``.
    """

    def __init__(self, layout: BundleLayout, *, runner: StepRunner | None = None) -> None:
        self.layout = layout
        self.cache = FingerprintCache(layout.hash_file, layout.output_file)
        self._runner = runner or run_step
        self.machine = GateMachine()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def sources_available(self) -> bool:
        """Whether every source tree needed for a rebuild is on disk."""
        return all(root.exists() for root in self.layout.source_roots)

    def current_fingerprint(self) -> str:
        """Fingerprint the manifests and source trees as they are now."""
        return compute_fingerprint(self.layout.root_dir, self.layout.input_roots)

    def status(self) -> GateStatus:
        """Inspect inputs and cache without building or writing anything."""
        available = self.sources_available()
        return GateStatus(
            sources_available=available,
            artifact_present=self.layout.output_file.exists(),
            recorded_fingerprint=self.cache.read_recorded(),
            current_fingerprint=self.current_fingerprint() if available else None,
        )

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def run(self) -> GateResult:
        """Run the gate once.

        Returns the GateResult on success. Any error moves the machine to
        FAILED and is re-raised unchanged; the cache record is not written.
        """
        if self.machine.state != GateState.CHECK_SOURCES_AVAILABLE:
            self.machine = GateMachine()
        machine = self.machine

        if not self.sources_available():
            logger.debug("Bundle sources missing; keeping prebuilt bundle.")
            machine.transition(GateState.DONE, "sources missing")
            return self._result(GateOutcome.KEPT_PREBUILT)

        steps_run: list[str] = []
        try:
            machine.transition(GateState.CHECK_CACHE)
            fingerprint = self.current_fingerprint()

            if self.cache.is_up_to_date(fingerprint):
                logger.debug("Bundle up to date; skipping.")
                machine.transition(GateState.UP_TO_DATE, "fingerprint match")
                machine.transition(GateState.DONE)
                return self._result(GateOutcome.UP_TO_DATE, fingerprint)

            machine.transition(GateState.REBUILD, "fingerprint mismatch")
            for step in self.layout.build_steps():
                logger.info("Build step '%s'", step.name)
                self._runner(step.command, step.args, step.cwd)
                steps_run.append(step.name)

            machine.transition(GateState.PERSIST)
            self.cache.commit(fingerprint)
            machine.transition(GateState.DONE)
        except Exception as exc:
            machine.fail(str(exc))
            raise

        return self._result(GateOutcome.REBUILT, fingerprint, steps_run)

    def _result(
        self,
        outcome: GateOutcome,
        fingerprint: str | None = None,
        steps_run: list[str] | None = None,
    ) -> GateResult:
        return GateResult(
            outcome=outcome,
            fingerprint=fingerprint,
            steps_run=steps_run or [],
            transitions=self.machine.history,
        )
