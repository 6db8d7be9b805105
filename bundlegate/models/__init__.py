"""Bundlegate data models — all Pydantic v2, all frozen (immutable)."""

from bundlegate.models.gate import (
    VALID_TRANSITIONS,
    GateOutcome,
    GateResult,
    GateState,
    GateStatus,
    GateTransition,
)
from bundlegate.models.layout import BuildStep, BundleLayout

__all__ = [
    "VALID_TRANSITIONS",
    "BuildStep",
    "BundleLayout",
    "GateOutcome",
    "GateResult",
    "GateState",
    "GateStatus",
    "GateTransition",
]
