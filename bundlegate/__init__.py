"""Bundlegate: fingerprint-gated incremental bundle builds.

Fingerprints the bundle's inputs (manifests plus source trees), compares
against the digest recorded by the last successful build, and only runs
the compile and bundle steps when something changed.
"""

__version__ = "0.1.0"
__description__ = "Content-addressed build gate for a single bundled artifact"

from bundlegate.core.hasher import compute_fingerprint
from bundlegate.core.orchestrator import BundleGate
from bundlegate.cli.app import app as cli

__all__ = ["BundleGate", "compute_fingerprint", "cli", "__version__"]
