"""Resolved project layout and the external build steps it implies."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class BuildStep(BaseModel):
    """An opaque external command run from the project root."""

    model_config = ConfigDict(frozen=True)

    name: str
    command: str
    args: list[str]
    cwd: Path


class BundleLayout(BaseModel):
    """Absolute paths for one bundle gate.

    Built from ``GateSettings.layout()``; every path here is already
    resolved against the project root.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: Path
    hash_file: Path
    output_file: Path
    renderer_dir: Path
    app_dir: Path
    manifest_files: list[Path]
    compile_config: Path
    bundle_config: Path
    package_manager: str = "pnpm"

    @property
    def source_roots(self) -> list[Path]:
        """Trees that must be present for a rebuild to be possible."""
        return [self.renderer_dir, self.app_dir]

    @property
    def input_roots(self) -> list[Path]:
        """Everything that feeds the fingerprint."""
        return [*self.manifest_files, *self.source_roots]

    def build_steps(self) -> list[BuildStep]:
        """Compile the renderer, then bundle the host app. Order matters."""
        pm = self.package_manager
        return [
            BuildStep(
                name="compile",
                command=pm,
                args=["-s", "exec", "tsc", "-p", str(self.compile_config)],
                cwd=self.root_dir,
            ),
            BuildStep(
                name="bundle",
                command=pm,
                args=["-s", "exec", "rolldown", "-c", str(self.bundle_config)],
                cwd=self.root_dir,
            ),
        ]
