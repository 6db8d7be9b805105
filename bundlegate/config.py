"""Gate configuration — env-driven, with defaults for the standard layout.

Every setting has a default, so ``bundlegate`` run with no arguments and
no environment gates the canvas A2UI bundle of the project in the current
directory. Relative paths are resolved against ``root_dir``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from bundlegate.models.layout import BundleLayout


class GateSettings(BaseSettings):
    """Bundle gate settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BUNDLEGATE_ROOT_DIR=/work/openclaw
        export BUNDLEGATE_LOG_LEVEL=DEBUG
        export BUNDLEGATE_PACKAGE_MANAGER=pnpm.cmd
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUNDLEGATE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_dir: Path = Path(".")
    log_level: str = "INFO"

    # Tooling
    package_manager: str = "pnpm"

    # Cache record and the bundle it guards
    hash_file: Path = Path("src/canvas-host/a2ui/.bundle.hash")
    output_file: Path = Path("src/canvas-host/a2ui/a2ui.bundle.js")

    # Fingerprint inputs
    renderer_dir: Path = Path("vendor/a2ui/renderers/lit")
    app_dir: Path = Path("apps/shared/OpenClawKit/Tools/CanvasA2UI")
    manifest_files: list[Path] = [Path("package.json"), Path("pnpm-lock.yaml")]

    # Step configs, relative to their source trees
    compile_config: Path = Path("tsconfig.json")
    bundle_config: Path = Path("rolldown.config.mjs")

    def layout(self) -> BundleLayout:
        """Resolve all paths against ``root_dir``."""
        root = self.root_dir.resolve()
        renderer = root / self.renderer_dir
        app = root / self.app_dir
        return BundleLayout(
            root_dir=root,
            hash_file=root / self.hash_file,
            output_file=root / self.output_file,
            renderer_dir=renderer,
            app_dir=app,
            manifest_files=[root / m for m in self.manifest_files],
            compile_config=renderer / self.compile_config,
            bundle_config=app / self.bundle_config,
            package_manager=self.package_manager,
        )
