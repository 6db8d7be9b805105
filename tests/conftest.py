"""Shared test fixtures for Bundlegate."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from bundlegate.config import GateSettings
from bundlegate.core.step_runner import StepExitError
from bundlegate.models.layout import BundleLayout


class RecordingRunner:
    """Step runner double: records calls and writes the bundle on the bundle step."""

    def __init__(self, output_file: Path, fail_on: str | None = None) -> None:
        self.output_file = output_file
        self.fail_on = fail_on
        self.calls: list[tuple[str, list[str], Path]] = []

    @property
    def tools(self) -> list[str]:
        """Tool name of each call (``tsc``, ``rolldown``)."""
        return [args[2] for _, args, _ in self.calls]

    def __call__(self, command: str, args: Sequence[str], cwd: Path) -> None:
        self.calls.append((command, list(args), Path(cwd)))
        tool = args[2]
        if tool == self.fail_on:
            raise StepExitError(command, args, 2)
        if tool == "rolldown":
            self.output_file.parent.mkdir(parents=True, exist_ok=True)
            self.output_file.write_text("// bundle\n", encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Provide a project tree with manifests and both source trees."""
    (tmp_path / "package.json").write_text('{"name": "demo"}\n', encoding="utf-8")
    (tmp_path / "pnpm-lock.yaml").write_text("lockfileVersion: '9.0'\n", encoding="utf-8")

    renderer = tmp_path / "vendor" / "a2ui" / "renderers" / "lit"
    (renderer / "src").mkdir(parents=True)
    (renderer / "tsconfig.json").write_text("{}\n", encoding="utf-8")
    (renderer / "src" / "index.ts").write_text("export const x = 1;\n", encoding="utf-8")

    app = tmp_path / "apps" / "shared" / "OpenClawKit" / "Tools" / "CanvasA2UI"
    app.mkdir(parents=True)
    (app / "rolldown.config.mjs").write_text("export default {};\n", encoding="utf-8")
    (app / "bootstrap.js").write_text("console.log('hi');\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def layout(project: Path) -> BundleLayout:
    """Provide the default layout resolved against the test project."""
    return GateSettings(root_dir=project).layout()


@pytest.fixture
def make_runner(layout: BundleLayout) -> Callable[..., RecordingRunner]:
    """Factory fixture: build a RecordingRunner for the test layout."""

    def _factory(fail_on: str | None = None) -> RecordingRunner:
        return RecordingRunner(layout.output_file, fail_on=fail_on)

    return _factory


@pytest.fixture
def runner(make_runner: Callable[..., RecordingRunner]) -> RecordingRunner:
    """Convenience: a runner that succeeds and produces the bundle file."""
    return make_runner()
