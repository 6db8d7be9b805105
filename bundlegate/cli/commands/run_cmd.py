"""``bundlegate run`` — rebuild the bundle if its inputs changed.

Also what a bare ``bundlegate`` invocation does.
"""

from __future__ import annotations

import typer
from rich.console import Console

from bundlegate.cli.commands._common import configure_logging, load_settings, report_failure
from bundlegate.core.orchestrator import BundleGate
from bundlegate.models.gate import GateOutcome

console = Console()

_OUTCOME_MESSAGES = {
    GateOutcome.KEPT_PREBUILT: "[yellow]Bundle sources missing; keeping prebuilt bundle.[/yellow]",
    GateOutcome.UP_TO_DATE: "[green]Bundle up to date; skipping.[/green]",
    GateOutcome.REBUILT: "[bold green]Bundle rebuilt.[/bold green]",
}


def run_cmd(
    root: str = typer.Option(
        None,
        "--root",
        "-C",
        help="Project root (defaults to BUNDLEGATE_ROOT_DIR or the current directory).",
    ),
) -> None:
    """Rebuild the bundle if its fingerprint changed; otherwise do nothing."""
    settings = load_settings(root)
    configure_logging(settings.log_level)

    gate = BundleGate(settings.layout())
    try:
        result = gate.run()
    except Exception as exc:
        report_failure(exc, settings.package_manager)
        raise typer.Exit(code=1) from exc

    console.print(_OUTCOME_MESSAGES[result.outcome])
    if result.outcome == GateOutcome.REBUILT:
        console.print(f"[dim]fingerprint {result.fingerprint}[/dim]")
