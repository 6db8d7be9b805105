"""``bundlegate fingerprint`` and ``bundlegate status`` — read-only views.

Neither command runs a build step or writes the hash record.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from bundlegate.cli.commands._common import configure_logging, load_settings, print_error
from bundlegate.core.orchestrator import BundleGate

console = Console()


def fingerprint_cmd(
    root: str = typer.Option(None, "--root", "-C", help="Project root."),
) -> None:
    """Print the current fingerprint of the bundle inputs."""
    settings = load_settings(root)
    configure_logging(settings.log_level)

    try:
        fingerprint = BundleGate(settings.layout()).current_fingerprint()
    except OSError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc

    # Plain output for scripting
    console.print(fingerprint, highlight=False)


def status_cmd(
    root: str = typer.Option(None, "--root", "-C", help="Project root."),
) -> None:
    """Show whether the bundle is current without rebuilding it."""
    settings = load_settings(root)
    configure_logging(settings.log_level)
    layout = settings.layout()

    try:
        status = BundleGate(layout).status()
    except OSError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc

    def _yes_no(flag: bool) -> str:
        return "[green]Yes[/green]" if flag else "[red]No[/red]"

    table = Table(title="Bundle Gate Status")
    table.add_column("Check", style="cyan")
    table.add_column("Value")
    table.add_row("Project root", str(layout.root_dir))
    table.add_row("Sources available", _yes_no(status.sources_available))
    table.add_row("Bundle present", _yes_no(status.artifact_present))
    table.add_row("Recorded fingerprint", status.recorded_fingerprint or "[dim]none[/dim]")
    table.add_row("Current fingerprint", status.current_fingerprint or "[dim]n/a[/dim]")
    table.add_row("Up to date", _yes_no(status.up_to_date))
    console.print(table)
