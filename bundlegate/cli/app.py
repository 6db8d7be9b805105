"""Main Typer application — imports and registers all CLI commands.

Entry point: ``bundlegate`` (configured via pyproject.toml project.scripts).
Invoked with no subcommand it behaves like ``bundlegate run``.
"""

from __future__ import annotations

import typer

from bundlegate.cli.commands.inspect_cmds import fingerprint_cmd, status_cmd
from bundlegate.cli.commands.run_cmd import run_cmd

app = typer.Typer(
    name="bundlegate",
    help="Bundlegate: skip the bundle build when its inputs have not changed.",
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="run", help="Rebuild the bundle if its inputs changed.")(run_cmd)
app.command(name="fingerprint", help="Print the current input fingerprint.")(fingerprint_cmd)
app.command(name="status", help="Show cache and source status.")(status_cmd)


@app.callback(invoke_without_command=True)
def default_cmd(ctx: typer.Context) -> None:
    """Run the gate when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        run_cmd(root=None)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
