"""Shared helpers for CLI commands: settings, logging and failure output."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from bundlegate.config import GateSettings

err_console = Console(stderr=True)


def load_settings(root: str | None) -> GateSettings:
    """Build settings from the environment, with ``--root`` taking precedence."""
    if root:
        return GateSettings(root_dir=Path(root))
    return GateSettings()


def configure_logging(level: str) -> None:
    """Send library logging to stderr through Rich. First call wins."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def print_error(message: str) -> None:
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)


def report_failure(exc: BaseException, package_manager: str) -> None:
    """Print the error followed by the fixed two-line remediation hint."""
    print_error(str(exc))
    print_error("Bundle build failed. Re-run with: bundlegate run")
    print_error(f"If this persists, verify {package_manager} deps and try again.")
