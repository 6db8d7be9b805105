"""Synchronous execution of external build steps.

Children inherit this process's stdin/stdout/stderr, so compiler and
bundler output appears exactly as if run by hand. Three failures are kept
apart: the command never started, it exited non-zero, or a signal killed it.
"""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class StepError(RuntimeError):
    """Base class for external step failures."""

    def __init__(self, message: str, command: str, args: Sequence[str]) -> None:
        super().__init__(message)
        self.command = command
        self.step_args = list(args)


class StepSpawnError(StepError):
    """Raised when the command could not be started at all."""


class StepExitError(StepError):
    """Raised when the command exits with a non-zero status."""

    def __init__(self, command: str, args: Sequence[str], returncode: int) -> None:
        super().__init__(f"{command} exited with code {returncode}", command, args)
        self.returncode = returncode


class StepSignalError(StepError):
    """Raised when the command is terminated by a signal instead of exiting."""

    def __init__(self, command: str, args: Sequence[str], signal_number: int) -> None:
        try:
            name = signal.Signals(signal_number).name
        except ValueError:
            name = str(signal_number)
        super().__init__(f"{command} terminated by signal {name}", command, args)
        self.signal_number = signal_number


def run_step(command: str, args: Sequence[str], cwd: str | os.PathLike[str]) -> None:
    """Run ``command`` with ``args`` in ``cwd`` and wait for it to finish.

    On Windows the shell resolves the command (package managers ship as
    ``.cmd`` shims there) and no console window is opened.

    Raises
    ------
    StepSpawnError
        The process could not be created.
    StepExitError
        The process exited with a non-zero code.
    StepSignalError
        The process was killed by a signal.
    """
    use_shell = sys.platform == "win32"
    logger.info("Running: %s", subprocess.list2cmdline([command, *args]))
    try:
        completed = subprocess.run(
            [command, *args],
            cwd=cwd,
            shell=use_shell,
            check=False,
            creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0) if use_shell else 0,
        )
    except OSError as exc:
        raise StepSpawnError(f"{command} could not be started: {exc}", command, args) from exc

    if completed.returncode < 0:
        raise StepSignalError(command, args, -completed.returncode)
    if completed.returncode != 0:
        raise StepExitError(command, args, completed.returncode)
