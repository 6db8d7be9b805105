"""Input tree walking and path canonicalization.

Every regular file reachable from an input root participates in the
fingerprint. Nothing is filtered: hidden files, lockfiles and build
leftovers under a root are all hashed.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

CANONICAL_SEP = "/"


def normalize_path(path: str | os.PathLike[str], sep: str = os.sep) -> str:
    """Replace the native separator with ``/`` so ordering and hashing match on every host."""
    return os.fspath(path).replace(sep, CANONICAL_SEP)


def walk_files(entry: str | os.PathLike[str], out: list[Path] | None = None) -> list[Path]:
    """Depth-first expansion of ``entry`` into the regular files beneath it.

    Directory entries are visited in the order the OS lists them. A file
    root is appended as-is. Files are appended to ``out`` (created when not
    given), which is also returned so several roots can share one list.

    Raises ``FileNotFoundError`` / ``PermissionError`` if a path vanishes
    or cannot be listed.
    """
    files: list[Path] = [] if out is None else out
    # Explicit stack: deep vendor trees must not hit the recursion limit.
    stack = [Path(entry)]
    while stack:
        current = stack.pop()
        if stat.S_ISDIR(current.stat().st_mode):
            # Reversed so pops come back in listing order.
            stack.extend(reversed(list(current.iterdir())))
        else:
            files.append(current)
    return files
