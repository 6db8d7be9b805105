"""Content fingerprint over a set of input roots.

The digest folds, for every file in canonical order::

    <relative path> NUL <file bytes> NUL

into a single SHA-256. The path is relative to the project root and uses
``/`` separators, so a rename, move, addition, removal or byte change all
change the digest, while traversal order and host separator style do not.
"""

from __future__ import annotations

import hashlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from bundlegate.core.walker import normalize_path, walk_files

logger = logging.getLogger(__name__)

_READ_CHUNK = 1024 * 1024
_SEPARATOR = b"\0"


def _sort_key(path: Path) -> tuple[str, str]:
    # Case-insensitive first, lowercase before uppercase on ties: the order
    # localeCompare gives for ASCII names under the root collation.
    normalized = normalize_path(path)
    return normalized.casefold(), normalized.swapcase()


def collect_input_files(inputs: Iterable[str | os.PathLike[str]]) -> list[Path]:
    """Walk every input root and return the files in canonical order.

    Overlapping roots are not deduplicated.
    """
    files: list[Path] = []
    for root in inputs:
        walk_files(Path(root).absolute(), files)
    files.sort(key=_sort_key)
    return files


def compute_fingerprint(
    base_dir: str | os.PathLike[str],
    inputs: Iterable[str | os.PathLike[str]],
) -> str:
    """Return the lowercase hex SHA-256 fingerprint of ``inputs``.

    Parameters
    ----------
    base_dir:
        Directory the hashed paths are made relative to.
    inputs:
        Files or directories to fingerprint. Order does not matter.
    """
    base = Path(base_dir).absolute()
    files = collect_input_files(inputs)

    digest = hashlib.sha256()
    for file_path in files:
        rel = normalize_path(os.path.relpath(file_path, base))
        digest.update(os.fsencode(rel))
        digest.update(_SEPARATOR)
        with file_path.open("rb") as fh:
            for chunk in iter(lambda: fh.read(_READ_CHUNK), b""):
                digest.update(chunk)
        digest.update(_SEPARATOR)

    fingerprint = digest.hexdigest()
    logger.debug("Fingerprinted %d files: %s", len(files), fingerprint)
    return fingerprint
