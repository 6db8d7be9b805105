"""Single-entry fingerprint cache guarding one produced bundle.

The record is a text file holding one hex digest and a newline. The bundle
is considered valid only while both the record and the bundle file exist
and the recorded digest matches the fresh one. There is no expiry and no
locking; a torn write just reads back as a mismatch.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FingerprintCache:
    """Fingerprint record for a single bundle artifact.

    Parameters
    ----------
    hash_file:
        Where the last successful build's fingerprint is recorded.
    output_file:
        The bundle the fingerprint vouches for. Only its existence is checked.
    """

    def __init__(self, hash_file: Path, output_file: Path) -> None:
        self.hash_file = Path(hash_file)
        self.output_file = Path(output_file)

    def read_recorded(self) -> str | None:
        """Return the recorded fingerprint, or None if there is no usable record."""
        try:
            return self.hash_file.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Unreadable hash record %s: %s", self.hash_file, exc)
            return None

    def is_up_to_date(self, fingerprint: str) -> bool:
        """True only if the record and bundle exist and the record equals ``fingerprint``."""
        if not self.hash_file.exists() or not self.output_file.exists():
            return False
        return self.read_recorded() == fingerprint

    def commit(self, fingerprint: str) -> None:
        """Record ``fingerprint`` as the last good build, replacing any previous value."""
        self.hash_file.parent.mkdir(parents=True, exist_ok=True)
        self.hash_file.write_text(f"{fingerprint}\n", encoding="utf-8")
        logger.debug("Recorded fingerprint %s in %s", fingerprint, self.hash_file)
