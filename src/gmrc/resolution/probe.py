"""Filesystem existence check for candidate configuration files."""

from __future__ import annotations

import os
from pathlib import Path


def exists(path: Path | str) -> bool:
    """Report whether ``path`` is visible to the current process.

    Only the directory entry is checked; the file is not opened. Any failure
    (missing file, permission denied, malformed path) counts as absent.
    """
    try:
        return os.access(path, os.F_OK)
    except (OSError, ValueError):
        return False
