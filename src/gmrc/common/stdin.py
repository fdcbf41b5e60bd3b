"""Standard input helpers."""

from __future__ import annotations

import sys
from typing import TextIO

CHUNK_SIZE = 64 * 1024


def read_stdin(stream: TextIO | None = None) -> str:
    """Read everything from ``stream`` until end of input.

    Args:
        stream: Text stream to drain (default: sys.stdin)

    Returns:
        All data read, as a single string
    """
    source = stream if stream is not None else sys.stdin
    chunks: list[str] = []
    while chunk := source.read(CHUNK_SIZE):
        chunks.append(chunk)
    return "".join(chunks)
