"""Types shared by the configuration resolution engine."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeAlias

# The resolved .gmrc payload. Never inspected here; validation happens in
# the commands that consume it.
Settings: TypeAlias = Any

Loader: TypeAlias = Callable[[Path | str], Settings]
Probe: TypeAlias = Callable[[Path | str], bool]


class LoaderKind(Enum):
    """Which loader a candidate file is handed to."""

    DATA = "data"
    CODE = "code"


@dataclass(frozen=True)
class CandidatePath:
    """A configuration file location together with its loader kind.

    Explicit paths keep the form the caller gave so messages can repeat it.
    """

    path: Path | str
    kind: LoaderKind

    @property
    def is_code(self) -> bool:
        """Whether the file is executed rather than parsed."""
        return self.kind is LoaderKind.CODE
