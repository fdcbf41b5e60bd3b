"""Candidate configuration file locations and loader classification."""

from __future__ import annotations

from pathlib import Path

from gmrc.resolution.types import CandidatePath, LoaderKind

GMRC_FILENAME = ".gmrc"

# Python source, alternate source and compiled bytecode.
CODE_SUFFIXES: tuple[str, ...] = (".py", ".pyw", ".pyc")

# Order matters: the plain data file wins over the code variants.
DEFAULT_FILENAMES: tuple[str, ...] = (
    GMRC_FILENAME,
    f"{GMRC_FILENAME}.py",
    f"{GMRC_FILENAME}.pyw",
)


def classify(path: Path | str) -> LoaderKind:
    """Pick the loader for ``path`` from its file name alone.

    Files ending in one of :data:`CODE_SUFFIXES` are executed as Python
    modules; everything else, including a bare ``.gmrc``, is parsed as JSON5.
    The file content is never inspected.
    """
    name = str(path)
    if name.endswith(CODE_SUFFIXES):
        return LoaderKind.CODE
    return LoaderKind.DATA


def candidate_for(path: Path | str) -> CandidatePath:
    """Wrap ``path`` in a :class:`CandidatePath` with its loader kind."""
    return CandidatePath(path=Path(path), kind=classify(path))


def default_candidates(cwd: Path | None = None) -> list[CandidatePath]:
    """Return the default .gmrc locations in precedence order.

    Args:
        cwd: Directory the defaults are anchored at (default: Path.cwd())

    Returns:
        ``.gmrc``, ``.gmrc.py`` and ``.gmrc.pyw`` under ``cwd``
    """
    base = cwd if cwd is not None else Path.cwd()
    return [candidate_for(base / filename) for filename in DEFAULT_FILENAMES]
