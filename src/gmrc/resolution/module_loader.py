"""Python module loader for .gmrc.py style configuration files.

A code config file is an ordinary Python file that assigns its settings to a
module-level ``default`` name::

    import os

    default = {
        "connectionString": os.environ["DATABASE_URL"],
    }

The file is executed as a fresh module every time. It is never looked up on
``sys.path``, so a file called ``json.py`` loads the user's file rather than
the standard library. While it executes, the module is registered in
``sys.modules`` under a unique private name (``dataclasses`` and similar
tools look modules up there) and removed again afterwards.
"""

from __future__ import annotations

import importlib.util
import sys
import traceback
from importlib.machinery import SourceFileLoader, SourcelessFileLoader
from itertools import count
from pathlib import Path
from typing import Any

from gmrc.config import get_logger
from gmrc.exceptions import ResolutionError
from gmrc.resolution.types import Settings

logger = get_logger(__name__)

DEFAULT_EXPORT = "default"

_module_ids = count()


class MissingDefaultExportError(AttributeError):
    """The executed config module did not define the default export."""


class _UncachedSourceLoader(SourceFileLoader):
    """Source loader that neither reads nor writes ``__pycache__``."""

    def get_code(self, fullname: str) -> Any:
        source = self.get_data(self.path)
        return self.source_to_code(source, self.path)


def _format_cause(error: BaseException) -> str:
    """Render ``error`` with its traceback, indented for nesting."""
    text = "".join(traceback.format_exception(error)).rstrip("\n")
    return text.replace("\n", "\n    ")


def _execute(location: Path) -> Settings:
    module_name = f"_gmrc_config_{next(_module_ids)}"
    if location.suffix == ".pyc":
        loader: SourceFileLoader | SourcelessFileLoader = SourcelessFileLoader(
            module_name, str(location)
        )
    else:
        loader = _UncachedSourceLoader(module_name, str(location))

    spec = importlib.util.spec_from_file_location(
        module_name, str(location), loader=loader
    )
    if spec is None:
        raise ImportError(f"Cannot create a module spec for {location}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        loader.exec_module(module)
    finally:
        sys.modules.pop(module_name, None)

    if not hasattr(module, DEFAULT_EXPORT):
        raise MissingDefaultExportError(
            f"module '{location.name}' does not define '{DEFAULT_EXPORT}'"
        )
    return getattr(module, DEFAULT_EXPORT)


def load_module(path: Path | str) -> Settings:
    """Execute a Python config file and return its ``default`` value.

    Args:
        path: Config file, absolute or relative to the working directory

    Returns:
        The module's ``default`` attribute, unchanged

    Raises:
        ResolutionError: If the file is missing, fails to compile, raises
            while executing, or defines no ``default``
    """
    location = (Path.cwd() / path).resolve()
    reference = location.as_uri()

    logger.debug("Importing config module", reference=reference)
    try:
        return _execute(location)
    except Exception as e:
        logger.debug(
            "Failed to import config module",
            reference=reference,
            error_type=type(e).__name__,
        )
        raise ResolutionError(
            f"Failed to import '{reference}'; error:\n    {_format_cause(e)}",
            path=reference,
        ) from e
