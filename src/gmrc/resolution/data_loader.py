"""JSON5 loader for plain .gmrc files."""

from __future__ import annotations

from pathlib import Path

import json5

from gmrc.config import get_logger
from gmrc.exceptions import ResolutionError
from gmrc.resolution.types import Settings

logger = get_logger(__name__)


def load_data(path: Path | str) -> Settings:
    """Read ``path`` and parse it as JSON5.

    Comments, trailing commas and unquoted keys are accepted. The parsed
    value is returned as-is.

    Args:
        path: File to read

    Returns:
        The parsed settings value

    Raises:
        ResolutionError: If the file cannot be read or is not valid JSON5
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read config file", path=str(path), error=str(e))
        raise ResolutionError(f"Failed to read '{path}': {e}", path=str(path)) from e

    try:
        return json5.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to parse config file", path=str(path), error=str(e))
        raise ResolutionError(
            f"Failed to parse '{path}': {e}", path=str(path)
        ) from e
