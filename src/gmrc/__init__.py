"""gmrc: locate and load the .gmrc settings of a migration project.

The settings come from an explicit path or from the first of ``.gmrc``
(JSON5), ``.gmrc.py`` and ``.gmrc.pyw`` in the working directory. They are
returned unvalidated.
"""

__version__ = "0.1.0"

from gmrc.exceptions import GmrcError, ResolutionError  # noqa: E402
from gmrc.resolution import SettingsResolver, get_settings  # noqa: E402

__all__ = [
    "GmrcError",
    "ResolutionError",
    "SettingsResolver",
    "__version__",
    "get_settings",
]
