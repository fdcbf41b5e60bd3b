"""Resolution of the .gmrc settings file."""

from gmrc.resolution.candidates import (
    CODE_SUFFIXES,
    DEFAULT_FILENAMES,
    GMRC_FILENAME,
    classify,
    default_candidates,
)
from gmrc.resolution.data_loader import load_data
from gmrc.resolution.module_loader import DEFAULT_EXPORT, load_module
from gmrc.resolution.probe import exists
from gmrc.resolution.resolver import NO_CONFIG_MESSAGE, SettingsResolver, get_settings
from gmrc.resolution.types import CandidatePath, LoaderKind, Settings

__all__ = [
    "CODE_SUFFIXES",
    "DEFAULT_EXPORT",
    "DEFAULT_FILENAMES",
    "GMRC_FILENAME",
    "NO_CONFIG_MESSAGE",
    "CandidatePath",
    "LoaderKind",
    "Settings",
    "SettingsResolver",
    "classify",
    "default_candidates",
    "exists",
    "get_settings",
    "load_data",
    "load_module",
]
