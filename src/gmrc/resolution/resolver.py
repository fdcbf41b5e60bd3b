"""Locate and load the .gmrc settings for a command."""

from __future__ import annotations

from pathlib import Path

from gmrc.config import get_logger
from gmrc.exceptions import ResolutionError
from gmrc.resolution.candidates import classify, default_candidates
from gmrc.resolution.data_loader import load_data
from gmrc.resolution.module_loader import load_module
from gmrc.resolution.probe import exists
from gmrc.resolution.types import CandidatePath, Loader, Probe, Settings

logger = get_logger(__name__)

NO_CONFIG_MESSAGE = "No .gmrc file found; please run the init command first."


class SettingsResolver:
    """Resolves the raw .gmrc settings for one working directory.

    Resolution order:
    1. An explicit ``config_file``, which must exist. Files ending in
       ``.py``, ``.pyw`` or ``.pyc`` are executed, anything else is parsed as
       JSON5.
    2. Otherwise the first existing default: ``.gmrc`` (JSON5), then
       ``.gmrc.py``, then ``.gmrc.pyw``.

    Only one file is ever loaded; settings from several files are never
    merged. The result is not validated and must not be trusted.

    The probe and both loaders can be swapped out, which keeps tests away
    from the filesystem and from executing real modules.
    """

    def __init__(
        self,
        cwd: Path | str | None = None,
        *,
        probe: Probe = exists,
        data_loader: Loader = load_data,
        module_loader: Loader = load_module,
    ) -> None:
        """Initialize the resolver.

        Args:
            cwd: Directory that relative paths and the defaults are anchored
                at (default: the process working directory at resolve time)
            probe: Existence check used for every candidate
            data_loader: Loader for JSON5 files
            module_loader: Loader for Python config files
        """
        self._cwd = Path(cwd) if cwd is not None else None
        self._probe = probe
        self._data_loader = data_loader
        self._module_loader = module_loader

    @property
    def cwd(self) -> Path:
        """Directory the candidate locations are anchored at."""
        return self._cwd if self._cwd is not None else Path.cwd()

    def resolve(self, config_file: Path | str | None = None) -> Settings:
        """Load the settings from the explicit file or the first default.

        Args:
            config_file: Optional explicit config path, absolute or relative
                to ``cwd``

        Returns:
            The raw settings value

        Raises:
            ResolutionError: If no file is found or loading fails
        """
        if config_file is not None:
            return self._resolve_explicit(config_file)

        for candidate in default_candidates(self.cwd):
            if self._probe(candidate.path):
                logger.debug(
                    "Using default config file",
                    path=str(candidate.path),
                    loader=candidate.kind.value,
                )
                return self.load(candidate)
            logger.debug("Default config file not present", path=str(candidate.path))

        raise ResolutionError(
            NO_CONFIG_MESSAGE,
            hint="Create a .gmrc file with 'gmrc init' or pass --config",
        )

    def _resolve_explicit(self, config_file: Path | str) -> Settings:
        # Relative paths are only re-anchored for a resolver bound to another
        # directory; otherwise loaders see the path as given.
        target = config_file if self._cwd is None else self.cwd / config_file
        candidate = CandidatePath(path=target, kind=classify(config_file))
        if self._names_cwd(target) or not self._probe(candidate.path):
            logger.debug("Explicit config file not found", path=str(config_file))
            raise ResolutionError(
                f"Failed to import '{config_file}': file not found",
                path=str(config_file),
            )
        logger.debug(
            "Using explicit config file",
            path=str(candidate.path),
            loader=candidate.kind.value,
        )
        return self.load(candidate)

    def _names_cwd(self, target: Path | str) -> bool:
        """Whether ``target`` is empty or just the working directory."""
        if not str(target):
            return True
        return Path(self.cwd, target).resolve() == self.cwd.resolve()

    def load(self, candidate: CandidatePath) -> Settings:
        """Load ``candidate`` with the loader its kind calls for."""
        if candidate.is_code:
            return self._module_loader(candidate.path)
        return self._data_loader(candidate.path)


def get_settings(
    config_file: Path | str | None = None, cwd: Path | str | None = None
) -> Settings:
    """Resolve the raw .gmrc settings.

    Convenience wrapper around :class:`SettingsResolver`; every call probes
    and reads the files again.

    Args:
        config_file: Optional explicit config path
        cwd: Directory to resolve in (default: the process working directory)

    Returns:
        The raw, unvalidated settings value
    """
    return SettingsResolver(cwd).resolve(config_file)
