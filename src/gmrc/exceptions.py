"""Exception hierarchy for gmrc with helpful error messages."""

from __future__ import annotations

from typing import Any


class GmrcError(Exception):
    """Base exception with helpful formatting for all gmrc errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ResolutionError(GmrcError):
    """A .gmrc file could not be located, read, parsed or imported.

    The message always names the offending path (or resolved module
    reference) and embeds the underlying cause.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize resolution error.

        Args:
            message: Complete human-readable message
            path: Path or reference the failure relates to
            hint: Optional hint suggesting how to fix the problem
        """
        self.path = path
        details = {"path": path} if path is not None else None
        super().__init__(message=message, hint=hint, details=details)


class DatabaseNameError(GmrcError):
    """The database name could not be extracted from a connection string."""

    pass


class TemplateExistsError(GmrcError):
    """A configuration template would overwrite an existing file."""

    def __init__(self, path: Any) -> None:
        """Initialize with the path that already exists.

        Args:
            path: Location of the existing configuration file
        """
        self.path = path
        super().__init__(
            message=f"Configuration file already exists: {path}",
            hint="Use --force to overwrite it",
            details={"path": str(path)},
        )
