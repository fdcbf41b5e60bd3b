"""Error handling utilities for CLI commands."""

from __future__ import annotations

import traceback

import typer
from rich.console import Console
from rich.markup import escape

from gmrc.config import get_logger
from gmrc.exceptions import GmrcError

logger = get_logger(__name__)
err_console = Console(stderr=True)


def handle_cli_error(
    error: Exception, verbose: bool = False, exit_code: int = 1
) -> None:
    """Report ``error`` to the user and exit.

    Args:
        error: The exception that was raised
        verbose: Whether to show detailed error information
        exit_code: Exit code to use when exiting

    Raises:
        typer.Exit: Always
    """
    if isinstance(error, GmrcError):
        err_console.print(f"[red]✗ {escape(error.message)}[/red]", soft_wrap=True)

        if error.hint:
            err_console.print(
                f"[yellow]→ {escape(error.hint)}[/yellow]", soft_wrap=True
            )

        if verbose and error.details:
            err_console.print("\n[dim]Details:[/dim]")
            for key, value in error.details.items():
                err_console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")

        logger.debug(
            "gmrc error occurred",
            error_type=type(error).__name__,
            error_message=error.message,
            hint=error.hint,
            details=error.details,
            exit_code=exit_code,
        )
    else:
        err_console.print(f"[red]✗ Unexpected error: {escape(str(error))}[/red]")

        if verbose:
            err_console.print("\n[dim]Full traceback:[/dim]")
            err_console.print(escape("".join(traceback.format_exception(error))))
        else:
            err_console.print("[dim]Run with --verbose for full error details[/dim]")

        logger.error(
            "Unexpected error occurred",
            error=str(error),
            error_type=type(error).__name__,
            exit_code=exit_code,
            exc_info=error,
        )

    raise typer.Exit(exit_code)
