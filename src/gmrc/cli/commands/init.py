"""Create a starter .gmrc file."""

from typing import Annotated

import typer
from rich.console import Console

from gmrc.cli.options import VerboseOption
from gmrc.cli.utils.error_handler import handle_cli_error
from gmrc.config import get_logger
from gmrc.config.template import (
    TEMPLATE_FORMATS,
    get_default_config_path,
    write_config_template,
)
from gmrc.exceptions import GmrcError

logger = get_logger(__name__)
console = Console()


def init_command(
    template_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="json5 writes .gmrc, python writes .gmrc.py",
        ),
    ] = "json5",
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Write a commented starter configuration into the current directory."""
    if template_format not in TEMPLATE_FORMATS:
        console.print(
            f"[red]Unknown format '{template_format}'. "
            f"Choose one of: {', '.join(TEMPLATE_FORMATS)}[/red]"
        )
        raise typer.Exit(2)

    output_path = get_default_config_path(template_format)
    try:
        written = write_config_template(output_path, template_format, force=force)
    except GmrcError as e:
        handle_cli_error(e, verbose=verbose)
        return

    logger.info("Configuration template written", path=str(written))
    console.print(
        f"[green]✓[/green] Configuration created: {written}", soft_wrap=True
    )
    console.print("[dim]Edit the file to set your connection strings.[/dim]")
