"""Main CLI entry point."""

from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError

from gmrc import __version__
from gmrc.cli.commands.config import config_app
from gmrc.cli.commands.database import database_name_command
from gmrc.cli.commands.init import init_command
from gmrc.config import (
    AppSettings,
    clear_app_settings_cache,
    configure_logging,
    get_app_settings,
    get_logger,
    set_app_settings,
)

logger = get_logger(__name__)

app = typer.Typer(
    name="gmrc",
    help="Locate and load .gmrc migration settings",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="init")(init_command)
app.command(name="database-name")(database_name_command)
app.add_typer(config_app, name="config")


@app.command()
def version() -> None:
    """Show the gmrc version."""
    typer.echo(f"gmrc v{__version__}")


@app.callback()
def main_callback(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging", envvar="GMRC_DEBUG"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        ),
    ] = None,
) -> None:
    """Configure global options and logging for the command."""
    clear_app_settings_cache()
    settings = get_app_settings()

    if debug or log_level is not None:
        overrides = settings.model_dump()
        if debug:
            overrides.update(debug=True, log_level="DEBUG")
        else:
            overrides["log_level"] = log_level
        try:
            settings = AppSettings(**overrides)
        except ValidationError as e:
            raise typer.BadParameter(
                f"Invalid log level: {log_level}", param_hint="--log-level"
            ) from e
        set_app_settings(settings)

    configure_logging(settings)
    logger.debug("Logging configured", log_level=settings.log_level)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
