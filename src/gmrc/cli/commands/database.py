"""Print the database name from a connection string."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated

import typer

from gmrc.cli.options import ConfigOption, VerboseOption
from gmrc.cli.utils.error_handler import handle_cli_error
from gmrc.common.connection import get_database_name
from gmrc.common.stdin import read_stdin
from gmrc.exceptions import GmrcError
from gmrc.resolution import get_settings

CONNECTION_STRING_KEY = "connectionString"


def _connection_string_from_settings(config: str | None) -> str:
    settings = get_settings(config)
    value = (
        settings.get(CONNECTION_STRING_KEY) if isinstance(settings, Mapping) else None
    )
    if not isinstance(value, str) or not value:
        raise GmrcError(
            f"'{CONNECTION_STRING_KEY}' is not set in the configuration",
            hint="Pass a connection string argument or use '-' to read stdin",
        )
    return value


def database_name_command(
    connection_string: Annotated[
        str | None,
        typer.Argument(
            help=(
                "Connection string; '-' reads it from stdin. Defaults to "
                "connectionString from the .gmrc file"
            ),
        ),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the database name a connection string refers to."""
    try:
        if connection_string == "-":
            connection_string = read_stdin().strip()
        elif connection_string is None:
            connection_string = _connection_string_from_settings(config)
        name = get_database_name(connection_string)
    except GmrcError as e:
        handle_cli_error(e, verbose=verbose)
        return

    typer.echo(name)
