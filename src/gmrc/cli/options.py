"""Options shared by several CLI commands."""

from typing import Annotated

import typer

ConfigOption = Annotated[
    str | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to the .gmrc file (.py, .pyw and .pyc files are executed)",
        envvar="GMRC_CONFIG",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show error details"),
]
