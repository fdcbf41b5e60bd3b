"""Configuration inspection commands for gmrc."""

import typer

from .precedence import config_precedence
from .show import config_show

config_app = typer.Typer(
    name="config",
    help="Inspect the resolved .gmrc configuration",
    pretty_exceptions_enable=False,
)

config_app.command(name="show")(config_show)
config_app.command(name="precedence")(config_precedence)

__all__ = ["config_app"]
