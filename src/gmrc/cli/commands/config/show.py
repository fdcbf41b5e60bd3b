"""Display the resolved .gmrc settings."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Annotated, Any

import typer

from gmrc.cli.options import ConfigOption, VerboseOption
from gmrc.cli.utils.error_handler import handle_cli_error
from gmrc.exceptions import GmrcError
from gmrc.resolution import get_settings


def _select_key(settings: Any, key: str) -> Any:
    if not isinstance(settings, Mapping):
        raise GmrcError(
            f"Cannot select '{key}': settings are a {type(settings).__name__}, "
            "not a mapping"
        )
    if key not in settings:
        raise GmrcError(
            f"Key '{key}' is not set",
            hint=f"Available keys: {', '.join(map(str, settings)) or '(none)'}",
        )
    return settings[key]


def config_show(
    config: ConfigOption = None,
    key: Annotated[
        str | None,
        typer.Option("--key", "-k", help="Show only this top-level key"),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the resolved settings as JSON.

    The settings are shown exactly as loaded, without validation. Values
    that JSON cannot represent are printed as strings.

    Examples:
        gmrc config show
        gmrc config show --config ./ci.gmrc.py
        gmrc config show --key connectionString
    """
    try:
        settings = get_settings(config)
        value = _select_key(settings, key) if key is not None else settings
    except GmrcError as e:
        handle_cli_error(e, verbose=verbose)
        return

    typer.echo(json.dumps(value, indent=2, default=str))
