"""Explain where gmrc looks for its configuration."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from gmrc.resolution import default_candidates, exists

console = Console()


def config_precedence() -> None:
    """Show the default configuration locations and which one is used.

    An explicit --config path always wins; otherwise the first existing file
    below is loaded and the rest are ignored.
    """
    panel = Panel.fit(
        """[bold cyan]Configuration lookup (first match wins):[/bold cyan]

1. [bold]--config PATH[/bold] or GMRC_CONFIG - must exist
   Files ending in .py, .pyw or .pyc are executed, anything else is JSON5

2. [bold].gmrc[/bold] - JSON5 (comments, trailing commas, unquoted keys)

3. [bold].gmrc.py[/bold] - Python module exporting [italic]default[/italic]

4. [bold].gmrc.pyw[/bold] - Python module exporting [italic]default[/italic]

[dim]Files are never merged. Use 'gmrc init' to create a .gmrc file.[/dim]""",
        title="Configuration Precedence",
        border_style="cyan",
    )
    console.print(panel)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Location", style="cyan")
    table.add_column("Loader")
    table.add_column("Status")

    selected = False
    for candidate in default_candidates():
        if not exists(candidate.path):
            status = "[dim]missing[/dim]"
        elif not selected:
            status = "[green]✓ used[/green]"
            selected = True
        else:
            status = "[yellow]ignored[/yellow]"
        table.add_row(str(candidate.path), candidate.kind.value, status)

    console.print(table)
    if not selected:
        console.print("[yellow]No default .gmrc file found[/yellow]")
