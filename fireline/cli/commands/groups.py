"""``fireline groups`` — list the built-in event group bits."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from fireline.models.groups import BUILTIN_GROUPS, DEFAULT_GROUPS

console = Console()


def groups_cmd(
    as_json: bool = typer.Option(False, "--json", help="Print name/value pairs as JSON."),
) -> None:
    """Show every built-in group with its bit position and value."""
    if as_json:
        console.print_json(data={group.name.lower(): int(group) for group in BUILTIN_GROUPS})
        return

    table = Table(title="Event Groups")
    table.add_column("Name", style="cyan")
    table.add_column("Bit", justify="right")
    table.add_column("Value", justify="right", style="green")

    for group in BUILTIN_GROUPS:
        table.add_row(group.name.lower(), str(int(group).bit_length() - 1), str(int(group)))

    console.print(table)
    console.print(f"[dim]All built-in groups: {int(DEFAULT_GROUPS)}[/dim]")
