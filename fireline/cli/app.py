"""Main Typer application — imports and registers all CLI commands.

Entry point: ``fireline`` (configured via pyproject.toml ``[project.scripts]``).
"""

from __future__ import annotations

import logging

import typer

from fireline.cli.commands.demo import demo_cmd
from fireline.cli.commands.encode import encode_cmd
from fireline.cli.commands.groups import groups_cmd
from fireline.config import settings

app = typer.Typer(
    name="fireline",
    help="Fireline: typed analytics events routed to handlers by group.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def configure(
    log_level: str = typer.Option(
        None, "--log-level", help="Override FIRELINE_LOG_LEVEL for this invocation."
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(name="groups", help="List the built-in event groups.")(groups_cmd)
app.command(name="encode", help="Encode a JSON payload with the dictionary encoder.")(encode_cmd)
app.command(name="demo", help="Fire sample events through a multiplex handler.")(demo_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
