"""``fireline demo`` — fire a short login flow through a multiplex handler.

Two console handlers are registered, one for ``action`` and one for
``state`` events.  A failed login is sent as self-describing metadata and
fans out to the ``action`` handler only.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel

from fireline.events import GlobalMetadata, SomeEvent
from fireline.handlers import ConsoleHandler, MultiplexHandler
from fireline.models import EmptyMetadata, Group

console = Console()


class LoginFailureReason(GlobalMetadata):
    reason: str

    @property
    def event(self) -> SomeEvent[str, LoginFailureReason]:
        return SomeEvent[str, LoginFailureReason]("loginFailed")


def demo_cmd(
    reason: str = typer.Option("failed", "--reason", "-r", help="Login failure reason."),
) -> None:
    """Fire ``loginScreenViewed``, ``loginAttempted`` and ``loginFailed``."""
    console.print(
        Panel(
            "[bold]Fireline Demo[/bold]\n\n"
            "action handler <- action events\n"
            "state handler  <- state events",
            border_style="cyan",
            padding=(1, 2),
        )
    )

    multiplex = MultiplexHandler(name_type=str)
    multiplex.register(ConsoleHandler(console, label="action"), Group.ACTION)
    multiplex.register(ConsoleHandler(console, label="state"), Group.STATE)

    SomeEvent[str, EmptyMetadata]("loginScreenViewed", group=Group.STATE).fire(multiplex)
    SomeEvent[str, EmptyMetadata]("loginAttempted").fire(multiplex)
    LoginFailureReason(reason=reason).send(to=multiplex)

    console.print(f"[bold green]Done:[/bold green] 3 events, {len(multiplex)} handlers")
