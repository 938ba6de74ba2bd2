"""Console sink — renders tracked events with rich."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text

from fireline.handlers.sinks import EncodingHandler, TrackedEvent
from fireline.handlers.sinks._formatting import format_group_label, format_payload

_GROUP_STYLES = {
    "error": "red",
    "critical": "bold red",
    "warning": "yellow",
    "sensitive": "magenta",
    "action": "cyan",
    "state": "green",
}


class ConsoleHandler(EncodingHandler):
    """Prints one line per tracked event.

    Parameters
    ----------
    console:
        Target console.  Defaults to a new ``rich.console.Console``.
    label:
        Optional prefix identifying this handler in shared output.
    """

    def __init__(
        self,
        console: Console | None = None,
        label: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.console = console if console is not None else Console()
        self.label = label

    def emit(self, record: TrackedEvent) -> None:
        groups = format_group_label(record.group)
        style = next(
            (_GROUP_STYLES[name] for name in record.group.labels() if name in _GROUP_STYLES),
            "white",
        )
        line = Text()
        if self.label:
            line.append(f"[{self.label}] ", style="dim")
        line.append(str(record.name) or "<unnamed>", style="bold")
        line.append(f" ({groups})", style=style)
        line.append(f" {record.at.isoformat()} ", style="dim")
        line.append(format_payload(record))
        self.console.print(line, soft_wrap=True)
