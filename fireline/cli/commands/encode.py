"""``fireline encode`` — run a JSON payload through ``DictionaryEncoder``.

Useful for checking how a payload will look once a handler encodes it::

    fireline encode '{"userName": "ada", "ratio": NaN}' --floats convert_to_string
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from fireline.encoding import (
    DictionaryEncoder,
    EncodingError,
    KeyEncodingStrategy,
    NonConformingFloatEncodingStrategy,
    OutputFormatting,
)

console = Console()
err_console = Console(stderr=True)


def encode_cmd(
    payload: str = typer.Argument(..., help="Payload as JSON text (NaN/Infinity allowed)."),
    keys: KeyEncodingStrategy = typer.Option(
        KeyEncodingStrategy.USE_DEFAULT_KEYS, "--keys", help="Key encoding strategy."
    ),
    floats: NonConformingFloatEncodingStrategy = typer.Option(
        NonConformingFloatEncodingStrategy.RAISE,
        "--floats",
        help="How to encode NaN and infinities.",
    ),
    sort_keys: bool = typer.Option(False, "--sort-keys", help="Sort object keys."),
    compact: bool = typer.Option(False, "--compact", help="Print without indentation."),
) -> None:
    """Encode PAYLOAD and print the result as JSON.

    Exits with code 1 if the payload is not valid JSON or cannot be encoded.
    """
    try:
        value = json.loads(payload)
    except json.JSONDecodeError as exc:
        err_console.print(f"[red]Invalid JSON:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    formatting = OutputFormatting.COMPACT if compact else OutputFormatting.PRETTY_PRINTED
    if sort_keys:
        formatting |= OutputFormatting.SORTED_KEYS
    encoder = DictionaryEncoder(
        key_encoding=keys,
        non_conforming_float=floats,
        output_formatting=formatting | OutputFormatting.WITHOUT_ESCAPING_SLASHES,
    )

    try:
        text = encoder.encode_json(value)
    except EncodingError as exc:
        err_console.print(f"[red]Encoding failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(text, markup=False, highlight=False, soft_wrap=True)
