"""Fireline CLI — Typer-based developer tooling.

Provides the ``fireline`` command with subcommands for inspecting groups,
trying out the dictionary encoder and running a small dispatch demo.

All output uses Rich for formatted terminal display.
"""
