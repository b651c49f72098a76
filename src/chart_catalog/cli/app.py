# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the chart-catalog commands."""

from __future__ import annotations

import typer

from .bindings import bindings_command
from .validate import validate_command

app = typer.Typer(
    name="chart-catalog",
    help="Validate rhythm-game catalog documents and generate typing bindings.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("validate")(validate_command)
app.command("bindings")(bindings_command)


def main() -> None:
    """Run the chart-catalog CLI."""

    app()


__all__ = ["app", "main"]
