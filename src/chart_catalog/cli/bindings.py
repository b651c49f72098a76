# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command generating typing bindings without validating documents."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..bindings import generate
from ..errors import CatalogIntegrityError
from ..io import load_schema
from ._options import EMOJI_OPTION, OUTPUT_OPTION, ROOT_OPTION, SCHEMA_OPTION, TYPE_NAME_OPTION, build_config
from .validate import emit_bindings

STDOUT_OPTION = Annotated[
    bool,
    typer.Option("--stdout", help="Print the bindings instead of writing them."),
]


def bindings_command(
    root: ROOT_OPTION = Path("."),
    schema: SCHEMA_OPTION = None,
    output: OUTPUT_OPTION = None,
    type_name: TYPE_NAME_OPTION = None,
    to_stdout: STDOUT_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
) -> None:
    """Generate the typing bindings from the schema."""

    config = build_config(root, schema_path=schema, bindings_path=output, type_name=type_name)
    if not to_stdout:
        try:
            emit_bindings(config, use_emoji=use_emoji)
        except FileNotFoundError as exc:
            raise typer.BadParameter(f"schema not found: {exc}") from exc
        return
    try:
        source = generate(load_schema(config.schema_path), config.type_name, config.banner())
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"schema not found: {exc}") from exc
    except CatalogIntegrityError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(source, nl=False)


__all__ = ["bindings_command"]
