# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Typer parameter declarations for chart-catalog commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from ..config import CatalogConfig, load_config
from ..errors import ConfigError

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root anchoring relative paths and pyproject.toml."),
]
DATA_DIR_OPTION = Annotated[
    Path | None,
    typer.Option("--data-dir", help="Directory holding the catalog documents."),
]
SCHEMA_OPTION = Annotated[
    Path | None,
    typer.Option("--schema", help="JSON schema describing catalog documents."),
]
JACKETS_DIR_OPTION = Annotated[
    Path | None,
    typer.Option("--jackets-dir", help="Directory holding jacket images referenced by songs."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Destination of the generated bindings module."),
]
TYPE_NAME_OPTION = Annotated[
    str | None,
    typer.Option("--type-name", help="Name of the generated root type."),
]
BASE_LOCALE_OPTION = Annotated[
    str | None,
    typer.Option("--base-locale", help="Locale every other locale is compared against."),
]
ENFORCE_FLAGS_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--enforce-default-flags/--allow-hidden-flags",
        help="Require default flags to be listed in meta.flags.",
        show_default=False,
    ),
]
NO_GENERATE_OPTION = Annotated[
    bool,
    typer.Option("--no-generate", help="Validate only; skip writing the bindings module."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Prefix status lines with emoji."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Emit debug logging to stderr."),
]


def build_config(root: Path, **overrides: Any) -> CatalogConfig:
    """Resolve configuration for ``root`` or raise a Typer usage error."""

    try:
        return load_config(root, overrides)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


__all__ = [
    "BASE_LOCALE_OPTION",
    "DATA_DIR_OPTION",
    "EMOJI_OPTION",
    "ENFORCE_FLAGS_OPTION",
    "JACKETS_DIR_OPTION",
    "NO_GENERATE_OPTION",
    "OUTPUT_OPTION",
    "ROOT_OPTION",
    "SCHEMA_OPTION",
    "TYPE_NAME_OPTION",
    "VERBOSE_OPTION",
    "build_config",
]
