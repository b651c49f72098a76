# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command validating every catalog document and regenerating bindings."""

from __future__ import annotations

from pathlib import Path

import typer
from jsonschema.exceptions import SchemaError

from ..bindings import generate, write_bindings
from ..config import CatalogConfig
from ..errors import CatalogIntegrityError
from ..io import load_schema
from ..logging import configure_logging, fail, info, ok, warn
from ..reporting import render_run
from ..validator import validate_catalog
from ._options import (
    BASE_LOCALE_OPTION,
    DATA_DIR_OPTION,
    EMOJI_OPTION,
    ENFORCE_FLAGS_OPTION,
    JACKETS_DIR_OPTION,
    NO_GENERATE_OPTION,
    OUTPUT_OPTION,
    ROOT_OPTION,
    SCHEMA_OPTION,
    TYPE_NAME_OPTION,
    VERBOSE_OPTION,
    build_config,
)


def validate_command(
    root: ROOT_OPTION = Path("."),
    data_dir: DATA_DIR_OPTION = None,
    schema: SCHEMA_OPTION = None,
    jackets_dir: JACKETS_DIR_OPTION = None,
    output: OUTPUT_OPTION = None,
    type_name: TYPE_NAME_OPTION = None,
    base_locale: BASE_LOCALE_OPTION = None,
    enforce_default_flags: ENFORCE_FLAGS_OPTION = None,
    no_generate: NO_GENERATE_OPTION = False,
    use_emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Validate catalog documents and regenerate the typing bindings when all pass."""

    configure_logging(verbose=verbose)
    config = build_config(
        root,
        data_dir=data_dir,
        schema_path=schema,
        jackets_dir=jackets_dir,
        bindings_path=output,
        type_name=type_name,
        base_locale=base_locale,
        enforce_default_flags=enforce_default_flags,
    )
    try:
        run = validate_catalog(config)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"schema not found: {exc}") from exc
    except (CatalogIntegrityError, SchemaError) as exc:
        raise typer.BadParameter(f"unusable schema {config.schema_path}: {exc}") from exc

    render_run(run, use_emoji=use_emoji)
    if not run.reports:
        warn(f"No catalog documents found in {config.data_dir}", use_emoji=use_emoji)
    if not run.ok:
        raise typer.Exit(code=1)
    if no_generate:
        return
    emit_bindings(config, use_emoji=use_emoji)


def emit_bindings(config: CatalogConfig, *, use_emoji: bool) -> None:
    """Generate bindings for ``config`` and write them to the configured path."""

    info("Building schema file", use_emoji=use_emoji)
    try:
        source = generate(load_schema(config.schema_path), config.type_name, config.banner())
    except CatalogIntegrityError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc
    try:
        destination = write_bindings(config.bindings_path, source)
    except OSError as exc:
        fail(f"could not write {config.bindings_path}: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc
    ok(f"Schema written to {_display_path(destination, config.project_root)}", use_emoji=use_emoji)


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


__all__ = ["emit_bindings", "validate_command"]
