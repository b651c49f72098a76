# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and the schema."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import cast

from .errors import CatalogIntegrityError
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogIntegrityError: If the schema cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse JSON schema ({exc.msg})") from exc
    return _ensure_json_object(payload, context=str(path))


def load_document(path: Path) -> JSONValue:
    """Load a catalog document from disk.

    Documents saved with a UTF-8 byte order mark are accepted.

    Args:
        path: Filesystem path to the catalog document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the document is missing.
        CatalogIntegrityError: If the document cannot be decoded or parsed.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise CatalogIntegrityError(f"{path}: document is not valid UTF-8") from exc
    try:
        payload = cast(JSONValue, json.loads(text))
    except json.JSONDecodeError as exc:
        raise CatalogIntegrityError(
            f"{path}: failed to parse catalog JSON ({exc.msg} at line {exc.lineno} column {exc.colno})",
        ) from exc
    return payload


def _ensure_json_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    """Ensure ``value`` is a JSON object, raising on type mismatch.

    Args:
        value: Parsed JSON payload to validate.
        context: Human-readable context string used in error messages.

    Returns:
        Mapping[str, JSONValue]: Validated JSON object.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """

    if isinstance(value, Mapping):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected a JSON object, found an array")
    raise CatalogIntegrityError(f"{context}: expected a JSON object")


__all__ = ["load_document", "load_schema"]
