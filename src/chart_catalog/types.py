# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for catalog documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]
Number: TypeAlias = int | float

BASE_LOCALE: Final[str] = "en"
ABBREVIATION_KEY: Final[str] = "$abbr"
META_NAMESPACE: Final[str] = "meta"
DOCUMENT_SUFFIX: Final[str] = ".json"

__all__ = [
    "ABBREVIATION_KEY",
    "BASE_LOCALE",
    "DOCUMENT_SUFFIX",
    "META_NAMESPACE",
    "JSONPrimitive",
    "JSONValue",
    "Number",
]
