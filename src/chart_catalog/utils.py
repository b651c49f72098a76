# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising catalog JSON structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .errors import CatalogIntegrityError
from .types import JSONValue, Number


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: The validated string.

    Raises:
        CatalogIntegrityError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool | None = None,
) -> bool:
    """Return ``value`` as ``bool`` with an optional default.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        CatalogIntegrityError: If ``value`` is not ``None`` and not a bool,
            or ``value`` is ``None`` and no ``default`` was provided.
    """
    if value is None:
        if default is None:
            raise CatalogIntegrityError(f"{context}: expected '{key}' to be a boolean")
        return default
    if isinstance(value, bool):
        return value
    raise CatalogIntegrityError(f"{context}: expected '{key}' to be a boolean")


def expect_number(value: JSONValue | None, *, key: str, context: str) -> Number:
    """Return ``value`` as an ``int`` or ``float`` without coercion.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Raises:
        CatalogIntegrityError: If ``value`` is not numeric.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a number")
    return value


def optional_number(value: JSONValue | None, *, key: str, context: str) -> Number | None:
    """Return ``value`` as an optional number, keeping integers intact."""
    if value is None:
        return None
    return expect_number(value, key=key, context=context)


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise CatalogIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an object")
    return value


def expect_mapping_array(value: JSONValue | None, *, key: str, context: str) -> tuple[Mapping[str, JSONValue], ...]:
    """Return ``value`` as a tuple of JSON objects.

    Raises:
        CatalogIntegrityError: If ``value`` is not an array of objects.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array")
    return tuple(
        expect_mapping(item, key=f"{key}[{index}]", context=context) for index, item in enumerate(value)
    )


def freeze_json_mapping(value: Mapping[str, JSONValue], *, context: str) -> Mapping[str, JSONValue]:
    """Return an immutable mapping with recursively frozen JSON values.

    Args:
        value: Mapping to freeze.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping with recursively frozen entries.

    Raises:
        CatalogIntegrityError: If any key is not a string.
    """
    frozen: dict[str, JSONValue] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise CatalogIntegrityError(f"{context}: expected keys to be strings")
        frozen[key] = freeze_json_value(item, context=f"{context}.{key}")
    return MappingProxyType(frozen)


def freeze_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Return a recursively frozen view of ``value``.

    Mappings become mapping proxies and sequences become tuples.

    Raises:
        CatalogIntegrityError: If ``value`` is not JSON compatible.
    """
    if isinstance(value, Mapping):
        return freeze_json_mapping(value, context=context)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return tuple(freeze_json_value(item, context=context) for item in value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    raise CatalogIntegrityError(f"{context}: unsupported JSON value type {type(value).__name__}")


__all__ = [
    "expect_mapping",
    "expect_mapping_array",
    "expect_number",
    "expect_string",
    "freeze_json_mapping",
    "freeze_json_value",
    "optional_bool",
    "optional_number",
    "optional_string",
    "string_array",
]
