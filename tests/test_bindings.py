# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the schema-to-bindings generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from chart_catalog.bindings import generate, pascal_case, write_bindings
from chart_catalog.config import CatalogConfig
from chart_catalog.errors import CatalogIntegrityError
from chart_catalog.schema import SchemaRepository

BANNER = '"""Generated file. DO NOT MODIFY BY HAND."""'

THING_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["kind", "mixed"],
    "properties": {
        "kind": {"enum": ["a", "b", None]},
        "version": {"const": 2},
        "label": {"type": ["string", "null"]},
        "point": {"type": "array", "items": [{"type": "number"}, {"type": "number"}]},
        "tags": {"type": "array"},
        "child": {"$ref": "#/$defs/Node"},
        "mixed": {
            "allOf": [
                {"properties": {"x": {"type": "integer"}}, "required": ["x"]},
                {"properties": {"y": {"anyOf": [{"type": "string"}, {"type": "string"}, {"type": "boolean"}]}}},
            ],
        },
    },
    "$defs": {
        "Node": {
            "type": "object",
            "description": "A tree node.",
            "properties": {"children": {"type": "array", "items": {"$ref": "#/$defs/Node"}}},
        },
    },
}


def test_pascal_case() -> None:
    assert pascal_case("diffClass") == "DiffClass"
    assert pascal_case("song-data") == "SongData"
    assert pascal_case("$abbr") == "Abbr"
    assert pascal_case("9lives") == "T9lives"
    assert pascal_case("$") == "Anonymous"


def test_catalog_schema_bindings(schemas: SchemaRepository) -> None:
    source = generate(schemas.schema, "SongData", BANNER)

    assert source.startswith(BANNER + "\n\nfrom __future__ import annotations\n")
    assert "from typing import NotRequired, TypeAlias, TypedDict\n" in source
    assert "SongData = TypedDict(\n" in source
    assert "        '$schema': 'NotRequired[str]',\n" in source
    assert "        'meta': 'GameMeta',\n" in source
    assert "        'songs': 'list[Song]',\n" in source
    assert "class GameMeta(TypedDict):\n" in source
    assert "    difficulties: list[Difficulty]\n" in source
    assert "    #: Charts are grouped by draw group instead of their numeric level.\n" in source
    assert "    usesDrawGroups: NotRequired[bool]\n" in source
    assert "class GameI18N(TypedDict):\n    # additional keys map to I18NDict\n    en: I18NDict\n" in source
    assert "I18NDict: TypeAlias = 'dict[str, str | I18NDict]'\n" in source
    assert "class Chart(TypedDict):\n" in source
    assert "    drawGroup: NotRequired[int]\n" in source
    assert "    step: NotRequired[float]\n" in source
    assert source.endswith(
        '__all__ = ["SongData", "GameMeta", "Difficulty", "GameDefaults", "GameI18N", "I18NDict", "Song", "Chart"]\n',
    )


def test_generated_bindings_execute(schemas: SchemaRepository) -> None:
    source = generate(schemas.schema, "SongData", BANNER)
    namespace: dict[str, Any] = {}
    exec(compile(source, "song_data.py", "exec"), namespace)  # noqa: S102

    assert "charts" in namespace["Song"].__annotations__
    assert "$schema" in namespace["SongData"].__annotations__
    assert namespace["I18NDict"] == "dict[str, str | I18NDict]"


def test_generation_is_deterministic(schemas: SchemaRepository) -> None:
    first = generate(schemas.schema, "SongData", BANNER)
    second = generate(schemas.schema, "SongData", BANNER)
    assert first == second


def test_schema_constructs() -> None:
    source = generate(THING_SCHEMA, "Thing", "")

    assert source.startswith("from __future__ import annotations\n\nfrom typing import Any, Literal, NotRequired, TypedDict\n")
    assert "class Thing(TypedDict):\n" in source
    assert "    kind: Literal['a', 'b'] | None\n" in source
    assert "    version: NotRequired[Literal[2]]\n" in source
    assert "    label: NotRequired[str | None]\n" in source
    assert "    point: NotRequired[tuple[float, float]]\n" in source
    assert "    tags: NotRequired[list[Any]]\n" in source
    assert "    child: NotRequired[Node]\n" in source
    assert "    mixed: ThingMixed\n" in source
    assert 'class Node(TypedDict):\n    """A tree node."""\n\n    children: NotRequired[list[Node]]\n' in source
    assert "class ThingMixed(TypedDict):\n    x: int\n    y: NotRequired[str | bool]\n" in source
    assert source.endswith('__all__ = ["Thing", "Node", "ThingMixed"]\n')


def test_keyword_properties_use_functional_syntax() -> None:
    source = generate({"type": "object", "properties": {"class": {"type": "string"}}}, "Item", "")
    assert "Item = TypedDict(\n    \"Item\",\n    {\n        'class': 'NotRequired[str]',\n    },\n)\n" in source


def test_empty_object_declares_an_empty_typed_dict() -> None:
    source = generate({"type": "object", "properties": {}}, "Empty", "")
    assert "class Empty(TypedDict):\n    pass\n" in source


def test_name_collisions_get_suffixes() -> None:
    schema = {
        "type": "object",
        "properties": {"item": {"$ref": "#/definitions/Root"}},
        "definitions": {"Root": {"type": "object", "properties": {"id": {"type": "integer"}}}},
    }
    source = generate(schema, "Root", "")
    assert "class Root(TypedDict):\n    item: NotRequired[Root2]\n" in source
    assert "class Root2(TypedDict):\n    id: NotRequired[int]\n" in source


def test_remote_references_are_rejected() -> None:
    schema = {"type": "object", "properties": {"a": {"$ref": "https://example.com/a.json"}}}
    with pytest.raises(CatalogIntegrityError, match="only local definitions"):
        generate(schema, "Remote", "")


def test_dangling_references_are_rejected() -> None:
    schema = {"type": "object", "properties": {"a": {"$ref": "#/definitions/Missing"}}}
    with pytest.raises(CatalogIntegrityError, match="unresolvable"):
        generate(schema, "Dangling", "")


def test_write_bindings_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "models" / "song_data.py"
    write_bindings(target, "old\n")
    write_bindings(target, "new\n")
    assert target.read_text(encoding="utf-8") == "new\n"


def test_config_banner_marks_file_generated() -> None:
    banner = CatalogConfig().banner()
    assert "DO NOT MODIFY BY HAND" in banner
    assert "songs.schema.json" in banner
    assert "SongData" in banner


def test_nullable_object_becomes_optional_typed_dict() -> None:
    schema = {
        "type": "object",
        "properties": {"extra": {"type": ["object", "null"], "properties": {"a": {"type": "string"}}}},
    }
    source = generate(schema, "Root", "")
    assert "    extra: NotRequired[RootExtra | None]\n" in source
    assert "class RootExtra(TypedDict):\n    a: NotRequired[str]\n" in source
    assert "RootExtra2" not in source


def test_additional_properties_are_only_described() -> None:
    schema = {
        "type": "object",
        "properties": {"id": {"type": "integer"}},
        "additionalProperties": {"type": "object", "properties": {"b": {"type": "string"}}},
    }
    source = generate(schema, "Bag", "")
    assert "class Bag(TypedDict):\n    # additional keys are allowed\n    id: NotRequired[int]\n" in source
    assert "BagValue" not in source
    assert source.endswith('__all__ = ["Bag"]\n')


def test_primitive_additional_properties_are_named() -> None:
    schema = {"type": "object", "properties": {"id": {"type": "integer"}}, "additionalProperties": {"type": "string"}}
    assert "    # additional keys map to str\n" in generate(schema, "Tagged", "")
