# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from chart_catalog.consistency import ConsistencyOptions
from chart_catalog.schema import SchemaRepository
from chart_catalog.validator import CatalogValidator

_TRANSLATIONS_EN: dict[str, Any] = {
    "name": "Dance Game",
    "single": "Single",
    "double": "Double",
    "basic": "Basic",
    "expert": "Expert",
    "unlock": "Unlockable",
    "$abbr": {"basic": "BSP", "expert": "ESP"},
}
_TRANSLATIONS_JA: dict[str, Any] = {
    "name": "ダンスゲーム",
    "single": "シングル",
    "double": "ダブル",
    "basic": "ベーシック",
    "expert": "エキスパート",
    "unlock": "解禁",
    "$abbr": {"basic": "BSP", "expert": "ESP"},
}

VALID_DOCUMENT: dict[str, Any] = {
    "meta": {
        "styles": ["single", "double"],
        "difficulties": [
            {"key": "basic", "color": "#ffcc00"},
            {"key": "expert", "color": "#22cc55"},
        ],
        "flags": ["unlock"],
        "lvlMax": 19,
    },
    "defaults": {
        "style": "single",
        "difficulties": ["expert"],
        "flags": [],
        "lowerLvlBound": 10,
        "upperLvlBound": 15,
    },
    "i18n": {"en": _TRANSLATIONS_EN, "ja": _TRANSLATIONS_JA},
    "songs": [
        {
            "name": "Alpha",
            "artist": "Artist A",
            "jacket": "alpha.png",
            "charts": [
                {"style": "single", "diffClass": "basic", "lvl": 5},
                {"style": "double", "diffClass": "expert", "lvl": 14},
            ],
        },
        {
            "name": "Beta",
            "artist": "Artist B",
            "charts": [{"style": "single", "diffClass": "expert", "lvl": 12}],
        },
    ],
}


@pytest.fixture
def schema_path() -> Path:
    """Return the repository schema used across catalog tests."""
    return Path(__file__).resolve().parents[1] / "schema" / "songs.schema.json"


@pytest.fixture
def schemas(schema_path: Path) -> SchemaRepository:
    return SchemaRepository.load(schema_path)


@pytest.fixture
def document() -> dict[str, Any]:
    """Return a fresh, fully consistent catalog document."""
    return copy.deepcopy(VALID_DOCUMENT)


@pytest.fixture
def jackets_dir(tmp_path: Path) -> Path:
    """Return a jacket directory holding the images referenced by ``document``."""
    directory = tmp_path / "jackets"
    directory.mkdir()
    (directory / "alpha.png").write_bytes(b"\x89PNG")
    return directory


@pytest.fixture
def validator(schemas: SchemaRepository, jackets_dir: Path) -> CatalogValidator:
    return CatalogValidator(schemas=schemas, options=ConsistencyOptions(jackets_dir=jackets_dir))


@pytest.fixture
def project(tmp_path: Path, schema_path: Path, jackets_dir: Path) -> Path:
    """Return a project root laid out with the default configuration paths."""
    root = tmp_path / "project"
    (root / "src" / "songs").mkdir(parents=True)
    (root / "src" / "assets").mkdir(parents=True)
    jackets_dir.rename(root / "src" / "assets" / "jackets")
    (root / "songs.schema.json").write_text(schema_path.read_text(encoding="utf-8"), encoding="utf-8")
    return root
