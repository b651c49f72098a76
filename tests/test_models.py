# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Unit tests for the typed catalog records and parsing primitives."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from chart_catalog.errors import CatalogIntegrityError
from chart_catalog.model_game import GameData
from chart_catalog.model_meta import Difficulty, GameMeta
from chart_catalog.model_song import Chart, Song
from chart_catalog.utils import expect_number, freeze_json_value, string_array


def test_game_data_from_mapping(document: dict[str, Any]) -> None:
    game = GameData.from_mapping(document, source=Path("ddr.json"))

    assert game.source == Path("ddr.json")
    assert game.meta.styles == ("single", "double")
    assert game.meta.difficulties[0] == Difficulty(key="basic", color="#ffcc00")
    assert game.meta.difficulty_keys == ("basic", "expert")
    assert game.meta.translation_keys == ("single", "double", "basic", "expert", "unlock")
    assert game.meta.uses_draw_groups is False
    assert game.defaults.style == "single"
    assert game.defaults.lower_lvl_bound == 10
    assert game.locales == ("en", "ja")
    assert game.abbreviations("en")["expert"] == "ESP"
    assert [song.name for song in game.songs] == ["Alpha", "Beta"]
    assert game.songs[0].charts[1] == Chart(style="double", diff_class="expert", lvl=14)


def test_game_data_is_detached_from_source(document: dict[str, Any]) -> None:
    game = GameData.from_mapping(document)
    document["i18n"]["en"]["single"] = "changed"
    assert game.translations("en")["single"] == "Single"
    with pytest.raises(TypeError):
        game.translations("en")["single"] = "mutated"  # type: ignore[index]


def test_unknown_locale_is_empty(document: dict[str, Any]) -> None:
    game = GameData.from_mapping(document)
    assert dict(game.translations("fr")) == {}
    assert dict(game.abbreviations("fr")) == {}


def test_song_optional_fields() -> None:
    song = Song.from_mapping(
        {
            "name": "Alpha",
            "artist": "Artist A",
            "name_translation": "アルファ",
            "bpm": "150",
            "flags": ["unlock"],
            "charts": [
                {"style": "single", "diffClass": "basic", "lvl": 5.5, "drawGroup": 2, "step": 180, "author": "N"},
            ],
        },
        context="songs[0]",
    )
    assert song.name_translation == "アルファ"
    assert song.jacket is None
    assert song.flags == ("unlock",)
    chart = song.charts[0]
    assert chart.lvl == 5.5
    assert chart.draw_group == 2
    assert chart.step == 180
    assert chart.author == "N"


def test_missing_section_raises(document: dict[str, Any]) -> None:
    del document["defaults"]
    with pytest.raises(CatalogIntegrityError, match="expected 'defaults' to be an object"):
        GameData.from_mapping(document)


def test_chart_errors_name_the_chart() -> None:
    with pytest.raises(CatalogIntegrityError, match=r"songs\[0\]\.charts\[1\]: expected 'diffClass' to be a string"):
        Song.from_mapping(
            {
                "name": "Alpha",
                "artist": "A",
                "charts": [{"style": "single", "diffClass": "basic", "lvl": 1}, {"style": "single", "lvl": 2}],
            },
            context="songs[0]",
        )


def test_meta_defaults_draw_groups_to_false() -> None:
    meta = GameMeta.from_mapping(
        {"styles": [], "difficulties": [], "flags": [], "lvlMax": 10},
        context="meta",
    )
    assert meta.uses_draw_groups is False
    assert meta.translation_keys == ()


def test_expect_number_rejects_booleans() -> None:
    with pytest.raises(CatalogIntegrityError, match="expected 'lvl' to be a number"):
        expect_number(True, key="lvl", context="chart")
    assert expect_number(7, key="lvl", context="chart") == 7


def test_string_array_validation() -> None:
    assert string_array(None, key="flags", context="x") == ()
    with pytest.raises(CatalogIntegrityError, match=r"expected 'flags\[1\]' to be a string"):
        string_array(["a", 2], key="flags", context="x")
    with pytest.raises(CatalogIntegrityError, match="expected 'flags' to be an array of strings"):
        string_array("abc", key="flags", context="x")


def test_freeze_json_value() -> None:
    frozen = freeze_json_value({"a": [1, {"b": "c"}]}, context="root")
    assert frozen["a"][1]["b"] == "c"  # type: ignore[index]
    assert isinstance(frozen["a"], tuple)  # type: ignore[index]
