# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Song and chart models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .types import JSONValue, Number
from .utils import (
    expect_mapping_array,
    expect_number,
    expect_string,
    optional_number,
    optional_string,
    string_array,
)


@dataclass(frozen=True, slots=True)
class Chart:
    """A single playable difficulty variant of a song."""

    style: str
    diff_class: str
    lvl: Number
    draw_group: Number | None = None
    step: Number | None = None
    shock: Number | None = None
    freeze: Number | None = None
    jacket: str | None = None
    author: str | None = None
    flags: tuple[str, ...] = ()

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Chart:
        """Create a ``Chart`` from JSON data.

        Args:
            data: Mapping describing the chart.
            context: Human-readable context used in error messages.

        Returns:
            Chart: Frozen chart record.

        Raises:
            CatalogIntegrityError: If a required field is missing or mistyped.
        """

        return Chart(
            style=expect_string(data.get("style"), key="style", context=context),
            diff_class=expect_string(data.get("diffClass"), key="diffClass", context=context),
            lvl=expect_number(data.get("lvl"), key="lvl", context=context),
            draw_group=optional_number(data.get("drawGroup"), key="drawGroup", context=context),
            step=optional_number(data.get("step"), key="step", context=context),
            shock=optional_number(data.get("shock"), key="shock", context=context),
            freeze=optional_number(data.get("freeze"), key="freeze", context=context),
            jacket=optional_string(data.get("jacket"), key="jacket", context=context),
            author=optional_string(data.get("author"), key="author", context=context),
            flags=string_array(data.get("flags"), key="flags", context=context),
        )


@dataclass(frozen=True, slots=True)
class Song:
    """A song and the charts available for it."""

    name: str
    artist: str
    charts: tuple[Chart, ...]
    name_translation: str | None = None
    artist_translation: str | None = None
    bpm: str | None = None
    folder: str | None = None
    genre: str | None = None
    jacket: str | None = None
    search_hint: str | None = None
    date_added: str | None = None
    flags: tuple[str, ...] = ()

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Song:
        """Create a ``Song`` and its charts from JSON data.

        Args:
            data: Mapping describing the song.
            context: Human-readable context used in error messages.

        Returns:
            Song: Frozen song record.

        Raises:
            CatalogIntegrityError: If a required field is missing or mistyped.
        """

        name = expect_string(data.get("name"), key="name", context=context)
        charts = tuple(
            Chart.from_mapping(entry, context=f"{context}.charts[{index}]")
            for index, entry in enumerate(
                expect_mapping_array(data.get("charts"), key="charts", context=context),
            )
        )

        def _text(key: str) -> str | None:
            return optional_string(data.get(key), key=key, context=context)

        return Song(
            name=name,
            artist=expect_string(data.get("artist"), key="artist", context=context),
            charts=charts,
            name_translation=_text("name_translation"),
            artist_translation=_text("artist_translation"),
            bpm=_text("bpm"),
            folder=_text("folder"),
            genre=_text("genre"),
            jacket=_text("jacket"),
            search_hint=_text("search_hint"),
            date_added=_text("date_added"),
            flags=string_array(data.get("flags"), key="flags", context=context),
        )


__all__ = ["Chart", "Song"]
