# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Aggregate model for a whole catalog document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from .model_meta import GameDefaults, GameMeta
from .model_song import Song
from .types import ABBREVIATION_KEY, JSONValue
from .utils import expect_mapping, expect_mapping_array, freeze_json_mapping

_EMPTY: Mapping[str, JSONValue] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class GameData:
    """Typed view over a structurally valid catalog document."""

    meta: GameMeta
    defaults: GameDefaults
    i18n: Mapping[str, Mapping[str, JSONValue]]
    songs: tuple[Song, ...]
    source: Path | None = None

    @property
    def locales(self) -> tuple[str, ...]:
        """Return the locales with a translation dictionary, in document order."""

        return tuple(self.i18n)

    def translations(self, locale: str) -> Mapping[str, JSONValue]:
        """Return the translation dictionary for ``locale`` (empty when absent)."""

        return self.i18n.get(locale, _EMPTY)

    def abbreviations(self, locale: str) -> Mapping[str, JSONValue]:
        """Return the ``$abbr`` dictionary for ``locale`` (empty when absent)."""

        abbreviations = self.translations(locale).get(ABBREVIATION_KEY)
        if isinstance(abbreviations, Mapping):
            return abbreviations
        return _EMPTY

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, source: Path | None = None) -> GameData:
        """Create ``GameData`` from a parsed catalog document.

        Args:
            data: Parsed catalog document.
            source: Optional path the document was read from.

        Returns:
            GameData: Frozen catalog aggregate.

        Raises:
            CatalogIntegrityError: If a section is missing or mistyped.
        """

        context = str(source) if source is not None else "<document>"
        meta = GameMeta.from_mapping(
            expect_mapping(data.get("meta"), key="meta", context=context),
            context=f"{context}.meta",
        )
        defaults = GameDefaults.from_mapping(
            expect_mapping(data.get("defaults"), key="defaults", context=context),
            context=f"{context}.defaults",
        )
        i18n_section = expect_mapping(data.get("i18n"), key="i18n", context=context)
        i18n = MappingProxyType(
            {
                locale: freeze_json_mapping(
                    expect_mapping(entries, key=f"i18n.{locale}", context=context),
                    context=f"{context}.i18n.{locale}",
                )
                for locale, entries in i18n_section.items()
            },
        )
        songs = tuple(
            Song.from_mapping(entry, context=f"{context}.songs[{index}]")
            for index, entry in enumerate(expect_mapping_array(data.get("songs"), key="songs", context=context))
        )
        return GameData(meta=meta, defaults=defaults, i18n=i18n, songs=songs, source=source)


__all__ = ["GameData"]
