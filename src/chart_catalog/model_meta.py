# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Models describing the ``meta`` and ``defaults`` sections of a catalog document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .types import JSONValue, Number
from .utils import (
    expect_mapping_array,
    expect_number,
    expect_string,
    optional_bool,
    optional_string,
    string_array,
)


@dataclass(frozen=True, slots=True)
class Difficulty:
    """Difficulty class declared by a game, such as ``basic`` or ``expert``."""

    key: str
    color: str | None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Difficulty:
        """Create a ``Difficulty`` from JSON data.

        Args:
            data: Mapping describing the difficulty class.
            context: Human-readable context used in error messages.

        Returns:
            Difficulty: Frozen difficulty metadata.

        Raises:
            CatalogIntegrityError: If ``key`` is missing or not a string.
        """

        return Difficulty(
            key=expect_string(data.get("key"), key="key", context=context),
            color=optional_string(data.get("color"), key="color", context=context),
        )


@dataclass(frozen=True, slots=True)
class GameMeta:
    """Enumerations of the styles, difficulties and flags a game recognises."""

    styles: tuple[str, ...]
    difficulties: tuple[Difficulty, ...]
    flags: tuple[str, ...]
    lvl_max: Number
    uses_draw_groups: bool

    @property
    def difficulty_keys(self) -> tuple[str, ...]:
        """Return difficulty keys in declaration order."""

        return tuple(difficulty.key for difficulty in self.difficulties)

    @property
    def translation_keys(self) -> tuple[str, ...]:
        """Return every key needing a translation: styles, then difficulties, then flags."""

        return (*self.styles, *self.difficulty_keys, *self.flags)

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> GameMeta:
        """Create ``GameMeta`` from the ``meta`` section of a document.

        Args:
            data: Mapping holding the ``meta`` section.
            context: Human-readable context used in error messages.

        Returns:
            GameMeta: Frozen game metadata.

        Raises:
            CatalogIntegrityError: If a required field is missing or mistyped.
        """

        difficulties = tuple(
            Difficulty.from_mapping(entry, context=f"{context}.difficulties[{index}]")
            for index, entry in enumerate(
                expect_mapping_array(data.get("difficulties"), key="difficulties", context=context),
            )
        )
        return GameMeta(
            styles=string_array(data.get("styles"), key="styles", context=context),
            difficulties=difficulties,
            flags=string_array(data.get("flags"), key="flags", context=context),
            lvl_max=expect_number(data.get("lvlMax"), key="lvlMax", context=context),
            uses_draw_groups=optional_bool(
                data.get("usesDrawGroups"),
                key="usesDrawGroups",
                context=context,
                default=False,
            ),
        )


@dataclass(frozen=True, slots=True)
class GameDefaults:
    """Default draw settings offered by a game."""

    style: str | None
    difficulties: tuple[str, ...]
    flags: tuple[str, ...]
    lower_lvl_bound: Number
    upper_lvl_bound: Number

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> GameDefaults:
        """Create ``GameDefaults`` from the ``defaults`` section of a document."""

        return GameDefaults(
            style=optional_string(data.get("style"), key="style", context=context),
            difficulties=string_array(data.get("difficulties"), key="difficulties", context=context),
            flags=string_array(data.get("flags"), key="flags", context=context),
            lower_lvl_bound=expect_number(data.get("lowerLvlBound"), key="lowerLvlBound", context=context),
            upper_lvl_bound=expect_number(data.get("upperLvlBound"), key="upperLvlBound", context=context),
        )


__all__ = ["Difficulty", "GameDefaults", "GameMeta"]
