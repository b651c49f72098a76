# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Semantic consistency checks run over structurally valid catalog documents.

Every check inspects a :class:`~chart_catalog.model_game.GameData` record and
yields human-readable error strings. Checks never raise for content problems
and never stop at the first failure: :func:`check_consistency` runs all of them
and concatenates their output in a fixed order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from .model_game import GameData
from .model_song import Chart, Song
from .types import BASE_LOCALE, JSONValue


@dataclass(frozen=True, slots=True)
class ConsistencyOptions:
    """Inputs shared by every consistency check."""

    jackets_dir: Path
    base_locale: str = BASE_LOCALE
    enforce_default_flags: bool = False


ConsistencyCheck = Callable[[GameData, ConsistencyOptions], Iterator[str]]


def check_level_max(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Flag games whose maximum level is below one."""

    if game.meta.lvl_max < 1:
        yield "max level is below 1"


def check_default_style(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Flag a default style that is not one of the declared styles."""

    style = game.defaults.style
    if style and style not in game.meta.styles:
        yield "default style is not listed in meta"


def check_default_difficulties(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Flag default difficulties that are not declared difficulty keys."""

    known = set(game.meta.difficulty_keys)
    if any(key not in known for key in game.defaults.difficulties):
        yield "some default difficulties are missing from meta"


def check_default_flags(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Flag default flags that are not declared flags.

    Off unless ``enforce_default_flags`` is set: some catalogs enable hidden
    flags by default (for example "plus" charts) that are intentionally not
    listed in ``meta.flags``.
    """

    if not options.enforce_default_flags:
        return
    known = set(game.meta.flags)
    if any(flag not in known for flag in game.defaults.flags):
        yield "some default flags are missing from meta"


def check_level_bounds(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Flag reversed default level bounds and bounds above the maximum level."""

    lower = game.defaults.lower_lvl_bound
    upper = game.defaults.upper_lvl_bound
    if lower > upper:
        yield "default level bounds are reversed"
    if lower > game.meta.lvl_max or upper > game.meta.lvl_max:
        yield "default level bounds are beyond max level"


def check_translations(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Flag keys lacking a translation in the base locale or any other locale.

    Only runs for games that ship at least one locale besides the base one.
    Difficulty keys additionally need an abbreviated translation.
    """

    base = options.base_locale
    difficulty_keys = set(game.meta.difficulty_keys)
    base_strings = game.translations(base)
    base_abbreviations = game.abbreviations(base)
    for locale in game.locales:
        if locale == base:
            continue
        strings = game.translations(locale)
        abbreviations = game.abbreviations(locale)
        for key in game.meta.translation_keys:
            if not (_translated(base_strings, key) and _translated(strings, key)):
                yield f"missing translation for {key} ({locale})"
            if key in difficulty_keys and not (
                _translated(base_abbreviations, key) and _translated(abbreviations, key)
            ):
                yield f"missing abbreviated translation for {key} ({locale})"


def check_songs(game: GameData, options: ConsistencyOptions) -> Iterator[str]:
    """Check jackets and charts of every song in document order."""

    styles = set(game.meta.styles)
    difficulties = set(game.meta.difficulty_keys)
    for song in game.songs:
        if song.jacket and not _jacket_path(options.jackets_dir, song.jacket).exists():
            yield f"missing jacket image {song.jacket}"
        for chart in song.charts:
            if chart.style not in styles:
                yield f'unrecognized style "{chart.style}" used by {song.name}'
            if chart.diff_class not in difficulties:
                yield f'unrecognized diffClass "{chart.diff_class}" used by {song.name}'
            yield from _check_chart_level(game, song, chart)


def _check_chart_level(game: GameData, song: Song, chart: Chart) -> Iterator[str]:
    lvl_max = game.meta.lvl_max
    if game.meta.uses_draw_groups:
        if not chart.draw_group:
            yield f"{song.name} is missing a draw group"
        elif chart.draw_group > lvl_max:
            yield f"{song.name} has draw group above max"
    elif chart.lvl > lvl_max:
        yield f"{song.name} has chart above level max"


def _jacket_path(jackets_dir: Path, jacket: str) -> Path:
    """Return ``jacket`` joined under ``jackets_dir``, even when it starts with a separator."""

    return jackets_dir / jacket.lstrip("/\\")


def _translated(strings: Mapping[str, JSONValue], key: str) -> bool:
    return bool(strings.get(key))


CONSISTENCY_CHECKS: tuple[ConsistencyCheck, ...] = (
    check_level_max,
    check_default_style,
    check_default_difficulties,
    check_level_bounds,
    check_default_flags,
    check_translations,
    check_songs,
)


def check_consistency(game: GameData, options: ConsistencyOptions) -> tuple[str, ...]:
    """Run every consistency check against ``game``.

    Args:
        game: Typed catalog document.
        options: Jacket directory, base locale and optional strictness switches.

    Returns:
        tuple[str, ...]: Errors in check order, then document order; empty when consistent.
    """

    errors: list[str] = []
    for check in CONSISTENCY_CHECKS:
        errors.extend(check(game, options))
    return tuple(errors)


__all__ = [
    "CONSISTENCY_CHECKS",
    "ConsistencyCheck",
    "ConsistencyOptions",
    "check_consistency",
    "check_default_difficulties",
    "check_default_flags",
    "check_default_style",
    "check_level_bounds",
    "check_level_max",
    "check_songs",
    "check_translations",
]
