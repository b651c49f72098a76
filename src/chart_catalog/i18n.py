# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translation lookups for the display strings shipped with each catalog."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .model_game import GameData
from .types import ABBREVIATION_KEY, BASE_LOCALE, META_NAMESPACE, JSONValue

Translate = Callable[[str], str]


def meta_string(translate: Translate, key: str) -> str:
    """Return the display string of a style, difficulty or flag ``key``."""

    return translate(f"{META_NAMESPACE}.{key}")


def diff_class_abbr(translate: Translate, diff_class: str) -> str:
    """Return the abbreviated display string of ``diff_class``."""

    return translate(f"{META_NAMESPACE}.{ABBREVIATION_KEY}.{diff_class}")


def diff_abbr(game: GameData, diff_class: str, *, base_locale: str = BASE_LOCALE) -> str | None:
    """Return the base-locale abbreviation of ``diff_class`` straight from ``game``."""

    value = game.abbreviations(base_locale).get(diff_class)
    return value if isinstance(value, str) else None


def lookup(strings: Mapping[str, JSONValue], path: str) -> str | None:
    """Resolve a dotted ``path`` inside nested translation ``strings``.

    Returns:
        str | None: The string found at ``path``; ``None`` when the path is
        missing or leads to a nested dictionary.
    """

    node: JSONValue = strings
    for part in path.split("."):
        if not isinstance(node, Mapping):
            return None
        node = node.get(part)
    return node if isinstance(node, str) else None


@dataclass(frozen=True, slots=True)
class Translator:
    """Resolve ``meta.*`` keys against a game's translations.

    Lookups try ``locale`` first, then the base locale. Unknown keys resolve to
    themselves so missing strings stay visible instead of disappearing.
    """

    game: GameData
    locale: str = BASE_LOCALE
    base_locale: str = BASE_LOCALE

    def __call__(self, key: str) -> str:
        namespace, _, path = key.partition(".")
        if namespace != META_NAMESPACE or not path:
            return key
        for locale in dict.fromkeys((self.locale, self.base_locale)):
            found = lookup(self.game.translations(locale), path)
            if found:
                return found
        return key


__all__ = ["Translate", "Translator", "diff_abbr", "diff_class_abbr", "lookup", "meta_string"]
