# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Validate rhythm-game chart catalogs and generate typing bindings from their schema."""

from __future__ import annotations

from typing import Final

from .bindings import generate, write_bindings
from .config import CatalogConfig, load_config
from .consistency import ConsistencyOptions, check_consistency
from .errors import CatalogIntegrityError, CatalogValidationError, ConfigError
from .i18n import Translator, diff_abbr, diff_class_abbr, meta_string
from .model_game import GameData
from .model_meta import Difficulty, GameDefaults, GameMeta
from .model_song import Chart, Song
from .schema import SchemaRepository
from .validator import CatalogValidator, DocumentReport, ValidationRun, validate_catalog

__all__: Final[tuple[str, ...]] = (
    "CatalogConfig",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "CatalogValidator",
    "Chart",
    "ConfigError",
    "ConsistencyOptions",
    "Difficulty",
    "DocumentReport",
    "GameData",
    "GameDefaults",
    "GameMeta",
    "SchemaRepository",
    "Song",
    "Translator",
    "ValidationRun",
    "check_consistency",
    "diff_abbr",
    "diff_class_abbr",
    "generate",
    "load_config",
    "meta_string",
    "validate_catalog",
    "write_bindings",
)
