# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for catalog validation runs."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .types import BASE_LOCALE

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "chart-catalog"

BANNER_TEMPLATE: Final[str] = '''"""
This file was automatically generated by chart-catalog. DO NOT MODIFY BY HAND.
Instead, modify `{schema_name}` and run `chart-catalog validate` to regenerate the {type_name} types
here as well as checking that the data files match.
"""'''


class CatalogConfig(BaseModel):
    """Locations and switches for a validation run.

    Relative paths are interpreted against ``project_root`` by :meth:`resolved`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_root: Path = Field(default_factory=Path.cwd)
    data_dir: Path = Path("src/songs")
    schema_path: Path = Path("songs.schema.json")
    jackets_dir: Path = Path("src/assets/jackets")
    bindings_path: Path = Path("src/models/song_data.py")
    type_name: str = Field(default="SongData", min_length=1)
    base_locale: str = Field(default=BASE_LOCALE, min_length=1)
    enforce_default_flags: bool = False

    def resolved(self) -> CatalogConfig:
        """Return a copy whose paths are absolute, anchored at ``project_root``."""

        root = self.project_root.expanduser().resolve()

        def _anchor(path: Path) -> Path:
            path = path.expanduser()
            return path if path.is_absolute() else root / path

        return self.model_copy(
            update={
                "project_root": root,
                "data_dir": _anchor(self.data_dir),
                "schema_path": _anchor(self.schema_path),
                "jackets_dir": _anchor(self.jackets_dir),
                "bindings_path": _anchor(self.bindings_path),
            },
        )

    def banner(self) -> str:
        """Return the banner prepended to generated bindings."""

        return BANNER_TEMPLATE.format(schema_name=self.schema_path.name, type_name=self.type_name)


def read_pyproject_section(project_root: Path) -> Mapping[str, Any]:
    """Return the ``[tool.chart-catalog]`` table of ``pyproject.toml`` under ``project_root``.

    Keys are normalised from ``kebab-case`` to ``snake_case``.

    Args:
        project_root: Directory expected to hold ``pyproject.toml``.

    Returns:
        Mapping[str, Any]: Section contents, empty when the file or table is absent.

    Raises:
        ConfigError: If the file cannot be parsed or the section is not a table.
    """

    path = project_root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML ({exc})") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION_KEY}] must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def load_config(
    project_root: Path,
    overrides: Mapping[str, Any] | None = None,
) -> CatalogConfig:
    """Build the effective configuration for ``project_root``.

    Precedence, lowest first: built-in defaults, ``[tool.chart-catalog]`` in
    ``pyproject.toml``, then ``overrides`` (entries set to ``None`` are ignored).

    Args:
        project_root: Directory anchoring relative paths.
        overrides: Values supplied by the caller, typically CLI options.

    Returns:
        CatalogConfig: Configuration with absolute paths.

    Raises:
        ConfigError: If any layer holds unknown keys or invalid values.
    """

    payload: dict[str, Any] = dict(read_pyproject_section(project_root))
    if "project_root" in payload:
        raise ConfigError("project_root cannot be set from pyproject.toml")
    payload.update({key: value for key, value in (overrides or {}).items() if value is not None})
    payload["project_root"] = project_root
    try:
        config = CatalogConfig.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"invalid configuration: {problems}") from exc
    return config.resolved()


__all__ = [
    "BANNER_TEMPLATE",
    "CatalogConfig",
    "PYPROJECT_SECTION_KEY",
    "load_config",
    "read_pyproject_section",
]
