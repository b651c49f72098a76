# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for catalog data directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .types import DOCUMENT_SUFFIX


@dataclass(slots=True)
class CatalogScanner:
    """Scan a data directory for catalog documents."""

    data_dir: Path

    def documents(self) -> tuple[Path, ...]:
        """Return catalog document paths sorted by file name.

        Only the top level of ``data_dir`` is scanned. Hidden files are skipped.

        Returns:
            tuple[Path, ...]: Sorted document paths; empty when ``data_dir`` does not exist.
        """
        if not self.data_dir.is_dir():
            return ()
        paths = [
            path
            for path in self.data_dir.iterdir()
            if path.is_file() and path.suffix == DOCUMENT_SUFFIX and not path.name.startswith(".")
        ]
        return tuple(sorted(paths, key=lambda path: path.name))


__all__ = ["CatalogScanner"]
