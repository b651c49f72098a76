# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Validate catalog documents structurally and semantically."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .config import CatalogConfig
from .consistency import ConsistencyOptions, check_consistency
from .errors import CatalogIntegrityError
from .io import load_document
from .model_game import GameData
from .scanner import CatalogScanner
from .schema import SchemaRepository
from .types import JSONValue
from .utils import expect_mapping

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DocumentReport:
    """Outcome of validating one catalog document.

    ``schema_errors`` and ``consistency_errors`` are never both populated:
    consistency checks only run for structurally valid documents.
    """

    name: str
    schema_errors: tuple[str, ...] = ()
    consistency_errors: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when the document has no errors of any kind."""

        return not (self.schema_errors or self.consistency_errors)

    @property
    def errors(self) -> tuple[str, ...]:
        """Return every error in report order."""

        return (*self.schema_errors, *self.consistency_errors)


@dataclass(frozen=True, slots=True)
class ValidationRun:
    """Per-document reports folded into an overall outcome."""

    reports: tuple[DocumentReport, ...] = ()
    ok: bool = True

    def add(self, report: DocumentReport) -> ValidationRun:
        """Return a new run extended with ``report``."""

        return ValidationRun(reports=(*self.reports, report), ok=self.ok and report.ok)

    @property
    def failed(self) -> tuple[DocumentReport, ...]:
        """Return the reports of documents with at least one error."""

        return tuple(report for report in self.reports if not report.ok)


def fold_reports(reports: Iterable[DocumentReport]) -> ValidationRun:
    """Fold ``reports`` into a :class:`ValidationRun`, preserving order."""

    run = ValidationRun()
    for report in reports:
        run = run.add(report)
    return run


@dataclass(slots=True)
class CatalogValidator:
    """Validate documents against a schema, then against the consistency rules."""

    schemas: SchemaRepository
    options: ConsistencyOptions = field(default_factory=lambda: ConsistencyOptions(jackets_dir=Path.cwd()))

    @classmethod
    def from_config(cls, config: CatalogConfig) -> CatalogValidator:
        """Build a validator from the schema and jacket locations in ``config``.

        Raises:
            FileNotFoundError: If the configured schema does not exist.
            CatalogIntegrityError: If the schema is not a JSON object.
        """

        return cls(
            schemas=SchemaRepository.load(config.schema_path),
            options=ConsistencyOptions(
                jackets_dir=config.jackets_dir,
                base_locale=config.base_locale,
                enforce_default_flags=config.enforce_default_flags,
            ),
        )

    def validate_document(
        self,
        document: JSONValue,
        *,
        name: str = "<document>",
        source: Path | None = None,
    ) -> DocumentReport:
        """Validate a parsed catalog document.

        Args:
            document: Parsed JSON payload.
            name: Label used for the report.
            source: Optional path the document was read from.

        Returns:
            DocumentReport: Schema errors when the document is structurally
            invalid, otherwise the consistency errors (possibly none).
        """

        schema_errors = self.schemas.structural_errors(document)
        if schema_errors:
            return DocumentReport(name=name, schema_errors=schema_errors)
        try:
            mapping = expect_mapping(document, key="<root>", context=name)
            game = GameData.from_mapping(mapping, source=source)
        except CatalogIntegrityError as exc:
            return DocumentReport(name=name, schema_errors=(str(exc),))
        return DocumentReport(name=name, consistency_errors=check_consistency(game, self.options))

    def validate_path(self, path: Path) -> DocumentReport:
        """Load and validate the document stored at ``path``.

        Unreadable or unparseable documents are reported, not raised.
        """

        try:
            document = load_document(path)
        except (CatalogIntegrityError, OSError) as exc:
            LOGGER.debug("could not load %s: %s", path, exc)
            return DocumentReport(name=path.name, schema_errors=(str(exc),))
        return self.validate_document(document, name=path.name, source=path)

    def validate_paths(self, paths: Iterable[Path]) -> ValidationRun:
        """Validate every document in ``paths`` in order, never stopping early."""

        return fold_reports(self._iter_reports(paths))

    def _iter_reports(self, paths: Iterable[Path]) -> Iterator[DocumentReport]:
        for path in paths:
            report = self.validate_path(path)
            LOGGER.debug("%s: %s", path.name, "ok" if report.ok else f"{len(report.errors)} error(s)")
            yield report


def validate_catalog(config: CatalogConfig) -> ValidationRun:
    """Validate every document in the configured data directory.

    Args:
        config: Resolved configuration.

    Returns:
        ValidationRun: Reports in directory order and the overall outcome.
    """

    paths = CatalogScanner(config.data_dir).documents()
    LOGGER.debug("found %d catalog document(s) in %s", len(paths), config.data_dir)
    return CatalogValidator.from_config(config).validate_paths(paths)


__all__ = [
    "CatalogValidator",
    "DocumentReport",
    "ValidationRun",
    "fold_reports",
    "validate_catalog",
]
