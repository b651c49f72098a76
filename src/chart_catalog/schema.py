# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog documents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from .errors import CatalogValidationError
from .io import load_schema
from .types import JSONValue


def format_schema_error(error: ValidationError) -> str:
    """Return the one-line rendering of a jsonschema ``error``.

    Args:
        error: Validation error produced by a jsonschema validator.

    Returns:
        str: ``"<json path>: <message>"`` where the path locates the offending value.
    """

    return f"{error.json_path}: {error.message}"


def flatten_errors(errors: Iterable[ValidationError]) -> Iterator[ValidationError]:
    """Yield ``errors`` followed by the sub-errors recorded in their ``context``.

    ``anyOf``/``oneOf`` failures only report a summary at their own level; the
    branch errors explaining why each alternative was rejected live in
    ``error.context`` and are yielded depth-first after their parent.
    """

    for error in errors:
        yield error
        if error.context:
            yield from flatten_errors(error.context)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the catalog document schema and its compiled validator."""

    schema_path: Path
    schema: Mapping[str, JSONValue]
    validator: Validator

    @classmethod
    def load(cls, schema_path: Path) -> SchemaRepository:
        """Load and compile the schema stored at ``schema_path``.

        The validator class follows the schema's ``$schema`` declaration and
        falls back to draft 2020-12.

        Args:
            schema_path: Filesystem path to the catalog schema.

        Returns:
            SchemaRepository: Repository bound to the compiled validator.

        Raises:
            FileNotFoundError: If the schema file does not exist.
            CatalogIntegrityError: If the schema is not a JSON object.
            jsonschema.exceptions.SchemaError: If the schema itself is invalid.
        """

        schema = load_schema(schema_path)
        validator_cls = validator_for(schema, default=Draft202012Validator)
        validator_cls.check_schema(schema)
        return cls(schema_path=schema_path, schema=schema, validator=validator_cls(schema))

    def iter_errors(self, document: JSONValue) -> Iterator[ValidationError]:
        """Yield every structural error of ``document`` including nested branch errors."""

        return flatten_errors(self.validator.iter_errors(document))

    def structural_errors(self, document: JSONValue) -> tuple[str, ...]:
        """Return the rendered structural errors of ``document`` in report order.

        Args:
            document: Parsed catalog document.

        Returns:
            tuple[str, ...]: One entry per schema violation; empty when the document conforms.
        """

        return tuple(format_schema_error(error) for error in self.iter_errors(document))

    def validate(self, document: JSONValue, *, source: Path | str = "<document>") -> None:
        """Validate ``document`` and raise on the first structural error.

        Args:
            document: Parsed catalog document.
            source: Path or label used to prefix the error message.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        try:
            self.validator.validate(document)
        except ValidationError as exc:
            raise CatalogValidationError(f"{source}: {format_schema_error(exc)}") from exc


__all__ = ["SchemaRepository", "flatten_errors", "format_schema_error"]
