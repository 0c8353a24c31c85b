# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating catalog documents."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, cast, runtime_checkable

from .errors import CatalogValidationError
from .io import BUNDLED_SCHEMA, load_schema, parse_schema, read_bundled
from .types import JSONValue


class SchemaValidationError(Protocol):
    """Represent schema validation errors surfaced by jsonschema."""

    @property
    def message(self) -> str:
        """Return the descriptive validation error message."""

    @property
    def json_path(self) -> str:
        """Return the JSON path of the offending instance."""


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def iter_errors(self, instance: JSONValue) -> Iterable[SchemaValidationError]:
        """Iterate over validation errors for ``instance``."""


SchemaValidatorFactory = Callable[[JSONValue], SchemaValidator]


jsonschema_module = importlib.import_module("jsonschema")
Draft202012Validator = cast(SchemaValidatorFactory, jsonschema_module.Draft202012Validator)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the JSON schema validator used for catalog documents."""

    source: str
    catalog_validator: SchemaValidator

    @classmethod
    def load(cls, *, schema_path: Path | None = None) -> SchemaRepository:
        """Load the catalog schema validator.

        Args:
            schema_path: Optional schema file overriding the bundled schema.

        Returns:
            SchemaRepository: Repository configured with the catalog validator.
        """
        if schema_path is None:
            schema = parse_schema(read_bundled(BUNDLED_SCHEMA), context=BUNDLED_SCHEMA)
            source = BUNDLED_SCHEMA
        else:
            schema = load_schema(schema_path)
            source = str(schema_path)
        return cls(source=source, catalog_validator=Draft202012Validator(schema))

    def validate(self, document: JSONValue, *, context: str) -> None:
        """Validate ``document`` against the catalog schema.

        Every violation is reported, ordered by JSON path so messages are stable.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        errors = sorted(self.catalog_validator.iter_errors(document), key=lambda error: error.json_path)
        if not errors:
            return
        details = "; ".join(f"{error.json_path}: {error.message}" for error in errors)
        raise CatalogValidationError(f"{context}: {details}")


__all__ = ["SchemaRepository", "SchemaValidator"]
