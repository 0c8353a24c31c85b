# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from importlib import resources
from pathlib import Path
from typing import Final, cast

from .errors import CatalogValidationError
from .types import JSONValue

DATA_PACKAGE: Final[str] = "crafting_catalog"
BUNDLED_CATALOG: Final[str] = "data/catalog.json"
BUNDLED_SCHEMA: Final[str] = "data/schema/catalog.schema.json"


def read_bytes(path: Path) -> bytes:
    """Return the raw bytes stored at ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    return path.read_bytes()


def read_bundled(name: str) -> bytes:
    """Return the raw bytes of a data file shipped inside the package."""

    return resources.files(DATA_PACKAGE).joinpath(name).read_bytes()


def parse_document(payload: bytes, *, context: str) -> JSONValue:
    """Decode ``payload`` as a JSON document and validate the result.

    Args:
        payload: UTF-8 encoded JSON text.
        context: Human-readable source description used in error messages.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        CatalogValidationError: If the payload is not valid UTF-8 JSON.
    """
    try:
        value = cast(JSONValue, json.loads(payload.decode("utf-8")))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CatalogValidationError(f"{context}: failed to parse catalog JSON") from exc
    return _ensure_json_value(value, context=context)


def parse_schema(payload: bytes, *, context: str) -> Mapping[str, JSONValue]:
    """Decode ``payload`` as a JSON schema and ensure it is a JSON object.

    Args:
        payload: UTF-8 encoded JSON schema text.
        context: Human-readable source description used in error messages.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        CatalogValidationError: If the schema cannot be parsed or is not a JSON object.
    """
    value = parse_document(payload, context=context)
    if not isinstance(value, Mapping):
        raise CatalogValidationError(f"{context}: expected a JSON object")
    return value


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogValidationError: If the schema cannot be parsed or is not a JSON object.
    """
    return parse_schema(read_bytes(path), context=str(path))


__all__ = [
    "BUNDLED_CATALOG",
    "BUNDLED_SCHEMA",
    "load_schema",
    "parse_document",
    "parse_schema",
    "read_bundled",
    "read_bytes",
]


def _ensure_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Ensure ``value`` is composed of JSON-compatible structures.

    Raises:
        CatalogValidationError: If ``value`` contains unsupported JSON constructs.
    """

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _ensure_json_value(item, context=f"{context}.{key}") for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_ensure_json_value(item, context=f"{context}[]") for item in value]
    raise CatalogValidationError(f"{context}: value is not valid JSON")
