# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that materialises the action catalog."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache

from .errors import CatalogIntegrityError, CatalogValidationError
from .io import BUNDLED_CATALOG, parse_document, read_bundled, read_bytes
from .model_action import Action, ActionGroup
from .model_catalog import ActionCatalog
from .schema import SchemaRepository
from .settings import CatalogSettings
from .types import JSONValue
from .utils import expect_mapping, expect_sequence, expect_string, string_array

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ActionCatalogLoader:
    """Loader that validates a catalog document and builds an :class:`ActionCatalog`."""

    settings: CatalogSettings = field(default_factory=CatalogSettings)
    _schemas: SchemaRepository = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Load the schema validator after dataclass setup."""

        self._schemas = SchemaRepository.load(schema_path=self.settings.schema_path)

    @property
    def source(self) -> str:
        """Return a description of the document this loader reads."""

        path = self.settings.catalog_path
        return str(path) if path is not None else BUNDLED_CATALOG

    def read_document(self) -> JSONValue:
        """Read and parse the configured catalog document.

        Raises:
            FileNotFoundError: If a configured catalog path does not exist.
            CatalogValidationError: If the document is not valid JSON.
        """

        path = self.settings.catalog_path
        payload = read_bundled(BUNDLED_CATALOG) if path is None else read_bytes(path)
        LOGGER.debug("Reading action catalog from %s (%d bytes)", self.source, len(payload))
        return parse_document(payload, context=self.source)

    def load(self) -> ActionCatalog:
        """Produce a validated catalog from the configured document.

        Returns:
            ActionCatalog: Catalog ready for read-only queries.

        Raises:
            CatalogValidationError: If the document fails schema validation.
            CatalogIntegrityError: If the document violates catalog invariants.
        """

        return self.build(self.read_document(), context=self.source)

    def build(self, document: JSONValue, *, context: str = "<document>") -> ActionCatalog:
        """Validate ``document`` and materialise it as a catalog.

        Args:
            document: Parsed catalog document.
            context: Human-readable source description used in error messages.

        Returns:
            ActionCatalog: Catalog built from ``document``.

        Raises:
            CatalogValidationError: If ``document`` is structurally invalid.
            CatalogIntegrityError: If ``document`` violates catalog invariants.
        """

        self._schemas.validate(document, context=context)
        mapping = expect_mapping(document, key="<root>", context=context)
        catalog = ActionCatalog(
            classes=string_array(mapping.get("classes"), key="classes", context=context),
            actions=tuple(
                Action.from_mapping(
                    expect_mapping(entry, key=f"actions[{index}]", context=context),
                    context=f"{context}.actions[{index}]",
                )
                for index, entry in enumerate(_entries(mapping, "actions", context=context))
            ),
            groups=tuple(
                ActionGroup.from_mapping(
                    expect_mapping(entry, key=f"groups[{index}]", context=context),
                    context=f"{context}.groups[{index}]",
                )
                for index, entry in enumerate(_entries(mapping, "groups", context=context))
            ),
            version=expect_string(mapping.get("version"), key="version", context=context),
            strict_membership=self.settings.strict_membership,
        )
        LOGGER.debug("Loaded action catalog %s from %s (checksum %s)", catalog.version, context, catalog.checksum)
        return catalog


def _entries(mapping: Mapping[str, JSONValue], key: str, *, context: str) -> tuple[JSONValue, ...]:
    return tuple(expect_sequence(mapping.get(key), key=key, context=context))


def load_catalog(settings: CatalogSettings | None = None) -> ActionCatalog:
    """Load a catalog using ``settings`` (bundled data when omitted)."""

    return ActionCatalogLoader(settings=settings or CatalogSettings()).load()


@lru_cache(maxsize=1)
def load_default_catalog() -> ActionCatalog:
    """Return the process-wide catalog configured through the environment.

    The catalog is loaded once and shared by every caller until
    :func:`clear_catalog_cache` is invoked.

    Raises:
        CatalogValidationError: If the configured document is malformed.
        CatalogIntegrityError: If the configured document is inconsistent.
    """

    settings = CatalogSettings.from_env()
    try:
        return load_catalog(settings)
    except (CatalogValidationError, CatalogIntegrityError):
        LOGGER.error("Unable to load the action catalog from %s", settings.catalog_path or BUNDLED_CATALOG)
        raise


def clear_catalog_cache() -> None:
    """Forget the cached default catalog so the next access reloads it."""

    load_default_catalog.cache_clear()


__all__ = [
    "ActionCatalogLoader",
    "clear_catalog_cache",
    "load_catalog",
    "load_default_catalog",
]
