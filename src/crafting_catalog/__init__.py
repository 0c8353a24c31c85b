# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the crafting action catalog."""

from __future__ import annotations

from typing import Final

from .errors import (
    CatalogError,
    CatalogIntegrityError,
    CatalogNotFoundError,
    CatalogValidationError,
    IntegrityError,
    NotFoundError,
)
from .loader import ActionCatalogLoader, clear_catalog_cache, load_catalog, load_default_catalog
from .model_action import Action, ActionGroup
from .model_catalog import ActionCatalog
from .settings import CatalogSettings

__all__: Final[tuple[str, ...]] = (
    "Action",
    "ActionCatalog",
    "ActionCatalogLoader",
    "ActionGroup",
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogNotFoundError",
    "CatalogSettings",
    "CatalogValidationError",
    "IntegrityError",
    "NotFoundError",
    "clear_catalog_cache",
    "load_catalog",
    "load_default_catalog",
)
