# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model controlling where the action catalog is loaded from."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

CATALOG_PATH_ENV: Final[str] = "CRAFTING_CATALOG_PATH"
SCHEMA_PATH_ENV: Final[str] = "CRAFTING_CATALOG_SCHEMA"
STRICT_ENV: Final[str] = "CRAFTING_CATALOG_STRICT"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class CatalogSettings(BaseModel):
    """Settings for locating and validating the catalog document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    catalog_path: Path | None = None
    schema_path: Path | None = None
    strict_membership: bool = False

    @field_validator("catalog_path", "schema_path")
    @classmethod
    def _expand_path(cls, value: Path | None) -> Path | None:
        """Expand ``~`` so environment-provided paths behave like shell paths."""

        return value.expanduser() if value is not None else None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CatalogSettings:
        """Build settings from environment variables.

        Args:
            environ: Mapping consulted instead of :data:`os.environ` when provided.

        Returns:
            CatalogSettings: Settings populated from the recognised variables.
        """

        env = os.environ if environ is None else environ
        catalog_path = env.get(CATALOG_PATH_ENV, "").strip()
        schema_path = env.get(SCHEMA_PATH_ENV, "").strip()
        return cls(
            catalog_path=Path(catalog_path) if catalog_path else None,
            schema_path=Path(schema_path) if schema_path else None,
            strict_membership=env.get(STRICT_ENV, "").strip().lower() in _TRUTHY,
        )


__all__ = ["CATALOG_PATH_ENV", "SCHEMA_PATH_ENV", "STRICT_ENV", "CatalogSettings"]
