# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by action catalog operations."""

from __future__ import annotations

from typing import Literal

LookupKind = Literal["action", "group"]


class CatalogError(RuntimeError):
    """Base class for every error raised by the action catalog."""


class CatalogNotFoundError(CatalogError, LookupError):
    """Raised when a query references an action or group absent from the catalog."""

    def __init__(self, key: str, *, kind: LookupKind = "action") -> None:
        """Create the error for the missing ``key`` of the given ``kind``."""

        super().__init__(f"unknown {kind} '{key}'")
        self.key = key
        self.kind = kind


class CatalogIntegrityError(CatalogError):
    """Raised when catalog data violates semantic invariants."""

    def __init__(self, message: str | None = None) -> None:
        """Create the integrity error with an optional ``message``."""

        super().__init__(message or "catalog integrity violation")


class CatalogValidationError(CatalogError):
    """Raised when a catalog document fails structural schema validation."""


NotFoundError = CatalogNotFoundError
IntegrityError = CatalogIntegrityError

__all__ = (
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogNotFoundError",
    "CatalogValidationError",
    "IntegrityError",
    "LookupKind",
    "NotFoundError",
)
