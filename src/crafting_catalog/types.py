# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the action catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

ClassName: TypeAlias = str
CatalogVersion: TypeAlias = str

CATALOG_SCHEMA_VERSION: Final[str] = "1.0.0"

__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "CatalogVersion",
    "ClassName",
    "JSONPrimitive",
    "JSONValue",
]
