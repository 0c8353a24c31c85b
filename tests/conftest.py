# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import copy
import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from crafting_catalog import ActionCatalog, clear_catalog_cache, load_catalog
from crafting_catalog.io import BUNDLED_CATALOG, read_bundled
from crafting_catalog.settings import CATALOG_PATH_ENV, SCHEMA_PATH_ENV, STRICT_ENV

WriteCatalog = Callable[[dict[str, Any]], Path]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep catalog environment variables and the default-catalog cache out of tests."""
    for name in (CATALOG_PATH_ENV, SCHEMA_PATH_ENV, STRICT_ENV):
        monkeypatch.delenv(name, raising=False)
    clear_catalog_cache()
    yield
    clear_catalog_cache()


@pytest.fixture
def catalog() -> ActionCatalog:
    """Return the catalog built from the bundled document."""
    return load_catalog()


@pytest.fixture
def catalog_document() -> dict[str, Any]:
    """Return a mutable copy of the bundled catalog document."""
    return copy.deepcopy(json.loads(read_bundled(BUNDLED_CATALOG).decode("utf-8")))


@pytest.fixture
def write_catalog(tmp_path: Path) -> WriteCatalog:
    """Return a helper writing catalog documents under ``tmp_path``."""

    def _write(payload: dict[str, Any]) -> Path:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write
