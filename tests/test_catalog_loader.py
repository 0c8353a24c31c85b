# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for loading catalog documents from disk and package data."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from crafting_catalog import (
    ActionCatalog,
    ActionCatalogLoader,
    CatalogIntegrityError,
    CatalogSettings,
    CatalogValidationError,
    load_catalog,
    load_default_catalog,
)
from crafting_catalog.settings import CATALOG_PATH_ENV, STRICT_ENV

WriteCatalog = Callable[[dict[str, Any]], Path]


def test_bundled_catalog_loads(catalog: ActionCatalog) -> None:
    """The bundled document should produce the full catalog."""
    assert len(catalog.list_classes()) == 8
    assert len(catalog.list_actions()) == 27
    assert len(catalog.list_groups()) == 5
    assert len(catalog.checksum) == 64


def test_checksum_ignores_formatting(
    catalog: ActionCatalog,
    catalog_document: dict[str, Any],
    tmp_path: Path,
) -> None:
    """Re-serialised documents with identical content share a checksum."""
    path = tmp_path / "reformatted.json"
    path.write_text(json.dumps(catalog_document, indent=8), encoding="utf-8")
    reloaded = load_catalog(CatalogSettings(catalog_path=path))
    assert reloaded.checksum == catalog.checksum
    assert reloaded == catalog


def test_checksum_tracks_content(
    catalog: ActionCatalog,
    catalog_document: dict[str, Any],
    write_catalog: WriteCatalog,
) -> None:
    """Renaming an action should change the checksum."""
    catalog_document["actions"][0]["name"] = "Basic Synthesis"
    changed = load_catalog(CatalogSettings(catalog_path=write_catalog(catalog_document)))
    assert changed.checksum != catalog.checksum
    assert changed.get_version() == catalog.get_version()


def test_dangling_reference_in_document(
    catalog_document: dict[str, Any],
    write_catalog: WriteCatalog,
) -> None:
    """A typo in a group member should abort loading with an integrity error."""
    catalog_document["groups"][1]["actions"].append("basicTuch")
    path = write_catalog(catalog_document)
    with pytest.raises(CatalogIntegrityError, match="'Quality' references unknown actions: basicTuch"):
        load_catalog(CatalogSettings(catalog_path=path))


def test_duplicate_short_name_in_document(
    catalog_document: dict[str, Any],
    write_catalog: WriteCatalog,
) -> None:
    """Duplicated short names pass the schema but fail the integrity checks."""
    catalog_document["actions"].append({"shortName": "innovation", "name": "Innovation (copy)"})
    with pytest.raises(CatalogIntegrityError, match="Duplicate action shortName 'innovation'"):
        load_catalog(CatalogSettings(catalog_path=write_catalog(catalog_document)))


@pytest.mark.parametrize(
    ("mutate", "fragment"),
    [
        (lambda doc: doc.pop("groups"), "'groups' is a required property"),
        (lambda doc: doc.update(version=""), "$.version"),
        (lambda doc: doc["actions"][0].pop("name"), "'name' is a required property"),
        (lambda doc: doc["actions"][0].update(icon="x.png"), "Additional properties"),
        (lambda doc: doc.update(schemaVersion="2.0.0"), "$.schemaVersion"),
        (lambda doc: doc["groups"][0]["actions"].append(7), "$.groups[0].actions[8]"),
    ],
)
def test_schema_violations(
    catalog_document: dict[str, Any],
    write_catalog: WriteCatalog,
    mutate: Any,
    fragment: str,
) -> None:
    """Structurally invalid documents should raise validation errors."""
    mutate(catalog_document)
    with pytest.raises(CatalogValidationError) as excinfo:
        load_catalog(CatalogSettings(catalog_path=write_catalog(catalog_document)))
    assert fragment in str(excinfo.value)


def test_invalid_json(tmp_path: Path) -> None:
    """Unparseable documents should raise validation errors naming the file."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogValidationError, match="failed to parse catalog JSON"):
        load_catalog(CatalogSettings(catalog_path=path))


def test_missing_document(tmp_path: Path) -> None:
    """A configured path that does not exist should surface FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_catalog(CatalogSettings(catalog_path=tmp_path / "absent.json"))


def test_custom_schema(tmp_path: Path, catalog_document: dict[str, Any], write_catalog: WriteCatalog) -> None:
    """A schema override should be used instead of the bundled schema."""
    schema_path = tmp_path / "strict.schema.json"
    schema_path.write_text(
        json.dumps(
            {
                "$schema": "https://json-schema.org/draft/2020-12/schema",
                "type": "object",
                "properties": {"version": {"const": "9.9"}},
            },
        ),
        encoding="utf-8",
    )
    loader = ActionCatalogLoader(
        settings=CatalogSettings(catalog_path=write_catalog(catalog_document), schema_path=schema_path),
    )
    with pytest.raises(CatalogValidationError, match=r"\$\.version"):
        loader.load()


@pytest.mark.parametrize(
    ("mutate", "message"),
    [
        (lambda doc: doc.pop("actions"), "expected 'actions' to be an array"),
        (lambda doc: doc["actions"][0].pop("name"), "expected 'name' to be a string"),
        (lambda doc: doc["groups"][0].update(name="  "), "expected 'name' to be non-empty"),
        (lambda doc: doc.update(classes="Alchemist"), "expected 'classes' to be an array of strings"),
    ],
)
def test_structural_errors_behind_permissive_schema(
    tmp_path: Path,
    catalog_document: dict[str, Any],
    write_catalog: WriteCatalog,
    mutate: Any,
    message: str,
) -> None:
    """Structural defects the schema lets through are still validation errors."""
    schema_path = tmp_path / "permissive.schema.json"
    schema_path.write_text(json.dumps({"type": "object"}), encoding="utf-8")
    mutate(catalog_document)
    settings = CatalogSettings(catalog_path=write_catalog(catalog_document), schema_path=schema_path)
    with pytest.raises(CatalogValidationError, match=message):
        load_catalog(settings)


def test_build_from_parsed_document(catalog_document: dict[str, Any]) -> None:
    """Loaders should accept already-parsed documents."""
    catalog_document["groups"] = [{"name": "Touches", "actions": ["basicTouch", "hastyTouch"]}]
    catalog = ActionCatalogLoader().build(catalog_document, context="inline")
    assert [action.name for action in catalog.resolve_group_actions("Touches")] == ["Basic Touch", "Hasty Touch"]
    assert len(catalog.ungrouped_actions()) == 25


def test_settings_from_env(tmp_path: Path) -> None:
    """Environment variables should populate settings."""
    settings = CatalogSettings.from_env(
        {CATALOG_PATH_ENV: str(tmp_path / "c.json"), STRICT_ENV: "Yes"},
    )
    assert settings.catalog_path == tmp_path / "c.json"
    assert settings.schema_path is None
    assert settings.strict_membership is True
    assert CatalogSettings.from_env({}) == CatalogSettings()


def test_strict_membership_from_settings(catalog_document: dict[str, Any], write_catalog: WriteCatalog) -> None:
    """Strict settings should reject actions listed in more than one group."""
    catalog_document["groups"][2]["actions"].append("innovation")
    path = write_catalog(catalog_document)
    lenient = load_catalog(CatalogSettings(catalog_path=path))
    assert lenient.group_of("innovation") == "CP"
    with pytest.raises(CatalogIntegrityError, match="'innovation' is listed in both 'CP' and 'Buffs'"):
        load_catalog(CatalogSettings(catalog_path=path, strict_membership=True))


def test_default_catalog_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """The default catalog should load once until the cache is cleared."""
    load_count = 0
    original_load = ActionCatalogLoader.load

    def _tracking_load(self: ActionCatalogLoader) -> ActionCatalog:
        nonlocal load_count
        load_count += 1
        return original_load(self)

    monkeypatch.setattr(ActionCatalogLoader, "load", _tracking_load)

    first = load_default_catalog()
    assert load_default_catalog() is first
    assert load_count == 1


def test_default_catalog_honours_environment(
    monkeypatch: pytest.MonkeyPatch,
    catalog_document: dict[str, Any],
    write_catalog: WriteCatalog,
) -> None:
    """The default catalog should read the document named by the environment."""
    catalog_document["version"] = "0.2-test"
    monkeypatch.setenv(CATALOG_PATH_ENV, str(write_catalog(catalog_document)))
    assert load_default_catalog().get_version() == "0.2-test"
