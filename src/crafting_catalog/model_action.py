# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Action and action group models for catalog entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .types import JSONValue
from .utils import expect_string, string_array


@dataclass(frozen=True, slots=True)
class Action:
    """Represent one performable crafting skill."""

    short_name: str
    name: str

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> Action:
        """Create an ``Action`` from JSON data.

        Args:
            data: Mapping containing ``shortName`` and ``name`` keys.
            context: Human-readable context used in error messages.

        Returns:
            Action: Frozen action definition.

        Raises:
            CatalogValidationError: If required action fields are missing or invalid.
        """

        return Action(
            short_name=expect_string(data.get("shortName"), key="shortName", context=context),
            name=expect_string(data.get("name"), key="name", context=context),
        )

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the action in catalog document form."""

        return {"shortName": self.short_name, "name": self.name}


@dataclass(frozen=True, slots=True)
class ActionGroup:
    """Named presentation bucket referencing actions by short name."""

    name: str
    actions: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", tuple(self.actions))

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> ActionGroup:
        """Create an ``ActionGroup`` from JSON data.

        Args:
            data: Mapping containing ``name`` and ``actions`` keys.
            context: Human-readable context used in error messages.

        Returns:
            ActionGroup: Frozen group definition preserving member order.

        Raises:
            CatalogValidationError: If required group fields are missing or invalid.
        """

        return ActionGroup(
            name=expect_string(data.get("name"), key="name", context=context),
            actions=string_array(data.get("actions"), key="actions", context=context),
        )

    def __contains__(self, short_name: object) -> bool:
        return short_name in self.actions

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the group in catalog document form."""

        return {"name": self.name, "actions": list(self.actions)}


__all__ = ["Action", "ActionGroup"]
