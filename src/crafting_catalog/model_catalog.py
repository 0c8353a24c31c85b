# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate holding classes, actions and action groups."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .checksum import compute_catalog_checksum
from .errors import CatalogIntegrityError, CatalogNotFoundError
from .model_action import Action, ActionGroup
from .types import CATALOG_SCHEMA_VERSION, CatalogVersion, ClassName, JSONValue
from .utils import find_duplicates

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActionCatalog:
    """Immutable catalog of crafting classes, actions and action groups.

    Construction builds the ``short_name`` index and validates every group
    reference against it, so a catalog instance is always internally
    consistent. Instances are read-only and safe to share between threads.
    """

    classes: tuple[ClassName, ...]
    actions: tuple[Action, ...]
    groups: tuple[ActionGroup, ...]
    version: CatalogVersion
    strict_membership: bool = False
    checksum: str = field(init=False)
    _actions_by_name: Mapping[str, Action] = field(init=False, repr=False, compare=False)
    _groups_by_name: Mapping[str, ActionGroup] = field(init=False, repr=False, compare=False)
    _membership: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build lookup indexes and enforce catalog invariants."""

        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "actions", tuple(self.actions))
        object.__setattr__(self, "groups", tuple(self.groups))
        if not self.version.strip():
            raise CatalogIntegrityError("catalog version must be a non-empty string")
        for label, values in (
            ("class name", self.classes),
            ("action shortName", tuple(action.short_name for action in self.actions)),
            ("group name", tuple(group.name for group in self.groups)),
        ):
            duplicates = find_duplicates(values)
            if duplicates:
                raise CatalogIntegrityError(f"Duplicate {label} {', '.join(repr(item) for item in duplicates)}")

        index = {action.short_name: action for action in self.actions}
        object.__setattr__(self, "_actions_by_name", MappingProxyType(index))
        object.__setattr__(
            self,
            "_groups_by_name",
            MappingProxyType({group.name: group for group in self.groups}),
        )
        object.__setattr__(self, "_membership", MappingProxyType(self._validate_groups(index)))
        object.__setattr__(self, "checksum", self._compute_checksum())
        LOGGER.debug(
            "Action catalog %s ready: %d classes, %d actions, %d groups",
            self.version,
            len(self.classes),
            len(self.actions),
            len(self.groups),
        )

    def _validate_groups(self, index: Mapping[str, Action]) -> dict[str, str]:
        """Return the action-to-group membership map after checking every reference."""

        membership: dict[str, str] = {}
        for group in self.groups:
            missing = [short_name for short_name in group.actions if short_name not in index]
            if missing:
                raise CatalogIntegrityError(
                    f"Group '{group.name}' references unknown actions: {', '.join(missing)}",
                )
            for short_name in group.actions:
                owner = membership.get(short_name)
                if owner is None:
                    membership[short_name] = group.name
                    continue
                if owner == group.name:
                    message = f"Action '{short_name}' is listed more than once in '{group.name}'"
                else:
                    message = f"Action '{short_name}' is listed in both '{owner}' and '{group.name}'"
                if self.strict_membership:
                    raise CatalogIntegrityError(message)
                LOGGER.warning(message)
        return membership

    def _compute_checksum(self) -> str:
        payload = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":")).encode("utf-8")
        return compute_catalog_checksum((("catalog", payload),))

    def list_classes(self) -> tuple[ClassName, ...]:
        """Return craftable class names in display order."""

        return self.classes

    def list_actions(self) -> tuple[Action, ...]:
        """Return all active actions in declaration order."""

        return self.actions

    def get_action(self, short_name: str) -> Action:
        """Return the action registered under ``short_name``.

        Args:
            short_name: Stable machine identifier of the action.

        Returns:
            Action: Matching action record.

        Raises:
            CatalogNotFoundError: If no action uses ``short_name``.
        """

        try:
            return self._actions_by_name[short_name]
        except KeyError as exc:
            raise CatalogNotFoundError(short_name, kind="action") from exc

    def has_action(self, short_name: str) -> bool:
        """Return whether an action named ``short_name`` exists."""

        return short_name in self._actions_by_name

    def __contains__(self, short_name: object) -> bool:
        return short_name in self._actions_by_name

    def list_groups(self) -> tuple[ActionGroup, ...]:
        """Return action groups in declaration order."""

        return self.groups

    def get_group(self, name: str) -> ActionGroup:
        """Return the group called ``name``.

        Raises:
            CatalogNotFoundError: If no group is called ``name``.
        """

        try:
            return self._groups_by_name[name]
        except KeyError as exc:
            raise CatalogNotFoundError(name, kind="group") from exc

    def resolve_group_actions(self, group_name: str) -> tuple[Action, ...]:
        """Return the full action records of a group in the group's order.

        Args:
            group_name: Display name of the group.

        Returns:
            tuple[Action, ...]: Actions referenced by the group.

        Raises:
            CatalogNotFoundError: If the group is unknown.
            CatalogIntegrityError: If a referenced action cannot be resolved.
        """

        group = self.get_group(group_name)
        resolved: list[Action] = []
        for short_name in group.actions:
            try:
                resolved.append(self.get_action(short_name))
            except CatalogNotFoundError as exc:
                raise CatalogIntegrityError(
                    f"Group '{group.name}' references unknown action '{short_name}'",
                ) from exc
        return tuple(resolved)

    def group_of(self, short_name: str) -> str | None:
        """Return the name of the group containing ``short_name``, if any.

        Raises:
            CatalogNotFoundError: If ``short_name`` is not a known action.
        """

        self.get_action(short_name)
        return self._membership.get(short_name)

    def ungrouped_actions(self) -> tuple[Action, ...]:
        """Return actions not covered by any group, in declaration order."""

        return tuple(action for action in self.actions if action.short_name not in self._membership)

    def display_order(self) -> tuple[Action, ...]:
        """Return every action once: grouped actions first, then the remainder."""

        ordered: dict[str, Action] = {}
        for group in self.groups:
            for short_name in group.actions:
                ordered.setdefault(short_name, self._actions_by_name[short_name])
        for action in self.ungrouped_actions():
            ordered[action.short_name] = action
        return tuple(ordered.values())

    def get_version(self) -> CatalogVersion:
        """Return the catalog version tag."""

        return self.version

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible representation in catalog document form."""

        return {
            "schemaVersion": CATALOG_SCHEMA_VERSION,
            "version": self.version,
            "classes": list(self.classes),
            "actions": [action.to_dict() for action in self.actions],
            "groups": [group.to_dict() for group in self.groups],
        }


__all__ = ["ActionCatalog"]
