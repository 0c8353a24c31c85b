# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising catalog JSON structures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

from .errors import CatalogValidationError
from .types import JSONValue

_T = TypeVar("_T")


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as a non-empty ``str`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Value with surrounding whitespace preserved.

    Raises:
        CatalogValidationError: If ``value`` is not a string or is blank.
    """
    if not isinstance(value, str):
        raise CatalogValidationError(f"{context}: expected '{key}' to be a string")
    if not value.strip():
        raise CatalogValidationError(f"{context}: expected '{key}' to be non-empty")
    return value


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        CatalogValidationError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogValidationError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        result.append(expect_string(item, key=f"{key}[{index}]", context=context))
    return tuple(result)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        CatalogValidationError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogValidationError(f"{context}: expected '{key}' to be an object")
    return value


def expect_sequence(value: JSONValue | None, *, key: str, context: str) -> Sequence[JSONValue]:
    """Return ``value`` as a JSON array or raise an error.

    Args:
        value: Raw JSON value extracted from the catalog payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Sequence[JSONValue]: Array entries in document order.

    Raises:
        CatalogValidationError: If ``value`` is not an array.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogValidationError(f"{context}: expected '{key}' to be an array")
    return value


def find_duplicates(values: Iterable[_T]) -> tuple[_T, ...]:
    """Return values appearing more than once, ordered by their second occurrence.

    Args:
        values: Iterable of hashable values to inspect.

    Returns:
        tuple[_T, ...]: Each repeated value reported once.
    """
    seen: set[_T] = set()
    repeated: list[_T] = []
    for value in values:
        if value in seen:
            if value not in repeated:
                repeated.append(value)
            continue
        seen.add(value)
    return tuple(repeated)


__all__ = [
    "expect_mapping",
    "expect_sequence",
    "expect_string",
    "find_duplicates",
    "string_array",
]
