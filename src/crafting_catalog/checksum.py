# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for catalog contents."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence


def compute_catalog_checksum(documents: Sequence[tuple[str, bytes]]) -> str:
    """Calculate the catalog checksum for the provided documents.

    Args:
        documents: Pairs of document label and raw document bytes.

    Returns:
        str: Hex-encoded SHA-256 checksum covering the provided documents.
    """
    hasher = hashlib.sha256()
    for label, payload in documents:
        hasher.update(label.encode("utf-8"))
        hasher.update(b"\0")
        hasher.update(payload)
    return hasher.hexdigest()


__all__ = ["compute_catalog_checksum"]
