"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from urllib.parse import urlsplit


def extract_path(uri: str) -> str:
    """Get the path component of a URI (``/`` when it has none)."""
    return urlsplit(uri).path or "/"


def normalize_base_path(base_path: str) -> str:
    """Normalize a base path prefix.

    Surrounding slashes are trimmed and a single leading one added back;
    the root collapses to the empty string.
    """
    base_path = "/" + base_path.strip("/")
    return "" if base_path == "/" else base_path


def strip_base_path(path: str, base_path: str) -> str:
    """Remove base_path from the front of path, if present."""
    if base_path and path.startswith(base_path):
        return path[len(base_path):] or "/"
    return path


def normalize_path(path: str) -> str:
    """Remove trailing slashes (except for root)."""
    if path != "/" and path.endswith("/"):
        path = path.rstrip("/") or "/"
    return path


__all__ = [
    "extract_path",
    "normalize_base_path",
    "normalize_path",
    "strip_base_path",
]
