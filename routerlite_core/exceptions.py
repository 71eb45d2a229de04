"""Routing errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Iterable, Optional


class RoutingError(Exception):
    """Base class for routing outcomes raised to an outer boundary."""

    status = 500

    def __init__(self, message: str = "", path: str = "", method: str = ""):
        self.path = path
        self.method = method
        super().__init__(message or self.default_message())

    def default_message(self) -> str:
        return "Routing error"


class NotFoundError(RoutingError):
    """No route matched the path."""

    status = 404

    def default_message(self) -> str:
        return f"No route for {self.path}" if self.path else "Not Found"


class MethodNotAllowedError(RoutingError):
    """A route matched the path but not the method."""

    status = 405

    def __init__(
        self,
        message: str = "",
        path: str = "",
        method: str = "",
        allowed: Optional[Iterable[str]] = None,
    ):
        self.allowed = list(allowed or [])
        super().__init__(message, path=path, method=method)

    def default_message(self) -> str:
        return f"Method not allowed; allowed: {', '.join(self.allowed)}"


__all__ = [
    "RoutingError",
    "NotFoundError",
    "MethodNotAllowedError",
]
