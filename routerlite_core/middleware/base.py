"""Middleware Base - Base classes for route middleware.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence

from routerlite_core.handlers import ensure_handler, invoke

logger = logging.getLogger(__name__)

# Value a middleware returns to stop the rest of its chain
STOP = False


class Middleware(ABC):
    """Abstract middleware base class.

    Middleware receives the same captured values as the controller.
    Returning ``False`` stops the chain; any other value continues.

    Pipeline:
    ┌────────────────────────────────────────────────────────────┐
    │                  Handler Chain                              │
    │                                                             │
    │  before[0] ──▶ before[1] ──▶ ... ──▶ controller             │
    │                                          │                  │
    │  ... ◀── after[1] ◀── after[0] ◀─────────┘ (in order)      │
    │                                                             │
    │  False from a before middleware skips everything after it  │
    └────────────────────────────────────────────────────────────┘
    """

    @abstractmethod
    def __call__(self, *args: str) -> Optional[Any]:
        """Process the captured values.

        Args:
            args: Values captured from the path, in token order

        Returns:
            False to stop the chain, anything else to continue
        """
        pass


class MiddlewareChain:
    """Chain of middleware for sequential execution."""

    def __init__(self, middleware: Optional[Iterable[Any]] = None):
        self._middleware: List[Any] = [ensure_handler(mw) for mw in middleware or ()]

    def add(self, middleware: Any) -> "MiddlewareChain":
        """Add middleware to chain."""
        self._middleware.append(ensure_handler(middleware))
        return self

    def remove(self, middleware: Any) -> bool:
        """Remove middleware from chain."""
        try:
            self._middleware.remove(middleware)
            return True
        except ValueError:
            return False

    def run(self, args: Sequence[str]) -> bool:
        """Run every middleware in order (see ``run_middleware``)."""
        return run_middleware(self._middleware, args)

    def __iter__(self):
        return iter(self._middleware)

    def __len__(self) -> int:
        return len(self._middleware)


def run_middleware(middleware: Iterable[Any], args: Sequence[str]) -> bool:
    """Call each middleware with args until one returns False.

    Exceptions raised by middleware propagate to the caller.

    Returns:
        False if a middleware stopped the chain, True otherwise
    """
    for mw in middleware:
        if invoke(mw, args) is STOP:
            logger.debug(f"Middleware {_name(mw)} stopped the chain")
            return False
    return True


def _name(obj: Any) -> str:
    """Readable name for a handler."""
    return getattr(obj, "__qualname__", None) or repr(obj)


__all__ = [
    "STOP",
    "Middleware",
    "MiddlewareChain",
    "run_middleware",
]
