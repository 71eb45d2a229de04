"""Handlers - Resolution and invocation of route handlers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import importlib
import logging
from functools import lru_cache
from typing import Any, Callable, Sequence

logger = logging.getLogger(__name__)


def ensure_handler(handler: Any) -> Any:
    """Check that handler has a supported shape.

    Supported handlers:
    - Any callable
    - Import strings: "package.module:function" or "package.module:Class.method"
    - Pairs of (target, "attribute"), resolved with getattr at call time

    Raises:
        TypeError: If handler is none of the above
    """
    if callable(handler):
        return handler

    if isinstance(handler, str):
        module_name, _, attr_path = handler.partition(":")
        if module_name and attr_path:
            return handler
        raise TypeError(f"Handler string must look like 'module:attribute', got {handler!r}")

    if (
        isinstance(handler, tuple)
        and len(handler) == 2
        and isinstance(handler[1], str)
    ):
        return handler

    raise TypeError(f"Unsupported handler: {handler!r}")


@lru_cache(maxsize=256)
def import_handler(path: str) -> Callable[..., Any]:
    """Import the callable named by a "module:attribute" string."""
    module_name, _, attr_path = path.partition(":")
    target: Any = importlib.import_module(module_name)

    for attr in attr_path.split("."):
        target = getattr(target, attr)

    if not callable(target):
        raise TypeError(f"{path!r} does not name a callable")

    logger.debug(f"Imported handler {path}")
    return target


def resolve_handler(handler: Any) -> Callable[..., Any]:
    """Turn a registered handler into a callable."""
    if isinstance(handler, str):
        return import_handler(handler)

    if isinstance(handler, tuple):
        target, attr = handler
        if isinstance(target, str):
            target = import_handler(target) if ":" in target else importlib.import_module(target)
        return getattr(target, attr)

    return handler


def invoke(handler: Any, args: Sequence[str]) -> Any:
    """Call handler with args as positional arguments."""
    return resolve_handler(handler)(*args)


__all__ = [
    "ensure_handler",
    "import_handler",
    "invoke",
    "resolve_handler",
]
