"""Route Table - Insertion ordered route storage.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from routerlite_core.routing.matcher import TemplateCompiler
from routerlite_core.routing.route import Route

logger = logging.getLogger(__name__)


class RouteTable:
    """Routes keyed by normalized template.

    Registering a method on a template that is already present merges
    it into the existing route, which keeps its position. Table order is
    the order in which templates were first registered, and that order
    decides precedence when several routes accept the same path.
    """

    def __init__(self, compiler: Optional[TemplateCompiler] = None):
        self._compiler = compiler or TemplateCompiler()
        self._routes: Dict[str, Route] = {}

    def register(
        self,
        method: str,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> Route:
        """Register a handler chain for method on pattern.

        Args:
            method: HTTP method
            pattern: Route template
            controller: Handler invoked with the captured values
            before: Middleware run before the controller
            after: Middleware run after the controller

        Returns:
            The route now stored for the template
        """
        compiled = self._compiler.compile(pattern)
        existing = self._routes.get(compiled.template)

        if existing is not None:
            route = existing.with_pattern(compiled)
        else:
            route = Route(pattern=compiled)

        route = route.with_handler(method, controller, before, after)
        self._routes[compiled.template] = route

        logger.debug(
            f"Registered {method.upper()} {compiled.template} "
            f"({'merged' if existing is not None else 'new'})"
        )
        return route

    def get(self, template: str) -> Optional[Route]:
        """Get route by template (normalized before lookup)."""
        return self._routes.get(self._compiler.compile(template).template)

    def match(self, path: str) -> Iterator[Route]:
        """Yield routes whose matcher accepts path, in table order."""
        for route in self._routes.values():
            if route.matches(path):
                yield route

    def methods_for_path(self, path: str) -> List[str]:
        """Union of methods over all routes matching path (path-only check)."""
        allowed: Dict[str, None] = {}
        for route in self.match(path):
            for method in route.allowed_methods:
                allowed[method] = None
        return list(allowed)

    def routes(self) -> List[Route]:
        """Get all routes in table order."""
        return list(self._routes.values())

    def clear(self) -> None:
        """Remove all routes."""
        self._routes.clear()

    def __contains__(self, template: str) -> bool:
        return self.get(template) is not None

    def __iter__(self) -> Iterator[Route]:
        return iter(list(self._routes.values()))

    def __len__(self) -> int:
        return len(self._routes)


__all__ = [
    "RouteTable",
]
