"""Router - Request resolution and dispatch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from routerlite_core.exceptions import MethodNotAllowedError, NotFoundError
from routerlite_core.handlers import ensure_handler, invoke
from routerlite_core.http.response import ResponseSink
from routerlite_core.middleware.base import run_middleware
from routerlite_core.routing.matcher import TemplateCompiler
from routerlite_core.routing.route import HandlerChain, Route
from routerlite_core.routing.table import RouteTable
from routerlite_core.utils.config import RouterConfig
from routerlite_core.utils.helpers import (
    extract_path,
    normalize_base_path,
    normalize_path,
    strip_base_path,
)

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Result of resolving a request."""

    HANDLED = "handled"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"


@dataclass(frozen=True)
class Resolution:
    """What happened to a request.

    ``allowed`` holds the methods of every route seen to accept the
    path. For ``METHOD_NOT_ALLOWED`` it is the value of the Allow header.
    """

    outcome: Outcome
    method: str
    path: str
    route: Optional[Route] = None
    handled_method: Optional[str] = None
    args: Tuple[str, ...] = ()
    allowed: Tuple[str, ...] = ()
    aborted: bool = False
    result: Any = None

    @property
    def handled(self) -> bool:
        return self.outcome is Outcome.HANDLED

    @property
    def status(self) -> int:
        """HTTP status the router reports for this outcome."""
        if self.outcome is Outcome.NOT_FOUND:
            return 404
        if self.outcome is Outcome.METHOD_NOT_ALLOWED:
            return 405
        return 200

    def raise_for_status(self) -> "Resolution":
        """Raise NotFoundError/MethodNotAllowedError for failed outcomes."""
        if self.outcome is Outcome.NOT_FOUND:
            raise NotFoundError(path=self.path, method=self.method)
        if self.outcome is Outcome.METHOD_NOT_ALLOWED:
            raise MethodNotAllowedError(
                path=self.path,
                method=self.method,
                allowed=self.allowed,
            )
        return self


def _noop(*args: str) -> None:
    return None


class Router:
    """Request Router.

    Features:
    - Route templates with path tokens (/users/{id}, /users/{id:\\d+})
    - Raw regex patterns (~^/files/(.+)$~)
    - Before/after middleware per route and method
    - HEAD falls back to GET
    - 404 vs 405 (with Allow) detection
    - Base path prefix

    Usage:
        router = Router()
        router.get("/users/{id}", show_user, before=[authenticate])
        router.post("/users", create_user)

        response = Response()
        router.dispatch("GET", "/users/42", response)
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        compiler: Optional[TemplateCompiler] = None,
    ):
        self.config = config or RouterConfig()
        self._table = RouteTable(compiler)
        self._base_path = ""
        self._not_found_handler: Optional[Any] = None
        self.set_base_path(self.config.base_path)

    @classmethod
    def from_config(cls, config: RouterConfig) -> "Router":
        """Create router from config."""
        return cls(config)

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def table(self) -> RouteTable:
        return self._table

    def set_base_path(self, base_path: str) -> "Router":
        """Set the prefix stripped from every path before matching."""
        self._base_path = normalize_base_path(base_path)
        return self

    def set_not_found(self, handler: Any) -> "Router":
        """Set the handler called (without arguments) when nothing matches."""
        self._not_found_handler = ensure_handler(handler)
        return self

    def add(
        self,
        method: str,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Router":
        """Add a route.

        Args:
            method: HTTP method
            pattern: Route template
            controller: Handler called with the captured values
            before: Middleware run before the controller
            after: Middleware run after the controller
        """
        self._table.register(
            method.upper(),
            pattern,
            ensure_handler(controller),
            [ensure_handler(mw) for mw in before],
            [ensure_handler(mw) for mw in after],
        )
        return self

    def get(
        self,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Router":
        """Add GET route."""
        return self.add("GET", pattern, controller, before, after)

    def post(
        self,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Router":
        """Add POST route."""
        return self.add("POST", pattern, controller, before, after)

    def put(
        self,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Router":
        """Add PUT route."""
        return self.add("PUT", pattern, controller, before, after)

    def patch(
        self,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Router":
        """Add PATCH route."""
        return self.add("PATCH", pattern, controller, before, after)

    def delete(
        self,
        pattern: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Router":
        """Add DELETE route."""
        return self.add("DELETE", pattern, controller, before, after)

    def options(self, pattern: str, controller: Optional[Any] = None) -> "Router":
        """Add OPTIONS route (a no-op controller if none is given)."""
        return self.add("OPTIONS", pattern, controller if controller is not None else _noop)

    def head(self, pattern: str, controller: Optional[Any] = None) -> "Router":
        """Add HEAD route (a no-op controller if none is given)."""
        return self.add("HEAD", pattern, controller if controller is not None else _noop)

    def resolve(self, method: str, uri: str) -> Resolution:
        """Resolve a request and run its handler chain.

        When nothing accepts the path the not-found handler, if set, is
        called without arguments and its return value becomes the
        resolution's ``result``.

        Args:
            method: HTTP method
            uri: Request URI; only its path is used

        Returns:
            Resolution describing the outcome. Exceptions from handlers
            and middleware propagate unchanged.
        """
        return self._resolve(method, uri)

    def dispatch(self, method: str, uri: str, sink: ResponseSink) -> Resolution:
        """Resolve a request and write 404/405 responses to sink."""
        resolution = self._resolve(method, uri, sink)

        if resolution.outcome is Outcome.METHOD_NOT_ALLOWED:
            sink.set_header("Allow", ", ".join(resolution.allowed))
            sink.set_status(405)
            sink.write(self.config.method_not_allowed_body)

        return resolution

    def _resolve(
        self,
        method: str,
        uri: str,
        sink: Optional[ResponseSink] = None,
    ) -> Resolution:
        method = method.upper()
        path = self._request_path(uri)
        allowed: Dict[str, None] = {}

        for candidate in self._methods_to_try(method):
            found = self._match(candidate, path, allowed)
            if found is None:
                continue

            route, chain, args = found
            logger.debug(f"{method} {path} -> {candidate} {route.template} args={args}")
            completed, result = self._run_chain(chain, args)

            return Resolution(
                outcome=Outcome.HANDLED,
                method=method,
                path=path,
                route=route,
                handled_method=candidate,
                args=tuple(args),
                allowed=tuple(allowed),
                aborted=not completed,
                result=result,
            )

        # No handler ran: 405 if any route accepts the path, else 404
        allow = self._table.methods_for_path(path)
        if allow:
            logger.info(f"{method} {path} -> 405 (allow: {', '.join(allow)})")
            return Resolution(
                outcome=Outcome.METHOD_NOT_ALLOWED,
                method=method,
                path=path,
                allowed=tuple(allow),
            )

        logger.info(f"{method} {path} -> 404")
        return Resolution(
            outcome=Outcome.NOT_FOUND,
            method=method,
            path=path,
            result=self._not_found(sink),
        )

    def _not_found(self, sink: Optional[ResponseSink]) -> Any:
        """Set 404 on sink, then run the not-found handler or write the body."""
        if sink is not None:
            sink.set_status(404)

        if self._not_found_handler is not None:
            return invoke(self._not_found_handler, ())

        if sink is not None:
            sink.write(self.config.not_found_body)
        return None

    def _request_path(self, uri: str) -> str:
        """Path used for matching: base path removed, no trailing slash."""
        path = strip_base_path(extract_path(uri), self._base_path)
        return normalize_path(path)

    def _methods_to_try(self, method: str) -> List[str]:
        """Prefer the exact method; HEAD also tries GET."""
        if method == "HEAD" and self.config.head_fallback:
            return ["HEAD", "GET"]
        return [method]

    def _match(
        self,
        method: str,
        path: str,
        allowed: Dict[str, None],
    ) -> Optional[Tuple[Route, HandlerChain, List[str]]]:
        """First route accepting path with a chain for method.

        Methods of every route that accepts the path are recorded in
        ``allowed``, whether or not it serves method.
        """
        for route in self._table:
            args = route.pattern.extract(path)
            if args is None:
                continue

            for am in route.allowed_methods:
                allowed[am] = None

            chain = route.handler_for(method)
            if chain is None:
                # Another route may accept the same path with this method
                continue

            return route, chain, args

        return None

    def _run_chain(self, chain: HandlerChain, args: List[str]) -> Tuple[bool, Any]:
        """Run before middleware, controller, after middleware.

        Returns:
            Tuple of (completed, controller_result); completed is False
            when a before middleware stopped the chain
        """
        if not run_middleware(chain.before, args):
            return False, None

        result = invoke(chain.controller, args)

        # A stop here only ends the after chain
        run_middleware(chain.after, args)

        return True, result

    def get_routes(self) -> List[Route]:
        """Get all routes in table order."""
        return self._table.routes()

    def get_stats(self) -> Dict[str, Any]:
        """Get router statistics."""
        return {
            "routes": len(self._table),
            "handlers": sum(len(route.handlers) for route in self._table),
            "base_path": self._base_path,
            "not_found_handler": self._not_found_handler is not None,
        }


__all__ = [
    "Outcome",
    "Resolution",
    "Router",
]
