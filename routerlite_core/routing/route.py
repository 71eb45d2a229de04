"""Route - Route value and handler chains.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from routerlite_core.routing.matcher import CompiledPattern, compile_template


@dataclass(frozen=True)
class HandlerChain:
    """Before middleware, controller and after middleware for one method."""

    controller: Any
    before: Tuple[Any, ...] = ()
    after: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.before) + 1 + len(self.after)


@dataclass(frozen=True)
class Route:
    """Route definition.

    Routes are immutable: ``with_handler`` returns an updated copy and
    leaves the original untouched, so a route handed out to a reader
    never changes underneath it.
    """

    pattern: CompiledPattern
    handlers: Mapping[str, HandlerChain] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def create(cls, template: str) -> "Route":
        """Create a route without handlers."""
        return cls(pattern=compile_template(template))

    @property
    def template(self) -> str:
        """Normalized template, e.g. ``/users/{id:\\d+}``."""
        return self.pattern.template

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Token names in order of appearance."""
        return self.pattern.tokens

    @property
    def allowed_methods(self) -> List[str]:
        """Methods registered on this route, in registration order."""
        return list(self.handlers)

    def with_handler(
        self,
        method: str,
        controller: Any,
        before: Iterable[Any] = (),
        after: Iterable[Any] = (),
    ) -> "Route":
        """Return a copy with the chain for method set (replacing any prior one)."""
        handlers = dict(self.handlers)
        handlers[method.upper()] = HandlerChain(
            controller=controller,
            before=tuple(before),
            after=tuple(after),
        )
        return replace(self, handlers=MappingProxyType(handlers))

    def with_pattern(self, pattern: CompiledPattern) -> "Route":
        """Return a copy that matches with another compiled pattern."""
        return replace(self, pattern=pattern)

    def handler_for(self, method: str) -> Optional[HandlerChain]:
        """Get the handler chain for method, if any."""
        return self.handlers.get(method.upper())

    def matches(self, path: str) -> bool:
        """Check if route matches path, regardless of method."""
        return self.pattern.matches(path)


__all__ = [
    "HandlerChain",
    "Route",
]
