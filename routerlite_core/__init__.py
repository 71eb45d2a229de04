"""RouterLite - Lightweight HTTP request router.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RouterLite maps (method, path) pairs to handler chains with:
- Route templates with typed and untyped path tokens
- Raw regex patterns for everything the templates cannot express
- Before/after middleware with short-circuiting
- 404 vs 405 detection with an Allow header
- HEAD to GET fallback and base path prefixes

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              RouterLite                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                        Resolution Pipeline                             │  │
│  │  (method, uri) ──▶ Path ──▶ Route Table ──▶ Handler Chain ──▶ Result  │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │    Matcher      │  │   Route Table   │  │        Router               │ │
│  │                 │  │                 │  │                             │ │
│  │ - Normalize     │  │ - Route values  │  │ - Base path stripping       │ │
│  │ - {name}        │  │ - Merge by      │  │ - HEAD -> GET fallback      │ │
│  │ - {name:expr}   │  │   template      │  │ - Allow set (405)           │ │
│  │ - Raw patterns  │  │ - Insert order  │  │ - Not found (404)           │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │   Middleware    │  │    Handlers     │  │        Response             │ │
│  │                 │  │                 │  │                             │ │
│  │ - Before chain  │  │ - Callables     │  │ - Sink contract             │ │
│  │ - After chain   │  │ - Import paths  │  │ - Buffered response         │ │
│  │ - False = stop  │  │ - (obj, attr)   │  │ - Allow header              │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Request Flow:
1. Method is uppercased, the path is taken from the URI
2. Base path and trailing slash are stripped
3. Routes are scanned in registration order for each candidate method
4. The first route with a chain for the method runs it
5. Otherwise 405 (path known) or 404 (path unknown) is reported

Usage:
    from routerlite_core import Router, Response

    router = Router()
    router.get("/users/{id:\\d+}", show_user)
    router.delete("/users/{id:\\d+}", delete_user, before=[require_admin])

    response = Response()
    router.dispatch("DELETE", "/users/7", response)
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Errors
from routerlite_core.exceptions import (
    RoutingError,
    NotFoundError,
    MethodNotAllowedError,
)

# Handlers
from routerlite_core.handlers import ensure_handler, invoke

# Response
from routerlite_core.http.response import Response, ResponseSink

# Routing
from routerlite_core.routing.matcher import (
    CompiledPattern,
    TemplateCompiler,
    compile_template,
    normalize_template,
)
from routerlite_core.routing.route import HandlerChain, Route
from routerlite_core.routing.table import RouteTable
from routerlite_core.routing.router import Outcome, Resolution, Router

# Middleware
from routerlite_core.middleware.base import STOP, Middleware, MiddlewareChain
from routerlite_core.middleware.logging import LoggingMiddleware

# Utils
from routerlite_core.utils.config import RouterConfig, configure_logging, load_config

__all__ = [
    # Version
    "__version__",
    # Errors
    "RoutingError",
    "NotFoundError",
    "MethodNotAllowedError",
    # Handlers
    "ensure_handler",
    "invoke",
    # Response
    "Response",
    "ResponseSink",
    # Routing
    "CompiledPattern",
    "TemplateCompiler",
    "compile_template",
    "normalize_template",
    "HandlerChain",
    "Route",
    "RouteTable",
    "Outcome",
    "Resolution",
    "Router",
    # Middleware
    "STOP",
    "Middleware",
    "MiddlewareChain",
    "LoggingMiddleware",
    # Utils
    "RouterConfig",
    "configure_logging",
    "load_config",
]
