"""Middleware module - Before/after route middleware."""

from routerlite_core.middleware.base import STOP, Middleware, MiddlewareChain
from routerlite_core.middleware.logging import LoggingMiddleware

__all__ = [
    "STOP",
    "Middleware",
    "MiddlewareChain",
    "LoggingMiddleware",
]
