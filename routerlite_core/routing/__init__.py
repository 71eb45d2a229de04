"""Routing module - Template compilation, route table and dispatch."""

from routerlite_core.routing.matcher import (
    CompiledPattern,
    TemplateCompiler,
    compile_template,
    normalize_template,
)
from routerlite_core.routing.route import HandlerChain, Route
from routerlite_core.routing.table import RouteTable
from routerlite_core.routing.router import Outcome, Resolution, Router

__all__ = [
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
]
