"""HTTP module - Response sink used by the router."""

from routerlite_core.http.response import Response, ResponseSink

__all__ = [
    "Response",
    "ResponseSink",
]
