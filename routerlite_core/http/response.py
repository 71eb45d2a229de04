"""Response - Response sink contract and buffering response.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Union


class ResponseSink(ABC):
    """Where the router writes status, headers and fallback bodies."""

    @abstractmethod
    def set_status(self, status: int) -> None:
        """Set the HTTP status code."""
        pass

    @abstractmethod
    def set_header(self, name: str, value: str) -> None:
        """Set a response header."""
        pass

    @abstractmethod
    def write(self, body: Union[str, bytes]) -> None:
        """Append to the response body."""
        pass


@dataclass
class Response(ResponseSink):
    """HTTP Response object.

    Buffers everything written to it; useful as the sink in tests and
    for servers that send the response in one piece.
    """

    status: int = 200
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    # Common status messages
    STATUS_MESSAGES: ClassVar[Dict[int, str]] = {
        200: "OK",
        201: "Created",
        204: "No Content",
        301: "Moved Permanently",
        302: "Found",
        304: "Not Modified",
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        500: "Internal Server Error",
    }

    @property
    def status_message(self) -> str:
        """Get status message."""
        return self.STATUS_MESSAGES.get(self.status, "Unknown")

    @property
    def is_error(self) -> bool:
        """Check if response is error (4xx or 5xx)."""
        return self.status >= 400

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode()

    def set_status(self, status: int) -> None:
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def get_header(self, name: str, default: str = "") -> str:
        """Get header value (case-insensitive)."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default

    def write(self, body: Union[str, bytes]) -> None:
        if isinstance(body, str):
            body = body.encode()
        self.body += body


__all__ = [
    "Response",
    "ResponseSink",
]
