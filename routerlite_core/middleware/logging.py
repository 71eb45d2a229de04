"""Logging Middleware - Handler chain logging.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from routerlite_core.middleware.base import Middleware

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    """Logging middleware configuration."""

    label: str = "route"
    level: int = logging.INFO
    log_args: bool = True
    max_arg_length: int = 64


class LoggingMiddleware(Middleware):
    """Logs every pass through a handler chain.

    Usable as before or after middleware; it never stops the chain.
    """

    def __init__(self, config: Optional[LoggingConfig] = None):
        self.config = config or LoggingConfig()
        self.calls = 0

    def __call__(self, *args: str) -> Optional[Any]:
        """Log captured values."""
        self.calls += 1
        log_parts = [f"[{self.config.label}] #{self.calls}"]

        if self.config.log_args and args:
            limit = self.config.max_arg_length
            shown = [arg if len(arg) <= limit else arg[:limit] + "..." for arg in args]
            log_parts.append(f"args={shown}")

        logger.log(self.config.level, " ".join(log_parts))
        return None


__all__ = [
    "LoggingMiddleware",
    "LoggingConfig",
]
