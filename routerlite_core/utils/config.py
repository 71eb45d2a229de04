"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RouterConfig")

DEFAULT_ENV_PREFIX = "ROUTERLITE_"


@dataclass
class RouterConfig:
    """Router configuration."""

    # Routing
    base_path: str = ""
    head_fallback: bool = True

    # Fallback bodies
    not_found_body: str = "Not Found"
    method_not_allowed_body: str = "Method Not Allowed"

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in (data or {}).items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls: Type[T], prefix: str = DEFAULT_ENV_PREFIX) -> T:
        """Load config from environment variables."""
        data = {}
        bool_fields = {
            f.name for f in fields(cls) if f.type in (bool, "bool")
        }

        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()

                # Type conversion by declared field type; str fields stay as-is
                if config_key in bool_fields:
                    data[config_key] = value.strip().lower() in ("true", "1", "yes", "on")
                else:
                    data[config_key] = value

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}
        for field_name in self.__dataclass_fields__:
            result[field_name] = getattr(self, field_name)
        return result

    def merge(self, other: Dict[str, Any]) -> "RouterConfig":
        """Merge with explicit overrides (overrides take precedence)."""
        data = self.to_dict()
        data.update(other)
        return type(self).from_dict(data)


def _explicit_env(prefix: str) -> Dict[str, Any]:
    """Only the settings actually present in the environment."""
    present = {
        key[len(prefix):].lower()
        for key in os.environ
        if key.startswith(prefix)
    }
    env_config = RouterConfig.from_env(prefix).to_dict()
    return {k: v for k, v in env_config.items() if k in present}


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> RouterConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RouterConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = RouterConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = RouterConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    return config.merge(_explicit_env(env_prefix))


def configure_logging(config: RouterConfig) -> logging.Logger:
    """Apply level and format from config to the package logger."""
    package_logger = logging.getLogger("routerlite_core")
    package_logger.setLevel(config.log_level.upper())

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.log_format))
        package_logger.addHandler(handler)

    return package_logger


__all__ = [
    "RouterConfig",
    "configure_logging",
    "load_config",
]
