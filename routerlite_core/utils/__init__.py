"""Utils module - Utility functions."""

from routerlite_core.utils.config import (
    RouterConfig,
    configure_logging,
    load_config,
)
from routerlite_core.utils.helpers import (
    extract_path,
    normalize_base_path,
    normalize_path,
    strip_base_path,
)

__all__ = [
    "RouterConfig",
    "configure_logging",
    "load_config",
    "extract_path",
    "normalize_base_path",
    "normalize_path",
    "strip_base_path",
]
