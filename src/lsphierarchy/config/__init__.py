"""Config module exports."""

from lsphierarchy.config.loader import load_config
from lsphierarchy.config.models import (
    HierarchyConfig,
    LoggingConfig,
    LogOutputConfig,
    LspHierarchyConfig,
)

__all__ = [
    "load_config",
    "HierarchyConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "LspHierarchyConfig",
]
