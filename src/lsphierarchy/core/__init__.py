"""Core module exports."""

from lsphierarchy.core.errors import (
    ConfigError,
    ErrorCode,
    HierarchyError,
    InternalError,
    LspHierarchyError,
)
from lsphierarchy.core.events import Disposable, DisposableCollection, Emitter, Event
from lsphierarchy.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    query_context,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "HierarchyError",
    "InternalError",
    "LspHierarchyError",
    # Events
    "Disposable",
    "DisposableCollection",
    "Emitter",
    "Event",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "query_context",
    "set_request_id",
]
