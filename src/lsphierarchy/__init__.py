"""lsphierarchy - type and call hierarchies over an LSP extension."""

from lsphierarchy.client import (
    CallHierarchyFeature,
    CallHierarchyType,
    TypeHierarchyFeature,
    TypeHierarchyType,
)
from lsphierarchy.service import CallHierarchyService, TypeHierarchyService

__version__ = "0.1.0"

__all__ = [
    "CallHierarchyFeature",
    "CallHierarchyService",
    "CallHierarchyType",
    "TypeHierarchyFeature",
    "TypeHierarchyService",
    "TypeHierarchyType",
    "__version__",
]
