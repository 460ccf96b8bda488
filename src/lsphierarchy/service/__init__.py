"""Per-kind hierarchy services."""

from lsphierarchy.service.base import HierarchyService
from lsphierarchy.service.callhierarchy import CallHierarchyService
from lsphierarchy.service.typehierarchy import TypeHierarchyService

__all__ = [
    "CallHierarchyService",
    "HierarchyService",
    "TypeHierarchyService",
]
