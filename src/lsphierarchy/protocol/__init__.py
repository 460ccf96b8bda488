"""Wire contract of the type and call hierarchy LSP extensions."""

from lsphierarchy.protocol.base import (
    DocumentFilter,
    DocumentSelector,
    Location,
    Position,
    ProtocolModel,
    Range,
    Registration,
    RequestType,
    SymbolKind,
    TextDocumentIdentifier,
    TextDocumentPositionParams,
    is_position_params,
    selector_to_wire,
)
from lsphierarchy.protocol.callhierarchy import (
    CallHierarchyDirection,
    CallHierarchyItem,
    CallHierarchyParams,
    CallHierarchyRequest,
    CallHierarchyResolveRequest,
    ResolveCallHierarchyItemParams,
)
from lsphierarchy.protocol.typehierarchy import (
    ResolveTypeHierarchyItemParams,
    ResolveTypeHierarchyRequest,
    TypeHierarchyDirection,
    TypeHierarchyItem,
    TypeHierarchyParams,
    TypeHierarchyRequest,
)

__all__ = [
    # Base
    "DocumentFilter",
    "DocumentSelector",
    "Location",
    "Position",
    "ProtocolModel",
    "Range",
    "Registration",
    "RequestType",
    "SymbolKind",
    "TextDocumentIdentifier",
    "TextDocumentPositionParams",
    "is_position_params",
    "selector_to_wire",
    # Type hierarchy
    "ResolveTypeHierarchyItemParams",
    "ResolveTypeHierarchyRequest",
    "TypeHierarchyDirection",
    "TypeHierarchyItem",
    "TypeHierarchyParams",
    "TypeHierarchyRequest",
    # Call hierarchy
    "CallHierarchyDirection",
    "CallHierarchyItem",
    "CallHierarchyParams",
    "CallHierarchyRequest",
    "CallHierarchyResolveRequest",
    "ResolveCallHierarchyItemParams",
]
