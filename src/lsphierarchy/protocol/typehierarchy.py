"""Type hierarchy protocol extension.

Super- and subtype hierarchies are not part of baseline LSP; these are the
request shapes and capability keys of the extension.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, model_validator

from lsphierarchy.protocol.base import (
    ProtocolModel,
    Range,
    RequestType,
    SymbolKind,
    TextDocumentPositionParams,
)

TypeHierarchyDirection = Literal["parents", "children", "both"]

# Client: textDocument.typeHierarchy.dynamicRegistration
CLIENT_CAPABILITY = "typeHierarchy"
# Server: typeHierarchyProvider (bool | registration options)
SERVER_CAPABILITY = "typeHierarchyProvider"
# Key used by early servers of this extension.
LEGACY_SERVER_CAPABILITY = "typeHierarchy"


class TypeHierarchyParams(TextDocumentPositionParams):
    """Parameters of `textDocument/typeHierarchy`."""

    # The hierarchy levels to resolve. `0` indicates no level.
    resolve: int | None = Field(default=None, ge=0)
    # Server default is `children` when omitted.
    direction: TypeHierarchyDirection | None = None


class TypeHierarchyItem(ProtocolModel):
    """A node of a super- or subtype hierarchy.

    ``parents``/``children`` are ``None`` when that side has not been resolved
    and an empty list when it was resolved and has no members.
    """

    name: str
    detail: str | None = None
    kind: SymbolKind
    deprecated: bool = False
    uri: str
    range: Range
    selection_range: Range
    parents: list[TypeHierarchyItem] | None = None
    children: list[TypeHierarchyItem] | None = None
    # Opaque to the client; sent back as-is in resolve requests.
    data: Any = None

    @model_validator(mode="after")
    def validate_selection_range(self) -> TypeHierarchyItem:
        if not self.range.contains(self.selection_range):
            raise ValueError("selectionRange must be contained in range")
        return self

    @property
    def is_resolved(self) -> bool:
        return self.parents is not None or self.children is not None


class ResolveTypeHierarchyItemParams(ProtocolModel):
    """Parameters of `typeHierarchy/resolve`."""

    item: TypeHierarchyItem
    resolve: int = Field(..., ge=0)
    direction: TypeHierarchyDirection


TypeHierarchyRequest: RequestType[TypeHierarchyParams, TypeHierarchyItem] = RequestType(
    "textDocument/typeHierarchy", TypeHierarchyParams, TypeHierarchyItem
)

ResolveTypeHierarchyRequest: RequestType[ResolveTypeHierarchyItemParams, TypeHierarchyItem] = (
    RequestType("typeHierarchy/resolve", ResolveTypeHierarchyItemParams, TypeHierarchyItem)
)
