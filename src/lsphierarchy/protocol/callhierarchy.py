"""Call hierarchy protocol extension (proposed).

Structurally parallel to the type hierarchy extension: a position request,
a resolve request for partially resolved items and a provider capability.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, model_validator

from lsphierarchy.protocol.base import (
    Location,
    ProtocolModel,
    Range,
    RequestType,
    SymbolKind,
    TextDocumentPositionParams,
)

# `incoming` lists callers, `outgoing` lists callees.
CallHierarchyDirection = Literal["incoming", "outgoing"]

CLIENT_CAPABILITY = "callHierarchy"
SERVER_CAPABILITY = "callHierarchyProvider"


class CallHierarchyParams(TextDocumentPositionParams):
    """Parameters of `textDocument/callHierarchy`."""

    resolve: int | None = Field(default=None, ge=0)
    # Server default is `incoming` when omitted.
    direction: CallHierarchyDirection | None = None


class CallHierarchyItem(ProtocolModel):
    """The result of a `textDocument/callHierarchy` request.

    The item is unresolved while both ``callers`` and ``callees`` are ``None``.
    ``call_location`` is set on resolved callers/callees only.
    """

    name: str
    detail: str | None = None
    kind: SymbolKind
    deprecated: bool = False
    uri: str
    range: Range
    selection_range: Range
    call_location: Location | None = None
    callers: list[CallHierarchyItem] | None = None
    callees: list[CallHierarchyItem] | None = None
    data: Any = None

    @model_validator(mode="after")
    def validate_selection_range(self) -> CallHierarchyItem:
        if not self.range.contains(self.selection_range):
            raise ValueError("selectionRange must be contained in range")
        return self

    @property
    def is_resolved(self) -> bool:
        return self.callers is not None or self.callees is not None


class ResolveCallHierarchyItemParams(ProtocolModel):
    """Parameters of `callHierarchy/resolve`."""

    item: CallHierarchyItem
    resolve: int = Field(..., ge=0)
    direction: CallHierarchyDirection


CallHierarchyRequest: RequestType[CallHierarchyParams, CallHierarchyItem] = RequestType(
    "textDocument/callHierarchy", CallHierarchyParams, CallHierarchyItem
)

CallHierarchyResolveRequest: RequestType[ResolveCallHierarchyItemParams, CallHierarchyItem] = (
    RequestType("callHierarchy/resolve", ResolveCallHierarchyItemParams, CallHierarchyItem)
)
