"""Text document feature for caller/callee hierarchies."""

from __future__ import annotations

from enum import Enum
from typing import Any

from lsphierarchy.client.feature import HierarchyFeature
from lsphierarchy.core.errors import HierarchyError
from lsphierarchy.protocol import callhierarchy as protocol
from lsphierarchy.protocol.callhierarchy import (
    CallHierarchyDirection,
    CallHierarchyItem,
    CallHierarchyParams,
    CallHierarchyRequest,
    CallHierarchyResolveRequest,
)


class CallHierarchyFeature(HierarchyFeature):
    """Performs `textDocument/callHierarchy` and `callHierarchy/resolve` for one language."""

    request_type = CallHierarchyRequest
    resolve_request_type = CallHierarchyResolveRequest
    client_capability = protocol.CLIENT_CAPABILITY
    server_capability = protocol.SERVER_CAPABILITY

    async def get(self, params: CallHierarchyParams) -> CallHierarchyItem | None:  # type: ignore[override]
        return await super().get(params)

    async def resolve(  # type: ignore[override]
        self, item: CallHierarchyItem, resolve: int, direction: CallHierarchyDirection
    ) -> CallHierarchyItem | None:
        return await super().resolve(item, resolve, direction)


class CallHierarchyType(str, Enum):
    """Available call hierarchy sides. `incoming` are callers, `outgoing` callees."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"

    @property
    def direction(self) -> CallHierarchyDirection:
        return "incoming" if self is CallHierarchyType.INCOMING else "outgoing"

    def flip(self) -> CallHierarchyType:
        """Returns `outgoing` for `incoming` and vice versa."""
        if self is CallHierarchyType.INCOMING:
            return CallHierarchyType.OUTGOING
        return CallHierarchyType.INCOMING


def flip(value: Any) -> CallHierarchyType:
    """Flips a call hierarchy type given as a member or its string value."""
    try:
        type_ = CallHierarchyType(value)
    except ValueError:
        raise HierarchyError.invalid_argument(
            "call hierarchy type", value, "'incoming' or 'outgoing'"
        ) from None
    return type_.flip()
