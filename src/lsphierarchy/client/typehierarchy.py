"""Text document feature for super- and subtype hierarchies."""

from __future__ import annotations

from enum import Enum
from typing import Any

from lsphierarchy.client.feature import HierarchyFeature
from lsphierarchy.core.errors import HierarchyError
from lsphierarchy.protocol import typehierarchy as protocol
from lsphierarchy.protocol.typehierarchy import (
    ResolveTypeHierarchyRequest,
    TypeHierarchyDirection,
    TypeHierarchyItem,
    TypeHierarchyParams,
    TypeHierarchyRequest,
)


class TypeHierarchyFeature(HierarchyFeature):
    """Performs `textDocument/typeHierarchy` and `typeHierarchy/resolve` for one language."""

    request_type = TypeHierarchyRequest
    resolve_request_type = ResolveTypeHierarchyRequest
    client_capability = protocol.CLIENT_CAPABILITY
    server_capability = protocol.SERVER_CAPABILITY
    legacy_server_capability = protocol.LEGACY_SERVER_CAPABILITY

    async def get(self, params: TypeHierarchyParams) -> TypeHierarchyItem | None:  # type: ignore[override]
        return await super().get(params)

    async def resolve(  # type: ignore[override]
        self, item: TypeHierarchyItem, resolve: int, direction: TypeHierarchyDirection
    ) -> TypeHierarchyItem | None:
        return await super().resolve(item, resolve, direction)


class TypeHierarchyType(str, Enum):
    """Available type hierarchy types."""

    SUBTYPE = "subtype"
    SUPERTYPE = "supertype"

    @property
    def direction(self) -> TypeHierarchyDirection:
        """Wire direction expanding this side of the hierarchy."""
        return "parents" if self is TypeHierarchyType.SUPERTYPE else "children"

    def flip(self) -> TypeHierarchyType:
        """Returns the counterpart: `subtype` for `supertype` and vice versa."""
        if self is TypeHierarchyType.SUBTYPE:
            return TypeHierarchyType.SUPERTYPE
        return TypeHierarchyType.SUBTYPE


def flip(value: Any) -> TypeHierarchyType:
    """Flips a type hierarchy type given as a member or its string value."""
    try:
        type_ = TypeHierarchyType(value)
    except ValueError:
        raise HierarchyError.invalid_argument(
            "type hierarchy type", value, "'subtype' or 'supertype'"
        ) from None
    return type_.flip()
