"""Call hierarchy service: callers and callees per language."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lsphierarchy.client.callhierarchy import CallHierarchyFeature, CallHierarchyType
from lsphierarchy.protocol.base import Location, TextDocumentPositionParams
from lsphierarchy.protocol.callhierarchy import (
    CallHierarchyDirection,
    CallHierarchyItem,
    CallHierarchyParams,
)
from lsphierarchy.service.base import HierarchyService

CallHierarchyArg = CallHierarchyItem | Location | TextDocumentPositionParams | Mapping[str, Any]


class CallHierarchyService(HierarchyService):
    """Answers caller and callee queries through the active feature of a language."""

    feature_class = CallHierarchyFeature
    params_type = CallHierarchyParams

    async def callers(self, language_id: str | None, arg: CallHierarchyArg) -> CallHierarchyItem | None:
        """Returns the symbol at ``arg`` with its incoming calls resolved."""
        return await self.calls(language_id, arg, CallHierarchyType.INCOMING)

    async def callees(self, language_id: str | None, arg: CallHierarchyArg) -> CallHierarchyItem | None:
        """Returns the symbol at ``arg`` with its outgoing calls resolved."""
        return await self.calls(language_id, arg, CallHierarchyType.OUTGOING)

    async def calls(
        self, language_id: str | None, arg: CallHierarchyArg, type_: CallHierarchyType
    ) -> CallHierarchyItem | None:
        return await self._query(language_id, arg, type_.direction)

    async def resolve(
        self,
        language_id: str | None,
        item: CallHierarchyItem,
        direction: CallHierarchyDirection,
        resolve: int | None = None,
    ) -> CallHierarchyItem | None:
        return await self.resolve_item(language_id, item, direction, resolve)
