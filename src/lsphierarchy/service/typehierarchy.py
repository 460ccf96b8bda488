"""Type hierarchy service: supertypes and subtypes per language."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lsphierarchy.client.typehierarchy import TypeHierarchyFeature, TypeHierarchyType
from lsphierarchy.protocol.base import Location, TextDocumentPositionParams
from lsphierarchy.protocol.typehierarchy import (
    TypeHierarchyDirection,
    TypeHierarchyItem,
    TypeHierarchyParams,
)
from lsphierarchy.service.base import HierarchyService

TypeHierarchyArg = TypeHierarchyItem | Location | TextDocumentPositionParams | Mapping[str, Any]


class TypeHierarchyService(HierarchyService):
    """Answers supertype and subtype queries through the active feature of a language."""

    feature_class = TypeHierarchyFeature
    params_type = TypeHierarchyParams

    async def super_types(self, language_id: str | None, arg: TypeHierarchyArg) -> TypeHierarchyItem | None:
        """Returns the symbol at ``arg`` with its supertypes resolved."""
        return await self.types(language_id, arg, TypeHierarchyType.SUPERTYPE)

    async def sub_types(self, language_id: str | None, arg: TypeHierarchyArg) -> TypeHierarchyItem | None:
        """Returns the symbol at ``arg`` with its subtypes resolved."""
        return await self.types(language_id, arg, TypeHierarchyType.SUBTYPE)

    async def types(
        self, language_id: str | None, arg: TypeHierarchyArg, type_: TypeHierarchyType
    ) -> TypeHierarchyItem | None:
        return await self._query(language_id, arg, type_.direction)

    async def resolve(
        self,
        language_id: str | None,
        item: TypeHierarchyItem,
        direction: TypeHierarchyDirection,
        resolve: int | None = None,
    ) -> TypeHierarchyItem | None:
        return await self.resolve_item(language_id, item, direction, resolve)
