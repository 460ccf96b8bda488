"""Registry of active hierarchy features, one per language.

Entries are added only when a registered feature fires its initialized event
and removed only when that same feature fires its disposed event. A feature
that initializes for a language which already has one disposes the old
feature before it is installed, so at most one feature per language is ever
mapped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

import structlog
from pydantic import ValidationError

from lsphierarchy.client.connection import LanguageClient
from lsphierarchy.client.feature import HierarchyFeature
from lsphierarchy.config.loader import load_config
from lsphierarchy.config.models import HierarchyConfig, LspHierarchyConfig
from lsphierarchy.core.errors import HierarchyError
from lsphierarchy.core.events import DisposableCollection
from lsphierarchy.core.logging import query_context
from lsphierarchy.protocol.base import (
    ProtocolModel,
    Range,
    TextDocumentIdentifier,
    TextDocumentPositionParams,
    is_position_params,
)

logger = structlog.get_logger()


class HierarchyService:
    """Routes hierarchy queries to the active feature of a language."""

    feature_class: type[HierarchyFeature]
    params_type: type[TextDocumentPositionParams]

    def __init__(self, config: HierarchyConfig | None = None) -> None:
        self.config = config or HierarchyConfig()
        self._features: dict[str, HierarchyFeature] = {}

    @classmethod
    def from_config(cls, config: LspHierarchyConfig | None = None) -> Self:
        """Build a service from the loaded configuration.

        Without ``config`` the settings are read with :func:`load_config`.
        """
        if config is None:
            config = load_config()
        return cls(config.hierarchy)

    @property
    def features(self) -> dict[str, HierarchyFeature]:
        """Snapshot of the language id to feature mapping."""
        return dict(self._features)

    def create_new_feature(self, client: LanguageClient) -> HierarchyFeature:
        """Creates a feature for ``client`` and registers it into this service."""
        feature = self.feature_class(client, self.config)
        self.register(feature)
        return feature

    def register(self, new_feature: HierarchyFeature) -> None:
        """Registers ``new_feature``; it is mapped once it initializes.

        The feature is removed from this service when it is disposed.
        """
        language_id = new_feature.language_id
        to_dispose_on_feature_dispose = DisposableCollection()

        def on_initialized(_: None) -> None:
            old_feature = self._features.get(language_id)
            if old_feature is not None and old_feature is not new_feature:
                logger.info("hierarchy_feature_superseded", language_id=language_id)
                old_feature.dispose()
            self._features[language_id] = new_feature
            logger.info("hierarchy_feature_registered", language_id=language_id)

        def on_disposed(_: None) -> None:
            if self._features.get(language_id) is new_feature:
                del self._features[language_id]
                logger.info("hierarchy_feature_unregistered", language_id=language_id)
            to_dispose_on_feature_dispose.dispose()

        to_dispose_on_feature_dispose.push(new_feature.on_initialized(on_initialized))
        to_dispose_on_feature_dispose.push(new_feature.on_disposed(on_disposed))

    def dispose(self) -> None:
        """Disposes every registered feature."""
        for feature in list(self._features.values()):
            feature.dispose()
        self._features.clear()

    def is_enabled_for(self, language_id: str | None) -> bool:
        """`True` if the hierarchy is available for the language. Otherwise, `False`.

        It is always `False` for a language until a language client connection
        for it has been established and the server announced the extension.
        """
        return bool(language_id) and language_id in self._features

    def feature_for(self, language_id: str | None) -> HierarchyFeature | None:
        if not language_id:
            return None
        return self._features.get(language_id)

    async def _query(self, language_id: str | None, arg: Any, direction: str) -> Any:
        with query_context(language_id, direction=direction):
            feature = self.feature_for(language_id)
            if feature is None:
                logger.debug("hierarchy_feature_missing")
                return None
            return await feature.get(self.to_params(arg, direction))

    async def resolve_item(
        self,
        language_id: str | None,
        item: ProtocolModel,
        direction: str,
        resolve: int | None = None,
    ) -> Any:
        """Expands ``item`` via the resolve request of the language's feature."""
        with query_context(language_id, direction=direction):
            feature = self.feature_for(language_id)
            if feature is None:
                logger.debug("hierarchy_feature_missing")
                return None
            depth = self.config.resolve_depth if resolve is None else resolve
            return await feature.resolve(item, depth, direction)

    def to_params(self, arg: Any, direction: str) -> TextDocumentPositionParams:
        """Converts an item, a location or position params into request params.

        Position params keep their text document and position; items and
        locations contribute their URI and the start of their range.
        """
        update = {"resolve": self.config.resolve_depth, "direction": direction}
        if is_position_params(arg):
            if isinstance(arg, self.params_type):
                return arg.model_copy(update=update)
            if isinstance(arg, Mapping):
                return self.params_type.model_validate({**arg, **update})
            return self.params_type(text_document=arg.text_document, position=arg.position, **update)

        uri, range_ = self._uri_and_range(arg)
        return self.params_type(
            text_document=TextDocumentIdentifier(uri=uri),
            position=range_.start,
            **update,
        )

    @staticmethod
    def _uri_and_range(arg: Any) -> tuple[str, Range]:
        if isinstance(arg, Mapping):
            uri, range_ = arg.get("uri"), arg.get("range")
        else:
            uri, range_ = getattr(arg, "uri", None), getattr(arg, "range", None)
        if isinstance(range_, Mapping):
            try:
                range_ = Range.model_validate(range_)
            except ValidationError:
                range_ = None
        if not isinstance(uri, str) or not isinstance(range_, Range):
            raise HierarchyError.invalid_argument(
                "hierarchy query argument",
                arg,
                "a hierarchy item, a location or text document position params",
            )
        return uri, range_
