"""Per-language hierarchy feature.

A feature is created for every language client connection. It becomes
queryable only when the server advertises the extension at initialize time
and is disposed when the connection goes away or a newer feature for the same
language replaces it.

State machine: CREATED -> INITIALIZED -> DISPOSED (terminal). A CREATED feature
may also be disposed directly.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

import structlog

from lsphierarchy.client.connection import LanguageClient
from lsphierarchy.client.negotiation import CapabilityNegotiator, Negotiated, NegotiationOutcome
from lsphierarchy.config.models import HierarchyConfig
from lsphierarchy.core.errors import InternalError
from lsphierarchy.core.events import DisposableCollection, Emitter, Event
from lsphierarchy.protocol.base import (
    DocumentSelector,
    ProtocolModel,
    Registration,
    RequestType,
    TextDocumentPositionParams,
)

logger = structlog.get_logger()


class FeatureState(Enum):
    """Hierarchy feature lifecycle state."""

    CREATED = "created"
    INITIALIZED = "initialized"
    DISPOSED = "disposed"


class HierarchyFeature:
    """Owns one negotiated registration and forwards hierarchy queries.

    Subclasses name the request pair and the capability keys of their
    hierarchy kind.
    """

    request_type: RequestType[Any, Any]
    resolve_request_type: RequestType[Any, Any]
    client_capability: str
    server_capability: str
    legacy_server_capability: str | None = None

    def __init__(self, client: LanguageClient, config: HierarchyConfig | None = None) -> None:
        self.client = client
        self.language_id: str = client.language_id
        self.config = config or HierarchyConfig()

        self._state = FeatureState.CREATED
        self._registrations: dict[str, Registration] = {}
        self._negotiator = CapabilityNegotiator(
            method=self.request_type.method,
            capability=self.server_capability,
            legacy_capability=(
                self.legacy_server_capability if self.config.accept_legacy_capability else None
            ),
        )
        self._on_initialized: Emitter[None] = Emitter(name="initialized", once=True)
        self._on_disposed: Emitter[None] = Emitter(name="disposed", once=True)
        self._to_dispose = DisposableCollection(self._on_initialized, self._on_disposed)
        self._log = logger.bind(feature=type(self).__name__, language_id=self.language_id)

    @property
    def state(self) -> FeatureState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is FeatureState.INITIALIZED

    @property
    def registrations(self) -> tuple[Registration, ...]:
        return tuple(self._registrations.values())

    @property
    def registration_id(self) -> str | None:
        """Id of the negotiated registration, if any."""
        for registration_id in self._registrations:
            return registration_id
        return None

    @property
    def on_initialized(self) -> Event[None]:
        """Fires once, when the server turned out to support the extension."""
        return self._on_initialized.event

    @property
    def on_disposed(self) -> Event[None]:
        """Fires once, when the feature is disposed."""
        return self._on_disposed.event

    def fill_client_capabilities(self, capabilities: dict[str, Any]) -> None:
        """Advertise the extension in the client capabilities sent at initialize."""
        text_document = capabilities.get("textDocument")
        if not isinstance(text_document, dict):
            text_document = capabilities["textDocument"] = {}
        text_document[self.client_capability] = {
            "dynamicRegistration": self.config.dynamic_registration,
        }

    def initialize(
        self,
        server_capabilities: Mapping[str, Any],
        document_selector: DocumentSelector | None,
    ) -> NegotiationOutcome | None:
        """Negotiate the extension against the server capabilities.

        Only the first call on a CREATED feature has an effect. Returns the
        negotiation outcome, or None when the feature was disposed before
        negotiating.
        """
        if self._state is FeatureState.DISPOSED:
            self._log.debug("hierarchy_feature_initialize_after_dispose")
            return self._negotiator.outcome
        if self._state is FeatureState.INITIALIZED:
            return self._negotiator.outcome

        outcome = self._negotiator.negotiate(server_capabilities, document_selector)
        if isinstance(outcome, Negotiated):
            self.register(self.request_type, outcome.registration)
            self._state = FeatureState.INITIALIZED
            self._log.info("hierarchy_feature_initialized", registration_id=outcome.registration_id)
            self._on_initialized.fire(None)
        return outcome

    def register(self, request_type: RequestType[Any, Any], registration: Registration) -> None:
        if request_type.method != self.request_type.method:
            raise InternalError.unexpected(
                "registration for a foreign method",
                expected=self.request_type.method,
                actual=request_type.method,
            )
        self._registrations[registration.id] = registration

    async def get(self, params: TextDocumentPositionParams) -> Any:
        """Send the position request. Returns None when there is no hierarchy there."""
        payload = self.request_type.serialize(params)
        self._log.debug(
            "hierarchy_request",
            method=self.request_type.method,
            resolve=payload.get("resolve"),
            direction=payload.get("direction"),
        )
        result = await self.client.send_request(self.request_type.method, payload)
        return self.request_type.parse(result)

    async def resolve(self, item: ProtocolModel, resolve: int, direction: str) -> Any:
        """Expand a previously returned item without a new position request."""
        params = self.resolve_request_type.params_type(item=item, resolve=resolve, direction=direction)
        payload = self.resolve_request_type.serialize(params)
        self._log.debug(
            "hierarchy_resolve_request",
            method=self.resolve_request_type.method,
            resolve=resolve,
            direction=direction,
        )
        result = await self.client.send_request(self.resolve_request_type.method, payload)
        return self.resolve_request_type.parse(result)

    def dispose(self) -> None:
        """Dispose the feature. Later calls do nothing."""
        if self._state is FeatureState.DISPOSED:
            return
        self._state = FeatureState.DISPOSED
        self._registrations.clear()
        self._log.info("hierarchy_feature_disposed")
        self._on_disposed.fire(None)
        self._to_dispose.dispose()
