"""Capability negotiation for the hierarchy extensions.

Capabilities are exchanged once, at initialize time. The outcome of the first
negotiation is kept for the lifetime of the connection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

import structlog

from lsphierarchy.protocol.base import DocumentSelector, Registration, selector_to_wire

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Skipped:
    """The server announced no document selector; nothing can be served."""


@dataclass(frozen=True, slots=True)
class Unsupported:
    """The server capability is absent or false."""

    capability: str


@dataclass(frozen=True, slots=True)
class Negotiated:
    """The server supports the extension; ``registration`` is fresh."""

    registration: Registration

    @property
    def registration_id(self) -> str:
        return self.registration.id


NegotiationOutcome = Skipped | Unsupported | Negotiated


@dataclass
class CapabilityNegotiator:
    """Decides once per connection whether a hierarchy method is usable."""

    method: str
    capability: str
    legacy_capability: str | None = None

    _outcome: NegotiationOutcome | None = field(default=None, init=False)

    @property
    def outcome(self) -> NegotiationOutcome | None:
        return self._outcome

    def negotiate(
        self,
        server_capabilities: Mapping[str, Any],
        document_selector: DocumentSelector | None,
    ) -> NegotiationOutcome:
        if self._outcome is not None:
            logger.debug("capability_already_negotiated", method=self.method)
            return self._outcome
        self._outcome = self._evaluate(server_capabilities, document_selector)
        return self._outcome

    def _evaluate(
        self,
        server_capabilities: Mapping[str, Any],
        document_selector: DocumentSelector | None,
    ) -> NegotiationOutcome:
        if document_selector is None:
            logger.debug("capability_negotiation_skipped", method=self.method)
            return Skipped()

        value = server_capabilities.get(self.capability)
        if value is None and self.legacy_capability:
            value = server_capabilities.get(self.legacy_capability)
        # Any registration options, {} included, mean supported.
        if value is None or value is False:
            logger.info("capability_unsupported", method=self.method, capability=self.capability)
            return Unsupported(self.capability)

        register_options: dict[str, Any] = {"documentSelector": selector_to_wire(document_selector)}
        if isinstance(value, Mapping):
            register_options.update(value)
            if register_options.get("documentSelector") is None:
                register_options["documentSelector"] = selector_to_wire(document_selector)

        registration = Registration(
            id=str(uuid4()),
            method=self.method,
            register_options=register_options,
        )
        logger.info(
            "capability_negotiated",
            method=self.method,
            registration_id=registration.id,
        )
        return Negotiated(registration)
