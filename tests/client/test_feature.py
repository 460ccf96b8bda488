"""Tests for the per-language hierarchy features."""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from lsphierarchy.client import (
    CallHierarchyFeature,
    FeatureState,
    Negotiated,
    Skipped,
    TypeHierarchyFeature,
    Unsupported,
)
from lsphierarchy.config.models import HierarchyConfig
from lsphierarchy.core.errors import ErrorCode, HierarchyError, InternalError
from lsphierarchy.protocol import (
    CallHierarchyItem,
    CallHierarchyParams,
    CallHierarchyRequest,
    Position,
    Registration,
    TextDocumentIdentifier,
    TypeHierarchyItem,
    TypeHierarchyParams,
)

ClientFactory = Callable[..., MagicMock]
WireItem = Callable[..., dict[str, Any]]


def _params(**fields: Any) -> TypeHierarchyParams:
    return TypeHierarchyParams(
        text_document=TextDocumentIdentifier(uri="file:///a.ts"),
        position=Position(line=3, character=5),
        **fields,
    )


class TestFeatureLifecycle:
    """CREATED -> INITIALIZED -> DISPOSED."""

    def test_given_new_feature_when_created_then_inert(self, make_client: ClientFactory) -> None:
        feature = TypeHierarchyFeature(make_client("go"))

        assert feature.state is FeatureState.CREATED
        assert feature.language_id == "go"
        assert feature.registration_id is None
        assert feature.registrations == ()

    def test_given_supported_server_when_initialize_then_registered_and_event_fired_once(
        self, make_client: ClientFactory, selector: list[dict[str, str]]
    ) -> None:
        # Given
        feature = TypeHierarchyFeature(make_client("go"))
        fired: list[FeatureState] = []
        feature.on_initialized(lambda _: fired.append(feature.state))

        # When
        outcome = feature.initialize({"typeHierarchyProvider": True}, selector)
        feature.initialize({"typeHierarchyProvider": True}, selector)

        # Then
        assert isinstance(outcome, Negotiated)
        assert fired == [FeatureState.INITIALIZED]
        assert feature.is_initialized
        assert feature.registration_id == outcome.registration_id
        assert len(feature.registrations) == 1
        assert feature.registrations[0].register_options["documentSelector"] == selector

    @pytest.mark.parametrize(
        ("capabilities", "use_selector", "expected"),
        [
            ({}, True, Unsupported),
            ({"typeHierarchyProvider": False}, True, Unsupported),
            ({"typeHierarchyProvider": True}, False, Skipped),
        ],
    )
    def test_given_unusable_server_when_initialize_then_no_event(
        self,
        make_client: ClientFactory,
        selector: list[dict[str, str]],
        capabilities: dict[str, Any],
        use_selector: bool,
        expected: type,
    ) -> None:
        # Given
        feature = TypeHierarchyFeature(make_client("go"))
        fired: list[None] = []
        feature.on_initialized(fired.append)

        # When
        outcome = feature.initialize(capabilities, selector if use_selector else None)

        # Then
        assert isinstance(outcome, expected)
        assert fired == []
        assert feature.state is FeatureState.CREATED
        assert feature.registration_id is None

    def test_given_legacy_key_when_disabled_by_config_then_unsupported(
        self, make_client: ClientFactory, selector: list[dict[str, str]]
    ) -> None:
        feature = TypeHierarchyFeature(make_client("go"), HierarchyConfig(accept_legacy_capability=False))

        outcome = feature.initialize({"typeHierarchy": True}, selector)

        assert isinstance(outcome, Unsupported)

    def test_given_call_feature_when_initialize_then_uses_call_capability(
        self, make_client: ClientFactory, selector: list[dict[str, str]]
    ) -> None:
        feature = CallHierarchyFeature(make_client("go"))

        unsupported = CallHierarchyFeature(make_client("go")).initialize({"typeHierarchyProvider": True}, selector)
        outcome = feature.initialize({"callHierarchyProvider": {"workDoneProgress": False}}, selector)

        assert isinstance(unsupported, Unsupported)
        assert isinstance(outcome, Negotiated)
        assert outcome.registration.method == "textDocument/callHierarchy"
        assert outcome.registration.register_options["workDoneProgress"] is False

    def test_given_initialized_feature_when_disposed_twice_then_event_fired_once(
        self, make_client: ClientFactory, selector: list[dict[str, str]]
    ) -> None:
        # Given
        feature = TypeHierarchyFeature(make_client("go"))
        feature.initialize({"typeHierarchyProvider": True}, selector)
        disposed: list[None] = []
        feature.on_disposed(disposed.append)

        # When
        feature.dispose()
        feature.dispose()

        # Then
        assert disposed == [None]
        assert feature.state is FeatureState.DISPOSED
        assert feature.registrations == ()

    def test_given_created_feature_when_disposed_then_silent_and_terminal(
        self, make_client: ClientFactory, selector: list[dict[str, str]]
    ) -> None:
        """Disposal before initialization is allowed and blocks later initialization."""
        # Given
        feature = TypeHierarchyFeature(make_client("go"))
        initialized: list[None] = []
        feature.on_initialized(initialized.append)

        # When
        feature.dispose()
        outcome = feature.initialize({"typeHierarchyProvider": True}, selector)

        # Then
        assert outcome is None
        assert initialized == []
        assert feature.state is FeatureState.DISPOSED

    def test_given_disposed_feature_when_subscribing_then_streams_closed(self, make_client: ClientFactory) -> None:
        # Given
        feature = TypeHierarchyFeature(make_client("go"))
        feature.dispose()
        calls: list[None] = []

        # When
        subscription = feature.on_disposed(calls.append)
        feature.dispose()

        # Then
        assert calls == []
        assert subscription.disposed

    def test_given_reentrant_dispose_from_listener_then_no_second_event(self, make_client: ClientFactory) -> None:
        # Given
        feature = TypeHierarchyFeature(make_client("go"))
        calls: list[None] = []

        def on_disposed(payload: None) -> None:
            calls.append(payload)
            feature.dispose()

        feature.on_disposed(on_disposed)

        # When
        feature.dispose()

        # Then
        assert calls == [None]

    def test_given_foreign_request_type_when_register_then_internal_error(self, make_client: ClientFactory) -> None:
        feature = TypeHierarchyFeature(make_client("go"))
        registration = Registration(id="x", method=CallHierarchyRequest.method)

        with pytest.raises(InternalError):
            feature.register(CallHierarchyRequest, registration)


class TestClientCapabilities:
    """fill_client_capabilities."""

    def test_given_empty_capabilities_when_filled_then_text_document_created(
        self, make_client: ClientFactory
    ) -> None:
        capabilities: dict[str, Any] = {}

        TypeHierarchyFeature(make_client("go")).fill_client_capabilities(capabilities)

        assert capabilities == {"textDocument": {"typeHierarchy": {"dynamicRegistration": False}}}

    def test_given_existing_capabilities_when_filled_then_preserved(self, make_client: ClientFactory) -> None:
        # Given
        capabilities: dict[str, Any] = {"textDocument": {"hover": {"contentFormat": ["markdown"]}}}
        config = HierarchyConfig(dynamic_registration=True)

        # When
        CallHierarchyFeature(make_client("go"), config).fill_client_capabilities(capabilities)

        # Then
        assert capabilities["textDocument"]["hover"] == {"contentFormat": ["markdown"]}
        assert capabilities["textDocument"]["callHierarchy"] == {"dynamicRegistration": True}


class TestFeatureRequests:
    """get/resolve dispatch."""

    @pytest.mark.asyncio
    async def test_given_item_response_when_get_then_item_returned(
        self, make_client: ClientFactory, make_wire_item: WireItem
    ) -> None:
        # Given
        client = make_client("go", result=make_wire_item(parents=[]))
        feature = TypeHierarchyFeature(client)

        # When
        item = await feature.get(_params(resolve=1, direction="parents"))

        # Then
        assert isinstance(item, TypeHierarchyItem)
        assert item.parents == []
        client.send_request.assert_awaited_once_with(
            "textDocument/typeHierarchy",
            {
                "textDocument": {"uri": "file:///a.ts"},
                "position": {"line": 3, "character": 5},
                "resolve": 1,
                "direction": "parents",
            },
        )

    @pytest.mark.asyncio
    async def test_given_null_response_when_get_then_none(self, make_client: ClientFactory) -> None:
        """No hierarchy at the position is not an error."""
        feature = TypeHierarchyFeature(make_client("go", result=None))

        assert await feature.get(_params()) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("result", ["", [], {}])
    async def test_given_empty_response_when_get_then_none(self, make_client: ClientFactory, result: Any) -> None:
        feature = TypeHierarchyFeature(make_client("go", result=result))

        assert await feature.get(_params()) is None

    @pytest.mark.asyncio
    async def test_given_resolve_zero_when_get_then_relations_unresolved(
        self, make_client: ClientFactory, make_wire_item: WireItem
    ) -> None:
        feature = TypeHierarchyFeature(make_client("go", result=make_wire_item()))

        item = await feature.get(_params(resolve=0))

        assert item is not None
        assert item.parents is None
        assert item.children is None

    @pytest.mark.asyncio
    async def test_given_transport_failure_when_get_then_propagates_unchanged(
        self, make_client: ClientFactory
    ) -> None:
        # Given
        client = make_client("go")
        failure = ConnectionError("server gone")
        client.send_request.side_effect = failure
        feature = TypeHierarchyFeature(client)

        # When / Then
        with pytest.raises(ConnectionError) as exc_info:
            await feature.get(_params())
        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_given_malformed_response_when_get_then_invalid_response(
        self, make_client: ClientFactory
    ) -> None:
        feature = TypeHierarchyFeature(make_client("go", result={"name": "broken"}))

        with pytest.raises(HierarchyError) as exc_info:
            await feature.get(_params())
        assert exc_info.value.code == ErrorCode.HIERARCHY_INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_given_item_when_resolve_then_item_and_data_round_tripped(
        self, make_client: ClientFactory, make_wire_item: WireItem
    ) -> None:
        # Given
        unresolved = make_wire_item(data={"handle": 42})
        client = make_client("go", result=make_wire_item(data={"handle": 42}, children=[]))
        feature = TypeHierarchyFeature(client)
        item = TypeHierarchyItem.model_validate(unresolved)

        # When
        resolved = await feature.resolve(item, 2, "children")

        # Then
        assert resolved is not None
        assert resolved.children == []
        method, payload = client.send_request.await_args.args
        assert method == "typeHierarchy/resolve"
        assert payload["item"]["data"] == {"handle": 42}
        assert payload["item"]["name"] == unresolved["name"]
        assert payload["resolve"] == 2
        assert payload["direction"] == "children"

    @pytest.mark.asyncio
    async def test_given_call_feature_when_get_then_call_request_sent(
        self, make_client: ClientFactory, make_wire_item: WireItem
    ) -> None:
        # Given
        client = make_client("go", result=make_wire_item("main", callers=[]))
        feature = CallHierarchyFeature(client)
        params = CallHierarchyParams(
            text_document=TextDocumentIdentifier(uri="file:///main.go"),
            position=Position(line=10, character=2),
            resolve=1,
            direction="incoming",
        )

        # When
        item = await feature.get(params)

        # Then
        assert isinstance(item, CallHierarchyItem)
        assert item.callers == []
        assert item.callees is None
        assert client.send_request.await_args.args[0] == "textDocument/callHierarchy"

    @pytest.mark.asyncio
    async def test_given_call_item_when_resolve_then_resolve_request_sent(
        self, make_client: ClientFactory, make_wire_item: WireItem
    ) -> None:
        client = make_client("go", result=None)
        feature = CallHierarchyFeature(client)
        item = CallHierarchyItem.model_validate(make_wire_item("main"))

        result = await feature.resolve(item, 1, "outgoing")

        assert result is None
        method, payload = client.send_request.await_args.args
        assert method == "callHierarchy/resolve"
        assert payload["direction"] == "outgoing"
