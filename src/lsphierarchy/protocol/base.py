"""Base LSP structures shared by the hierarchy extensions.

Models accept snake_case attribute names and camelCase wire names alike and
always serialize to the camelCase wire form. Optional fields left as ``None``
are omitted from the wire form; empty lists are kept.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from lsphierarchy.core.errors import HierarchyError


class ProtocolModel(BaseModel):
    """Base for wire structures.

    Unknown fields sent by a server are kept so that items can be handed back
    verbatim in resolve requests.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class SymbolKind(IntEnum):
    """A symbol kind."""

    FILE = 1
    MODULE = 2
    NAMESPACE = 3
    PACKAGE = 4
    CLASS = 5
    METHOD = 6
    PROPERTY = 7
    FIELD = 8
    CONSTRUCTOR = 9
    ENUM = 10
    INTERFACE = 11
    FUNCTION = 12
    VARIABLE = 13
    CONSTANT = 14
    STRING = 15
    NUMBER = 16
    BOOLEAN = 17
    ARRAY = 18
    OBJECT = 19
    KEY = 20
    NULL = 21
    ENUM_MEMBER = 22
    STRUCT = 23
    EVENT = 24
    OPERATOR = 25
    TYPE_PARAMETER = 26


class Position(ProtocolModel):
    """Zero-based line and character offset in a text document."""

    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.character)


class Range(ProtocolModel):
    start: Position
    end: Position

    def contains(self, other: Range) -> bool:
        return (
            self.start.as_tuple() <= other.start.as_tuple()
            and other.end.as_tuple() <= self.end.as_tuple()
        )


class Location(ProtocolModel):
    uri: str
    range: Range


class TextDocumentIdentifier(ProtocolModel):
    uri: str


class TextDocumentPositionParams(ProtocolModel):
    text_document: TextDocumentIdentifier
    position: Position


class DocumentFilter(ProtocolModel):
    language: str | None = None
    scheme: str | None = None
    pattern: str | None = None


DocumentSelector = Sequence[DocumentFilter | Mapping[str, Any] | str]


def selector_to_wire(selector: DocumentSelector) -> list[Any]:
    """Normalize a document selector to its JSON form."""
    wire: list[Any] = []
    for entry in selector:
        if isinstance(entry, str):
            wire.append(entry)
        elif isinstance(entry, DocumentFilter):
            wire.append(entry.to_wire())
        else:
            wire.append(DocumentFilter.model_validate(entry).to_wire())
    return wire


class Registration(ProtocolModel):
    """A negotiated registration. ``id`` is unique per negotiation."""

    id: str
    method: str
    register_options: dict[str, Any] = Field(default_factory=dict)


def is_position_params(value: Any) -> bool:
    """Whether ``value`` already has the ``{textDocument, position}`` shape."""
    if isinstance(value, TextDocumentPositionParams):
        return True
    if isinstance(value, Mapping):
        position = value.get("position")
        document = value.get("textDocument", value.get("text_document"))
    else:
        position = getattr(value, "position", None)
        document = getattr(value, "text_document", None)
    if position is None or document is None:
        return False
    try:
        if not isinstance(position, Position):
            Position.model_validate(position)
        if not isinstance(document, TextDocumentIdentifier):
            TextDocumentIdentifier.model_validate(document)
    except ValidationError:
        return False
    return True


P = TypeVar("P", bound=ProtocolModel)
R = TypeVar("R", bound=ProtocolModel)


@dataclass(frozen=True)
class RequestType(Generic[P, R]):
    """One wire method with its params and result models."""

    method: str
    params_type: type[P]
    result_type: type[R]

    def serialize(self, params: P) -> dict[str, Any]:
        return params.to_wire()

    def parse(self, result: Any) -> R | None:
        """Turn a raw result into the result model.

        ``null`` and empty results (``""``, ``[]``, ``{}``) mean no result.
        """
        if isinstance(result, self.result_type):
            return result
        if result is None or (not isinstance(result, BaseModel) and not result):
            return None
        try:
            return self.result_type.model_validate(result)
        except ValidationError as e:
            raise HierarchyError.invalid_response(self.method, str(e)) from e
