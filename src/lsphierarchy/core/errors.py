"""lsphierarchy error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 8xxx: Hierarchy (LSP extension)
- 9xxx: Internal

Absence of a hierarchy result is not an error: features and services return
``None`` for it. Transport failures raised by the language client are never
wrapped and reach the caller unchanged.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Hierarchy (8xxx)
    HIERARCHY_INVALID_ARGUMENT = 8001
    HIERARCHY_INVALID_RESPONSE = 8002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class LspHierarchyError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LspHierarchyError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class HierarchyError(LspHierarchyError):
    """Misuse of the hierarchy API or malformed server answers."""

    @classmethod
    def invalid_argument(cls, name: str, value: Any, expected: str) -> "HierarchyError":
        return cls(
            code=ErrorCode.HIERARCHY_INVALID_ARGUMENT,
            message=f"Unexpected {name}: {value!r}. Expected {expected}.",
            details={"name": name, "value": repr(value), "expected": expected},
        )

    @classmethod
    def invalid_response(cls, method: str, reason: str) -> "HierarchyError":
        return cls(
            code=ErrorCode.HIERARCHY_INVALID_RESPONSE,
            message=f"Invalid response for '{method}': {reason}",
            details={"method": method, "reason": reason},
        )


class InternalError(LspHierarchyError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
