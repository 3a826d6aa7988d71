"""Error taxonomy for tool invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .enums import ErrorCode

if TYPE_CHECKING:
    from .schemas import InvocationError


class ToolRelayError(RuntimeError):
    """Base error; every subclass maps to one stable error code."""

    error_code: ErrorCode = ErrorCode.internal_error

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ToolNotFoundError(ToolRelayError):
    """Raised when a tool name has no registry entry."""

    error_code = ErrorCode.tool_not_found

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolValidationError(ToolRelayError):
    """Raised when raw arguments do not match a tool's input schema."""

    error_code = ErrorCode.validation_error

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class DomainError(ToolRelayError):
    """Business-rule violation inside a handler."""

    error_code = ErrorCode.domain_error


class UpstreamError(ToolRelayError):
    """External HTTP call failed or returned an unusable shape."""

    error_code = ErrorCode.upstream_error


class ToolInvocationFailed(ToolRelayError):
    """Raised by the raising entry points; carries the normalized envelope."""

    def __init__(self, error: "InvocationError") -> None:
        super().__init__(error.message)
        self.error = error
        self.error_code = error.error_code
