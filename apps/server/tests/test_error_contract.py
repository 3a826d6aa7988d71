from toolrelay.domain.enums import ErrorCode
from toolrelay.domain.errors import (
    DomainError,
    ToolInvocationFailed,
    ToolNotFoundError,
    ToolRelayError,
    ToolValidationError,
    UpstreamError,
)
from toolrelay.domain.schemas import InvocationError


def test_error_code_mapping_for_each_failure_class():
    assert ToolNotFoundError("x").error_code == ErrorCode.tool_not_found
    assert ToolValidationError("bad").error_code == ErrorCode.validation_error
    assert DomainError("Division by zero").error_code == ErrorCode.domain_error
    assert UpstreamError("Error fetching price for btc").error_code == ErrorCode.upstream_error
    assert ToolRelayError("oops").error_code == ErrorCode.internal_error


def test_all_failures_share_a_message_attribute():
    for exc in [ToolNotFoundError("abacus"), DomainError("Unknown operation"), ToolValidationError("bad", [{"field": "a"}])]:
        assert isinstance(exc, ToolRelayError)
        assert exc.message == str(exc)


def test_invocation_failed_carries_envelope():
    envelope = InvocationError(message="Price not found for btc", error_code=ErrorCode.upstream_error)
    exc = ToolInvocationFailed(envelope)

    assert exc.message == "Price not found for btc"
    assert exc.error_code == ErrorCode.upstream_error
    assert exc.error.model_dump(mode="json") == {
        "message": "Price not found for btc",
        "error_code": "UPSTREAM_ERROR",
        "errors": None,
    }
