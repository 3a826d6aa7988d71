from __future__ import annotations

import inspect
import logging
import time
from functools import partial
from typing import Any

import anyio

from ..domain.enums import ErrorCode
from ..domain.errors import ToolInvocationFailed, ToolNotFoundError, ToolRelayError, ToolValidationError
from ..domain.schemas import InvocationError, ToolFailure, ToolResult, ToolSuccess
from ..tools.registry import ToolDefinition, ToolRegistry
from ..tools.validation import describe_violations, validate_arguments

log = logging.getLogger("toolrelay.services")


class InvocationService:
    def __init__(self, tools: ToolRegistry):
        self.tools = tools

    def _error_envelope(self, exc: ToolRelayError) -> InvocationError:
        errors = getattr(exc, "errors", None) or None
        return InvocationError(message=exc.message, error_code=exc.error_code, errors=errors)

    async def _run_handler(self, definition: ToolDefinition, validated: Any) -> Any:
        handler = definition.handler
        if inspect.iscoroutinefunction(handler):
            return await handler(validated)
        # Blocking handlers must not stall the event loop.
        result = await anyio.to_thread.run_sync(partial(handler, validated))
        if inspect.isawaitable(result):
            result = await result
        return result

    def _normalize(self, tool_name: str, outcome: Any) -> ToolResult | InvocationError:
        if isinstance(outcome, ToolSuccess):
            return ToolResult.from_text(outcome.text)
        if isinstance(outcome, ToolFailure):
            return InvocationError(message=outcome.message, error_code=outcome.error_code)
        if isinstance(outcome, str):
            return ToolResult.from_text(outcome)
        if isinstance(outcome, ToolResult):
            return outcome
        log.error("Tool %s returned unsupported result type %s", tool_name, type(outcome).__name__)
        return InvocationError(
            message=f"Tool {tool_name} returned an unsupported result",
            error_code=ErrorCode.internal_error,
        )

    async def invoke(self, tool_name: str, raw_args: Any) -> ToolResult | InvocationError:
        try:
            definition = self.tools.get(tool_name)
        except ToolNotFoundError as e:
            log.info("Rejected call to unknown tool %s", tool_name)
            return self._error_envelope(e)

        validated, violations = validate_arguments(definition.input_model, raw_args)
        if violations:
            exc = ToolValidationError(
                f"Invalid arguments for {tool_name}: {describe_violations(violations)}",
                errors=[v.model_dump() for v in violations],
            )
            log.info("%s", exc.message)
            return self._error_envelope(exc)

        started_ns = time.perf_counter_ns()
        try:
            outcome = await self._run_handler(definition, validated)
            envelope = self._normalize(tool_name, outcome)
        except ToolRelayError as e:
            envelope = self._error_envelope(e)
        except Exception as e:
            log.exception("Tool %s raised", tool_name)
            envelope = InvocationError(message=str(e), error_code=ErrorCode.internal_error)

        duration_ms = int((time.perf_counter_ns() - started_ns) / 1_000_000)
        status = "FAILED" if isinstance(envelope, InvocationError) else "SUCCEEDED"
        log.debug("Tool %s %s in %sms", tool_name, status, duration_ms)
        return envelope

    async def call(self, tool_name: str, raw_args: Any) -> ToolResult:
        envelope = await self.invoke(tool_name, raw_args)
        if isinstance(envelope, InvocationError):
            raise ToolInvocationFailed(envelope)
        return envelope
