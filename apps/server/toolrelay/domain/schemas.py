from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import ErrorCode


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    content: list[TextContent] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    kind: str


class InvocationError(BaseModel):
    message: str
    error_code: ErrorCode = Field(..., description="Stable machine-readable error code")
    errors: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class ToolSuccess:
    text: str


@dataclass(frozen=True)
class ToolFailure:
    message: str
    error_code: ErrorCode = ErrorCode.domain_error


ToolOutcome = Union[ToolSuccess, ToolFailure]
