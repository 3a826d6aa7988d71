from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol, Type, Union

from pydantic import BaseModel

from ..domain.errors import ToolNotFoundError
from ..domain.schemas import ToolOutcome

HandlerReturn = Union[ToolOutcome, str]
ToolHandler = Callable[[BaseModel], Union[HandlerReturn, Awaitable[HandlerReturn]]]


class Tool(Protocol):
    name: str
    description: str
    InputModel: Type[BaseModel]

    def run(self, validated: BaseModel) -> HandlerReturn | Awaitable[HandlerReturn]: ...


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: ToolHandler

    def json_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


class ToolRegistry:
    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        schema: Type[BaseModel],
        handler: ToolHandler,
    ) -> ToolDefinition:
        # Last registration wins.
        definition = ToolDefinition(
            name=name,
            description=description,
            input_model=schema,
            handler=handler,
        )
        self._tools[name] = definition
        return definition

    def register_tool(self, tool: Tool) -> ToolDefinition:
        return self.register(tool.name, tool.description, tool.InputModel, tool.run)

    def get(self, name: str) -> ToolDefinition:
        if name not in self._tools:
            raise ToolNotFoundError(name)
        return self._tools[name]

    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
