from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..tools.registry import ToolHandler, ToolRegistry
from .invocation_service import InvocationService

log = logging.getLogger("toolrelay")


@dataclass(frozen=True)
class ServerInfo:
    name: str = "example-server"
    version: str = "1.0.0"
    capabilities: dict[str, Any] = field(default_factory=lambda: {"logging": {}})


class ToolRouter:
    """
    Framework-facing surface of the dispatcher.
    The embedding RPC layer registers tools through add_tool(), advertises them
    with list_tools() and forwards demultiplexed calls to call_tool().
    """

    def __init__(
        self,
        tools: ToolRegistry,
        service: InvocationService | None = None,
        info: ServerInfo | None = None,
        log_level: str = "DEBUG",
    ):
        self.tools = tools
        self.service = service or InvocationService(tools)
        self.info = info or ServerInfo()
        self.log_level = log_level.upper()
        log.setLevel(self.log_level)

    def add_tool(self, name: str, metadata: Mapping[str, Any], handler: ToolHandler) -> None:
        schema = metadata.get("schema")
        if schema is None:
            raise ValueError(f"Tool {name} is missing a schema")
        if name in self.tools:
            log.warning("Tool %s registered again; replacing previous definition", name)
        self.tools.register(name, str(metadata.get("description") or ""), schema, handler)
        log.debug("Registered tool %s", name)

    def server_info(self) -> dict[str, Any]:
        return {
            "name": self.info.name,
            "version": self.info.version,
            "capabilities": dict(self.info.capabilities),
        }

    def list_tools(self) -> list[dict[str, Any]]:
        return [
            {"name": d.name, "description": d.description, "inputSchema": d.json_schema()}
            for d in self.tools.definitions()
        ]

    async def call_tool(self, name: str, arguments: Any) -> dict[str, Any]:
        result = await self.service.call(name, arguments)
        return result.model_dump(mode="json")
