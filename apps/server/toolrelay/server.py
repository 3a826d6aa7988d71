from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from toolrelay.core.config import Settings
from toolrelay.core.logging import configure_logging
from toolrelay.services.invocation_service import InvocationService
from toolrelay.services.router import ServerInfo, ToolRouter
from toolrelay.tools import build_registry

log = logging.getLogger("toolrelay")


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> AsyncIterator[ToolRouter]:
    """
    Build the dispatcher and its shared resources.
    An injected http_client is left open on exit; one created here is closed.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(settings.price_timeout_s))

    registry = build_registry(settings, client)
    router = ToolRouter(
        tools=registry,
        service=InvocationService(registry),
        info=ServerInfo(name=settings.app_name, version=settings.app_version),
        log_level=settings.log_level,
    )
    log.info(
        "%s %s ready with tools: %s (port %s)",
        settings.app_name,
        settings.app_version,
        ", ".join(registry.names()),
        settings.port,
    )

    try:
        yield router
    finally:
        if owns_client:
            await client.aclose()
