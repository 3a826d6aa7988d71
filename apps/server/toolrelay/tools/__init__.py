import httpx

from ..core.config import Settings
from .calculator import CalculatorTool
from .price_oracle import PriceOracleTool
from .registry import ToolRegistry


def build_registry(settings: Settings, http_client: httpx.AsyncClient) -> ToolRegistry:
    r = ToolRegistry()
    r.register_tool(CalculatorTool())
    r.register_tool(
        PriceOracleTool(
            client=http_client,
            base_url=settings.price_api_base_url,
            timeout_s=settings.price_timeout_s,
        )
    )
    return r
