from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from ..domain.errors import UpstreamError
from ..domain.schemas import ToolFailure, ToolOutcome, ToolSuccess
from .numeric import format_number

log = logging.getLogger("toolrelay.tools")

class PriceOracleIn(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    crypto: str


def _render_price(price: Any) -> str:
    if isinstance(price, bool):
        return "true" if price else "false"
    if isinstance(price, (int, float)):
        return format_number(price)
    return str(price)


class PriceOracleTool:
    name = "priceoracle"
    description = (
        "Fetches the current price in USD for a given cryptocurrency using the CoinGecko API. "
        'Provide the cryptocurrency id (e.g., "bitcoin", "ethereum").'
    )
    InputModel = PriceOracleIn

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        timeout_s: float | None,
    ):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s

    def price_url(self) -> str:
        return f"{self._base_url}/simple/price"

    async def fetch_usd_price(self, crypto_id: str) -> Any:
        try:
            r = await self._client.get(
                self.price_url(),
                params={"ids": crypto_id, "vs_currencies": "usd"},
                timeout=self._timeout_s,
            )
        except httpx.HTTPError as e:
            log.warning("Price request for %s failed: %s", crypto_id, e)
            raise UpstreamError(f"Error fetching price for {crypto_id}") from e

        if not r.is_success:
            log.warning("Price request for %s returned HTTP %s", crypto_id, r.status_code)
            raise UpstreamError(f"Error fetching price for {crypto_id}")

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError(f"Price not found for {crypto_id}") from e

        entry = data.get(crypto_id) if isinstance(data, dict) else None
        price = entry.get("usd") if isinstance(entry, dict) else None
        # Falsy quotes (missing, null, 0, "") count as absent.
        if not price:
            raise UpstreamError(f"Price not found for {crypto_id}")
        return price

    async def run(self, validated: PriceOracleIn) -> ToolOutcome:
        crypto_id = validated.crypto.lower()
        try:
            price = await self.fetch_usd_price(crypto_id)
        except UpstreamError as e:
            return ToolFailure(e.message, e.error_code)
        return ToolSuccess(f"Current price of {crypto_id}: ${_render_price(price)}")
