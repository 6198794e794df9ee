"""Metals.dev client — latest spot prices."""

from __future__ import annotations

from typing import Any

from gold_signals.providers.base import ProviderClient, ProviderError


class MetalsDevClient(ProviderClient):
    name = "metals_dev"
    api_key_param = "api_key"

    def __init__(
        self,
        base_url: str = "https://api.metals.dev/v1",
        api_key: str | None = None,
        *,
        currency: str = "USD",
        unit: str = "toz",
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, api_key, **kwargs)
        self.currency = currency
        self.unit = unit

    async def get_latest(self) -> dict:
        """Return the provider body unchanged once it reports success."""
        body = await self._get_json("latest", {"currency": self.currency, "unit": self.unit})
        if body.get("status") != "success":
            raise ProviderError(self.name, body.get("message") or "unexpected response")
        return body
