"""Shared plumbing for the market-data HTTP clients."""

from __future__ import annotations

from typing import Any

import httpx

from gold_signals.logging import get_logger

log = get_logger(__name__)


class ProviderError(Exception):
    """An upstream call failed or the provider reported an error."""

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.status_code = status_code


class RateLimitedError(ProviderError):
    """The provider answered 429."""


class NotConfiguredError(ProviderError):
    """No API key configured for the provider."""


class ProviderClient:
    """Async JSON-over-HTTP client with one lazily created connection pool.

    Pass *transport* to route requests somewhere other than the network.
    """

    name: str = "provider"
    api_key_param: str = "apikey"

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_s: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_s = timeout_s
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport)
        return self._http

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def _get_json(self, path: str, params: dict[str, Any]) -> dict:
        """GET ``base_url/path`` with the API key attached and decode the JSON object."""
        if not self.configured:
            raise NotConfiguredError(self.name, "API key not configured")

        http = await self._get_http()
        query = {**params, self.api_key_param: self.api_key}
        try:
            resp = await http.get(f"{self.base_url}/{path.lstrip('/')}", params=query)
        except httpx.HTTPError as exc:
            raise ProviderError(self.name, f"request failed: {exc}") from exc

        if resp.status_code == 429:
            log.warning("provider_rate_limited", provider=self.name, path=path)
            raise RateLimitedError(self.name, "rate limit reached", status_code=429)
        if resp.is_error:
            raise ProviderError(
                self.name, f"returned status {resp.status_code}", status_code=resp.status_code
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise ProviderError(self.name, "response body is not JSON") from exc
        if not isinstance(body, dict):
            raise ProviderError(self.name, f"expected a JSON object, got {type(body).__name__}")
        return body
