"""NewsAPI client — latest gold-market headlines."""

from __future__ import annotations

from typing import Any

from gold_signals.providers.base import ProviderClient, ProviderError


class NewsApiClient(ProviderClient):
    name = "news_api"
    api_key_param = "apiKey"

    def __init__(
        self,
        base_url: str = "https://newsapi.org/v2",
        api_key: str | None = None,
        *,
        query: str = "gold market OR gold price",
        sort_by: str = "publishedAt",
        page_size: int = 6,
        language: str = "en",
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, api_key, **kwargs)
        self.query = query
        self.sort_by = sort_by
        self.page_size = page_size
        self.language = language

    async def get_headlines(self) -> tuple[list[dict], int]:
        """Return ``(articles, totalResults)``."""
        body = await self._get_json("everything", {
            "q": self.query,
            "sortBy": self.sort_by,
            "pageSize": self.page_size,
            "language": self.language,
        })
        if body.get("status") != "ok":
            raise ProviderError(self.name, body.get("message") or "unknown error from NewsAPI")
        return body.get("articles") or [], int(body.get("totalResults") or 0)
