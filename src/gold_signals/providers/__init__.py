"""Upstream market-data API clients."""

from gold_signals.config.schema import ProvidersConfig
from gold_signals.providers.base import (
    NotConfiguredError,
    ProviderClient,
    ProviderError,
    RateLimitedError,
)
from gold_signals.providers.metals import MetalsDevClient
from gold_signals.providers.news import NewsApiClient
from gold_signals.providers.twelvedata import TwelveDataClient


def build_clients(cfg: ProvidersConfig) -> tuple[TwelveDataClient, MetalsDevClient, NewsApiClient]:
    """Instantiate one client per provider from config."""
    td, md, na = cfg.twelve_data, cfg.metals_dev, cfg.news_api
    return (
        TwelveDataClient(
            td.base_url,
            td.api_key,
            symbol=td.symbol,
            interval=td.interval,
            rsi_period=td.rsi_period,
            outputsize=td.outputsize,
            timeout_s=td.timeout_s,
        ),
        MetalsDevClient(
            md.base_url, md.api_key, currency=md.currency, unit=md.unit, timeout_s=md.timeout_s
        ),
        NewsApiClient(
            na.base_url,
            na.api_key,
            query=na.query,
            sort_by=na.sort_by,
            page_size=na.page_size,
            language=na.language,
            timeout_s=na.timeout_s,
        ),
    )


__all__ = [
    "MetalsDevClient",
    "NewsApiClient",
    "NotConfiguredError",
    "ProviderClient",
    "ProviderError",
    "RateLimitedError",
    "TwelveDataClient",
    "build_clients",
]
