"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TwelveDataConfig(BaseModel):
    base_url: str = "https://api.twelvedata.com"
    api_key: str | None = None
    timeout_s: float = 15.0
    symbol: str = "XAU/USD"
    interval: str = "1day"
    rsi_period: int = 14
    outputsize: int = 30


class MetalsDevConfig(BaseModel):
    base_url: str = "https://api.metals.dev/v1"
    api_key: str | None = None
    timeout_s: float = 15.0
    currency: str = "USD"
    unit: str = "toz"


class NewsApiConfig(BaseModel):
    base_url: str = "https://newsapi.org/v2"
    api_key: str | None = None
    timeout_s: float = 15.0
    query: str = "gold market OR gold price"
    sort_by: str = "publishedAt"
    page_size: int = 6
    language: str = "en"


class ProvidersConfig(BaseModel):
    twelve_data: TwelveDataConfig = Field(default_factory=TwelveDataConfig)
    metals_dev: MetalsDevConfig = Field(default_factory=MetalsDevConfig)
    news_api: NewsApiConfig = Field(default_factory=NewsApiConfig)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    # Cache-Control values sent to the CDN in front of the service
    market_heat_cache: str = "s-maxage=3600, stale-while-revalidate"
    metals_cache: str = "s-maxage=60, stale-while-revalidate"


class AppConfig(BaseModel):
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
