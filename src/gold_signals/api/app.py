"""FastAPI application serving market heat, spot prices and news to the dashboard."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, TypeVar

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gold_signals.config import AppConfig, load_config
from gold_signals.logging import bind_request, get_logger
from gold_signals.providers import (
    MetalsDevClient,
    NewsApiClient,
    ProviderError,
    RateLimitedError,
    TwelveDataClient,
    build_clients,
)
from gold_signals.signal import assess_heat, classify, market_heat_payload, price_change_pct

logger = get_logger(__name__)

T = TypeVar("T")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# Generic 500 message per route; internal details are only logged
FAILURES: dict[str, str] = {
    "/api/market-heat": "Failed to calculate market signals. Please try again later.",
    "/api/metals": "Failed to fetch metal prices. Please try again later.",
    "/api/news": "Failed to fetch news",
}
DEFAULT_FAILURE = "Internal server error. Please try again later."


def _error(status_code: int, message: str, cache_control: str | None = None) -> JSONResponse:
    headers = {"Cache-Control": cache_control} if cache_control else None
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


async def _optional(what: str, call: Awaitable[T]) -> T | None:
    """Await a secondary upstream call, degrading failures to None."""
    try:
        return await call
    except ProviderError as exc:
        logger.warning("secondary_fetch_failed", what=what, error=str(exc))
        return None


# ── Dependencies ──────────────────────────────────────────────


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_twelve_data(request: Request) -> TwelveDataClient:
    return request.app.state.twelve_data


def get_metals(request: Request) -> MetalsDevClient:
    return request.app.state.metals


def get_news(request: Request) -> NewsApiClient:
    return request.app.state.news


# ── App factory ───────────────────────────────────────────────


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build the API. Config is loaded from file/env when not given."""
    config = config or load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        for client in (app.state.twelve_data, app.state.metals, app.state.news):
            await client.close()
        logger.info("Upstream clients closed")

    app = FastAPI(
        title="Gold Signals API",
        description="Market heat, buy/sell signals, spot prices and news for the gold dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.twelve_data, app.state.metals, app.state.news = build_clients(config.providers)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.allow_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = bind_request(request.headers.get("x-request-id"), path=request.url.path)
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
        return _error(exc.status_code, message)

    cache_by_path = {
        "/api/market-heat": config.api.market_heat_cache,
        "/api/metals": config.api.metals_cache,
    }

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        path = request.url.path
        logger.exception("Unhandled error", path=path)
        return _error(500, FAILURES.get(path, DEFAULT_FAILURE), cache_by_path.get(path))

    @app.options("/api/{path:path}")
    async def preflight(path: str) -> Response:
        return Response(status_code=200)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "timestamp": _now()}

    @app.get("/api/market-heat")
    async def market_heat(
        response: Response,
        cfg: AppConfig = Depends(get_config),
        client: TwelveDataClient = Depends(get_twelve_data),
    ) -> Any:
        """Market heat (RSI), overheat alert and the composite ENTRY/EXIT/HOLD signal."""
        cache = cfg.api.market_heat_cache
        response.headers["Cache-Control"] = cache
        if not client.configured:
            logger.error("TWELVE_DATA_API_KEY not configured")
            return _error(500, "Signal system not configured.", cache)

        failure = FAILURES["/api/market-heat"]
        logger.info("Fetching market data", symbol=client.symbol)
        try:
            oscillator = await client.get_rsi()
        except ProviderError as exc:
            logger.error("Error calculating signals", error=str(exc))
            return _error(500, failure, cache)

        trend, closes = await asyncio.gather(
            _optional("macd", client.get_macd()),
            _optional("time_series", client.get_closes()),
        )
        result = classify(oscillator, trend, price_change_pct(closes) if closes else None)
        heat = assess_heat(oscillator)
        if result is None or heat is None:
            logger.error("No Market Heat data available")
            return _error(500, failure, cache)

        logger.info(
            "Signals calculated",
            signal=result.type.value,
            strength=result.strength,
            heat=round(heat.current, 1),
            heat_level=heat.level,
        )
        return {
            "success": True,
            "data": market_heat_payload(oscillator, heat, result),
            "timestamp": _now(),
        }

    @app.get("/api/metals")
    async def metals(
        response: Response,
        cfg: AppConfig = Depends(get_config),
        client: MetalsDevClient = Depends(get_metals),
    ) -> Any:
        """Latest precious-metal spot prices, proxied so the key stays server-side."""
        cache = cfg.api.metals_cache
        response.headers["Cache-Control"] = cache
        if not client.configured:
            logger.error("METALS_DEV_API_KEY not configured")
            return _error(
                500, "Metals price service not configured. Please contact administrator.", cache
            )

        try:
            data = await client.get_latest()
        except RateLimitedError:
            return _error(
                429, "Price service temporarily unavailable. Please try again later.", cache
            )
        except ProviderError as exc:
            logger.error("Error fetching metal prices", error=str(exc))
            return _error(500, FAILURES["/api/metals"], cache)

        logger.info("Fetched metal prices")
        return {"success": True, "data": data, "timestamp": _now()}

    @app.get("/api/news")
    async def news(client: NewsApiClient = Depends(get_news)) -> Any:
        """Latest gold-market headlines."""
        if not client.configured:
            logger.error("NEWS_API_KEY not configured")
            return _error(500, "News service not configured.")

        try:
            articles, total = await client.get_headlines()
        except ProviderError as exc:
            logger.error("Error fetching news", error=str(exc))
            return _error(500, FAILURES["/api/news"])

        return {"success": True, "articles": articles, "totalResults": total}

    return app
