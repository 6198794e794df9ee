"""Shared test fixtures."""

from __future__ import annotations

import httpx
import pytest


def routed_transport(routes: dict[str, tuple[int, object]], seen: list[httpx.Request] | None = None):
    """MockTransport answering by the last path segment of the request URL.

    *routes* maps a path suffix (e.g. ``"rsi"``) to ``(status, json_body)``.
    Unknown paths answer 404.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        suffix = request.url.path.rstrip("/").rsplit("/", 1)[-1]
        if suffix not in routes:
            return httpx.Response(404, json={"message": "not found"})
        status, body = routes[suffix]
        return httpx.Response(status, json=body)

    return httpx.MockTransport(handler)


def td_series(key: str, values: list[str]) -> dict:
    """A Twelve Data ``values`` body with one numeric field per row."""
    return {
        "meta": {"symbol": "XAU/USD", "interval": "1day"},
        "values": [
            {"datetime": f"2026-10-{16 - i:02d}", key: v} for i, v in enumerate(values)
        ],
        "status": "ok",
    }


@pytest.fixture
def rsi_body() -> dict:
    # 85 starts a streak, 64 ends it, 75 starts a second one
    return td_series("rsi", ["85.0", "72.0", "64.0", "75.0", "60.0"])


@pytest.fixture
def macd_body() -> dict:
    return {
        "values": [
            {"datetime": "2026-10-16", "macd": "-1.2", "macd_signal": "0.3", "macd_hist": "-1.5"},
        ],
        "status": "ok",
    }


@pytest.fixture
def closes_body() -> dict:
    # 2080 vs 2000 -> +4.0%
    return td_series("close", ["2080.0", "2000.0", "1990.0"])


@pytest.fixture
def routed():
    return routed_transport


@pytest.fixture
def series():
    return td_series
