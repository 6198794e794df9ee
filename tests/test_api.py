"""Tests for the HTTP API, with upstream providers on MockTransport."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from gold_signals.api.app import create_app, get_metals, get_news, get_twelve_data
from gold_signals.config import AppConfig
from gold_signals.providers import MetalsDevClient, NewsApiClient, TwelveDataClient

KEYED = AppConfig(providers={
    "twelve_data": {"api_key": "td"},
    "metals_dev": {"api_key": "md"},
    "news_api": {"api_key": "na"},
})


@pytest.fixture
def make_client(routed):
    """TestClient whose provider dependencies answer from *routes*."""

    def factory(
        routes: dict, config: AppConfig = KEYED, raise_server_exceptions: bool = True
    ) -> TestClient:
        app = create_app(config)
        providers = config.providers
        app.dependency_overrides[get_twelve_data] = lambda: TwelveDataClient(
            api_key=providers.twelve_data.api_key, transport=routed(routes)
        )
        app.dependency_overrides[get_metals] = lambda: MetalsDevClient(
            api_key=providers.metals_dev.api_key, transport=routed(routes)
        )
        app.dependency_overrides[get_news] = lambda: NewsApiClient(
            api_key=providers.news_api.api_key, transport=routed(routes)
        )
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return factory


class TestHealth:
    def test_health(self):
        resp = TestClient(create_app(AppConfig())).get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert resp.headers["x-request-id"]

    def test_request_id_echoed(self):
        resp = TestClient(create_app(AppConfig())).get(
            "/api/health", headers={"X-Request-ID": "req-42"}
        )
        assert resp.headers["x-request-id"] == "req-42"


class TestMarketHeat:
    def test_full_signal(self, make_client, rsi_body, macd_body, closes_body):
        client = make_client({
            "rsi": (200, rsi_body),
            "macd": (200, macd_body),
            "time_series": (200, closes_body),
        })
        resp = client.get("/api/market-heat")

        assert resp.status_code == 200
        assert resp.headers["cache-control"] == "s-maxage=3600, stale-while-revalidate"
        body = resp.json()
        assert body["success"] is True
        assert body["timestamp"].endswith("Z")

        data = body["data"]
        assert data["currentHeat"] == 85.0
        assert data["heatLevel"] == 2
        assert data["peakCycles"] == 2
        assert data["maxCycles"] == 3
        assert data["isOverheated"] is True
        assert data["alert"]["title"] == "Caution - Market Overheating"
        assert len(data["history"]) == 5
        assert data["history"][0] == {"date": "2026-10-16", "heat": 85.0}

        signal = data["signal"]
        assert signal["type"] == "EXIT"
        assert signal["strength"] == 10
        assert signal["confidence"] == 98
        assert signal["trendForce"] == "Bearish"
        assert signal["pulseSpeed"] == "Extreme"
        assert signal["pulseValue"] == "4.00"
        assert len(signal["supportingIndicators"]) == 3

    def test_secondary_failures_degrade(self, make_client, series):
        client = make_client({
            "rsi": (200, series("rsi", ["25.0"])),
            "macd": (500, {}),
            "time_series": (200, {"status": "error", "message": "out of credits"}),
        })
        resp = client.get("/api/market-heat")

        assert resp.status_code == 200
        signal = resp.json()["data"]["signal"]
        assert signal["type"] == "ENTRY"
        assert signal["strength"] == 6
        assert signal["trendForce"] == "Neutral"
        assert signal["pulseSpeed"] == "Steady"
        assert signal["pulseValue"] == "0.00"

    def test_single_close_gives_no_pulse(self, make_client, series):
        client = make_client({
            "rsi": (200, series("rsi", ["50.0"])),
            "time_series": (200, series("close", ["2000.0"])),
        })
        signal = client.get("/api/market-heat").json()["data"]["signal"]
        assert signal["type"] == "HOLD"
        assert signal["pulseValue"] == "0.00"

    def test_nan_close_degrades_to_steady(self, make_client, series):
        client = make_client({
            "rsi": (200, series("rsi", ["50.0"])),
            "time_series": (200, series("close", ["NaN", "2000.0"])),
        })
        resp = client.get("/api/market-heat")

        assert resp.status_code == 200
        signal = resp.json()["data"]["signal"]
        assert signal["type"] == "HOLD"
        assert signal["pulseSpeed"] == "Steady"
        assert signal["pulseValue"] == "0.00"

    def test_nan_macd_degrades_to_neutral(self, make_client, series):
        macd = {
            "values": [
                {"datetime": "2026-10-16", "macd": "NaN", "macd_signal": "0.3", "macd_hist": "NaN"},
            ],
            "status": "ok",
        }
        client = make_client({"rsi": (200, series("rsi", ["25.0"])), "macd": (200, macd)})
        resp = client.get("/api/market-heat")

        assert resp.status_code == 200
        signal = resp.json()["data"]["signal"]
        assert signal["trendForce"] == "Neutral"
        assert signal["strength"] == 6

    def test_unexpected_exception_returns_json_error(self, make_client):
        client = make_client({}, raise_server_exceptions=False)
        with patch.object(TwelveDataClient, "get_rsi", side_effect=RuntimeError("boom")):
            resp = client.get("/api/market-heat")

        assert resp.status_code == 500
        assert resp.headers["cache-control"] == "s-maxage=3600, stale-while-revalidate"
        assert resp.json() == {
            "success": False,
            "error": "Failed to calculate market signals. Please try again later.",
        }

    def test_missing_rsi_is_an_error(self, make_client):
        client = make_client({"rsi": (200, {"values": [], "status": "ok"})})
        resp = client.get("/api/market-heat")
        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "error": "Failed to calculate market signals. Please try again later.",
        }

    def test_rsi_provider_error(self, make_client):
        client = make_client({"rsi": (200, {"status": "error", "message": "bad symbol"})})
        resp = client.get("/api/market-heat")
        assert resp.status_code == 500
        assert resp.json()["success"] is False

    def test_not_configured(self, make_client):
        client = make_client({}, config=AppConfig())
        resp = client.get("/api/market-heat")
        assert resp.status_code == 500
        assert resp.headers["cache-control"] == "s-maxage=3600, stale-while-revalidate"
        assert resp.json() == {"success": False, "error": "Signal system not configured."}

    def test_method_not_allowed(self, make_client):
        resp = make_client({}).post("/api/market-heat")
        assert resp.status_code == 405
        assert resp.json() == {"success": False, "error": "Method not allowed"}

    def test_preflight(self, make_client):
        resp = make_client({}).options("/api/market-heat")
        assert resp.status_code == 200

    def test_cors_headers(self, make_client, series):
        client = make_client({"rsi": (200, series("rsi", ["50.0"]))})
        resp = client.get("/api/market-heat", headers={"Origin": "https://dashboard.example"})
        assert resp.headers["access-control-allow-origin"] == "*"


class TestMetals:
    def test_passthrough(self, make_client):
        body = {"status": "success", "metals": {"gold": 2650.1, "silver": 31.2}}
        resp = make_client({"latest": (200, body)}).get("/api/metals")

        assert resp.status_code == 200
        assert resp.headers["cache-control"] == "s-maxage=60, stale-while-revalidate"
        payload = resp.json()
        assert payload["success"] is True
        assert payload["data"] == body
        assert "timestamp" in payload

    def test_rate_limited(self, make_client):
        resp = make_client({"latest": (429, {})}).get("/api/metals")
        assert resp.status_code == 429
        assert resp.headers["cache-control"] == "s-maxage=60, stale-while-revalidate"
        assert resp.json()["error"] == "Price service temporarily unavailable. Please try again later."

    def test_upstream_failure_hides_details(self, make_client):
        resp = make_client({"latest": (502, {"secret": "stack trace"})}).get("/api/metals")
        assert resp.status_code == 500
        assert resp.json() == {
            "success": False,
            "error": "Failed to fetch metal prices. Please try again later.",
        }

    def test_not_configured(self, make_client):
        resp = make_client({}, config=AppConfig()).get("/api/metals")
        assert resp.status_code == 500
        assert "not configured" in resp.json()["error"]


class TestNews:
    def test_headlines(self, make_client):
        body = {"status": "ok", "totalResults": 2, "articles": [{"title": "a"}, {"title": "b"}]}
        resp = make_client({"everything": (200, body)}).get("/api/news")
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "articles": [{"title": "a"}, {"title": "b"}],
            "totalResults": 2,
        }

    def test_unexpected_exception_returns_json_error(self, make_client):
        client = make_client({}, raise_server_exceptions=False)
        with patch.object(NewsApiClient, "get_headlines", side_effect=KeyError("articles")):
            resp = client.get("/api/news")

        assert resp.status_code == 500
        assert "cache-control" not in resp.headers
        assert resp.json() == {"success": False, "error": "Failed to fetch news"}

    def test_error(self, make_client):
        resp = make_client({"everything": (200, {"status": "error"})}).get("/api/news")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Failed to fetch news"}
