"""Twelve Data client — RSI, MACD and daily closes for one symbol.

Twelve Data returns HTTP 200 with ``{"status": "error", "message": ...}``
for bad symbols, exhausted credits, etc., so the body status is checked on
every call. Series come back most recent first under ``values``, with
numbers encoded as strings.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from gold_signals.models import MAX_HISTORY, OscillatorPoint, OscillatorReading, TrendIndicator
from gold_signals.providers.base import ProviderClient, ProviderError

T = TypeVar("T")


class TwelveDataClient(ProviderClient):
    """Async client for the Twelve Data technical-indicator endpoints."""

    name = "twelve_data"
    api_key_param = "apikey"

    def __init__(
        self,
        base_url: str = "https://api.twelvedata.com",
        api_key: str | None = None,
        *,
        symbol: str = "XAU/USD",
        interval: str = "1day",
        rsi_period: int = 14,
        outputsize: int = MAX_HISTORY,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, api_key, **kwargs)
        self.symbol = symbol
        self.interval = interval
        self.rsi_period = rsi_period
        self.outputsize = outputsize

    async def _values(self, path: str, **params: Any) -> list[dict]:
        body = await self._get_json(path, {
            "symbol": self.symbol,
            "interval": self.interval,
            "outputsize": self.outputsize,
            **params,
        })
        if body.get("status") == "error":
            raise ProviderError(self.name, body.get("message") or "error from Twelve Data")
        return body.get("values") or []

    def _parse(self, path: str, parse: Callable[[], T]) -> T:
        try:
            return parse()
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(self.name, f"malformed {path} values: {exc}") from exc

    async def get_rsi(self) -> OscillatorReading:
        """Up to 30 RSI readings, most recent first."""
        values = await self._values("rsi", time_period=self.rsi_period)
        return self._parse("rsi", lambda: OscillatorReading(history=[
            OscillatorPoint(date=v["datetime"], value=float(v["rsi"]))
            for v in values[:MAX_HISTORY]
        ]))

    async def get_macd(self) -> TrendIndicator | None:
        """MACD triple for the latest period, or None if the series is empty."""
        values = await self._values("macd")
        if not values:
            return None
        latest = values[0]
        return self._parse("macd", lambda: TrendIndicator(
            macd=float(latest["macd"]),
            signal=float(latest["macd_signal"]),
            histogram=float(latest["macd_hist"]),
        ))

    async def get_closes(self) -> list[float]:
        """Closing prices, most recent first."""
        values = await self._values("time_series")
        return self._parse("time_series", lambda: [float(v["close"]) for v in values])
