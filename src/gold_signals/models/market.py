"""Indicator inputs — oscillator history and trend triple."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_HISTORY = 30


class OscillatorPoint(BaseModel):
    """One RSI observation as reported by the data provider."""

    date: str
    value: float = Field(ge=0.0, le=100.0)


class OscillatorReading(BaseModel):
    """Trailing oscillator history, most recent first.

    The current reading is ``history[0]``; an empty history means the
    provider returned no current value.
    """

    history: list[OscillatorPoint] = Field(default_factory=list, max_length=MAX_HISTORY)

    @property
    def current(self) -> float | None:
        if not self.history:
            return None
        return self.history[0].value

    @property
    def values(self) -> list[float]:
        return [p.value for p in self.history]

    @classmethod
    def from_values(cls, values: list[float], dates: list[str] | None = None) -> OscillatorReading:
        """Build a reading from bare values (most recent first)."""
        dates = dates or [f"t-{i}" for i in range(len(values))]
        return cls(history=[OscillatorPoint(date=d, value=v) for d, v in zip(dates, values)])


class TrendIndicator(BaseModel):
    """MACD-style triple for the latest period."""

    model_config = ConfigDict(allow_inf_nan=False)

    macd: float
    signal: float
    histogram: float
