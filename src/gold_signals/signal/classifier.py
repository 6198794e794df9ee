"""Composite ENTRY/EXIT/HOLD classification from oscillator, trend and pulse.

RSI < 40  -> ENTRY (expect a rebound)
RSI > 60  -> EXIT  (take profits)
otherwise -> HOLD

ENTRY and EXIT gain one strength point each for a trend that agrees with
them and for a fast price pulse.
"""

from __future__ import annotations

import math

from gold_signals.models import (
    OscillatorReading,
    PulseSpeed,
    Reason,
    ReasonCode,
    SignalResult,
    SignalType,
    TrendDirection,
    TrendIndicator,
)
from gold_signals.signal import thresholds as t


def classify_pulse(price_delta: float | None) -> tuple[PulseSpeed, float]:
    """Momentum speed and magnitude; Steady/0 when no finite delta is known."""
    if price_delta is None or not math.isfinite(price_delta):
        return PulseSpeed.STEADY, 0.0
    pulse_value = abs(price_delta)
    return t.pulse_speed(pulse_value), pulse_value


def classify_trend(trend: TrendIndicator | None) -> tuple[TrendDirection, float]:
    """Trend direction and strength in [0, 10]; Neutral/0 when absent."""
    if trend is None:
        return TrendDirection.NEUTRAL, 0.0
    direction = TrendDirection.BULLISH if trend.macd > trend.signal else TrendDirection.BEARISH
    return direction, min(abs(trend.histogram) * 2, float(t.MAX_STRENGTH))


def _boosted(
    strength: int,
    reasons: list[Reason],
    *,
    agreeing_trend: TrendDirection,
    trend: TrendDirection,
    trend_reason: ReasonCode,
    pulse: PulseSpeed,
    pulse_reason: ReasonCode,
) -> int:
    if trend is agreeing_trend:
        strength = min(strength + 1, t.MAX_STRENGTH)
        reasons.append(Reason(code=trend_reason))
    if pulse in t.FAST_PULSES:
        strength = min(strength + 1, t.MAX_STRENGTH)
        reasons.append(Reason(code=pulse_reason, pulse=pulse))
    return strength


def classify(
    oscillator: OscillatorReading,
    trend: TrendIndicator | None = None,
    price_delta: float | None = None,
) -> SignalResult | None:
    """Classify the current market state.

    Returns None if the oscillator has no current reading. Missing trend
    or price data degrade to Neutral and Steady.
    """
    r = oscillator.current
    if r is None:
        return None

    pulse, pulse_value = classify_pulse(price_delta)
    direction, trend_strength = classify_trend(trend)
    reasons: list[Reason] = []

    if r < t.ENTRY_BELOW:
        signal_type = SignalType.ENTRY
        strength, zone = t.entry_tier(r)
        reasons.append(Reason(code=zone, value=r))
        strength = _boosted(
            strength,
            reasons,
            agreeing_trend=TrendDirection.BULLISH,
            trend=direction,
            trend_reason=ReasonCode.POSITIVE_TREND,
            pulse=pulse,
            pulse_reason=ReasonCode.UPWARD_PULSE,
        )
        confidence = min(strength * 10, t.MAX_CONFIDENCE)
    elif r > t.EXIT_ABOVE:
        signal_type = SignalType.EXIT
        strength, zone = t.exit_tier(r)
        reasons.append(Reason(code=zone, value=r))
        strength = _boosted(
            strength,
            reasons,
            agreeing_trend=TrendDirection.BEARISH,
            trend=direction,
            trend_reason=ReasonCode.NEGATIVE_TREND,
            pulse=pulse,
            pulse_reason=ReasonCode.DOWNWARD_PULSE,
        )
        confidence = min(strength * 10, t.MAX_CONFIDENCE)
    else:
        signal_type = SignalType.HOLD
        strength = t.HOLD_STRENGTH
        confidence = t.HOLD_CONFIDENCE
        reasons.append(Reason(code=ReasonCode.NEUTRAL_HEAT, value=r))
        reasons.append(Reason(code=ReasonCode.AWAIT_THRESHOLD))

    return SignalResult(
        type=signal_type,
        strength=strength,
        confidence=confidence,
        reasons=reasons,
        pulse=pulse,
        pulse_value=pulse_value,
        trend=direction,
        trend_strength=trend_strength,
    )
