"""Display strings, icons and the market-heat payload for the front-end.

Field names in :func:`market_heat_payload` are consumed by the existing
dashboard and must not change.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from gold_signals.models import (
    HeatAlert,
    OscillatorReading,
    PulseSpeed,
    Reason,
    ReasonCode,
    SignalResult,
    SignalType,
)
from gold_signals.signal import thresholds as t


class Badge(NamedTuple):
    title: str
    color: str
    icon: str


HEAT_ALERTS: dict[int, Badge] = {
    0: Badge("Normal Market Conditions", "gray", "⚪"),
    1: Badge("Strong Momentum - High Gains Probable", "green", "🟢"),
    2: Badge("Caution - Market Overheating", "yellow", "🟡"),
    3: Badge("Alert - Extreme Peak Zone", "red", "🔴"),
}

SIGNAL_BADGES: dict[SignalType, Badge] = {
    SignalType.ENTRY: Badge("ENTRY", "green", "🟢"),
    SignalType.EXIT: Badge("EXIT", "red", "🔴"),
    SignalType.HOLD: Badge("HOLD", "gray", "⚪"),
}

PULSE_ICONS: dict[PulseSpeed, str] = {
    PulseSpeed.GRADUAL: "🐌",
    PulseSpeed.STEADY: "🚶",
    PulseSpeed.RAPID: "🏃",
    PulseSpeed.EXTREME: "🚀",
}

# {value} is the oscillator reading, {pulse} the pulse speed with its icon
REASON_TEMPLATES: dict[ReasonCode, str] = {
    ReasonCode.EXTREME_LOW_HEAT: "✅ Extreme Low Heat ({value}° - CRITICAL BUY ZONE)",
    ReasonCode.VERY_LOW_HEAT: "✅ Very Low Heat ({value}° - STRONG BUY)",
    ReasonCode.LOW_HEAT: "✅ Low Heat Zone ({value}° - BUY)",
    ReasonCode.COOLING_HEAT: "✅ Cooling Heat ({value}° - CONSIDER BUY)",
    ReasonCode.EXTREME_HIGH_HEAT: "✅ Extreme High Heat ({value}° - CRITICAL SELL ZONE)",
    ReasonCode.VERY_HIGH_HEAT: "✅ Very High Heat ({value}° - STRONG SELL)",
    ReasonCode.HIGH_HEAT: "✅ High Heat Zone ({value}° - SELL)",
    ReasonCode.RISING_HEAT: "✅ Rising Heat ({value}° - CONSIDER SELL)",
    ReasonCode.POSITIVE_TREND: "✅ Positive Trend Force",
    ReasonCode.NEGATIVE_TREND: "✅ Negative Trend Force",
    ReasonCode.UPWARD_PULSE: "✅ Strong Upward Pulse ({pulse})",
    ReasonCode.DOWNWARD_PULSE: "✅ Strong Downward Pulse ({pulse})",
    ReasonCode.NEUTRAL_HEAT: "ℹ️ Neutral Heat ({value}° - RANGE: 40-60°)",
    ReasonCode.AWAIT_THRESHOLD: "ℹ️ Wait for Market Heat < 40° (BUY) or > 60° (SELL)",
}


def render_reason(reason: Reason) -> str:
    value = f"{reason.value:.1f}" if reason.value is not None else ""
    pulse = f"{PULSE_ICONS[reason.pulse]} {reason.pulse.value}" if reason.pulse else ""
    return REASON_TEMPLATES[reason.code].format(value=value, pulse=pulse)


def signal_payload(result: SignalResult) -> dict[str, Any]:
    badge = SIGNAL_BADGES[result.type]
    return {
        "type": result.type.value,
        "icon": badge.icon,
        "color": badge.color,
        "strength": result.strength,
        "strengthLabel": result.strength_label,
        "confidence": result.confidence,
        "pulseSpeed": result.pulse.value,
        "pulseIcon": PULSE_ICONS[result.pulse],
        "pulseValue": f"{result.pulse_value:.2f}",
        "supportingIndicators": [render_reason(r) for r in result.reasons],
        "trendForce": result.trend.value,
    }


def alert_payload(level: int) -> dict[str, str]:
    return HEAT_ALERTS[level]._asdict()


def market_heat_payload(
    oscillator: OscillatorReading,
    heat: HeatAlert,
    result: SignalResult,
) -> dict[str, Any]:
    """The ``data`` object of a ``/api/market-heat`` response."""
    return {
        "currentHeat": heat.current,
        "heatLevel": heat.level,
        "peakCycles": heat.peak_cycles,
        "maxCycles": t.MAX_CYCLES,
        "alert": alert_payload(heat.level),
        "isOverheated": heat.is_overheated,
        "signal": signal_payload(result),
        "history": [{"date": p.date, "heat": p.value} for p in oscillator.history],
    }
