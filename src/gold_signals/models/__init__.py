"""Pydantic domain models."""

from gold_signals.models.market import (
    MAX_HISTORY,
    OscillatorPoint,
    OscillatorReading,
    TrendIndicator,
)
from gold_signals.models.signal import (
    HeatAlert,
    PulseSpeed,
    Reason,
    ReasonCode,
    SignalResult,
    SignalType,
    TrendDirection,
)

__all__ = [
    "HeatAlert",
    "MAX_HISTORY",
    "OscillatorPoint",
    "OscillatorReading",
    "PulseSpeed",
    "Reason",
    "ReasonCode",
    "SignalResult",
    "SignalType",
    "TrendDirection",
    "TrendIndicator",
]
