"""Signal models — classifier output and heat alert."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SignalType(str, Enum):
    ENTRY = "ENTRY"
    EXIT = "EXIT"
    HOLD = "HOLD"


class PulseSpeed(str, Enum):
    """Bucket of the absolute last-close price change."""

    GRADUAL = "Gradual"
    STEADY = "Steady"
    RAPID = "Rapid"
    EXTREME = "Extreme"


class TrendDirection(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class ReasonCode(str, Enum):
    """Why a signal has the strength it has. Rendered to text at the API edge."""

    # ENTRY zones
    EXTREME_LOW_HEAT = "extreme_low_heat"
    VERY_LOW_HEAT = "very_low_heat"
    LOW_HEAT = "low_heat"
    COOLING_HEAT = "cooling_heat"
    # EXIT zones
    EXTREME_HIGH_HEAT = "extreme_high_heat"
    VERY_HIGH_HEAT = "very_high_heat"
    HIGH_HEAT = "high_heat"
    RISING_HEAT = "rising_heat"
    # boosts
    POSITIVE_TREND = "positive_trend"
    NEGATIVE_TREND = "negative_trend"
    UPWARD_PULSE = "upward_pulse"
    DOWNWARD_PULSE = "downward_pulse"
    # HOLD
    NEUTRAL_HEAT = "neutral_heat"
    AWAIT_THRESHOLD = "await_threshold"


# (strength >= bound, label)
STRENGTH_LABELS: tuple[tuple[int, str], ...] = (
    (9, "VERY STRONG"),
    (7, "STRONG"),
    (4, "MODERATE"),
)
WEAKEST_LABEL = "WEAK"


def strength_label(strength: int) -> str:
    for bound, label in STRENGTH_LABELS:
        if strength >= bound:
            return label
    return WEAKEST_LABEL


class Reason(BaseModel):
    """A reason code plus the number it refers to (oscillator value, etc.)."""

    code: ReasonCode
    value: float | None = None
    pulse: PulseSpeed | None = None


class SignalResult(BaseModel):
    """Composite ENTRY/EXIT/HOLD signal for one evaluation."""

    type: SignalType
    strength: int = Field(ge=0, le=10)
    confidence: int = Field(ge=0, le=98)
    reasons: list[Reason] = Field(default_factory=list)
    pulse: PulseSpeed = PulseSpeed.STEADY
    pulse_value: float = Field(default=0.0, ge=0.0)
    trend: TrendDirection = TrendDirection.NEUTRAL
    trend_strength: float = Field(default=0.0, ge=0.0, le=10.0)

    @property
    def strength_label(self) -> str:
        return strength_label(self.strength)


class HeatAlert(BaseModel):
    """Sustained-overbought risk derived from the oscillator history."""

    current: float
    level: int = Field(ge=0, le=3)
    peak_cycles: int = Field(ge=0)
    is_overheated: bool
