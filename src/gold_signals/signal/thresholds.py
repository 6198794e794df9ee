"""Threshold constants and lookup tables used by the classifier.

All thresholds are behavioural contracts with the front-end. Tables are
ordered; the first matching row wins.
"""

from __future__ import annotations

from gold_signals.models.signal import (  # noqa: F401
    STRENGTH_LABELS,
    WEAKEST_LABEL,
    PulseSpeed,
    ReasonCode,
    strength_label,
)

# Primary signal bands
ENTRY_BELOW = 40.0
EXIT_ABOVE = 60.0

MAX_STRENGTH = 10
MAX_CONFIDENCE = 98
HOLD_STRENGTH = 4
HOLD_CONFIDENCE = 50

# Overheat detection: a streak starts above OVERBOUGHT and only ends
# below STREAK_RESET.
OVERBOUGHT = 70.0
STREAK_RESET = 65.0
MAX_CYCLES = 3

# (upper bound exclusive, category); anything above the last row is EXTREME
PULSE_BANDS: tuple[tuple[float, PulseSpeed], ...] = (
    (0.5, PulseSpeed.GRADUAL),
    (1.5, PulseSpeed.STEADY),
    (3.0, PulseSpeed.RAPID),
)
FAST_PULSES = frozenset({PulseSpeed.RAPID, PulseSpeed.EXTREME})

# (r < bound, base strength, zone reason)
ENTRY_TIERS: tuple[tuple[float, int, ReasonCode], ...] = (
    (10.0, 10, ReasonCode.EXTREME_LOW_HEAT),
    (20.0, 8, ReasonCode.VERY_LOW_HEAT),
    (30.0, 6, ReasonCode.LOW_HEAT),
    (ENTRY_BELOW, 4, ReasonCode.COOLING_HEAT),
)

# (r > bound, base strength, zone reason)
EXIT_TIERS: tuple[tuple[float, int, ReasonCode], ...] = (
    (90.0, 10, ReasonCode.EXTREME_HIGH_HEAT),
    (80.0, 8, ReasonCode.VERY_HIGH_HEAT),
    (70.0, 6, ReasonCode.HIGH_HEAT),
    (EXIT_ABOVE, 4, ReasonCode.RISING_HEAT),
)

# (peak cycles >= bound, alert level), applied only while overheated
HEAT_LEVELS: tuple[tuple[int, int], ...] = (
    (3, 3),
    (2, 2),
)
BASE_HEAT_LEVEL = 1


def pulse_speed(pulse_value: float) -> PulseSpeed:
    for bound, speed in PULSE_BANDS:
        if pulse_value < bound:
            return speed
    return PulseSpeed.EXTREME


def entry_tier(r: float) -> tuple[int, ReasonCode]:
    for bound, strength, reason in ENTRY_TIERS:
        if r < bound:
            return strength, reason
    raise ValueError(f"{r} is not in the ENTRY band (< {ENTRY_BELOW})")


def exit_tier(r: float) -> tuple[int, ReasonCode]:
    for bound, strength, reason in EXIT_TIERS:
        if r > bound:
            return strength, reason
    raise ValueError(f"{r} is not in the EXIT band (> {EXIT_ABOVE})")


def heat_level(current: float, peak_cycles: int) -> int:
    """Alert level 0–3 for the current reading and its streak count."""
    if current <= OVERBOUGHT:
        return 0
    for bound, level in HEAT_LEVELS:
        if peak_cycles >= bound:
            return level
    return BASE_HEAT_LEVEL
