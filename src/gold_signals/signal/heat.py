"""Overbought streak counting and heat alert levels."""

from __future__ import annotations

from gold_signals.models import MAX_HISTORY, HeatAlert, OscillatorReading
from gold_signals.signal import thresholds as t


def count_peak_cycles(values: list[float]) -> int:
    """Count separate excursions above the overbought threshold.

    A streak starts on the first value above ``OVERBOUGHT`` and only ends
    once a value falls below ``STREAK_RESET``, so a dip into the band
    between the two does not split one excursion into two.
    """
    cycles = 0
    in_streak = False
    for value in values[:MAX_HISTORY]:
        if value > t.OVERBOUGHT:
            if not in_streak:
                cycles += 1
                in_streak = True
        elif value < t.STREAK_RESET:
            in_streak = False
    return cycles


def assess_heat(oscillator: OscillatorReading) -> HeatAlert | None:
    """Heat alert for the current reading, or None if there is none."""
    current = oscillator.current
    if current is None:
        return None

    cycles = count_peak_cycles(oscillator.values)
    return HeatAlert(
        current=current,
        level=t.heat_level(current, cycles),
        peak_cycles=cycles,
        is_overheated=current > t.OVERBOUGHT,
    )
