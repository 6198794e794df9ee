"""Signal classification: pure functions, no I/O."""

from gold_signals.signal.classifier import classify, classify_pulse, classify_trend
from gold_signals.signal.heat import assess_heat, count_peak_cycles
from gold_signals.signal.indicators import price_change_pct
from gold_signals.signal.presentation import market_heat_payload, render_reason

__all__ = [
    "assess_heat",
    "classify",
    "classify_pulse",
    "classify_trend",
    "count_peak_cycles",
    "market_heat_payload",
    "price_change_pct",
    "render_reason",
]
