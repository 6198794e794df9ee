"""Helpers on provider price series."""

from __future__ import annotations


def price_change_pct(closes: list[float]) -> float | None:
    """Percent change from the previous close to the latest one.

    *closes* is most recent first. Returns None with fewer than two
    closes or a zero previous close.
    """
    if len(closes) < 2:
        return None
    latest, previous = closes[0], closes[1]
    if previous == 0:
        return None
    return (latest - previous) / previous * 100
