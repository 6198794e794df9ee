"""HTTP API."""

from gold_signals.api.app import create_app

__all__ = ["create_app"]
