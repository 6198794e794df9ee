"""Gold market heat, buy/sell signals, spot prices and news."""

__version__ = "0.1.0"
