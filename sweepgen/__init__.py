"""SweepGen - tick-to-candle aggregation and strategy parameter sweeps."""

__version__ = "0.1.0"
