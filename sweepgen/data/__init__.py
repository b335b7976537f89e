"""Tick loading and candle aggregation."""

from sweepgen.data.candles import DEFAULT_INTERVAL_MS, aggregate
from sweepgen.data.loader import load_ticks, parse_ticks
from sweepgen.data.policy import ParseOrZero, ParsePolicy, StrictParse, get_parse_policy

__all__ = [
    "DEFAULT_INTERVAL_MS",
    "aggregate",
    "load_ticks",
    "parse_ticks",
    "ParseOrZero",
    "ParsePolicy",
    "StrictParse",
    "get_parse_policy",
]
