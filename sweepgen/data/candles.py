"""Tick-to-candle aggregation.

Ticks are bucketed into half-open windows ``[start, start + interval_ms)``.
The first window starts at the first tick's timestamp; later windows advance
in whole multiples of ``interval_ms``. Windows with no ticks are skipped, not
zero-filled, and the in-progress window is always flushed at the end.
"""

import logging
from typing import Sequence

from sweepgen.models import Candle, Tick

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 60_000


class _Bucket:
    """Mutable accumulator for the window currently being filled."""

    __slots__ = ("start", "end", "open", "high", "low", "close", "spread_sum", "spread_count")

    def __init__(self, start: int, interval_ms: int, bid: float):
        self.start = start
        self.end = start + interval_ms
        self.open = bid
        self.high = bid
        self.low = bid
        self.close = bid
        self.spread_sum = 0.0
        self.spread_count = 0

    def add(self, tick: Tick) -> None:
        if tick.bid > self.high:
            self.high = tick.bid
        if tick.bid < self.low:
            self.low = tick.bid
        self.close = tick.bid
        self.spread_sum += tick.spread
        self.spread_count += 1

    def reseed(self, tick: Tick) -> None:
        self.open = self.high = self.low = self.close = tick.bid
        self.spread_sum = tick.spread
        self.spread_count = 1

    def advance_to(self, timestamp_ms: int, interval_ms: int) -> None:
        # Jump over empty windows in one step
        if timestamp_ms >= self.end:
            skipped = (timestamp_ms - self.end) // interval_ms + 1
            self.start = self.end + (skipped - 1) * interval_ms
            self.end = self.start + interval_ms

    def flush(self) -> Candle:
        avg_spread = self.spread_sum / self.spread_count if self.spread_count > 0 else 0.0
        return Candle(
            window_start_ms=self.start,
            window_end_ms=self.end,
            open=self.open,
            high=self.high,
            low=self.low,
            close=self.close,
            avg_spread=avg_spread,
        )


def aggregate(ticks: Sequence[Tick], interval_ms: int = DEFAULT_INTERVAL_MS) -> list[Candle]:
    """Aggregate ordered ticks into OHLC candles.

    Prices are taken from the bid. Every tick, including the seeding one,
    contributes its absolute spread to the window average.

    Args:
        ticks: Ticks ordered by non-decreasing timestamp.
        interval_ms: Window width in milliseconds.

    Returns:
        Candles in window order. Empty input yields an empty list.

    Raises:
        ValueError: If ``interval_ms`` is not positive.
    """
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {interval_ms}")
    if not ticks:
        return []

    candles: list[Candle] = []
    bucket = _Bucket(ticks[0].timestamp_ms, interval_ms, ticks[0].bid)

    for tick in ticks:
        if tick.timestamp_ms >= bucket.end:
            candles.append(bucket.flush())
            bucket.advance_to(tick.timestamp_ms, interval_ms)
            bucket.reseed(tick)
        else:
            bucket.add(tick)

    candles.append(bucket.flush())

    logger.debug("Aggregated %d ticks into %d candles (%d ms)", len(ticks), len(candles), interval_ms)
    return candles
