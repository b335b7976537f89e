"""Candidate building and the parameter sweep loop."""

import logging
import time
from typing import Callable, Optional, Sequence

from sweepgen.models import Candidate, Candle, Metrics, ParamSet
from sweepgen.strategy import MetricsModel, get_metrics_model
from sweepgen.sweep.grid import GridSpec

logger = logging.getLogger(__name__)

# Returns wall-clock time as integer epoch milliseconds
Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def fixed_clock(millis: int) -> Clock:
    """A clock that always returns ``millis``."""
    return lambda: millis


def make_candidate_id(symbol: str, params: ParamSet, stamp: int) -> str:
    """Build a candidate identifier.

    Identifiers are only as unique as the timestamp: two identical
    combinations built in the same millisecond collide.
    """
    return (
        f"{symbol}_donch{params.donch_n}_rr{params.rr_min:.2f}"
        f"_{params.session_filter}_{stamp}"
    )


def build_candidate(
    symbol: str,
    params: ParamSet,
    metrics: Metrics,
    clock: Clock = system_clock,
) -> Candidate:
    """Combine symbol, parameters and metrics into a ``Candidate``."""
    return Candidate(
        id=make_candidate_id(symbol, params, clock()),
        symbol=symbol,
        params=params,
        metrics=metrics,
    )


def run_single(
    symbol: str,
    candles: Sequence[Candle],
    params: ParamSet,
    model: Optional[MetricsModel] = None,
    clock: Clock = system_clock,
) -> Candidate:
    """Evaluate one parameter combination and build its candidate."""
    model = model or get_metrics_model()
    metrics = model.evaluate(candles, params)
    return build_candidate(symbol, params, metrics, clock=clock)


def run_sweep(
    symbol: str,
    candles: Sequence[Candle],
    grid: GridSpec,
    model: Optional[MetricsModel] = None,
    clock: Clock = system_clock,
) -> list[Candidate]:
    """Evaluate every combination in ``grid``.

    Returns:
        One candidate per combination, in grid iteration order.
    """
    model = model or get_metrics_model()
    logger.info("Sweeping %d combinations for %s with '%s' model", grid.size, symbol, model.name)

    candidates = []
    for params in grid.combinations():
        candidate = run_single(symbol, candles, params, model=model, clock=clock)
        logger.debug("%s score=%.4f", candidate.id, candidate.score)
        candidates.append(candidate)

    return candidates
