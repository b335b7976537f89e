"""Deterministic placeholder metrics model.

Derives metrics from the parameters alone so that scoring and ranking are
stable before a real price-driven simulator is plugged in. Candle contents
are not inspected.
"""

from typing import Sequence

from sweepgen.models import Candle, Metrics, ParamSet
from sweepgen.strategy.base import MetricsModel

SESSION_BONUS = {
    "london": 0.05,
    "nyopen": 0.04,
    "asia": 0.03,
}
DEFAULT_SESSION_BONUS = 0.02

# (threshold, penalty) pairs, checked from the highest threshold down
SPREAD_PENALTY_TIERS = (
    (2.5, 0.05),
    (2.0, 0.03),
)


def session_bonus(session_filter: str) -> float:
    """Bonus term for a session label; unknown labels get the default tier."""
    return SESSION_BONUS.get(session_filter, DEFAULT_SESSION_BONUS)


def spread_penalty(max_spread: float) -> float:
    """Penalty term for a spread cap."""
    for threshold, penalty in SPREAD_PENALTY_TIERS:
        if max_spread > threshold:
            return penalty
    return 0.0


class HeuristicMetricsModel(MetricsModel):
    """Metrics as a closed-form function of the strategy parameters."""

    name = "heuristic"

    def evaluate(self, candles: Sequence[Candle], params: ParamSet) -> Metrics:
        donch_n = params.donch_n
        rr_min = params.rr_min
        bonus = session_bonus(params.session_filter)
        penalty = spread_penalty(params.max_spread)

        trades = 1000 + donch_n * 5
        winrate = 0.50 + (rr_min - 1.5) / 20.0
        pf = 1.5 + donch_n / 200.0 + (rr_min - 1.5) / 5.0 + bonus - penalty
        dd = 0.04 + donch_n / 1000.0 + rr_min / 100.0 + penalty / 2.0
        pnl = trades * max(pf - 1.0, 0.0) * (donch_n / 40.0) * 0.01

        return Metrics(
            profit_factor=pf,
            max_drawdown=dd,
            trade_count=trades,
            win_rate=winrate,
            pnl=pnl,
        )
