"""Strategy evaluation for SweepGen.

Evaluators implement ``MetricsModel``; ``evaluate`` is a convenience
wrapper over the default model.
"""

from typing import Optional, Sequence

from sweepgen.models import Candle, Metrics, ParamSet
from sweepgen.strategy.base import MetricsModel
from sweepgen.strategy.heuristic import HeuristicMetricsModel

METRICS_MODELS: dict[str, type[MetricsModel]] = {
    HeuristicMetricsModel.name: HeuristicMetricsModel,
}

DEFAULT_MODEL = HeuristicMetricsModel.name


def get_metrics_model(name: str = DEFAULT_MODEL) -> MetricsModel:
    """Instantiate a registered metrics model by name.

    Raises:
        ValueError: If no model is registered under ``name``.
    """
    if name not in METRICS_MODELS:
        valid = ", ".join(sorted(METRICS_MODELS))
        raise ValueError(f"Unknown metrics model '{name}' (expected one of: {valid})")
    return METRICS_MODELS[name]()


def evaluate(
    candles: Sequence[Candle],
    donch_n: int,
    rr_min: float,
    max_spread: float,
    session_filter: str,
    model: Optional[MetricsModel] = None,
) -> Metrics:
    """Evaluate one parameter combination against a candle sequence."""
    params = ParamSet(
        donch_n=donch_n,
        rr_min=rr_min,
        max_spread=max_spread,
        session_filter=session_filter,
    )
    return (model or get_metrics_model()).evaluate(candles, params)


__all__ = [
    "DEFAULT_MODEL",
    "HeuristicMetricsModel",
    "METRICS_MODELS",
    "MetricsModel",
    "evaluate",
    "get_metrics_model",
]
