"""Data models for SweepGen."""

from sweepgen.models.tick import Tick
from sweepgen.models.candle import Candle
from sweepgen.models.params import Metrics, ParamSet
from sweepgen.models.candidate import Candidate

__all__ = [
    "Tick",
    "Candle",
    "Metrics",
    "ParamSet",
    "Candidate",
]
