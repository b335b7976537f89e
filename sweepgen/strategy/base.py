"""Base metrics model interface for SweepGen."""

from abc import ABC, abstractmethod
from typing import Sequence

from sweepgen.models import Candle, Metrics, ParamSet


class MetricsModel(ABC):
    """Abstract base class for strategy evaluators.

    A metrics model turns a candle sequence and one parameter combination
    into ``Metrics``. Implementations must be pure: the same inputs always
    produce identical outputs, and no state is shared between calls. This
    is what lets a sweep evaluate combinations in any order.
    """

    name: str = ""

    @abstractmethod
    def evaluate(self, candles: Sequence[Candle], params: ParamSet) -> Metrics:
        """Compute metrics for one parameter combination.

        Args:
            candles: Aggregated candles for the instrument.
            params: Strategy parameters to evaluate.

        Returns:
            Metrics for the combination.
        """
        pass
