"""Candidate data model."""

from pydantic import BaseModel, Field

from sweepgen.models.params import Metrics, ParamSet


class Candidate(BaseModel):
    """A parameter combination together with its metrics and identifier."""

    id: str = Field(..., alias="model_id", description="Generated model identifier")
    symbol: str = Field(..., description="Instrument symbol")
    params: ParamSet = Field(..., description="Strategy parameters")
    metrics: Metrics = Field(..., description="Computed metrics")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def score(self) -> float:
        """Ranking score, higher is better."""
        return self.metrics.profit_factor - 10.0 * self.metrics.max_drawdown

    def to_json(self, indent: int | None = None) -> str:
        """Serialize using the wire field names."""
        return self.model_dump_json(by_alias=True, indent=indent)
