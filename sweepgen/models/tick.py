"""Tick data model."""

from pydantic import BaseModel, Field


class Tick(BaseModel):
    """Represents a single bid/ask quote observation."""

    timestamp_ms: int = Field(..., ge=0, description="Epoch timestamp in milliseconds")
    bid: float = Field(..., description="Bid price")
    ask: float = Field(..., description="Ask price")

    model_config = {"frozen": True}

    @property
    def spread(self) -> float:
        """Absolute bid/ask spread."""
        return abs(self.ask - self.bid)
