"""Candle (OHLC + average spread) data model."""

from pydantic import BaseModel, Field


class Candle(BaseModel):
    """Represents a single fixed-width OHLC candle built from ticks."""

    window_start_ms: int = Field(..., ge=0, description="Window start (inclusive)")
    window_end_ms: int = Field(..., ge=0, description="Window end (exclusive)")
    open: float = Field(..., description="First bid in the window")
    high: float = Field(..., description="Highest bid in the window")
    low: float = Field(..., description="Lowest bid in the window")
    close: float = Field(..., description="Last bid in the window")
    avg_spread: float = Field(..., description="Mean absolute ask-bid spread")

    model_config = {"frozen": True}

    @property
    def interval_ms(self) -> int:
        """Width of the candle window in milliseconds."""
        return self.window_end_ms - self.window_start_ms
