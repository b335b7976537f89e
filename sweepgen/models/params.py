"""Strategy parameter and metrics data models."""

from pydantic import BaseModel, Field


class ParamSet(BaseModel):
    """One combination of strategy parameters.

    No range validation is applied; any value is passed to the evaluator.
    """

    donch_n: int = Field(..., ge=0, description="Donchian channel length")
    rr_min: float = Field(..., description="Minimum reward/risk ratio")
    max_spread: float = Field(..., description="Maximum tolerated spread")
    session_filter: str = Field(..., description="Trading session label")

    model_config = {"frozen": True}


class Metrics(BaseModel):
    """Performance metrics computed for one parameter combination."""

    profit_factor: float = Field(..., alias="pf_bt", description="Backtest profit factor")
    max_drawdown: float = Field(..., alias="dd_bt", description="Backtest max drawdown")
    trade_count: int = Field(..., ge=0, alias="trades", description="Number of trades")
    win_rate: float = Field(..., alias="winrate", description="Fraction of winning trades")
    pnl: float = Field(..., description="Net profit and loss")

    model_config = {"frozen": True, "populate_by_name": True}
