"""Risk calculation data models."""

from pydantic import BaseModel, Field

from tradejournal.models.stats import Ratio


class RiskCalculation(BaseModel):
    """Recommended position size for a given risk budget."""

    lot_size: float = Field(..., ge=0.01, description="Recommended lots, floored to 0.01")
    position_size: float = Field(..., ge=0, description="Lots times contract size")
    risk_amount: float = Field(..., description="Currency at stake")
    potential_profit: float = Field(default=0.0, description="Currency gained at target")
    risk_reward_ratio: Ratio = Field(default=0.0, description="Target pips over stop pips")
    pip_value: float = Field(..., ge=0, description="Currency per pip at this lot size")
    pips_at_risk: float = Field(..., description="Stop-loss distance in pips")
    pips_to_target: float = Field(default=0.0, description="Take-profit distance in pips")

    model_config = {"frozen": True}


class RiskReward(BaseModel):
    """Pip distances and ratio derived from planned prices."""

    risk_pips: float = Field(..., ge=0, description="Entry to stop, in pips")
    reward_pips: float = Field(..., ge=0, description="Entry to target, in pips")
    ratio: float = Field(..., ge=0, description="Reward pips over risk pips")

    model_config = {"frozen": True}


class TradePlan(BaseModel):
    """A sizing result together with the instrument it was computed for."""

    symbol: str = Field(..., description="Instrument symbol")
    account_balance: float = Field(..., description="Balance the plan is based on")
    risk_percent: float = Field(..., description="Percent of balance at risk")
    calculation: RiskCalculation

    model_config = {"frozen": True}
