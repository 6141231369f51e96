"""Aggregate statistics data models."""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

# Tagged value for a ratio with a zero denominator and a positive numerator.
INFINITE = "infinite"

Ratio = Union[Literal["infinite"], float]


class StreakType(str, Enum):
    WIN = "win"
    LOSS = "loss"
    NONE = "none"


class PairPerformance(BaseModel):
    """Per-instrument accumulation used to rank pairs."""

    pair: str
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    pnl: float = 0.0

    model_config = {"frozen": True}


class TradeStats(BaseModel):
    """Aggregate performance over closed technical trades."""

    total_trades: int = Field(..., ge=0, description="Closed technical trades")
    winning_trades: int = Field(..., ge=0)
    losing_trades: int = Field(..., ge=0)
    breakeven_trades: int = Field(..., ge=0)
    win_rate: float = Field(..., ge=0, le=100, description="Win rate percentage")
    profit_factor: Ratio = Field(..., description="Gross win over gross loss")
    average_rr: float = Field(..., ge=0, description="Mean realized risk:reward")
    total_pnl: float
    average_pnl: float
    largest_win: float = Field(..., ge=0)
    largest_loss: float = Field(..., ge=0, description="Magnitude of the worst trade")
    current_streak: int = Field(..., ge=0)
    streak_type: StreakType
    best_pair: Optional[str] = None
    worst_pair: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> "TradeStats":
        """Stats for a journal with no closed trades."""
        return cls(
            total_trades=0,
            winning_trades=0,
            losing_trades=0,
            breakeven_trades=0,
            win_rate=0.0,
            profit_factor=0.0,
            average_rr=0.0,
            total_pnl=0.0,
            average_pnl=0.0,
            largest_win=0.0,
            largest_loss=0.0,
            current_streak=0,
            streak_type=StreakType.NONE,
        )


class JournalCounts(BaseModel):
    """Entry counters shown above the journal listing."""

    total: int = Field(..., ge=0)
    simple: int = Field(..., ge=0)
    technical: int = Field(..., ge=0)
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)

    model_config = {"frozen": True}
