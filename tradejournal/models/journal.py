"""JournalEntry data model."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class EntryType(str, Enum):
    """Kind of journal entry."""

    SIMPLE = "simple"
    TECHNICAL = "technical"


class TradeResult(str, Enum):
    """Outcome of a closed trade."""

    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"


class Sentiment(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class JournalEntry(BaseModel):
    """Represents one journal record, either a reflection or a trade.

    Optional fields default to None, which stands for a null column in the
    hosted store. Whether a field was present in the source at all is kept
    in ``model_fields_set``.
    """

    id: Optional[str] = Field(default=None, description="Store ID")
    user_id: Optional[str] = Field(default=None, description="Owning user ID")
    type: EntryType = Field(..., description="Entry kind (simple/technical)")
    title: str = Field(default="", description="Entry title")
    content: Optional[str] = Field(default=None, description="Free-form notes")
    sentiment: Optional[Sentiment] = Field(default=None, description="Market bias")
    pair: Optional[str] = Field(default=None, description="Traded instrument")
    entry_price: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Entry price")
    exit_price: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Exit price")
    stop_loss: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Stop-loss price")
    take_profit: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Take-profit price")
    lot_size: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="Position size in lots")
    result: Optional[TradeResult] = Field(default=None, description="Trade outcome, None while open")
    pnl: Optional[float] = Field(default=None, allow_inf_nan=False, description="Realized P&L")
    pnl_percentage: Optional[float] = Field(default=None, allow_inf_nan=False, description="Realized P&L in percent")
    tags: tuple[str, ...] = Field(default=(), description="User tags")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    model_config = {"frozen": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive and aware timestamps must stay comparable when sorting.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_closed_trade(self) -> bool:
        """True for technical entries that have a recorded result."""
        return self.type == EntryType.TECHNICAL and self.result is not None
