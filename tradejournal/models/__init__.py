"""Data models for tradejournal."""

from tradejournal.models.asset import AssetCategory, AssetConfig
from tradejournal.models.journal import EntryType, JournalEntry, Sentiment, TradeResult
from tradejournal.models.risk import RiskCalculation, RiskReward, TradePlan
from tradejournal.models.stats import (
    INFINITE,
    JournalCounts,
    PairPerformance,
    Ratio,
    StreakType,
    TradeStats,
)

__all__ = [
    "AssetCategory",
    "AssetConfig",
    "EntryType",
    "JournalEntry",
    "Sentiment",
    "TradeResult",
    "RiskCalculation",
    "RiskReward",
    "TradePlan",
    "INFINITE",
    "JournalCounts",
    "PairPerformance",
    "Ratio",
    "StreakType",
    "TradeStats",
]
