"""Position sizing and risk/reward calculations."""

from tradejournal.risk.assets import (
    ASSETS,
    get_all_assets,
    get_asset,
    get_assets_by_category,
)
from tradejournal.risk.calculator import (
    MIN_LOT_SIZE,
    calculate_lot_size,
    calculate_risk_reward,
    calculate_trade_plan,
)

__all__ = [
    "ASSETS",
    "get_all_assets",
    "get_asset",
    "get_assets_by_category",
    "MIN_LOT_SIZE",
    "calculate_lot_size",
    "calculate_risk_reward",
    "calculate_trade_plan",
]
