"""Position sizing from a risk budget and a stop distance."""

import math

from tradejournal.log import get_logger
from tradejournal.models import (
    INFINITE,
    AssetCategory,
    AssetConfig,
    RiskCalculation,
    RiskReward,
    TradePlan,
)

logger = get_logger("risk.calculator")

MIN_LOT_SIZE = 0.01

# Gold is quoted so that one pip is worth 100 units per lot rather than
# the table's per-lot pip value; it is special-cased by symbol.
GOLD_SYMBOL = "XAUUSD"
GOLD_PIP_MULTIPLIER = 100


def _raw_lot_size(risk_amount: float, stop_loss_pips: float, asset: AssetConfig) -> float:
    if asset.category == AssetCategory.INDICES:
        return risk_amount / stop_loss_pips
    if asset.category == AssetCategory.COMMODITIES and asset.symbol == GOLD_SYMBOL:
        logger.debug("gold_lot_formula", symbol=asset.symbol)
        return risk_amount / (stop_loss_pips * GOLD_PIP_MULTIPLIER)
    return risk_amount / (stop_loss_pips * asset.pip_value)


def _floor_lot(lot_size: float) -> float:
    # Round off float noise (0.29 * 100 == 28.999...) before flooring.
    return math.floor(round(lot_size * 100, 6)) / 100


def calculate_lot_size(
    account_balance: float,
    risk_percent: float,
    stop_loss_pips: float,
    asset: AssetConfig,
) -> RiskCalculation:
    """Recommend a lot size that risks ``risk_percent`` of the balance.

    The lot size is floored to two decimals and never goes below
    ``MIN_LOT_SIZE``. A non-positive stop distance cannot size a position
    and returns the minimum lot.

    Args:
        account_balance: Account balance in account currency.
        risk_percent: Percent of the balance to risk.
        stop_loss_pips: Stop-loss distance in pips.
        asset: Instrument being traded.

    Returns:
        RiskCalculation with take-profit fields left at zero.
    """
    risk_amount = account_balance * (risk_percent / 100)

    if stop_loss_pips > 0:
        lot_size = max(MIN_LOT_SIZE, _floor_lot(_raw_lot_size(risk_amount, stop_loss_pips, asset)))
    else:
        lot_size = MIN_LOT_SIZE

    return RiskCalculation(
        lot_size=lot_size,
        position_size=lot_size * asset.contract_size,
        risk_amount=risk_amount,
        pip_value=lot_size * asset.pip_value,
        pips_at_risk=stop_loss_pips,
    )


def calculate_trade_plan(
    account_balance: float,
    risk_percent: float,
    stop_loss_pips: float,
    take_profit_pips: float,
    asset: AssetConfig,
) -> TradePlan:
    """Size a position and fill in the take-profit figures.

    Args:
        account_balance: Account balance in account currency.
        risk_percent: Percent of the balance to risk.
        stop_loss_pips: Stop-loss distance in pips.
        take_profit_pips: Take-profit distance in pips.
        asset: Instrument being traded.

    Returns:
        TradePlan whose calculation carries the ratio and potential profit.
    """
    base = calculate_lot_size(account_balance, risk_percent, stop_loss_pips, asset)

    if stop_loss_pips > 0:
        ratio = take_profit_pips / stop_loss_pips
        potential_profit = base.risk_amount / stop_loss_pips * take_profit_pips
    else:
        ratio = INFINITE if take_profit_pips > 0 else 0.0
        potential_profit = 0.0

    calculation = base.model_copy(update={
        "potential_profit": potential_profit,
        "risk_reward_ratio": ratio,
        "pips_to_target": take_profit_pips,
    })

    logger.debug(
        "trade_plan_computed",
        symbol=asset.symbol,
        lot_size=calculation.lot_size,
        risk_amount=calculation.risk_amount,
    )

    return TradePlan(
        symbol=asset.symbol,
        account_balance=account_balance,
        risk_percent=risk_percent,
        calculation=calculation,
    )


def calculate_risk_reward(
    entry_price: float,
    stop_loss: float,
    take_profit: float,
    asset: AssetConfig,
) -> RiskReward:
    """Convert planned prices into pip distances and a reward/risk ratio.

    Pip distances are rounded to one decimal and the ratio to two.
    """
    pip_multiplier = 1 / asset.pip_size

    risk_pips = abs(entry_price - stop_loss) * pip_multiplier
    reward_pips = abs(take_profit - entry_price) * pip_multiplier
    ratio = reward_pips / risk_pips if risk_pips > 0 else 0.0

    return RiskReward(
        risk_pips=round(risk_pips, 1),
        reward_pips=round(reward_pips, 1),
        ratio=round(ratio, 2),
    )
