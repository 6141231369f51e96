"""Instrument reference table.

Built once at import and exposed read-only. Pip values are per standard
lot in account currency (USD).
"""

from types import MappingProxyType
from typing import Mapping

from tradejournal.models import AssetCategory, AssetConfig


def _asset(
    symbol: str,
    name: str,
    pip_value: float,
    pip_size: float,
    category: AssetCategory,
    contract_size: float,
) -> AssetConfig:
    return AssetConfig(
        name=name,
        symbol=symbol,
        pip_value=pip_value,
        pip_size=pip_size,
        category=category,
        contract_size=contract_size,
    )


_FOREX = AssetCategory.FOREX
_INDICES = AssetCategory.INDICES
_COMMODITIES = AssetCategory.COMMODITIES
_CRYPTO = AssetCategory.CRYPTO

_ASSET_LIST = [
    # Majors
    _asset("EURUSD", "EUR/USD", 10, 0.0001, _FOREX, 100000),
    _asset("GBPUSD", "GBP/USD", 10, 0.0001, _FOREX, 100000),
    _asset("USDJPY", "USD/JPY", 9.1, 0.01, _FOREX, 100000),
    _asset("USDCHF", "USD/CHF", 10.2, 0.0001, _FOREX, 100000),
    _asset("AUDUSD", "AUD/USD", 10, 0.0001, _FOREX, 100000),
    _asset("USDCAD", "USD/CAD", 7.6, 0.0001, _FOREX, 100000),
    _asset("NZDUSD", "NZD/USD", 10, 0.0001, _FOREX, 100000),
    # Crosses
    _asset("EURGBP", "EUR/GBP", 12.7, 0.0001, _FOREX, 100000),
    _asset("EURJPY", "EUR/JPY", 9.1, 0.01, _FOREX, 100000),
    _asset("GBPJPY", "GBP/JPY", 9.1, 0.01, _FOREX, 100000),
    # Indices
    _asset("NAS100", "NASDAQ 100", 1, 0.1, _INDICES, 1),
    _asset("US30", "Dow Jones 30", 1, 0.1, _INDICES, 1),
    _asset("SPX500", "S&P 500", 1, 0.1, _INDICES, 1),
    _asset("GER40", "DAX 40", 1, 0.1, _INDICES, 1),
    _asset("UK100", "FTSE 100", 1, 0.1, _INDICES, 1),
    # Commodities
    _asset("XAUUSD", "Gold", 1, 0.01, _COMMODITIES, 100),
    _asset("XAGUSD", "Silver", 50, 0.001, _COMMODITIES, 5000),
    _asset("USOIL", "WTI Crude Oil", 1, 0.01, _COMMODITIES, 1000),
    # Crypto
    _asset("BTCUSD", "Bitcoin", 1, 0.01, _CRYPTO, 1),
    _asset("ETHUSD", "Ethereum", 1, 0.01, _CRYPTO, 1),
]

ASSETS: Mapping[str, AssetConfig] = MappingProxyType({a.symbol: a for a in _ASSET_LIST})


def get_asset(symbol: str) -> AssetConfig:
    """Look up an instrument by symbol, ignoring case.

    Raises:
        KeyError: If the symbol is not in the table.
    """
    key = symbol.strip().upper()
    try:
        return ASSETS[key]
    except KeyError:
        raise KeyError(
            f"Unknown asset '{symbol}'. Must be one of {list(ASSETS.keys())}"
        ) from None


def get_assets_by_category(category: AssetCategory) -> list[AssetConfig]:
    return [a for a in ASSETS.values() if a.category == category]


def get_all_assets() -> list[AssetConfig]:
    return list(ASSETS.values())
