"""AssetConfig data model."""

from enum import Enum

from pydantic import BaseModel, Field


class AssetCategory(str, Enum):
    """Instrument class, which selects the lot-size formula."""

    FOREX = "forex"
    INDICES = "indices"
    COMMODITIES = "commodities"
    CRYPTO = "crypto"


class AssetConfig(BaseModel):
    """Static sizing constants for a tradable instrument."""

    name: str = Field(..., min_length=1, description="Display name")
    symbol: str = Field(..., min_length=1, description="Instrument symbol")
    pip_value: float = Field(..., gt=0, description="Value of one pip per standard lot")
    pip_size: float = Field(..., gt=0, description="Price increment that makes one pip")
    category: AssetCategory = Field(..., description="Instrument category")
    contract_size: float = Field(..., gt=0, description="Units per standard lot")

    model_config = {"frozen": True}
