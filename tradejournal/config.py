"""Configuration loading for tradejournal.

Settings live in a TOML file at ``~/.config/tradejournal/config.toml``.
The ``TRADEJOURNAL_CONFIG`` environment variable points at another file.
"""

import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field, ValidationError

CONFIG_ENV_VAR = "TRADEJOURNAL_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tradejournal" / "config.toml"


class AccountSettings(BaseModel):
    """Account defaults used by the calculator."""

    balance: float = Field(default=10000.0, gt=0, description="Account balance")
    risk_percent: float = Field(default=1.0, gt=0, le=100, description="Risk per trade in percent")
    currency: str = Field(default="USD", min_length=3, max_length=3, description="ISO currency code")

    model_config = {"frozen": True}


class CalculatorSettings(BaseModel):
    """Default calculator inputs."""

    asset: str = Field(default="EURUSD", description="Default instrument symbol")
    stop_loss_pips: float = Field(default=20.0, gt=0, description="Default stop distance")
    take_profit_pips: float = Field(default=40.0, ge=0, description="Default target distance")

    model_config = {"frozen": True}


class LoggingSettings(BaseModel):
    level: str = Field(default="WARNING", description="Log level name")
    json_output: bool = Field(default=False, alias="json", description="Emit JSON log lines")

    model_config = {"frozen": True, "populate_by_name": True}


class Settings(BaseModel):
    """Top-level configuration."""

    account: AccountSettings = Field(default_factory=AccountSettings)
    calculator: CalculatorSettings = Field(default_factory=CalculatorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"frozen": True}


def get_config_path(path: Optional[Path] = None) -> Path:
    """Resolve the config file location.

    Args:
        path: Explicit path, wins over the environment variable.

    Returns:
        Path to the config file (which may not exist).
    """
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from TOML, falling back to defaults.

    Args:
        path: Optional config file path.

    Returns:
        Parsed Settings. Defaults when the file does not exist.

    Raises:
        ValueError: If the file is not valid TOML or holds invalid values.
    """
    config_path = get_config_path(path)

    if not config_path.exists():
        return Settings()

    try:
        data = toml.load(config_path)
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {config_path}:\n{e}") from e


def create_template_config(path: Optional[Path] = None) -> Path:
    """Write a config file populated with the default settings.

    Returns:
        Path of the written file.
    """
    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = Settings().model_dump(by_alias=True)

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
