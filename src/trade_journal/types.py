"""Shared domain types for the position-sizing engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TradeDirection(str, Enum):
    """Direction of a trade setup."""

    LONG = "LONG"
    SHORT = "SHORT"


class SizingFamily(str, Enum):
    """Formula family used to turn a risk amount into a position size."""

    PIP_VALUE = "pip_value"  # lots / contracts
    PRICE_DISTANCE = "price_distance"  # shares / coins


class Category(str, Enum):
    """Instrument category."""

    FOREX = "Forex"
    COMMODITIES = "Commodities"
    STOCKS = "Stocks"
    INDICES = "Indices"
    CRYPTO = "Crypto"

    @property
    def sizing_family(self) -> SizingFamily:
        return _SIZING_FAMILIES[self]


_SIZING_FAMILIES: dict[Category, SizingFamily] = {
    Category.FOREX: SizingFamily.PIP_VALUE,
    Category.INDICES: SizingFamily.PIP_VALUE,
    Category.COMMODITIES: SizingFamily.PIP_VALUE,
    Category.STOCKS: SizingFamily.PRICE_DISTANCE,
    Category.CRYPTO: SizingFamily.PRICE_DISTANCE,
}


@dataclass(frozen=True, slots=True)
class Instrument:
    """Tradable instrument with the constants needed to price a pip."""

    symbol: str
    name: str
    category: Category
    pip_value: float  # money value of one pip for one standard unit
    pip_size: float  # price increment that makes one pip
    contract_size: float


NumericInput = float | int | str | None


@dataclass(frozen=True, slots=True)
class CalculationInput:
    """Raw user input for one calculation."""

    account_size: NumericInput
    risk_percentage: NumericInput
    entry_price: NumericInput
    exit_price: NumericInput
    stop_loss: NumericInput
    instrument_symbol: str


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Risk, size and outcome figures derived from one trade setup."""

    risk_amount: float = 0.0
    position_size: float = 0.0
    risk_reward_ratio: float = 0.0
    profit_pips: float = 0.0
    loss_pips: float = 0.0
    profit_dollars: float = 0.0
    loss_dollars: float = 0.0
    trade_direction: TradeDirection = TradeDirection.SHORT

    @property
    def is_complete(self) -> bool:
        """Whether the setup produced a usable position size."""
        return self.position_size > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase field names used by the journal."""
        return {
            "riskAmount": self.risk_amount,
            "positionSize": self.position_size,
            "riskRewardRatio": self.risk_reward_ratio,
            "profitPips": self.profit_pips,
            "lossPips": self.loss_pips,
            "profitDollars": self.profit_dollars,
            "lossDollars": self.loss_dollars,
            "tradeDirection": self.trade_direction.value,
        }
