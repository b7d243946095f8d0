"""Trade record schema handed to the journal for persistence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from trade_journal.risk.calculator import parse_number
from trade_journal.types import CalculationResult, Category, Instrument, NumericInput, TradeDirection

TradeStatus = Literal["PLANNED", "ACTIVE", "WIN", "LOSS"]


class TradeRecord(BaseModel):
    """Calculated trade plus instrument and account context."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    symbol: str = Field(min_length=1)
    category: Category
    trade_direction: TradeDirection = Field(alias="tradeDirection")
    status: TradeStatus = "PLANNED"
    entry_price: float = Field(alias="entryPrice", ge=0.0)
    exit_price: float = Field(alias="exitPrice", ge=0.0)
    stop_loss: float = Field(alias="stopLoss", ge=0.0)
    account_size: float = Field(alias="accountSize", ge=0.0)
    risk_percentage: float = Field(alias="riskPercentage", ge=0.0)
    risk_amount: float = Field(alias="riskAmount", ge=0.0)
    lot_size: float = Field(alias="lotSize", ge=0.0)
    profit_dollars: float = Field(alias="profitDollars", ge=0.0)
    loss_dollars: float = Field(alias="lossDollars", ge=0.0)
    risk_reward_ratio: float = Field(alias="riskRewardRatio", ge=0.0)
    profit_pips: float = Field(alias="profitPips", ge=0.0)
    loss_pips: float = Field(alias="lossPips", ge=0.0)
    tags: list[str] = Field(default_factory=list)
    notes: str | None = None

    @classmethod
    def from_calculation(
        cls,
        result: CalculationResult,
        instrument: Instrument,
        *,
        entry_price: NumericInput,
        exit_price: NumericInput,
        stop_loss: NumericInput,
        account_size: NumericInput,
        risk_percentage: NumericInput,
        status: TradeStatus = "PLANNED",
        tags: Iterable[str] = (),
        notes: str | None = None,
    ) -> "TradeRecord":
        """Build a record from a calculator result; position size becomes lot size."""
        return cls(
            symbol=instrument.symbol,
            category=instrument.category,
            trade_direction=result.trade_direction,
            status=status,
            entry_price=max(0.0, parse_number(entry_price)),
            exit_price=max(0.0, parse_number(exit_price)),
            stop_loss=max(0.0, parse_number(stop_loss)),
            account_size=max(0.0, parse_number(account_size)),
            risk_percentage=max(0.0, parse_number(risk_percentage)),
            risk_amount=result.risk_amount,
            lot_size=result.position_size,
            profit_dollars=result.profit_dollars,
            loss_dollars=result.loss_dollars,
            risk_reward_ratio=result.risk_reward_ratio,
            profit_pips=result.profit_pips,
            loss_pips=result.loss_pips,
            tags=list(tags),
            notes=notes,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase keys for storage."""
        return self.model_dump(mode="json", by_alias=True)
