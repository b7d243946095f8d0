"""Position-sizing calculator.

Turns account settings, an instrument and a trade setup (entry, target and
stop-loss prices) into risk, size and outcome figures. Malformed or
non-positive input never raises: affected fields degrade to zero so callers
can render an incomplete setup instead of an error.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from trade_journal.instruments import catalog
from trade_journal.types import (
    CalculationInput,
    CalculationResult,
    Instrument,
    NumericInput,
    SizingFamily,
    TradeDirection,
)

_LEADING_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_float(value: NumericInput | Decimal) -> float:
    """Read a number from user input, NaN when there is none.

    Strings are read from their leading decimal number, so ``"1.10abc"``
    parses as 1.10 and ``"abc"`` as NaN.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        return float(match.group(0)) if match else math.nan
    return math.nan


def parse_number(value: NumericInput | Decimal) -> float:
    """Parse user input leniently, returning 0.0 for anything unusable."""
    number = parse_float(value)
    return number if math.isfinite(number) else 0.0


def compute_risk_amount(account_size: float, risk_percentage: float) -> float:
    """Money at risk for the given account settings."""
    if account_size > 0 and risk_percentage > 0:
        return account_size * risk_percentage / 100
    return 0.0


def infer_direction(entry_price: float, exit_price: float) -> TradeDirection:
    """LONG when the target sits strictly above entry, SHORT otherwise."""
    return TradeDirection.LONG if exit_price > entry_price else TradeDirection.SHORT


def compute(
    account_size: NumericInput,
    risk_percentage: NumericInput,
    instrument: Instrument | str | None,
    entry_price: NumericInput,
    exit_price: NumericInput,
    stop_loss: NumericInput,
) -> CalculationResult:
    """Derive risk, pip distances, position size and scenario outcomes.

    Args:
        account_size: Account balance.
        risk_percentage: Share of the account to risk, in percent.
        instrument: Catalog entry, or a symbol resolved through the catalog.
        entry_price: Planned entry.
        exit_price: Take-profit target.
        stop_loss: Stop-loss level.

    Returns:
        A fresh CalculationResult. ``risk_amount`` is populated whenever the
        account settings are valid, even if the prices are not.
    """
    account = parse_number(account_size)
    risk_pct = parse_number(risk_percentage)
    entry = parse_number(entry_price)
    exit_ = parse_number(exit_price)
    stop = parse_number(stop_loss)

    risk_amount = compute_risk_amount(account, risk_pct)
    direction = infer_direction(entry, exit_)

    if entry <= 0 or exit_ <= 0 or stop <= 0:
        return CalculationResult(risk_amount=risk_amount, trade_direction=direction)

    resolved = catalog.lookup(instrument) if isinstance(instrument, str) else instrument
    if resolved is None or not resolved.pip_size > 0:
        return CalculationResult(risk_amount=risk_amount, trade_direction=direction)

    stop_distance = abs(entry - stop)
    target_distance = abs(exit_ - entry)
    loss_pips = stop_distance / resolved.pip_size
    profit_pips = target_distance / resolved.pip_size
    risk_reward_ratio = profit_pips / loss_pips if loss_pips > 0 else 0.0

    position_size = 0.0
    profit_dollars = 0.0
    loss_dollars = 0.0

    family = _sizing_family(resolved)
    if family is SizingFamily.PIP_VALUE:
        if loss_pips > 0 and risk_amount > 0 and resolved.pip_value > 0:
            pip_value = resolved.pip_value
            position_size = risk_amount / (loss_pips * pip_value)
            profit_dollars = profit_pips * pip_value * position_size
            loss_dollars = loss_pips * pip_value * position_size
    elif family is SizingFamily.PRICE_DISTANCE:
        if stop_distance > 0 and risk_amount > 0:
            position_size = risk_amount / stop_distance
            profit_dollars = target_distance * position_size
            loss_dollars = stop_distance * position_size

    return CalculationResult(
        risk_amount=risk_amount,
        position_size=position_size,
        risk_reward_ratio=risk_reward_ratio,
        profit_pips=profit_pips,
        loss_pips=loss_pips,
        profit_dollars=profit_dollars,
        loss_dollars=loss_dollars,
        trade_direction=direction,
    )


def compute_input(data: CalculationInput) -> CalculationResult:
    """Run ``compute`` over a CalculationInput."""
    return compute(
        data.account_size,
        data.risk_percentage,
        data.instrument_symbol,
        data.entry_price,
        data.exit_price,
        data.stop_loss,
    )


def _sizing_family(instrument: Instrument) -> SizingFamily | None:
    # Categories outside the enum size to zero rather than failing.
    family = getattr(instrument.category, "sizing_family", None)
    return family if isinstance(family, SizingFamily) else None
