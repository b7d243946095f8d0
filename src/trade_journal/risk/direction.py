"""Direction auto-detection from a full trade setup.

Unlike ``calculator.infer_direction``, this checks stop placement against
entry and scores the setup before proposing a direction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from trade_journal.risk.calculator import parse_float
from trade_journal.types import NumericInput, TradeDirection

AUTO_DETECT_THRESHOLD = 70.0
MAX_CONFIDENCE = 95.0
BASE_CONFIDENCE = 60.0
UNDETERMINED_SUMMARY = "Unable to determine direction. Please check your price levels."


@dataclass(frozen=True, slots=True)
class DirectionAnalysis:
    """Outcome of analyzing entry/target/stop placement."""

    direction: TradeDirection | None
    confidence: float
    risk_reward: float
    summary: str

    @property
    def auto_detected(self) -> bool:
        return self.direction is not None and self.confidence > AUTO_DETECT_THRESHOLD


def analyze_direction(
    entry_price: NumericInput,
    exit_price: NumericInput,
    stop_loss: NumericInput,
) -> DirectionAnalysis:
    """Detect LONG/SHORT from price placement and score the setup."""
    entry = parse_float(entry_price)
    exit_ = parse_float(exit_price)
    stop = parse_float(stop_loss)
    if not all(math.isfinite(price) for price in (entry, exit_, stop)):
        return DirectionAnalysis(direction=None, confidence=0.0, risk_reward=0.0, summary="")

    if exit_ > entry and stop < entry:
        direction = TradeDirection.LONG
        profit_distance = exit_ - entry
        loss_distance = entry - stop
    elif exit_ < entry and stop > entry:
        direction = TradeDirection.SHORT
        profit_distance = entry - exit_
        loss_distance = stop - entry
    else:
        return DirectionAnalysis(
            direction=None,
            confidence=0.0,
            risk_reward=0.0,
            summary=UNDETERMINED_SUMMARY,
        )

    risk_reward = profit_distance / loss_distance
    confidence = min(MAX_CONFIDENCE, BASE_CONFIDENCE + risk_reward * 10)
    return DirectionAnalysis(
        direction=direction,
        confidence=confidence,
        risk_reward=risk_reward,
        summary=_summarize(direction, entry, exit_, stop, profit_distance, loss_distance, risk_reward),
    )


def _summarize(
    direction: TradeDirection,
    entry: float,
    exit_: float,
    stop: float,
    profit_distance: float,
    loss_distance: float,
    risk_reward: float,
) -> str:
    label = "Long" if direction is TradeDirection.LONG else "Short"
    gain_pct = profit_distance / entry * 100 if entry else 0.0
    loss_pct = loss_distance / entry * 100 if entry else 0.0
    return (
        f"{label} position detected: Entry {entry:.15g} -> Target {exit_:.15g} "
        f"({gain_pct:.2f}% gain), Stop {stop:.15g} ({loss_pct:.2f}% loss). "
        f"R:R = 1:{risk_reward:.2f}"
    )
