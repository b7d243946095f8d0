"""Preset risk:reward target/stop suggestions for an entry price."""

from __future__ import annotations

from dataclasses import dataclass

from trade_journal.risk.calculator import parse_number
from trade_journal.types import NumericInput


@dataclass(frozen=True, slots=True)
class RiskPreset:
    name: str
    risk_reward: float
    description: str


PRESETS: tuple[RiskPreset, ...] = (
    RiskPreset("Conservative", 1.5, "Lower risk, steady gains"),
    RiskPreset("Balanced", 2.0, "Optimal risk-reward balance"),
    RiskPreset("Aggressive", 3.0, "Higher risk, higher reward"),
)


@dataclass(frozen=True, slots=True)
class RiskSuggestion:
    """Long-side target and stop levels for one preset."""

    name: str
    risk_reward: float
    description: str
    entry_price: float
    exit_price: float
    stop_loss: float
    profit_pips: float
    loss_pips: float
    profit_distance: float
    loss_distance: float


def _heuristic(symbol: str, entry: float) -> tuple[float, float]:
    """Return (pip_size, risk_distance) guessed from the symbol text."""
    # Slash symbols are matched first, so XAU/USD takes the forex branch.
    if "/" in symbol:
        if "JPY" in symbol:
            return 0.01, entry * 0.005
        return 0.0001, entry * 0.008
    if "XAU" in symbol or "XAG" in symbol:
        return 0.1, entry * 0.015
    return 0.0001, entry * 0.02


def suggest_levels(symbol: str, entry_price: NumericInput) -> list[RiskSuggestion]:
    """Build one suggestion per preset, or none without a usable entry."""
    entry = parse_number(entry_price)
    if not symbol or entry <= 0:
        return []

    pip_size, risk_distance = _heuristic(symbol, entry)
    suggestions = []
    for preset in PRESETS:
        stop_loss = entry - risk_distance
        profit_distance = risk_distance * preset.risk_reward
        exit_price = entry + profit_distance
        suggestions.append(
            RiskSuggestion(
                name=preset.name,
                risk_reward=preset.risk_reward,
                description=preset.description,
                entry_price=entry,
                exit_price=exit_price,
                stop_loss=stop_loss,
                profit_pips=abs(exit_price - entry) / pip_size,
                loss_pips=abs(entry - stop_loss) / pip_size,
                profit_distance=profit_distance,
                loss_distance=risk_distance,
            )
        )
    return suggestions
