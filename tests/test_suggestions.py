from __future__ import annotations

import pytest

from trade_journal.risk.suggestions import suggest_levels


def test_major_pair_suggestions() -> None:
    suggestions = suggest_levels("EUR/USD", "1.1000")
    assert [s.name for s in suggestions] == ["Conservative", "Balanced", "Aggressive"]
    balanced = suggestions[1]
    assert balanced.loss_distance == pytest.approx(1.1 * 0.008)
    assert balanced.stop_loss == pytest.approx(1.1 - 0.0088)
    assert balanced.exit_price == pytest.approx(1.1 + 0.0176)
    assert balanced.loss_pips == pytest.approx(88)
    assert balanced.profit_pips == pytest.approx(176)


def test_jpy_pair_uses_wider_pips() -> None:
    conservative = suggest_levels("USD/JPY", 150)[0]
    assert conservative.loss_distance == pytest.approx(0.75)
    assert conservative.loss_pips == pytest.approx(75)
    assert conservative.profit_distance == pytest.approx(1.125)


def test_metal_without_slash_uses_metal_heuristic() -> None:
    aggressive = suggest_levels("XAUUSD", 2000)[2]
    assert aggressive.loss_distance == pytest.approx(30)
    assert aggressive.loss_pips == pytest.approx(300)
    assert aggressive.exit_price == pytest.approx(2090)


def test_stock_heuristic() -> None:
    balanced = suggest_levels("AAPL", 150)[1]
    assert balanced.stop_loss == pytest.approx(147)
    assert balanced.exit_price == pytest.approx(156)


@pytest.mark.parametrize("entry", [0, -5, "", "abc", None])
def test_no_suggestions_without_entry(entry: object) -> None:
    assert suggest_levels("EUR/USD", entry) == []  # type: ignore[arg-type]


def test_no_suggestions_without_symbol() -> None:
    assert suggest_levels("", 1.1) == []
