from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from trade_journal.config import LogFormat, Settings


def test_defaults() -> None:
    settings = Settings(journal_dir="data/journal")
    assert settings.default_account_size == 10_000
    assert settings.default_risk_pct == 2.0
    assert settings.default_symbol == "EUR/USD"
    assert settings.log_format is LogFormat.CONSOLE
    assert settings.journal_dir == Path("data/journal")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_SYMBOL", "AAPL")
    monkeypatch.setenv("DEFAULT_RISK_PCT", "1.5")
    monkeypatch.setenv("LOG_FORMAT", "json")
    settings = Settings()
    assert settings.default_symbol == "AAPL"
    assert settings.default_risk_pct == 1.5
    assert settings.log_format is LogFormat.JSON


def test_rejects_unknown_default_symbol() -> None:
    with pytest.raises(ValidationError):
        Settings(default_symbol="NOPE")


def test_rejects_non_positive_risk() -> None:
    with pytest.raises(ValidationError):
        Settings(default_risk_pct=0)
