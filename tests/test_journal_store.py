from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from trade_journal.instruments import catalog
from trade_journal.journal.store import TradeJournalStore
from trade_journal.risk.calculator import compute
from trade_journal.schemas import TradeRecord
from trade_journal.types import Category, TradeDirection


def _eurusd_record(**overrides: object) -> TradeRecord:
    instrument = catalog.get_strict("EUR/USD")
    result = compute(10_000, 2, instrument, "1.1000", "1.1100", "1.0950")
    kwargs: dict[str, object] = {
        "entry_price": "1.1000",
        "exit_price": "1.1100",
        "stop_loss": "1.0950",
        "account_size": 10_000,
        "risk_percentage": 2,
    }
    kwargs.update(overrides)
    return TradeRecord.from_calculation(result, instrument, **kwargs)  # type: ignore[arg-type]


def test_record_maps_position_size_to_lot_size() -> None:
    record = _eurusd_record(tags=["breakout"], notes="London open")
    payload = record.to_payload()
    assert payload["symbol"] == "EUR/USD"
    assert payload["category"] == "Forex"
    assert payload["tradeDirection"] == "LONG"
    assert payload["status"] == "PLANNED"
    assert payload["lotSize"] == pytest.approx(0.4)
    assert payload["riskAmount"] == 200
    assert payload["entryPrice"] == pytest.approx(1.1)
    assert payload["tags"] == ["breakout"]
    assert "positionSize" not in payload


def test_record_validates_by_alias() -> None:
    payload = _eurusd_record().to_payload()
    restored = TradeRecord.model_validate(payload)
    assert restored.category is Category.FOREX
    assert restored.trade_direction is TradeDirection.LONG


def test_record_rejects_unknown_fields_and_status() -> None:
    payload = _eurusd_record().to_payload()
    with pytest.raises(ValidationError):
        TradeRecord.model_validate({**payload, "userId": "u1"})
    with pytest.raises(ValidationError):
        TradeRecord.model_validate({**payload, "status": "CLOSED"})


def test_store_appends_and_loads(tmp_path: Path) -> None:
    store = TradeJournalStore(tmp_path / "journal")
    first = store.append(_eurusd_record())
    store.append(_eurusd_record(status="ACTIVE"))

    assert first["event_type"] == "trade_saved"
    rows = store.load_recent(10)
    assert len(rows) == 2
    assert rows[-1]["payload"]["status"] == "ACTIVE"

    trades = store.load_trades(1)
    assert len(trades) == 1
    assert trades[0].status == "ACTIVE"
    assert store.load_recent(0) == []


def test_store_rejects_unknown_event_type(tmp_path: Path) -> None:
    store = TradeJournalStore(tmp_path)
    with pytest.raises(ValueError):
        store._write("trade_deleted", {})
