"""JSONL journal store for saved trades."""

from __future__ import annotations

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from trade_journal.schemas import TradeRecord
from trade_journal.utils.logging import get_logger, log_trade_saved

_ALLOWED_EVENT_TYPES = {"trade_saved"}

logger = get_logger(__name__)


class TradeJournalStore:
    """Append-only JSONL trade store, one file per UTC day."""

    def __init__(self, journal_dir: Path) -> None:
        self._journal_dir = journal_dir
        self._journal_dir.mkdir(parents=True, exist_ok=True)

    def append(self, record: TradeRecord) -> dict[str, Any]:
        """Persist one trade record and return the stored line."""
        row = self._write("trade_saved", record.to_payload())
        log_trade_saved(
            logger,
            symbol=record.symbol,
            direction=record.trade_direction.value,
            lot_size=record.lot_size,
            risk_amount=record.risk_amount,
            status=record.status,
        )
        return row

    def load_trades(self, limit: int) -> list[TradeRecord]:
        """Load recently saved trades as validated records."""
        return [
            TradeRecord.model_validate(row["payload"])
            for row in self.load_recent(limit)
            if row.get("event_type") == "trade_saved"
        ]

    def load_recent(self, limit: int) -> list[dict[str, Any]]:
        """Load recent events from the most recent journal files."""
        if limit <= 0:
            return []

        rows: list[dict[str, Any]] = []
        files = sorted(self._journal_dir.glob("*.jsonl"), reverse=True)
        for file in files:
            lines = file.read_text(encoding="utf-8").splitlines()
            for line in reversed(lines):
                if not line.strip():
                    continue
                rows.append(json.loads(line))
                if len(rows) >= limit:
                    return list(reversed(rows))
        return list(reversed(rows))

    def _write(self, event_type: str, payload: dict[str, Any]) -> dict[str, Any]:
        if event_type not in _ALLOWED_EVENT_TYPES:
            raise ValueError(f"unsupported_event_type: {event_type}")
        now = datetime.now(timezone.utc)
        record = {
            "timestamp": now.isoformat(),
            "event_type": event_type,
            "payload": payload,
        }
        file_path = self._file_path_for_day(now.date())
        with file_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=True) + "\n")
        return record

    def _file_path_for_day(self, day: date) -> Path:
        return self._journal_dir / f"{day.isoformat()}.jsonl"
