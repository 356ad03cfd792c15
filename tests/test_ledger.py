"""Unit tests for trading.ledger."""

from datetime import datetime, timezone

import pytest
from alphafx.core.types import Trade, TradeSide, TradeStatus
from alphafx.trading.ledger import FRAME_COLUMNS, TradeLedger

NOW = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


def _trade(trade_id, side=TradeSide.BUY):
    return Trade(id=trade_id, timestamp=NOW, pair="EUR/USD", side=side, amount=1000.0, entry_price=1.1)


def test_newest_first():
    ledger = TradeLedger()
    ledger.add(_trade("A"))
    ledger.add(_trade("B"))
    assert [t.id for t in ledger] == ["B", "A"]
    assert "A" in ledger
    assert len(ledger) == 2


def test_duplicate_id_rejected():
    ledger = TradeLedger()
    ledger.add(_trade("A"))
    with pytest.raises(ValueError):
        ledger.add(_trade("A"))


def test_next_id_from_clock_with_suffix():
    ledger = TradeLedger()
    first = ledger.next_id(NOW)
    assert first == f"TXN{int(NOW.timestamp() * 1000)}"
    ledger.add(_trade(first))
    second = ledger.next_id(NOW)
    assert second == f"{first}-1"
    ledger.add(_trade(second))
    assert ledger.next_id(NOW) == f"{first}-2"


def test_close_once():
    ledger = TradeLedger()
    ledger.add(_trade("A"))
    closed = ledger.close("A", 1.2, 5.0)
    assert closed.status == TradeStatus.CLOSED
    assert closed.exit_price == 1.2
    assert ledger.close("A", 1.3, 9.0) is None
    assert ledger.get("A").exit_price == 1.2
    assert ledger.get("A").profit == 5.0
    assert ledger.close("missing", 1.0, 0.0) is None


def test_open_and_closed_views():
    ledger = TradeLedger()
    ledger.add(_trade("A"))
    ledger.add(_trade("B", TradeSide.SELL))
    ledger.close("A", 1.2, 1.0)
    assert [t.id for t in ledger.open_trades()] == ["B"]
    assert [t.id for t in ledger.closed_trades()] == ["A"]


def test_to_frame():
    ledger = TradeLedger()
    assert list(ledger.to_frame().columns) == FRAME_COLUMNS
    assert ledger.to_frame().empty
    ledger.add(_trade("A"))
    df = ledger.to_frame()
    assert df.iloc[0]["side"] == "BUY"
    assert df.iloc[0]["status"] == "OPEN"
