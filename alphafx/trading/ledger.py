"""
Trade ledger: newest trade first, closes happen in place.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Dict, Iterator, List, Optional

import pandas as pd

from alphafx.core.types import Trade, TradeStatus

logger = logging.getLogger("alphafx.trading.ledger")

FRAME_COLUMNS = [
    "id", "timestamp", "pair", "side", "amount", "entry_price",
    "exit_price", "status", "profit", "algorithm",
]


class TradeLedger:
    def __init__(self):
        self._trades: List[Trade] = []
        self._by_id: Dict[str, Trade] = {}

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(self._trades)

    def __contains__(self, trade_id: str) -> bool:
        return trade_id in self._by_id

    def next_id(self, now: datetime) -> str:
        """TXN<epoch ms>; trades created within the same millisecond get a -n suffix."""
        base = f"TXN{int(now.timestamp() * 1000)}"
        candidate, n = base, 1
        while candidate in self._by_id:
            candidate = f"{base}-{n}"
            n += 1
        return candidate

    def add(self, trade: Trade) -> None:
        if trade.id in self._by_id:
            raise ValueError(f"Duplicate trade id: {trade.id}")
        self._trades.insert(0, trade)
        self._by_id[trade.id] = trade

    def get(self, trade_id: str) -> Optional[Trade]:
        return self._by_id.get(trade_id)

    def close(self, trade_id: str, exit_price: float, profit: float) -> Optional[Trade]:
        """Mark an open trade CLOSED. Returns None if the id is unknown or the trade is not open."""
        trade = self._by_id.get(trade_id)
        if trade is None or not trade.is_open:
            return None
        trade.exit_price = exit_price
        trade.profit = profit
        trade.status = TradeStatus.CLOSED
        return trade

    @property
    def trades(self) -> List[Trade]:
        return list(self._trades)

    def open_trades(self) -> List[Trade]:
        return [t for t in self._trades if t.status == TradeStatus.OPEN]

    def closed_trades(self) -> List[Trade]:
        return [t for t in self._trades if t.status == TradeStatus.CLOSED]

    def to_frame(self) -> pd.DataFrame:
        """Blotter as a DataFrame, newest first."""
        rows = [
            {
                "id": t.id,
                "timestamp": t.timestamp,
                "pair": t.pair,
                "side": t.side.value,
                "amount": t.amount,
                "entry_price": t.entry_price,
                "exit_price": t.exit_price,
                "status": t.status.value,
                "profit": t.profit,
                "algorithm": t.algorithm,
            }
            for t in self._trades
        ]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)
