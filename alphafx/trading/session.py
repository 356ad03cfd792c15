"""
Trading session: the one owner of desk state (live price, ledger, portfolio).
All mutations go through the operations here; derived figures such as
unrealized P&L and profit percentages are computed on read.
"""

from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, List, Optional, Sequence, Union

import pandas as pd

from alphafx.analytics.metrics import BlotterSummary, PerformanceMetrics, blotter_summary, compute_metrics
from alphafx.core.config import Config
from alphafx.core.types import (
    MarketQuote,
    Portfolio,
    PortfolioSnapshot,
    Recommendation,
    Trade,
    TradeSide,
    TradeStatus,
)
from alphafx.market.overview import generate_market_overview
from alphafx.market.pairs import validate_pair
from alphafx.market.price_feed import LivePriceFeed, PriceGenerator
from alphafx.notifications import Notifier
from alphafx.profile.store import SUPPORTED_CURRENCIES, DemoProfile, trade_defaults
from alphafx.recommendations.generator import generate_recommendations
from alphafx.trading.accounting import margin_for, pct_of, total_unrealized, trade_pnl
from alphafx.trading.accounting import unrealized_pnl as _unrealized_pnl
from alphafx.trading.catalog import Algorithm, default_algorithms
from alphafx.trading.ledger import TradeLedger
from alphafx.utils.formatting import format_rate, parse_amount

logger = logging.getLogger("alphafx.trading.session")


@dataclass
class TradeResult:
    """Outcome of an open/close request."""
    success: bool
    trade: Optional[Trade] = None
    message: str = ""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_side(side: Union[TradeSide, str]) -> TradeSide:
    if isinstance(side, TradeSide):
        return side
    return TradeSide(str(side).strip().upper())


def _valid_price(price: float) -> bool:
    return math.isfinite(price) and price > 0


class TradingSession:
    """
    Single-threaded desk controller. A timer (or a test) calls tick() to move
    the live price; user actions call open_trade/close_trade and friends.
    """

    def __init__(
        self,
        portfolio: Portfolio,
        price_feed: LivePriceFeed,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
        selected_pair: str = "EUR/USD",
        trade_amount: float = 1000.0,
        min_trade_amount: float = 100.0,
        margin_rate: float = 0.01,
        release_margin_on_close: bool = False,
    ):
        self.portfolio = portfolio
        self.price_feed = price_feed
        self.notifier = notifier or Notifier()
        self.ledger = TradeLedger()
        self.algorithms: List[Algorithm] = default_algorithms()
        self.auto_trading = False
        self.market_overview: List[MarketQuote] = []
        self.selected_pair = validate_pair(selected_pair)
        self.trade_amount = trade_amount
        self.min_trade_amount = min_trade_amount
        self.margin_rate = margin_rate
        self.release_margin_on_close = release_margin_on_close
        self._rng = rng or random.Random()
        self._clock = clock
        self._day: date = clock().date()
        self._realized: List[float] = []
        self._starting_balance = portfolio.balance

    @classmethod
    def from_config(
        cls,
        config: Config,
        profile: Optional[DemoProfile] = None,
        notifier: Optional[Notifier] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> "TradingSession":
        rng = rng or random.Random(config.seed)
        base_currency = config.base_currency
        if profile is not None and profile.base_currency in SUPPORTED_CURRENCIES:
            base_currency = profile.base_currency
        trade_amount, min_amount = trade_defaults(profile, config.default_trade_amount, config.min_trade_amount)
        portfolio = Portfolio(
            balance=config.initial_balance,
            base_currency=base_currency,
            total_profit=config.initial_total_profit,
            today_profit=config.initial_today_profit,
            open_positions=config.initial_open_positions,
            total_trades=config.initial_total_trades,
        )
        generator = PriceGenerator(
            config.starting_price,
            rng=rng,
            volatility=config.live_volatility,
            band=config.price_band,
            momentum_decay=config.momentum_decay,
        )
        return cls(
            portfolio=portfolio,
            price_feed=LivePriceFeed(generator),
            notifier=notifier,
            rng=rng,
            clock=clock,
            selected_pair=config.default_pair,
            trade_amount=trade_amount,
            min_trade_amount=min_amount,
            margin_rate=config.margin_rate,
            release_margin_on_close=config.release_margin_on_close,
        )

    @property
    def current_price(self) -> float:
        return self.price_feed.current

    def tick(self) -> float:
        """Advance the live price one step. Also rolls today's profit at UTC midnight."""
        self._roll_day()
        return self.price_feed.tick()

    def refresh_market_overview(self) -> List[MarketQuote]:
        self.market_overview = generate_market_overview(self.selected_pair, self.current_price, self._rng)
        return self.market_overview

    def _roll_day(self) -> None:
        today = self._clock().date()
        if today != self._day:
            logger.info("New trading day %s, resetting today's profit (was %.2f)", today, self.portfolio.today_profit)
            self._day = today
            self.portfolio.today_profit = 0.0

    def select_pair(self, pair: str) -> str:
        self.selected_pair = validate_pair(pair)
        return self.selected_pair

    def set_trade_amount(self, raw: Union[str, float]) -> float:
        self.trade_amount = parse_amount(raw)
        return self.trade_amount

    def set_min_trade_amount(self, raw: Union[str, float]) -> float:
        minimum = parse_amount(raw)
        if not math.isfinite(minimum) or minimum <= 0:
            raise ValueError(f"Minimum trade amount must be a positive number, got {raw!r}")
        self.min_trade_amount = minimum
        return self.min_trade_amount

    def toggle_algorithm(self, algorithm_id: str, enabled: bool) -> Algorithm:
        for alg in self.algorithms:
            if alg.id == algorithm_id:
                alg.enabled = enabled
                return alg
        raise ValueError(f"Unknown algorithm: {algorithm_id}")

    def enabled_algorithms(self) -> List[Algorithm]:
        return [a for a in self.algorithms if a.enabled]

    def toggle_auto_trading(self) -> bool:
        self.auto_trading = not self.auto_trading
        if self.auto_trading:
            self.notifier.notify("Auto Trading Enabled", "AI algorithms will now execute trades automatically")
        else:
            self.notifier.notify("Auto Trading Disabled", "Manual trading mode activated")
        return self.auto_trading

    def open_trade(
        self,
        side: Union[TradeSide, str],
        amount: Optional[float] = None,
        pair: Optional[str] = None,
        current_price: Optional[float] = None,
        algorithm: str = "Manual",
    ) -> TradeResult:
        """
        Open a trade at the live price (or `current_price`). Amounts below the
        minimum are rejected with a notification and leave all state untouched.
        """
        side = _coerce_side(side)
        amount = self.trade_amount if amount is None else float(amount)
        pair = validate_pair(pair) if pair else self.selected_pair
        price = self.current_price if current_price is None else current_price
        currency = self.portfolio.base_currency

        if not math.isfinite(amount) or amount <= 0:
            message = "Enter a positive trade amount"
            self.notifier.notify("Invalid Trade Amount", message)
            return TradeResult(success=False, message=message)
        if amount < self.min_trade_amount:
            message = f"Minimum trade amount is {self.min_trade_amount:g} {currency}"
            self.notifier.notify("Trade Too Small", message)
            return TradeResult(success=False, message=message)
        if not _valid_price(price):
            message = f"No usable price for {pair}: {price}"
            self.notifier.notify("Invalid Price", message, variant="destructive")
            return TradeResult(success=False, message=message)

        now = self._clock()
        trade = Trade(
            id=self.ledger.next_id(now),
            timestamp=now,
            pair=pair,
            side=side,
            amount=amount,
            entry_price=price,
            algorithm=algorithm,
        )
        self.ledger.add(trade)
        self.portfolio.balance -= margin_for(amount, self.margin_rate)
        self.portfolio.open_positions += 1
        self.portfolio.total_trades += 1
        if self.portfolio.balance < 0:
            logger.warning("Balance is negative after opening %s: %.2f %s", trade.id, self.portfolio.balance, currency)

        verb = "Bought" if side == TradeSide.BUY else "Sold"
        self.notifier.notify(
            f"{side.value} Order Executed",
            f"{verb} {amount:g} {pair} at {format_rate(price)}",
        )
        return TradeResult(success=True, trade=trade)

    def close_trade(self, trade_id: str, current_price: Optional[float] = None) -> TradeResult:
        """
        Close an open trade at the live price and book its profit.
        Unknown ids and already-closed trades are reported and change nothing.
        """
        trade = self.ledger.get(trade_id)
        if trade is None:
            message = f"Trade {trade_id} not found"
            self.notifier.notify("Trade Not Found", message, variant="destructive")
            return TradeResult(success=False, message=message)
        if trade.status != TradeStatus.OPEN:
            message = f"Trade {trade_id} is already {trade.status.value.lower()}"
            self.notifier.notify("Trade Not Open", message, variant="destructive")
            return TradeResult(success=False, trade=trade, message=message)

        price = self.current_price if current_price is None else current_price
        if not _valid_price(price):
            message = f"No usable price to close {trade_id}: {price}"
            self.notifier.notify("Invalid Price", message, variant="destructive")
            return TradeResult(success=False, trade=trade, message=message)

        self._roll_day()
        profit = trade_pnl(trade.side, trade.entry_price, price, trade.amount)
        self.ledger.close(trade_id, price, profit)
        self._realized.append(profit)

        released = margin_for(trade.amount, self.margin_rate) if self.release_margin_on_close else 0.0
        self.portfolio.balance += profit + released
        self.portfolio.total_profit += profit
        self.portfolio.today_profit += profit
        self.portfolio.open_positions = max(0, self.portfolio.open_positions - 1)

        self.notifier.notify("Trade Closed", f"Trade {trade_id} closed. P/L {profit:.2f}")
        return TradeResult(success=True, trade=trade)

    def unrealized_pnl(self, trade: Trade, current_price: Optional[float] = None) -> float:
        price = self.current_price if current_price is None else current_price
        return _unrealized_pnl(trade, price)

    def recommendations(self, count: int = 3) -> List[Recommendation]:
        return generate_recommendations(self.portfolio.balance, self._rng, count=count)

    def apply_recommendations(self, recs: Sequence[Recommendation]) -> List[TradeResult]:
        """
        Open one trade per recommendation, in order, on the selected pair at the
        live price. Not atomic: earlier trades stay open if a later one is rejected.
        """
        return [self.open_trade(rec.action, amount=rec.amount, algorithm="AI") for rec in recs]

    def apply_best_recommendation(self, recs: Sequence[Recommendation]) -> Optional[TradeResult]:
        if not recs:
            return None
        return self.apply_recommendations(recs[:1])[0]

    def snapshot(self, current_price: Optional[float] = None) -> PortfolioSnapshot:
        price = self.current_price if current_price is None else current_price
        p = self.portfolio
        open_trades = self.ledger.open_trades()
        unrealized = total_unrealized(open_trades, price)
        return PortfolioSnapshot(
            balance=p.balance,
            base_currency=p.base_currency,
            total_profit=p.total_profit,
            today_profit=p.today_profit,
            profit_pct=pct_of(p.total_profit, p.balance),
            today_profit_pct=pct_of(p.today_profit, p.balance),
            open_positions=p.open_positions,
            total_trades=p.total_trades,
            unrealized_pnl=unrealized,
            equity=p.balance + unrealized,
            margin_in_use=sum(margin_for(t.amount, self.margin_rate) for t in open_trades),
            open_notional=sum(t.amount for t in open_trades),
            closed_profit=sum(t.profit for t in self.ledger.closed_trades()),
        )

    def blotter_summary(self) -> BlotterSummary:
        return blotter_summary(self.ledger)

    def performance(self) -> PerformanceMetrics:
        """Metrics of closed trades in the order they were closed."""
        return compute_metrics(list(self._realized), starting_balance=self._starting_balance)

    def trades_frame(self, current_price: Optional[float] = None) -> pd.DataFrame:
        """Ledger as a DataFrame with an `unrealized` column for open trades."""
        price = self.current_price if current_price is None else current_price
        df = self.ledger.to_frame()
        df["unrealized"] = [_unrealized_pnl(t, price) for t in self.ledger]
        return df
