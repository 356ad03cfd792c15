#!/usr/bin/env python3
"""
AlphaFx demo desk CLI: signup | login | run | recommend | chart
Usage:
  python main.py signup --name Ada --email ada@example.com --password x --currency USD --amount 1000
  python main.py login --email ada@example.com --password x
  python main.py run [--ticks 30] [--buy 1000] [--sell 500] [--close-all] [--export trades.csv]
  python main.py recommend [--apply best|all]
  python main.py chart [--samples 50]
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
from pathlib import Path

# Project root
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from alphafx.core.config import Config, load_config
from alphafx.core.logger import setup_logging
from alphafx.market.overview import find_quote
from alphafx.market.price_feed import chart_change, generate_price_history
from alphafx.notifications import Notifier
from alphafx.profile.store import SignupForm, load_profile, login, signup
from alphafx.trading.session import TradingSession
from alphafx.utils.formatting import format_money, format_pct, format_rate
from alphafx.utils.telegram import TelegramRelay
from alphafx.utils.timers import TickScheduler

logger = logging.getLogger("alphafx")


def _setup(config_path: Path | None) -> tuple[Config, Notifier]:
    config = load_config(config_path, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file,
                  secrets=(config.telegram_bot_token, config.telegram_chat_id))
    relay = TelegramRelay(config.telegram_bot_token, config.telegram_chat_id)
    return config, Notifier(relay)


def _profile_path(config: Config) -> Path:
    path = config.profile_path
    return path if path.is_absolute() else ROOT / path


def _session(config: Config, notifier: Notifier) -> TradingSession:
    profile = load_profile(_profile_path(config))
    if profile is None:
        logger.info("No demo profile found, using configured trade defaults")
    return TradingSession.from_config(config, profile=profile, notifier=notifier)


def print_portfolio(session: TradingSession) -> None:
    s = session.snapshot()
    cur = s.base_currency
    print("\n--- Portfolio ---")
    print(f"Balance: {format_money(s.balance, cur)}")
    print(f"Total profit: {format_money(s.total_profit, cur, signed=True)} ({format_pct(s.profit_pct)})")
    print(f"Today: {format_money(s.today_profit, cur, signed=True)} ({format_pct(s.today_profit_pct)})")
    print(f"Unrealized: {format_money(s.unrealized_pnl, cur, signed=True)} | Equity: {format_money(s.equity, cur)}")
    print(f"Open positions: {s.open_positions} | Total trades: {s.total_trades}")
    print(f"Open notional: {format_money(s.open_notional, cur)} | Margin in use: {format_money(s.margin_in_use, cur)} "
          f"| Closed this session: {format_money(s.closed_profit, cur, signed=True)}")


def print_blotter(session: TradingSession) -> None:
    print("\n--- Trade Blotter ---")
    price = session.current_price
    for t in session.ledger:
        shown_exit = price if t.is_open else t.exit_price
        pnl = session.unrealized_pnl(t) if t.is_open else t.profit
        print(
            f"{t.id:<20} {t.timestamp:%Y-%m-%d %H:%M:%S} {t.pair:<8} {t.side.value:<4} "
            f"{t.amount:>10,.0f} {format_rate(t.entry_price)} {format_rate(shown_exit)} "
            f"{format_money(pnl, signed=True):>10} {t.status.value:<6} {t.algorithm}"
        )
    b = session.blotter_summary()
    print(f"Open trades: {b.open_trades} | Total P&L: {format_money(b.total_pnl, signed=True)} "
          f"| Win rate: {b.win_rate * 100:.1f}% | Volume: {b.volume:,.0f}")


def run_signup(args: argparse.Namespace) -> int:
    config, notifier = _setup(args.config)
    form = SignupForm(
        name=args.name,
        email=args.email,
        password=args.password,
        user_type="organization" if args.organization else "individual",
        organization_name=args.organization or "",
        base_currency=args.currency,
        basic_trade_amount=args.amount,
    )
    result = signup(form, _profile_path(config), notifier)
    return 0 if result.success else 1


def run_login(args: argparse.Namespace) -> int:
    _, notifier = _setup(args.config)
    return 0 if login(args.email, args.password, notifier).success else 1


def run_desk(args: argparse.Namespace) -> int:
    """Open requested trades, let the price walk for --ticks, optionally close everything."""
    config, notifier = _setup(args.config)
    session = _session(config, notifier)
    if args.pair:
        session.select_pair(args.pair)
    for amount in args.buy or []:
        session.open_trade("BUY", amount=amount)
    for amount in args.sell or []:
        session.open_trade("SELL", amount=amount)

    def on_price_tick() -> None:
        price = session.tick()
        logger.debug("%s %s", session.selected_pair, format_rate(price))

    def on_overview_tick() -> None:
        quote = find_quote(session.refresh_market_overview(), session.selected_pair)
        if quote is not None:
            logger.info("%s %s (%+.5f, %+.2f%%) spread %s", quote.pair, format_rate(quote.price),
                        quote.change, quote.change_pct, format_rate(quote.spread))

    scheduler = TickScheduler()
    scheduler.every(config.price_tick_seconds, on_price_tick, name="price")
    scheduler.every(config.overview_tick_seconds, on_overview_tick, name="overview")
    scheduler.run_forever(max_iterations=args.ticks)

    if args.close_all:
        for trade in session.ledger.open_trades():
            session.close_trade(trade.id)
    print_portfolio(session)
    print_blotter(session)
    if args.export:
        session.trades_frame().to_csv(args.export, index=False)
        logger.info("Exported %d trades to %s", len(session.ledger), args.export)
    return 0


def run_recommend(args: argparse.Namespace) -> int:
    config, notifier = _setup(args.config)
    session = _session(config, notifier)
    recs = session.recommendations()
    balance = session.portfolio.balance
    print("\n--- AI Recommendations ---")
    for i, rec in enumerate(recs):
        best = " (best match)" if i == 0 else ""
        print(f"{rec.action.value:<4} {rec.pair} {rec.amount:,.0f} ({rec.portfolio_share_pct(balance):.1f}% of portfolio) "
              f"confidence {rec.confidence:.1f}% ~{rec.expected_profit:.0f} profit, {rec.timeframe}{best}")
        print(f"     {rec.reasoning}")
    if args.apply == "best":
        session.apply_best_recommendation(recs)
    elif args.apply == "all":
        session.apply_recommendations(recs)
    if args.apply:
        print_portfolio(session)
        print_blotter(session)
    return 0


def run_chart(args: argparse.Namespace) -> int:
    config, _ = _setup(args.config)
    rng = random.Random(config.seed)
    df = generate_price_history(
        config.starting_price,
        rng=rng,
        samples=args.samples or config.chart_samples,
        volatility=config.chart_volatility,
        band=config.price_band,
    )
    change, change_pct = chart_change(df)
    print(f"\n--- {config.default_pair} Live Chart ---")
    print(f"Last: {format_rate(float(df['price'].iloc[-1]))}  {change:+.5f} ({change_pct:+.3f}%)")
    print(df.to_string(index=False))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="AlphaFx demo trading desk")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="mode", required=True)

    p = sub.add_parser("signup", help="Create the local demo profile")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--password", required=True)
    p.add_argument("--currency", default="", help="Base currency (USD, INR, AED, GBP, EUR, JPY)")
    p.add_argument("--amount", default="100", help="Basic trade amount")
    p.add_argument("--organization", default=None, help="Organization name (organization accounts)")
    p.set_defaults(func=run_signup)

    p = sub.add_parser("login", help="Simulated login")
    p.add_argument("--email", required=True)
    p.add_argument("--password", required=True)
    p.set_defaults(func=run_login)

    p = sub.add_parser("run", help="Run the desk with a live mock price")
    p.add_argument("--ticks", type=int, default=30, help="Scheduler iterations before stopping")
    p.add_argument("--pair", default=None)
    p.add_argument("--buy", type=float, action="append", help="Open a BUY of this amount (repeatable)")
    p.add_argument("--sell", type=float, action="append", help="Open a SELL of this amount (repeatable)")
    p.add_argument("--close-all", action="store_true", help="Close all open trades before exit")
    p.add_argument("--export", type=Path, default=None, help="Write the blotter to CSV")
    p.set_defaults(func=run_desk)

    p = sub.add_parser("recommend", help="Show mock AI recommendations")
    p.add_argument("--apply", choices=["best", "all"], default=None)
    p.set_defaults(func=run_recommend)

    p = sub.add_parser("chart", help="Print synthetic price history")
    p.add_argument("--samples", type=int, default=None, help="Defaults to market.chart_samples")
    p.set_defaults(func=run_chart)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    exit(main())
