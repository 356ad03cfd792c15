"""
Load configuration from config.yaml and .env. Telegram credentials only from env.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_bool(key: str, default: bool = False) -> bool:
        return os.getenv(key, str(default)).lower() in ("true", "1", "yes")

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    portfolio = data.get("portfolio", {})
    trading = data.get("trading", {})
    market = data.get("market", {})
    profile = data.get("profile", {})
    telegram = data.get("telegram", {})
    logging_cfg = data.get("logging", {})

    seed = os.getenv("SEED", market.get("seed"))
    try:
        seed = int(seed) if seed not in (None, "") else None
    except ValueError:
        seed = None

    return Config(
        # Portfolio
        base_currency=env("BASE_CURRENCY", portfolio.get("base_currency", "USD")).upper(),
        initial_balance=env_float("INITIAL_BALANCE", portfolio.get("balance", 5000.0)),
        initial_total_profit=float(portfolio.get("total_profit", 0.0)),
        initial_today_profit=float(portfolio.get("today_profit", 0.0)),
        initial_open_positions=int(portfolio.get("open_positions", 0)),
        initial_total_trades=int(portfolio.get("total_trades", 0)),
        # Trading
        default_pair=env("DEFAULT_PAIR", trading.get("default_pair", "EUR/USD")).upper(),
        default_trade_amount=env_float("DEFAULT_TRADE_AMOUNT", trading.get("default_trade_amount", 1000.0)),
        min_trade_amount=env_float("MIN_TRADE_AMOUNT", trading.get("min_trade_amount", 100.0)),
        margin_rate=env_float("MARGIN_RATE", trading.get("margin_rate", 0.01)),
        release_margin_on_close=env_bool("RELEASE_MARGIN_ON_CLOSE", trading.get("release_margin_on_close", False)),
        # Market simulation
        starting_price=env_float("STARTING_PRICE", market.get("starting_price", 1.0847)),
        price_tick_seconds=env_float("PRICE_TICK_SECONDS", market.get("price_tick_seconds", 1.0)),
        overview_tick_seconds=env_float("OVERVIEW_TICK_SECONDS", market.get("overview_tick_seconds", 2.0)),
        live_volatility=env_float("LIVE_VOLATILITY", market.get("live_volatility", 0.002)),
        chart_volatility=env_float("CHART_VOLATILITY", market.get("chart_volatility", 0.0001)),
        price_band=env_float("PRICE_BAND", market.get("price_band", 0.01)),
        momentum_decay=env_float("MOMENTUM_DECAY", market.get("momentum_decay", 0.8)),
        chart_samples=env_int("CHART_SAMPLES", market.get("chart_samples", 50)),
        seed=seed,
        # Demo profile
        profile_path=Path(env("PROFILE_PATH", str(profile.get("path", ".alphafx/demo_user.json")))),
        # Telegram
        telegram_bot_token=env("TELEGRAM_BOT_TOKEN", telegram.get("bot_token", "")),
        telegram_chat_id=env("TELEGRAM_CHAT_ID", telegram.get("chat_id", "")),
        # Logging
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file", "alphafx.log"),
    )


class Config:
    """Unified configuration. Treated as read-only after load."""

    __slots__ = (
        "base_currency", "initial_balance", "initial_total_profit", "initial_today_profit",
        "initial_open_positions", "initial_total_trades",
        "default_pair", "default_trade_amount", "min_trade_amount", "margin_rate", "release_margin_on_close",
        "starting_price", "price_tick_seconds", "overview_tick_seconds", "live_volatility",
        "chart_volatility", "price_band", "momentum_decay", "chart_samples", "seed",
        "profile_path",
        "telegram_bot_token", "telegram_chat_id",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        base_currency: str = "USD",
        initial_balance: float = 5000.0,
        initial_total_profit: float = 0.0,
        initial_today_profit: float = 0.0,
        initial_open_positions: int = 0,
        initial_total_trades: int = 0,
        default_pair: str = "EUR/USD",
        default_trade_amount: float = 1000.0,
        min_trade_amount: float = 100.0,
        margin_rate: float = 0.01,
        release_margin_on_close: bool = False,
        starting_price: float = 1.0847,
        price_tick_seconds: float = 1.0,
        overview_tick_seconds: float = 2.0,
        live_volatility: float = 0.002,
        chart_volatility: float = 0.0001,
        price_band: float = 0.01,
        momentum_decay: float = 0.8,
        chart_samples: int = 50,
        seed: Optional[int] = None,
        profile_path: Path = None,
        telegram_bot_token: str = "",
        telegram_chat_id: str = "",
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "alphafx.log",
    ):
        self.base_currency = base_currency
        self.initial_balance = initial_balance
        self.initial_total_profit = initial_total_profit
        self.initial_today_profit = initial_today_profit
        self.initial_open_positions = initial_open_positions
        self.initial_total_trades = initial_total_trades
        self.default_pair = default_pair
        self.default_trade_amount = default_trade_amount
        self.min_trade_amount = min_trade_amount
        self.margin_rate = margin_rate
        self.release_margin_on_close = release_margin_on_close
        self.starting_price = starting_price
        self.price_tick_seconds = price_tick_seconds
        self.overview_tick_seconds = overview_tick_seconds
        self.live_volatility = live_volatility
        self.chart_volatility = chart_volatility
        self.price_band = price_band
        self.momentum_decay = momentum_decay
        self.chart_samples = chart_samples
        self.seed = seed
        self.profile_path = Path(profile_path) if profile_path else Path(".alphafx/demo_user.json")
        self.telegram_bot_token = telegram_bot_token
        self.telegram_chat_id = telegram_chat_id
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
