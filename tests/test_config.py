"""Unit tests for core.config."""

from pathlib import Path

import pytest
from alphafx.core.config import Config, load_config

YAML = """
portfolio:
  base_currency: eur
  balance: 7500
  total_trades: 12
trading:
  min_trade_amount: 200
  release_margin_on_close: true
market:
  starting_price: 1.27
  seed: 9
profile:
  path: data/me.json
"""

OVERRIDABLE = (
    "BASE_CURRENCY", "INITIAL_BALANCE", "MIN_TRADE_AMOUNT", "STARTING_PRICE", "SEED",
    "RELEASE_MARGIN_ON_CLOSE", "PROFILE_PATH", "LOG_LEVEL", "DEFAULT_PAIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in OVERRIDABLE:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_file(tmp_path):
    config = load_config(tmp_path / "missing.yaml", tmp_path)
    assert config.initial_balance == 5000.0
    assert config.min_trade_amount == 100.0
    assert config.margin_rate == 0.01
    assert config.seed is None
    assert config.default_pair == "EUR/USD"


def test_yaml_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(YAML, encoding="utf-8")
    config = load_config(path, tmp_path)
    assert config.base_currency == "EUR"
    assert config.initial_balance == 7500.0
    assert config.initial_total_trades == 12
    assert config.min_trade_amount == 200.0
    assert config.release_margin_on_close is True
    assert config.starting_price == 1.27
    assert config.seed == 9
    assert config.profile_path == Path("data/me.json")


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(YAML, encoding="utf-8")
    monkeypatch.setenv("MIN_TRADE_AMOUNT", "350")
    monkeypatch.setenv("SEED", "4")
    monkeypatch.setenv("INITIAL_BALANCE", "not-a-number")
    config = load_config(path, tmp_path)
    assert config.min_trade_amount == 350.0
    assert config.seed == 4
    assert config.initial_balance == 7500.0


def test_config_is_slotted():
    config = Config()
    with pytest.raises(AttributeError):
        config.unknown = 1
