"""AlphaFx demo trading desk: mock FX market, trade ledger and portfolio accounting."""

__version__ = "0.1.0"
