"""Shared fixtures: a small trade file in csv, parquet and json form."""

import json

import polars as pl
import pytest

ROWS = [
    {"trade_date": "2024-01-01", "symbol": "TCS", "quantity": 10.0,
     "buy_value": 1000.0, "sell_value": 1100.0, "gross_pnl": 100.0, "charges": 0.0},
    {"trade_date": "2024-01-02", "symbol": "INFY", "quantity": 5.0,
     "buy_value": 800.0, "sell_value": 750.0, "gross_pnl": -50.0, "charges": 0.0},
    {"trade_date": "2024-01-03", "symbol": "TCS", "quantity": 10.0,
     "buy_value": 1000.0, "sell_value": 1200.0, "gross_pnl": 200.0, "charges": 0.0},
    {"trade_date": "2024-01-04", "symbol": "WIPRO", "quantity": 20.0,
     "buy_value": 600.0, "sell_value": 550.0, "gross_pnl": -50.0, "charges": 0.0},
]


@pytest.fixture
def trade_rows() -> list[dict]:
    return [dict(row) for row in ROWS]


@pytest.fixture
def trade_csv(tmp_path):
    path = tmp_path / "trades.csv"
    pl.DataFrame(ROWS).write_csv(path)
    return path


@pytest.fixture
def trade_parquet(tmp_path):
    path = tmp_path / "trades.parquet"
    pl.DataFrame(ROWS).write_parquet(path)
    return path


@pytest.fixture
def trade_json(tmp_path):
    path = tmp_path / "trades.json"
    path.write_text(json.dumps(ROWS), encoding="utf-8")
    return path
