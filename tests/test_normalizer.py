"""Unit tests for domain/normalizer.py.

Tests verify:
1. snake_case and camelCase rows map to the same Trade
2. Unreadable values are defaulted and reported, never raised
3. Net P&L is recomputed from gross P&L and charges
4. Programmer errors (non-mapping rows) raise TypeError
"""

from datetime import date, datetime

import pytest

from trade_analytics.domain.normalizer import (
    UNKNOWN_SYMBOL,
    normalize_trade,
    normalize_trades,
    parse_date,
    parse_number,
    parse_trade,
)

TODAY = date(2024, 6, 30)


# =============================================================================
# Value Coercion Tests
# =============================================================================

class TestParseNumber:
    """Tests for parse_number."""

    def test_numbers_pass_through(self):
        assert parse_number(5) == 5.0
        assert parse_number(-2.5) == -2.5

    def test_strings_with_noise(self):
        """Currency symbols, separators and spaces are stripped."""
        assert parse_number("₹1,234.50") == pytest.approx(1234.5)
        assert parse_number("1,23,456.50") == pytest.approx(123456.5)
        assert parse_number(" -500 ") == -500.0

    def test_unreadable(self):
        assert parse_number("n/a") is None
        assert parse_number("") is None
        assert parse_number(None) is None
        assert parse_number(True) is None
        assert parse_number([1]) is None

    def test_non_finite_rejected(self):
        assert parse_number(float("inf")) is None
        assert parse_number("nan") is None


class TestParseDate:
    """Tests for parse_date."""

    def test_iso(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)
        assert parse_date("2024-01-15T09:30:00") == date(2024, 1, 15)

    def test_day_first(self):
        assert parse_date("15-01-2024") == date(2024, 1, 15)
        assert parse_date("15/01/2024") == date(2024, 1, 15)

    def test_objects(self):
        assert parse_date(datetime(2024, 1, 15, 10, 0)) == date(2024, 1, 15)
        assert parse_date(date(2024, 1, 15)) == date(2024, 1, 15)

    def test_unreadable(self):
        assert parse_date("yesterday") is None
        assert parse_date("") is None
        assert parse_date(20240115) is None


# =============================================================================
# Row Normalisation Tests
# =============================================================================

class TestNormalizeTrade:
    """Tests for normalize_trade and parse_trade."""

    def test_snake_and_camel_agree(self):
        """Aliases should resolve to the same trade."""
        snake = normalize_trade({
            "trade_date": "2024-01-15", "symbol": "INFY", "quantity": 10,
            "buy_value": 15000, "sell_value": 15500,
            "gross_pnl": 500, "charges": 20,
        })
        camel = normalize_trade({
            "tradeDate": "2024-01-15", "Symbol": "INFY", "qty": "10",
            "buyValue": "15,000", "sellValue": "₹15,500.00",
            "grossPnl": "500", "fees": "20",
        })
        assert snake == camel
        assert snake.net_pnl == pytest.approx(480.0)

    def test_supplied_net_is_recomputed(self):
        """A net_pnl that disagrees with gross - charges is discarded."""
        trade = normalize_trade({
            "date": "2024-01-15", "symbol": "TCS",
            "gross_pnl": 100, "charges": 10, "net_pnl": 999,
        })
        assert trade.net_pnl == pytest.approx(90.0)

    def test_clean_row_is_ok(self):
        result = parse_trade({"trade_date": "2024-01-15", "symbol": "A", "gross_pnl": 10})
        assert result.ok
        assert result.issues == ()

    def test_absent_amounts_default_silently(self):
        """Missing amounts are zero without an issue."""
        result = parse_trade({"trade_date": "2024-01-15", "symbol": "A"})
        assert result.ok
        assert result.trade.gross_pnl == 0.0
        assert result.trade.charges == 0.0

    def test_unreadable_number_is_reported(self):
        result = parse_trade({
            "trade_date": "2024-01-15", "symbol": "A",
            "gross_pnl": "abc", "charges": 5,
        })
        assert not result.ok
        assert result.trade.gross_pnl == 0.0
        assert [i.field for i in result.issues] == ["gross_pnl"]
        assert result.issues[0].raw == "abc"

    def test_missing_date_uses_today(self):
        result = parse_trade({"symbol": "A", "gross_pnl": 10}, today=TODAY)
        assert result.trade.trade_date == TODAY
        assert result.issues[0].field == "trade_date"

    def test_bad_date_uses_today(self):
        trade = normalize_trade({"date": "not a date", "symbol": "A"}, today=TODAY)
        assert trade.trade_date == TODAY

    def test_blank_symbol(self):
        result = parse_trade({"trade_date": "2024-01-15", "symbol": "  "})
        assert result.trade.symbol == UNKNOWN_SYMBOL
        assert result.issues[0].field == "symbol"

    def test_intraday_label_sets_entry_and_exit(self):
        trade = normalize_trade({
            "trade_date": "2024-01-15", "symbol": "A",
            "trade_type": "Intraday", "gross_pnl": 10,
        })
        assert trade.entry_date == trade.exit_date == date(2024, 1, 15)
        assert trade.is_intraday

    def test_explicit_entry_exit_dates(self):
        trade = normalize_trade({
            "trade_date": "2024-01-20", "symbol": "A",
            "entry_date": "2024-01-10", "exitDate": "2024-01-20",
        })
        assert trade.duration_days == 10

    def test_non_mapping_raises(self):
        with pytest.raises(TypeError):
            normalize_trade(["2024-01-15", "A", 10])


class TestNormalizeTrades:
    """Tests for normalize_trades."""

    @pytest.fixture
    def rows(self):
        return [
            {"trade_date": "2024-01-02", "symbol": "B", "gross_pnl": 0},
            {"trade_date": "2024-01-01", "symbol": "A", "gross_pnl": 50},
            {"trade_date": "2024-01-03", "symbol": "C", "gross_pnl": -20},
        ]

    def test_preserves_order(self, rows):
        trades = normalize_trades(rows)
        assert [t.symbol for t in trades] == ["B", "A", "C"]

    def test_zero_gross_kept_by_default(self, rows):
        assert len(normalize_trades(rows)) == 3

    def test_drop_zero_gross(self, rows):
        trades = normalize_trades(rows, drop_zero_gross=True)
        assert [t.symbol for t in trades] == ["A", "C"]

    def test_empty(self):
        assert normalize_trades([]) == []

    def test_non_iterable_raises(self):
        with pytest.raises(TypeError):
            normalize_trades(42)

    def test_string_rows_raise(self):
        with pytest.raises(TypeError):
            normalize_trades("2024-01-01,A,10")

    def test_non_mapping_row_raises(self, rows):
        with pytest.raises(TypeError):
            normalize_trades(rows + [None])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
