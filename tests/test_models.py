"""Unit tests for domain/models.py.

Tests verify:
1. Trade derives net P&L, win flag, duration and month key
2. AdvancedMetrics builds the empty record and converts to dicts
3. Non-finite metric values are rejected
"""

from dataclasses import replace
from datetime import date

import pytest

from trade_analytics.domain.models import (
    AdvancedMetrics,
    OutcomeCounts,
    Trade,
)


def make_trade(net: float = 0.0, day: date = date(2024, 1, 15), **kwargs) -> Trade:
    """Trade with the given net P&L (no charges unless overridden)."""
    charges = kwargs.pop("charges", 0.0)
    return Trade(
        trade_date=day,
        symbol=kwargs.pop("symbol", "INFY"),
        quantity=kwargs.pop("quantity", 10),
        buy_value=kwargs.pop("buy_value", 1000.0),
        sell_value=kwargs.pop("sell_value", 1000.0 + net + charges),
        gross_pnl=net + charges,
        charges=charges,
        **kwargs,
    )


# =============================================================================
# Trade Tests
# =============================================================================

class TestTrade:
    """Tests for Trade dataclass."""

    def test_net_pnl_is_gross_less_charges(self):
        """net_pnl should always equal gross_pnl - charges."""
        trade = Trade(
            trade_date=date(2024, 1, 15), symbol="INFY", quantity=10,
            buy_value=15000.0, sell_value=15500.0,
            gross_pnl=500.0, charges=20.0,
        )
        assert trade.net_pnl == pytest.approx(480.0)

    def test_is_win_strictly_positive(self):
        """Only strictly positive net P&L counts as a win."""
        assert make_trade(10).is_win
        assert not make_trade(-10).is_win
        assert not make_trade(0).is_win

    def test_break_even_after_charges_is_loss(self):
        """Gross profit eaten by charges is not a win."""
        trade = make_trade(0, charges=20.0)
        assert trade.gross_pnl == 20.0
        assert trade.net_pnl == 0.0
        assert not trade.is_win

    def test_duration_days(self):
        """Duration needs both entry and exit dates."""
        trade = make_trade(
            10, entry_date=date(2024, 1, 10), exit_date=date(2024, 1, 15)
        )
        assert trade.duration_days == 5
        assert make_trade(10, entry_date=date(2024, 1, 10)).duration_days is None
        assert make_trade(10).duration_days is None

    def test_is_intraday(self):
        """Same entry and exit day is intraday."""
        day = date(2024, 1, 15)
        assert make_trade(10, entry_date=day, exit_date=day).is_intraday
        assert not make_trade(10).is_intraday
        assert not make_trade(
            10, entry_date=date(2024, 1, 14), exit_date=day
        ).is_intraday

    def test_month_key(self):
        assert make_trade(10, day=date(2024, 3, 5)).month_key == "2024-03"

    def test_to_dict(self):
        """to_dict should include the derived net_pnl and ISO dates."""
        d = make_trade(100, charges=5.0).to_dict()

        assert d["trade_date"] == "2024-01-15"
        assert d["symbol"] == "INFY"
        assert d["gross_pnl"] == pytest.approx(105.0)
        assert d["net_pnl"] == pytest.approx(100.0)
        assert d["entry_date"] is None

    def test_frozen(self):
        """Trade should be immutable."""
        trade = make_trade(10)
        with pytest.raises(AttributeError):
            trade.gross_pnl = 999.0


# =============================================================================
# AdvancedMetrics Tests
# =============================================================================

class TestAdvancedMetrics:
    """Tests for AdvancedMetrics dataclass."""

    def test_empty_is_all_zero(self):
        m = AdvancedMetrics.empty()

        assert m.total_trades == 0
        assert m.total_net_pnl == 0.0
        assert m.profit_factor == 0.0
        assert m.best_trade is None
        assert m.worst_trade is None
        assert m.start_date == ""
        assert m.end_date == ""

    def test_to_dict_snake_case(self):
        d = AdvancedMetrics.empty().to_dict()

        assert "total_net_pnl" in d
        assert "max_drawdown_percent" in d
        assert d["best_trade"] is None

    def test_to_dict_camel_case(self):
        """camel_case should emit display-layer keys."""
        d = AdvancedMetrics.empty().to_dict(camel_case=True)

        assert "totalNetPnL" in d
        assert "totalGrossPnL" in d
        assert "winRate" in d
        assert "maxDrawdownPercent" in d
        assert "longestWinStreak" in d
        assert "startDate" in d
        assert len(d) == len(AdvancedMetrics.empty().to_dict())

    def test_to_dict_converts_trades(self):
        m = replace(AdvancedMetrics.empty(), best_trade=make_trade(50))
        assert m.to_dict()["best_trade"]["net_pnl"] == pytest.approx(50.0)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite(self, value):
        """Every float field must be finite."""
        with pytest.raises(ValueError):
            replace(AdvancedMetrics.empty(), sharpe_ratio=value)

    def test_frozen(self):
        m = AdvancedMetrics.empty()
        with pytest.raises(AttributeError):
            m.win_rate = 50.0


class TestOutcomeCounts:
    """Tests for OutcomeCounts."""

    def test_total(self):
        assert OutcomeCounts(wins=3, losses=2, break_even=1).total == 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
