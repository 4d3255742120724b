"""Unit tests for infrastructure config and repositories.

Tests verify that:
1. DataPaths builds consistent paths
2. TradeRepository loads csv, parquet and json trade files
3. Caching and error handling work
"""

from datetime import date
from pathlib import Path

import polars as pl
import pytest

from trade_analytics.infrastructure import (
    DEFAULT_CONFIG,
    DEFAULT_PATHS,
    DataPaths,
    RepositoryError,
)
from trade_analytics.infrastructure.repositories import TradeRepository


# =============================================================================
# Config Tests
# =============================================================================

class TestDataPaths:
    """Tests for DataPaths configuration."""

    def test_paths_are_consistent(self):
        """All paths should be relative to root directory."""
        paths = DEFAULT_PATHS
        assert paths.data_dir == paths.root / "data"
        assert paths.trades_dir == paths.data_dir / "trades"
        assert paths.reports_dir == paths.data_dir / "reports"

    def test_trade_file(self):
        assert DEFAULT_PATHS.trade_file("2024") == DEFAULT_PATHS.trades_dir / "2024.csv"
        assert (
            DEFAULT_PATHS.trade_file("2024.parquet")
            == DEFAULT_PATHS.trades_dir / "2024.parquet"
        )

    def test_validate_returns_missing(self):
        missing = DataPaths(root=Path("/nonexistent")).validate()
        assert len(missing) > 0
        assert all(isinstance(m, str) for m in missing)

    def test_ensure_dirs_and_list(self, tmp_path):
        paths = DataPaths(root=tmp_path)
        assert paths.list_trade_files() == []

        paths.ensure_dirs()
        assert paths.validate() == []
        (paths.trades_dir / "b.csv").write_text("x")
        (paths.trades_dir / "a.json").write_text("[]")
        (paths.trades_dir / "notes.txt").write_text("x")

        assert [p.name for p in paths.list_trade_files()] == ["a.json", "b.csv"]

    def test_default_config(self):
        assert DEFAULT_CONFIG.annualization_factor == 252
        assert DEFAULT_CONFIG.ratio_cap == 999.0
        assert DEFAULT_CONFIG.kelly_bounds == (-100.0, 100.0)
        assert DEFAULT_CONFIG.drop_zero_gross is False

    def test_config_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.precision = 4

    def test_config_shared_with_domain(self):
        """Infrastructure re-exports the domain's config objects."""
        from trade_analytics.domain import config as domain_config

        assert DEFAULT_CONFIG is domain_config.DEFAULT_CONFIG

    def test_domain_does_not_import_infrastructure(self):
        domain_dir = Path(__file__).parent.parent / "trade_analytics" / "domain"
        offenders = [
            path.name
            for path in domain_dir.rglob("*.py")
            if "trade_analytics.infrastructure" in path.read_text(encoding="utf-8")
        ]
        assert offenders == []


# =============================================================================
# TradeRepository Tests
# =============================================================================

class TestTradeRepository:
    """Tests for TradeRepository."""

    @pytest.mark.parametrize("fixture", ["trade_csv", "trade_parquet", "trade_json"])
    def test_loads_all_formats(self, fixture, request):
        repo = TradeRepository(request.getfixturevalue(fixture))

        df = repo.get_all()
        assert isinstance(df, pl.DataFrame)
        assert df.height == 4

        trades = repo.get_trades()
        assert [t.symbol for t in trades] == ["TCS", "INFY", "TCS", "WIPRO"]
        assert trades[0].trade_date == date(2024, 1, 1)
        assert sum(t.net_pnl for t in trades) == pytest.approx(200.0)

    def test_get_rows(self, trade_csv):
        rows = TradeRepository(trade_csv).get_rows()
        assert rows[0]["symbol"] == "TCS"

    def test_list_symbols(self, trade_csv):
        assert TradeRepository(trade_csv).list_symbols() == ["INFY", "TCS", "WIPRO"]

    def test_get_date_range(self, trade_csv):
        assert TradeRepository(trade_csv).get_date_range() == (
            date(2024, 1, 1),
            date(2024, 1, 4),
        )

    def test_camel_case_columns(self, tmp_path):
        path = tmp_path / "camel.csv"
        pl.DataFrame({
            "tradeDate": ["15-01-2024"],
            "Symbol": ["HDFC"],
            "grossPnl": [250.0],
            "fees": [10.0],
        }).write_csv(path)

        trade = TradeRepository(path).get_trades()[0]
        assert trade.symbol == "HDFC"
        assert trade.trade_date == date(2024, 1, 15)
        assert trade.net_pnl == pytest.approx(240.0)

    def test_drop_zero_gross(self, tmp_path):
        path = tmp_path / "zero.csv"
        pl.DataFrame({
            "trade_date": ["2024-01-01", "2024-01-02"],
            "symbol": ["A", "B"],
            "gross_pnl": [0.0, 10.0],
        }).write_csv(path)
        repo = TradeRepository(path)

        assert len(repo.get_trades()) == 2
        assert [t.symbol for t in repo.get_trades(drop_zero_gross=True)] == ["B"]

    def test_caching_works(self, trade_csv):
        """Second call should return cached data."""
        repo = TradeRepository(trade_csv)
        assert repo.get_all() is repo.get_all()

    def test_clear_cache(self, trade_csv):
        """clear_cache should invalidate cache."""
        repo = TradeRepository(trade_csv)
        df1 = repo.get_all()
        repo.clear_cache()
        assert repo.get_all() is not df1

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(RepositoryError) as exc:
            TradeRepository(tmp_path / "missing.csv").get_all()
        assert "missing.csv" in str(exc.value)
        assert exc.value.path.endswith("missing.csv")

    def test_unsupported_suffix_raises(self, tmp_path):
        path = tmp_path / "trades.txt"
        path.write_text("hello")
        with pytest.raises(RepositoryError):
            TradeRepository(path).get_all()

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "broken.parquet"
        path.write_text("not parquet")
        with pytest.raises(RepositoryError):
            TradeRepository(path).get_all()


class TestRepositoryError:
    """Tests for RepositoryError."""

    def test_message_with_path(self):
        err = RepositoryError("Trade file not found", "/data/x.csv")
        assert str(err) == "Trade file not found (path: /data/x.csv)"
        assert err.path == "/data/x.csv"

    def test_message_without_path(self):
        assert str(RepositoryError("boom")) == "boom"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
