"""Unit tests for interfaces/cli.py.

Tests verify:
1. CLI commands execute against a trade file
2. Output format is correct
3. Error handling works properly
"""

import json

import pytest

from trade_analytics.interfaces.cli import main


class TestCliBasic:
    """Basic CLI tests."""

    def test_version(self, capsys):
        """--version should show version."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0

    def test_help(self, capsys):
        """No command should show help."""
        assert main([]) == 0

    def test_invalid_command(self):
        """Invalid command should fail."""
        with pytest.raises(SystemExit):
            main(["invalid_command"])


class TestSummaryCommand:
    """Tests for summary command."""

    def test_summary(self, trade_csv, capsys):
        assert main(["summary", str(trade_csv)]) == 0

        out = capsys.readouterr().out
        assert "2024-01-01 to 2024-01-04" in out
        assert "+₹200.00" in out
        assert "50.00%" in out

    def test_verbose(self, trade_csv):
        assert main(["-v", "summary", str(trade_csv)]) == 0

    def test_missing_file(self, tmp_path, capsys):
        assert main(["summary", str(tmp_path / "missing.csv")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_empty_file(self, tmp_path, capsys):
        path = tmp_path / "empty.csv"
        path.write_text("trade_date,symbol,gross_pnl\n")
        assert main(["summary", str(path)]) == 0
        assert "No trades found" in capsys.readouterr().out


class TestTableCommands:
    """Tests for symbols and monthly commands."""

    def test_symbols(self, trade_csv, capsys):
        assert main(["symbols", str(trade_csv)]) == 0

        out = capsys.readouterr().out
        assert out.index("TCS") < out.index("INFY") < out.index("WIPRO")

    def test_symbols_top(self, trade_csv, capsys):
        assert main(["symbols", str(trade_csv), "--top", "1"]) == 0

        out = capsys.readouterr().out
        assert "TCS" in out
        assert "WIPRO" not in out

    def test_monthly(self, trade_csv, capsys):
        assert main(["monthly", str(trade_csv)]) == 0
        assert "2024-01" in capsys.readouterr().out


class TestExportCommand:
    """Tests for export command."""

    def test_export(self, trade_csv, tmp_path, capsys):
        base = tmp_path / "out" / "report"
        assert main(["export", str(trade_csv), "-o", str(base), "-f", "json,csv"]) == 0

        data = json.loads((tmp_path / "out" / "report.json").read_text(encoding="utf-8"))
        assert data["metrics"]["total_trades"] == 4
        assert (tmp_path / "out" / "report.csv").exists()
        assert "Saved:" in capsys.readouterr().out

    def test_export_bad_format(self, trade_csv, tmp_path, capsys):
        base = tmp_path / "report"
        assert main(["export", str(trade_csv), "-o", str(base), "-f", "pdf"]) == 2
        assert "Unknown format" in capsys.readouterr().err


class TestFilesCommand:
    """Tests for files command."""

    def test_files_runs(self, capsys):
        assert main(["files"]) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
