"""Command Line Interface for Trade Analytics.

Provides CLI access to the P&L report:
- summary: Headline metrics for a trade file
- symbols: Per-symbol table
- monthly: Monthly gross/net
- export: Write the report to json/csv/parquet/xlsx
- files: List trade files under data/trades

Usage:
    python -m trade_analytics summary FILE
    python -m trade_analytics symbols FILE [--top N]
    python -m trade_analytics monthly FILE
    python -m trade_analytics export FILE [-o BASE] [-f json,xlsx]
    python -m trade_analytics files
"""

import argparse
import logging
import sys
from pathlib import Path

from trade_analytics import __version__
from trade_analytics.application import ReportService, PnLReport
from trade_analytics.domain.formatting import (
    format_currency,
    format_percentage,
    format_ratio,
    ratio_label,
)
from trade_analytics.infrastructure import DEFAULT_PATHS, RepositoryError


def _resolve(file: str) -> Path:
    """Use FILE as given, else look it up under data/trades."""
    path = Path(file)
    if path.exists():
        return path
    candidate = DEFAULT_PATHS.trade_file(file)
    return candidate if candidate.exists() else path


def _load(args: argparse.Namespace, service: ReportService | None = None) -> PnLReport:
    service = service or ReportService()
    return service.build_from_file(_resolve(args.file))


def cmd_summary(args: argparse.Namespace) -> int:
    """Show headline metrics."""
    m = _load(args).metrics

    print(f"Trade Analytics v{__version__}")
    print("=" * 50)
    if m.total_trades == 0:
        print("No trades found")
        return 0

    print(f"Period: {m.start_date} to {m.end_date}")
    print()

    print("[P&L]")
    print(f"  Gross P&L:     {format_currency(m.total_gross_pnl)}")
    print(f"  Charges:       {format_currency(m.total_charges)}")
    print(f"  Net P&L:       {format_currency(m.total_net_pnl)}")
    print()

    print("[Trades]")
    print(f"  Total:         {m.total_trades:,}")
    print(f"  Wins/Losses:   {m.winning_trades:,} / {m.losing_trades:,}")
    print(f"  Win rate:      {format_percentage(m.win_rate)}")
    print(f"  Avg win/loss:  {format_currency(m.avg_win)} / {format_currency(-m.avg_loss)}")
    print(f"  Payoff ratio:  {format_ratio(m.payoff_ratio)}")
    print(f"  Expectancy:    {format_currency(m.expectancy)}")
    print()

    print("[Risk]")
    print(f"  Profit factor: {format_ratio(m.profit_factor)}")
    print(f"  Sharpe:        {format_ratio(m.sharpe_ratio)} ({ratio_label(m.sharpe_ratio)})")
    print(f"  Sortino:       {format_ratio(m.sortino_ratio)} ({ratio_label(m.sortino_ratio)})")
    print(f"  Calmar:        {format_ratio(m.calmar_ratio)}")
    print(f"  Omega:         {format_ratio(m.omega_ratio)}")
    print(f"  Max drawdown:  {format_currency(-m.max_drawdown)} "
          f"({format_percentage(m.max_drawdown_percent)}, "
          f"{m.max_drawdown_duration} days)")
    print(f"  Kelly:         {format_percentage(m.kelly_criterion)}")
    print()

    print("[Streaks]")
    print(f"  Current:       {m.current_streak:+d}")
    print(f"  Longest win:   {m.longest_win_streak}")
    print(f"  Longest loss:  {m.longest_loss_streak}")

    return 0


def cmd_symbols(args: argparse.Namespace) -> int:
    """Show the per-symbol table."""
    report = _load(args)
    symbols = report.symbols[: args.top] if args.top else report.symbols

    print(f"{'Symbol':<14} {'Trades':>6} {'Win %':>7} {'Avg P&L':>14} {'Total P&L':>16}")
    print("-" * 61)
    for s in symbols:
        print(f"{s.symbol:<14} {s.count:>6} {s.win_rate:>6.1f}% "
              f"{format_currency(s.avg_pnl):>14} {format_currency(s.total_pnl):>16}")

    if not symbols:
        print("  No trades")
    return 0


def cmd_monthly(args: argparse.Namespace) -> int:
    """Show monthly gross/net P&L."""
    report = _load(args)

    print(f"{'Month':<8} {'Trades':>6} {'Gross P&L':>16} {'Net P&L':>16}")
    print("-" * 49)
    for m in report.monthly:
        print(f"{m.month:<8} {m.trade_count:>6} "
              f"{format_currency(m.gross_pnl):>16} {format_currency(m.net_pnl):>16}")

    if not report.monthly:
        print("  No trades")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Write the report to files."""
    output = Path(args.output)
    service = ReportService(output_dir=output.parent)
    report = _load(args, service)

    formats = tuple(f.strip() for f in args.formats.split(",") if f.strip())
    try:
        saved = service.save_report(report, output.name, formats)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for path in saved:
        print(f"Saved: {path}")
    return 0


def cmd_files(args: argparse.Namespace) -> int:
    """List trade files under data/trades."""
    files = DEFAULT_PATHS.list_trade_files()
    if not files:
        print(f"No trade files in {DEFAULT_PATHS.trades_dir}")
        return 0
    for path in files:
        print(path.name)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="trade_analytics",
        description="Trade Analytics - P&L Performance Report",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # summary command
    summary_parser = subparsers.add_parser("summary", help="Show headline metrics")
    summary_parser.add_argument("file", help="Trade file (csv, parquet or json)")

    # symbols command
    symbols_parser = subparsers.add_parser("symbols", help="Show per-symbol table")
    symbols_parser.add_argument("file", help="Trade file (csv, parquet or json)")
    symbols_parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Show only the top N symbols",
    )

    # monthly command
    monthly_parser = subparsers.add_parser("monthly", help="Show monthly P&L")
    monthly_parser.add_argument("file", help="Trade file (csv, parquet or json)")

    # export command
    export_parser = subparsers.add_parser("export", help="Export the report")
    export_parser.add_argument("file", help="Trade file (csv, parquet or json)")
    export_parser.add_argument(
        "-o", "--output",
        default="pnl_report",
        help="Output path without extension",
    )
    export_parser.add_argument(
        "-f", "--formats",
        default="json",
        help="Output formats (comma-separated: json,csv,parquet,xlsx)",
    )

    # files command
    subparsers.add_parser("files", help="List trade files")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "summary": cmd_summary,
        "symbols": cmd_symbols,
        "monthly": cmd_monthly,
        "export": cmd_export,
        "files": cmd_files,
    }

    try:
        return commands[args.command](args)
    except RepositoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
