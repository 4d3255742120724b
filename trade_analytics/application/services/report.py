"""Report Service: Build and export the full P&L report.

Orchestrates report generation:
1. Load trades via TradeRepository (or accept them directly)
2. Compute AdvancedMetrics and every chart series
3. Bundle them into a PnLReport
4. Export to JSON, CSV, Parquet or Excel
"""

from dataclasses import asdict, dataclass, is_dataclass
from datetime import date
import json
import logging
import math
from pathlib import Path
from typing import Iterable

import polars as pl

from trade_analytics.domain.metrics import calculate_advanced_metrics
from trade_analytics.domain.models import (
    AdvancedMetrics,
    DailyPnL,
    DistributionBucket,
    EquityPoint,
    MonthlyPnL,
    MonthlyWinRate,
    OutcomeCounts,
    SymbolPerformance,
    Trade,
    WeekdayPerformance,
)
from trade_analytics.domain.normalizer import coerce_trades
from trade_analytics.domain.series import (
    aggregate_by_day,
    calendar_data,
    equity_curve,
    monthly_pnl,
    monthly_win_rate,
    outcome_counts,
    pnl_distribution,
    symbol_performance,
    top_winners_losers,
    weekday_performance,
)
from trade_analytics.infrastructure import AnalysisConfig, DEFAULT_CONFIG, TradeRepository

logger = logging.getLogger(__name__)

SYMBOL_SCHEMA = {
    "symbol": pl.Utf8,
    "count": pl.Int64,
    "total_pnl": pl.Float64,
    "avg_pnl": pl.Float64,
    "win_rate": pl.Float64,
    "wins": pl.Int64,
    "losses": pl.Int64,
}

MONTHLY_SCHEMA = {
    "month": pl.Utf8,
    "gross_pnl": pl.Float64,
    "net_pnl": pl.Float64,
    "trade_count": pl.Int64,
}


def _jsonable(value):
    """Convert report values to JSON-safe primitives."""
    if isinstance(value, Trade):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return {k: _jsonable(v) for k, v in asdict(value).items()}
    if isinstance(value, dict):
        return {_jsonable(k) if isinstance(k, date) else k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and math.isinf(value):
        # Open-ended bucket bounds
        return None
    return value


# =============================================================================
# Report
# =============================================================================

@dataclass(frozen=True)
class PnLReport:
    """Everything the P&L report page shows.

    Attributes:
        metrics: Headline AdvancedMetrics
        daily: Per-day totals with cumulative net
        equity: Trade-by-trade equity curve
        monthly: Per-month gross/net
        calendar: Day -> net P&L
        distribution: Trade counts per P&L bucket
        symbols: Top symbols by total net P&L
        winners: Best trades, best first
        losers: Worst trades, worst first
        monthly_win_rate: Win rate for recent months
        weekdays: Day-of-week rollup
        outcomes: Win / loss / break-even counts
    """
    metrics: AdvancedMetrics
    daily: list[DailyPnL]
    equity: list[EquityPoint]
    monthly: list[MonthlyPnL]
    calendar: dict[date, float]
    distribution: list[DistributionBucket]
    symbols: list[SymbolPerformance]
    winners: list[Trade]
    losers: list[Trade]
    monthly_win_rate: list[MonthlyWinRate]
    weekdays: list[WeekdayPerformance]
    outcomes: OutcomeCounts

    @property
    def is_empty(self) -> bool:
        return self.metrics.total_trades == 0

    def to_dict(self) -> dict:
        """JSON-ready dictionary (dates as ISO strings)."""
        return {
            "metrics": self.metrics.to_dict(),
            "daily": _jsonable(self.daily),
            "equity": _jsonable(self.equity),
            "monthly": _jsonable(self.monthly),
            "calendar": _jsonable(self.calendar),
            "distribution": _jsonable(self.distribution),
            "symbols": _jsonable(self.symbols),
            "winners": _jsonable(self.winners),
            "losers": _jsonable(self.losers),
            "monthly_win_rate": _jsonable(self.monthly_win_rate),
            "weekdays": _jsonable(self.weekdays),
            "outcomes": _jsonable(self.outcomes),
        }


# =============================================================================
# Report Service
# =============================================================================

class ReportService:
    """Service for building and exporting P&L reports.

    Example:
        >>> service = ReportService(output_dir=Path("reports"))
        >>> report = service.build_from_file("data/trades/2024.csv")
        >>> service.save_report(report, "pnl_2024", formats=("json", "xlsx"))
    """

    # Months shown in the win-rate trend
    WIN_RATE_MONTHS = 6

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        output_dir: Path = Path("."),
    ):
        """Initialize the service.

        Args:
            config: Analysis configuration (uses defaults if not provided)
            output_dir: Directory for exported files
        """
        self._config = config or DEFAULT_CONFIG
        self._output_dir = Path(output_dir)

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def build(self, trades: Iterable) -> PnLReport:
        """Compute the full report from trades or raw rows."""
        items = coerce_trades(trades)
        if self._config.drop_zero_gross:
            items = [t for t in items if t.gross_pnl != 0]

        metrics = calculate_advanced_metrics(items, self._config)
        winners, losers = top_winners_losers(items, self._config.top_n)

        report = PnLReport(
            metrics=metrics,
            daily=aggregate_by_day(items),
            equity=equity_curve(items),
            monthly=monthly_pnl(items),
            calendar=calendar_data(items),
            distribution=pnl_distribution(items),
            symbols=symbol_performance(items, self._config.symbol_top_n),
            winners=winners,
            losers=losers,
            monthly_win_rate=monthly_win_rate(items, self.WIN_RATE_MONTHS),
            weekdays=weekday_performance(items),
            outcomes=outcome_counts(items),
        )
        logger.info(
            "Built report for %d trades (%s to %s)",
            metrics.total_trades, metrics.start_date or "-", metrics.end_date or "-",
        )
        return report

    def build_from_file(self, path: str | Path) -> PnLReport:
        """Load a trade file and build its report.

        Raises:
            RepositoryError: If the file cannot be read
        """
        repo = TradeRepository(path)
        return self.build(repo.get_trades(drop_zero_gross=self._config.drop_zero_gross))

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def symbol_frame(self, report: PnLReport) -> pl.DataFrame:
        """Symbol table with a 1-based rank column."""
        df = pl.DataFrame([asdict(s) for s in report.symbols], schema=SYMBOL_SCHEMA)
        return df.with_row_index("rank", offset=1)

    def monthly_frame(self, report: PnLReport) -> pl.DataFrame:
        """Monthly gross/net table."""
        return pl.DataFrame([asdict(m) for m in report.monthly], schema=MONTHLY_SCHEMA)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def save_report(
        self,
        report: PnLReport,
        base_name: str = "pnl_report",
        formats: tuple[str, ...] = ("json",),
    ) -> list[Path]:
        """Save report to the given formats.

        Args:
            report: Built report
            base_name: Base filename without extension
            formats: Any of "json", "csv", "parquet", "xlsx"
                (csv and parquet hold the symbol table)

        Returns:
            List of saved file paths

        Raises:
            ValueError: If a format is unknown
        """
        unknown = [fmt for fmt in formats if fmt not in ("json", "csv", "parquet", "xlsx")]
        if unknown:
            raise ValueError(f"Unknown format: {unknown[0]}")

        self._output_dir.mkdir(parents=True, exist_ok=True)
        saved = []

        for fmt in formats:
            path = self._output_dir / f"{base_name}.{fmt}"

            if fmt == "json":
                with open(path, "w", encoding="utf-8") as f:
                    json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            elif fmt == "csv":
                self.symbol_frame(report).write_csv(path)
            elif fmt == "parquet":
                self.symbol_frame(report).write_parquet(path)
            else:
                self._save_excel(report, path)

            logger.info("Wrote %s", path)
            saved.append(path)

        return saved

    def _save_excel(self, report: PnLReport, path: Path) -> None:
        """Save report to Excel with formatted sheets.

        Creates three sheets:
        1. Summary - metric name and value
        2. Monthly - gross/net per month
        3. Symbols - ranked symbol table
        """
        import xlsxwriter

        workbook = xlsxwriter.Workbook(str(path))

        summary = pl.DataFrame(
            {
                "metric": list(report.metrics.to_dict().keys()),
                "value": [
                    self._summary_value(v) for v in report.metrics.to_dict().values()
                ],
            },
            schema={"metric": pl.Utf8, "value": pl.Utf8},
        )
        self._write_sheet(workbook, workbook.add_worksheet("Summary"), summary)
        self._write_sheet(workbook, workbook.add_worksheet("Monthly"), self.monthly_frame(report))
        self._write_sheet(workbook, workbook.add_worksheet("Symbols"), self.symbol_frame(report))

        workbook.close()

    @staticmethod
    def _summary_value(value) -> str:
        if isinstance(value, dict):
            return f"{value['symbol']} {value['trade_date']} {value['net_pnl']:.2f}"
        return "" if value is None else str(value)

    def _write_sheet(self, workbook, worksheet, df: pl.DataFrame) -> None:
        """Write a DataFrame to an Excel worksheet."""
        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#4472C4",
            "font_color": "white",
            "border": 1,
        })
        money_fmt = workbook.add_format({"num_format": "#,##0.00"})

        columns = df.columns
        for col_idx, col_name in enumerate(columns):
            worksheet.write(0, col_idx, col_name, header_fmt)

        for row_idx, row in enumerate(df.iter_rows(named=True), 1):
            for col_idx, col_name in enumerate(columns):
                value = row[col_name]
                if value is None:
                    worksheet.write(row_idx, col_idx, "")
                elif col_name.endswith("_pnl"):
                    worksheet.write(row_idx, col_idx, value, money_fmt)
                else:
                    worksheet.write(row_idx, col_idx, value)

        for col_idx, col_name in enumerate(columns):
            worksheet.set_column(col_idx, col_idx, max(len(col_name), 12))
