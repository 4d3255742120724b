"""Domain Layer: Core business logic and entities.

This layer contains:
- models.py: Data structures (Trade, AdvancedMetrics, series records)
- normalizer.py: Raw row to Trade conversion
- aggregation.py: Grouping, running totals, streaks and buckets
- series.py: Chart-ready time series
- metrics/: Performance, risk, drawdown and streak calculations
- formatting.py: Display strings for money, percentages and ratios
- config.py: AnalysisConfig for the metrics calculator
"""

from trade_analytics.domain.config import AnalysisConfig, DEFAULT_CONFIG
from trade_analytics.domain.models import (
    Trade,
    AdvancedMetrics,
    DailyPnL,
    EquityPoint,
    MonthlyPnL,
    DistributionBucket,
    SymbolPerformance,
    WeekdayPerformance,
    MonthlyWinRate,
    OutcomeCounts,
)
from trade_analytics.domain.normalizer import (
    FieldIssue,
    ParseResult,
    parse_trade,
    normalize_trade,
    normalize_trades,
)
from trade_analytics.domain.aggregation import (
    Bucket,
    DEFAULT_PNL_BUCKETS,
    StreakSummary,
    group_sum,
    cumulative_sum,
    drawdown_series,
    detect_streaks,
    validate_buckets,
    histogram,
)
from trade_analytics.domain.series import (
    aggregate_by_day,
    daily_equity,
    equity_curve,
    monthly_pnl,
    monthly_win_rate,
    calendar_data,
    pnl_distribution,
    symbol_performance,
    top_winners_losers,
    weekday_performance,
    outcome_counts,
)
from trade_analytics.domain.metrics import (
    calculate_advanced_metrics,
    summary_basic,
    profit_factor,
    expectancy_breakdown,
    streaks,
)
from trade_analytics.domain.formatting import (
    FormatConfig,
    format_currency,
    format_percentage,
    format_ratio,
    ratio_label,
    format_compact,
)

__all__ = [
    # Config
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    # Models
    "Trade",
    "AdvancedMetrics",
    "DailyPnL",
    "EquityPoint",
    "MonthlyPnL",
    "DistributionBucket",
    "SymbolPerformance",
    "WeekdayPerformance",
    "MonthlyWinRate",
    "OutcomeCounts",
    # Normalizer
    "FieldIssue",
    "ParseResult",
    "parse_trade",
    "normalize_trade",
    "normalize_trades",
    # Aggregation
    "Bucket",
    "DEFAULT_PNL_BUCKETS",
    "StreakSummary",
    "group_sum",
    "cumulative_sum",
    "drawdown_series",
    "detect_streaks",
    "validate_buckets",
    "histogram",
    # Series
    "aggregate_by_day",
    "daily_equity",
    "equity_curve",
    "monthly_pnl",
    "monthly_win_rate",
    "calendar_data",
    "pnl_distribution",
    "symbol_performance",
    "top_winners_losers",
    "weekday_performance",
    "outcome_counts",
    # Metrics
    "calculate_advanced_metrics",
    "summary_basic",
    "profit_factor",
    "expectancy_breakdown",
    "streaks",
    # Formatting
    "FormatConfig",
    "format_currency",
    "format_percentage",
    "format_ratio",
    "ratio_label",
    "format_compact",
]
