"""Trading metrics for P&L performance analysis.

This package provides:

- Performance: The full AdvancedMetrics record and its building blocks
- Risk: Sharpe, Sortino, Omega, Calmar, recovery factor and Kelly
- Drawdown: Peak-to-trough statistics on daily cumulative P&L
- Streaks: Consecutive win/loss runs

Usage:
    from trade_analytics.domain.metrics import (
        calculate_advanced_metrics,
        sharpe_ratio,
        drawdown_stats,
    )
"""

# Drawdown
from trade_analytics.domain.metrics.drawdown import (
    DrawdownStats,
    drawdown_stats,
)

# Risk
from trade_analytics.domain.metrics.risk import (
    sharpe_ratio,
    sortino_ratio,
    downside_deviation,
    omega_ratio,
    annualized_return_percent,
    calmar_ratio,
    recovery_factor,
    kelly_criterion,
)

# Streaks
from trade_analytics.domain.metrics.streaks import streaks

# Performance
from trade_analytics.domain.metrics.performance import (
    BasicSummary,
    ExpectancyBreakdown,
    summary_basic,
    profit_factor,
    expectancy_breakdown,
    calculate_advanced_metrics,
)

__all__ = [
    # Drawdown
    "DrawdownStats",
    "drawdown_stats",
    # Risk
    "sharpe_ratio",
    "sortino_ratio",
    "downside_deviation",
    "omega_ratio",
    "annualized_return_percent",
    "calmar_ratio",
    "recovery_factor",
    "kelly_criterion",
    # Streaks
    "streaks",
    # Performance
    "BasicSummary",
    "ExpectancyBreakdown",
    "summary_basic",
    "profit_factor",
    "expectancy_breakdown",
    "calculate_advanced_metrics",
]
