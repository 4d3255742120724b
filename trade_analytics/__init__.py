"""Trade Analytics: P&L performance analytics for a trading journal.

Turns a list of closed trades into the numbers and series a P&L report
shows: totals, risk-adjusted ratios, drawdown, streaks, and chart data.

Architecture:
- domain/: Core business logic (models, metrics, series, formatting)
- infrastructure/: Configuration and trade file access
- application/: Report building and export
- interfaces/: CLI
"""

__version__ = "0.1.0"

from trade_analytics.domain import (
    Trade,
    AdvancedMetrics,
    normalize_trades,
    calculate_advanced_metrics,
)
from trade_analytics.infrastructure import (
    DataPaths,
    AnalysisConfig,
    DEFAULT_PATHS,
    DEFAULT_CONFIG,
    RepositoryError,
)

__all__ = [
    # Version
    "__version__",
    # Domain
    "Trade",
    "AdvancedMetrics",
    "normalize_trades",
    "calculate_advanced_metrics",
    # Infrastructure
    "DataPaths",
    "AnalysisConfig",
    "DEFAULT_PATHS",
    "DEFAULT_CONFIG",
    "RepositoryError",
]
