"""Streaks: Consecutive win/loss runs over trades in date order."""

from collections.abc import Iterable

from trade_analytics.domain.aggregation import StreakSummary, detect_streaks
from trade_analytics.domain.normalizer import coerce_trades
from trade_analytics.domain.series import sort_chronologically


def streaks(trades: Iterable) -> StreakSummary:
    """Win/loss streaks for trades or raw rows.

    A trade with net P&L <= 0 counts as a loss. Same-day trades keep their
    input order.
    """
    ordered = sort_chronologically(coerce_trades(trades))
    return detect_streaks(t.is_win for t in ordered)
