"""Drawdown: Peak-to-trough losses on the daily cumulative P&L curve.

The running peak starts at zero (no equity before the first trade), so an
account that only loses shows its full loss as drawdown.

Duration counts consecutive trading days spent below the running peak,
not calendar days.
"""

from dataclasses import dataclass
from typing import Sequence

from trade_analytics.domain.aggregation import drawdown_series


@dataclass(frozen=True, slots=True)
class DrawdownStats:
    """Drawdown summary of a cumulative P&L series.

    Attributes:
        max_drawdown: Largest peak - cumulative value (money, >= 0)
        max_drawdown_percent: max_drawdown as a percent of the peak it fell from
        current_drawdown: Final peak - final cumulative
        max_drawdown_duration: Longest run of days below the running peak
        peak: Highest cumulative value reached (>= 0)
    """
    max_drawdown: float
    max_drawdown_percent: float
    current_drawdown: float
    max_drawdown_duration: int
    peak: float

    @property
    def in_drawdown(self) -> bool:
        return self.current_drawdown > 0


def drawdown_stats(cumulative: Sequence[float]) -> DrawdownStats:
    """Compute drawdown statistics.

    Args:
        cumulative: Cumulative net P&L per trading day, in date order

    Returns:
        DrawdownStats (all zero for an empty series)

    Example:
        >>> s = drawdown_stats([100.0, 50.0, 250.0, 200.0])
        >>> s.max_drawdown, s.max_drawdown_percent
        (50.0, 50.0)
    """
    max_dd = 0.0
    max_dd_pct = 0.0
    longest = 0
    run = 0
    peak = 0.0

    for peak, dd in drawdown_series(cumulative):
        if dd > 0:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
        if dd > max_dd:
            max_dd = dd
            max_dd_pct = dd / peak * 100 if peak > 0 else 0.0

    current = peak - cumulative[-1] if len(cumulative) else 0.0

    return DrawdownStats(
        max_drawdown=max_dd,
        max_drawdown_percent=max_dd_pct,
        current_drawdown=current,
        max_drawdown_duration=longest,
        peak=peak,
    )
