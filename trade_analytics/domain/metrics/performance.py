"""Performance Metrics: The full AdvancedMetrics record for a list of trades.

Combines:
- Core performance: totals, win/loss split, win rate
- Win/loss shape: averages, extremes, payoff ratio, profit factor
- Risk-adjusted ratios from daily P&L (see risk.py)
- Drawdown on the daily cumulative curve (see drawdown.py)
- Streaks, best/worst day and trade, holding duration

A trade with net P&L <= 0 is a loss, so every trade is either a win or a
loss and winning_trades + losing_trades == total_trades.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging

from trade_analytics.domain.metrics.drawdown import drawdown_stats
from trade_analytics.domain.metrics.risk import (
    annualized_return_percent,
    calmar_ratio,
    kelly_criterion,
    omega_ratio,
    recovery_factor,
    sharpe_ratio,
    sortino_ratio,
)
from trade_analytics.domain.metrics.streaks import streaks
from trade_analytics.domain.models import AdvancedMetrics, Trade
from trade_analytics.domain.normalizer import coerce_trades
from trade_analytics.domain.series import aggregate_by_day, sort_chronologically
from trade_analytics.domain.config import DEFAULT_CONFIG, AnalysisConfig

logger = logging.getLogger(__name__)

DURATION_PRECISION = 1


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class BasicSummary:
    """Totals and win/loss counts without any ratios."""
    total_gross: float
    total_charges: float
    total_net: float
    total_trades: int
    winning_trades: int
    losing_trades: int


@dataclass(frozen=True, slots=True)
class ExpectancyBreakdown:
    """Average win, average loss (positive magnitude) and expectancy.

    Attributes:
        avg_win: Mean net P&L of winners
        avg_loss: Absolute mean net P&L of losers
        win_rate: Fraction of winners (0-1)
        expectancy: Expected net P&L per trade
    """
    avg_win: float
    avg_loss: float
    win_rate: float
    expectancy: float

    @property
    def payoff_ratio(self) -> float:
        """avg_win / avg_loss, 0 without losses."""
        return self.avg_win / self.avg_loss if self.avg_loss else 0.0


# =============================================================================
# Standalone Helpers
# =============================================================================

def summary_basic(trades: Iterable) -> BasicSummary:
    """Totals and counts for trades or raw rows."""
    items = coerce_trades(trades)
    wins = sum(1 for t in items if t.is_win)
    return BasicSummary(
        total_gross=sum(t.gross_pnl for t in items),
        total_charges=sum(t.charges for t in items),
        total_net=sum(t.net_pnl for t in items),
        total_trades=len(items),
        winning_trades=wins,
        losing_trades=len(items) - wins,
    )


def profit_factor(values: Iterable[float], ratio_cap: float = 999.0) -> float:
    """Sum of gains over the absolute sum of losses.

    Args:
        values: Net P&L per trade
        ratio_cap: Returned when there are gains but no losses

    Example:
        >>> profit_factor([100, -50, 200, -50])
        3.0
        >>> profit_factor([100, 200])
        999.0
    """
    gains = 0.0
    losses = 0.0
    for value in values:
        if value > 0:
            gains += value
        else:
            losses += value
    losses = abs(losses)

    if losses > 0:
        return gains / losses
    if gains > 0:
        logger.debug("Profit factor has no losses, using cap %s", ratio_cap)
        return ratio_cap
    return 0.0


def expectancy_breakdown(trades: Iterable) -> ExpectancyBreakdown:
    """Average win, average loss and expectancy per trade."""
    items = coerce_trades(trades)
    winners = [t.net_pnl for t in items if t.is_win]
    losers = [t.net_pnl for t in items if not t.is_win]

    avg_win = sum(winners) / len(winners) if winners else 0.0
    avg_loss = abs(sum(losers) / len(losers)) if losers else 0.0
    win_rate = len(winners) / len(items) if items else 0.0
    expectancy = sum(t.net_pnl for t in items) / len(items) if items else 0.0

    return ExpectancyBreakdown(
        avg_win=avg_win,
        avg_loss=avg_loss,
        win_rate=win_rate,
        expectancy=expectancy,
    )


def _first_extreme(trades: Sequence[Trade], pick) -> Trade | None:
    """First trade holding the max/min net P&L."""
    if not trades:
        return None
    target = pick(t.net_pnl for t in trades)
    return next(t for t in trades if t.net_pnl == target)


# =============================================================================
# Advanced Metrics
# =============================================================================

def calculate_advanced_metrics(
    trades: Iterable,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> AdvancedMetrics:
    """Calculate the full metrics record.

    Args:
        trades: Trade objects or raw rows (normalised first)
        config: Annualization, sentinels, clamps and rounding

    Returns:
        AdvancedMetrics; AdvancedMetrics.empty() for no trades

    Raises:
        TypeError: If trades is not iterable or holds a non-mapping row

    Example:
        >>> m = calculate_advanced_metrics([
        ...     {"date": "2024-01-01", "symbol": "A", "gross_pnl": 100},
        ...     {"date": "2024-01-02", "symbol": "A", "gross_pnl": -50},
        ... ])
        >>> m.win_rate, m.profit_factor
        (50.0, 2.0)
    """
    items = coerce_trades(trades)
    if config.drop_zero_gross:
        items = [t for t in items if t.gross_pnl != 0]
    if not items:
        return AdvancedMetrics.empty()

    ordered = sort_chronologically(items)
    p = config.precision

    def money(value: float) -> float:
        return round(value, p)

    # --- Core performance ---
    summary = summary_basic(ordered)
    total = summary.total_trades
    win_rate = summary.winning_trades / total * 100

    # --- Win/loss shape ---
    breakdown = expectancy_breakdown(ordered)
    winners = [t.net_pnl for t in ordered if t.is_win]
    losers = [t.net_pnl for t in ordered if not t.is_win]
    largest_win = max(winners) if winners else 0.0
    largest_loss = min(losers) if losers else 0.0
    payoff = breakdown.payoff_ratio
    pf = profit_factor((t.net_pnl for t in ordered), config.ratio_cap)

    # --- Daily series and drawdown ---
    daily = aggregate_by_day(ordered)
    returns = [d.net_pnl for d in daily]
    dd = drawdown_stats([d.cumulative for d in daily])

    # --- Risk-adjusted ratios ---
    factor = config.annualization_factor
    capital_base = config.starting_capital if config.starting_capital > 0 else dd.peak
    annual_pct = annualized_return_percent(summary.total_net, capital_base, len(daily), factor)

    # --- Streaks ---
    streak = streaks(ordered)

    # --- Duration ---
    durations = [t.duration_days for t in ordered if t.duration_days is not None]
    intraday = sum(1 for t in ordered if t.is_intraday)

    metrics = AdvancedMetrics(
        total_gross_pnl=money(summary.total_gross),
        total_charges=money(summary.total_charges),
        total_net_pnl=money(summary.total_net),
        total_trades=total,
        winning_trades=summary.winning_trades,
        losing_trades=summary.losing_trades,
        win_rate=money(win_rate),
        profit_factor=money(pf),
        expectancy=money(breakdown.expectancy),
        sharpe_ratio=money(sharpe_ratio(returns, factor)),
        sortino_ratio=money(sortino_ratio(returns, factor)),
        calmar_ratio=money(calmar_ratio(annual_pct, dd.max_drawdown_percent)),
        omega_ratio=money(omega_ratio(returns, config.omega_threshold, config.ratio_cap)),
        recovery_factor=money(recovery_factor(summary.total_net, dd.max_drawdown)),
        max_drawdown=money(dd.max_drawdown),
        max_drawdown_percent=money(dd.max_drawdown_percent),
        current_drawdown=money(dd.current_drawdown),
        max_drawdown_duration=dd.max_drawdown_duration,
        avg_win=money(breakdown.avg_win),
        avg_loss=money(breakdown.avg_loss),
        largest_win=money(largest_win),
        largest_loss=money(largest_loss),
        payoff_ratio=money(payoff),
        current_streak=streak.current,
        longest_win_streak=streak.longest_win,
        longest_loss_streak=streak.longest_loss,
        best_day=money(max(returns)),
        worst_day=money(min(returns)),
        best_trade=_first_extreme(ordered, max),
        worst_trade=_first_extreme(ordered, min),
        avg_trade_duration=round(
            sum(durations) / len(durations) if durations else 0.0, DURATION_PRECISION
        ),
        longest_trade=max(durations) if durations else 0,
        intraday_percent=round(intraday / total * 100, DURATION_PRECISION),
        kelly_criterion=money(kelly_criterion(win_rate, payoff, config.kelly_bounds)),
        start_date=ordered[0].trade_date.isoformat(),
        end_date=ordered[-1].trade_date.isoformat(),
    )

    logger.debug(
        "Metrics for %d trades over %d days: net=%s win_rate=%s",
        total, len(daily), metrics.total_net_pnl, metrics.win_rate,
    )
    return metrics
