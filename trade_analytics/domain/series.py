"""Time-Series Builders: Chart-ready series derived from trades.

Each builder accepts Trade objects or raw rows and returns plain records:
- aggregate_by_day / daily_equity: Daily totals and equity
- equity_curve: Trade-by-trade cumulative P&L with peak and drawdown
- monthly_pnl / monthly_win_rate: Per-month rollups
- calendar_data: Day -> net P&L map for heatmaps
- pnl_distribution: Trade counts per P&L bucket
- symbol_performance / top_winners_losers: Instrument and trade rankings
- weekday_performance / outcome_counts: Day-of-week and outcome splits

Builders never mutate their input. Order-dependent builders sort by trade
date (stable) first.
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from datetime import date
from operator import attrgetter

from trade_analytics.domain.aggregation import (
    DEFAULT_PNL_BUCKETS,
    Bucket,
    cumulative_sum,
    drawdown_series,
    group_sum,
    histogram,
)
from trade_analytics.domain.models import (
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

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def sort_chronologically(trades: Iterable[Trade]) -> list[Trade]:
    """Stable sort by trade date; same-day trades keep input order."""
    return sorted(trades, key=lambda t: t.trade_date)


def _win_rate(wins: int, count: int) -> float:
    return wins / count * 100 if count else 0.0


def _rollup(
    trades: Sequence[Trade],
    key_fn: Callable[[Trade], Hashable],
) -> tuple[dict, dict, dict]:
    """Trade count, win count and net total per key, first-occurrence order."""
    counts = group_sum(trades, key_fn, lambda t: 1)
    wins = group_sum(trades, key_fn, lambda t: int(t.is_win))
    totals = group_sum(trades, key_fn, lambda t: t.net_pnl)
    return counts, wins, totals


# =============================================================================
# Daily Series
# =============================================================================

def aggregate_by_day(trades: Iterable) -> list[DailyPnL]:
    """Sum trades per calendar day, ascending, with running cumulative net.

    Example:
        >>> days = aggregate_by_day([
        ...     {"date": "2024-01-02", "symbol": "A", "gross_pnl": -30},
        ...     {"date": "2024-01-01", "symbol": "B", "gross_pnl": 100},
        ... ])
        >>> [(d.date.isoformat(), d.cumulative) for d in days]
        [('2024-01-01', 100.0), ('2024-01-02', 70.0)]
    """
    items = coerce_trades(trades)
    by_day = attrgetter("trade_date")
    net = group_sum(items, by_day, lambda t: t.net_pnl)
    gross = group_sum(items, by_day, lambda t: t.gross_pnl)
    charges = group_sum(items, by_day, lambda t: t.charges)
    counts = group_sum(items, by_day, lambda t: 1)

    days = sorted(net)
    running = cumulative_sum(net[d] for d in days)
    return [
        DailyPnL(
            date=d,
            net_pnl=net[d],
            gross_pnl=gross[d],
            charges=charges[d],
            trade_count=int(counts[d]),
            cumulative=cum,
        )
        for d, cum in zip(days, running)
    ]


def daily_equity(
    daily: Sequence[DailyPnL],
    starting_capital: float = 0.0,
) -> list[tuple[date, float]]:
    """Account equity at the end of each trading day."""
    return [(day.date, starting_capital + day.cumulative) for day in daily]


def calendar_data(trades: Iterable) -> dict[date, float]:
    """Net P&L per day in date order, for calendar heatmaps."""
    return {day.date: day.net_pnl for day in aggregate_by_day(trades)}


# =============================================================================
# Equity Curve
# =============================================================================

def equity_curve(trades: Iterable) -> list[EquityPoint]:
    """Trade-by-trade cumulative net P&L with running peak and drawdown.

    The peak starts at zero, so every point satisfies
    drawdown = peak - cumulative_pnl >= 0.
    """
    ordered = sort_chronologically(coerce_trades(trades))
    cumulative = cumulative_sum(t.net_pnl for t in ordered)
    return [
        EquityPoint(
            index=i,
            date=trade.trade_date,
            cumulative_pnl=cum,
            peak=peak,
            drawdown=dd,
        )
        for i, (trade, cum, (peak, dd)) in enumerate(
            zip(ordered, cumulative, drawdown_series(cumulative)), start=1
        )
    ]


# =============================================================================
# Monthly Series
# =============================================================================

def monthly_pnl(trades: Iterable) -> list[MonthlyPnL]:
    """Gross and net totals per YYYY-MM, ascending by month."""
    items = coerce_trades(trades)
    by_month = attrgetter("month_key")
    gross = group_sum(items, by_month, lambda t: t.gross_pnl)
    net = group_sum(items, by_month, lambda t: t.net_pnl)
    counts = group_sum(items, by_month, lambda t: 1)

    return [
        MonthlyPnL(month=m, gross_pnl=gross[m], net_pnl=net[m], trade_count=int(counts[m]))
        for m in sorted(net)
    ]


def monthly_win_rate(trades: Iterable, last_n: int | None = None) -> list[MonthlyWinRate]:
    """Win rate per YYYY-MM, ascending; optionally only the last N months."""
    counts, wins, _ = _rollup(coerce_trades(trades), attrgetter("month_key"))

    result = [
        MonthlyWinRate(
            month=m,
            win_rate=_win_rate(wins[m], counts[m]),
            trade_count=int(counts[m]),
        )
        for m in sorted(counts)
    ]
    if last_n is not None:
        result = result[-last_n:] if last_n > 0 else []
    return result


# =============================================================================
# Distribution
# =============================================================================

def pnl_distribution(
    trades: Iterable,
    buckets: Sequence[Bucket] = DEFAULT_PNL_BUCKETS,
) -> list[DistributionBucket]:
    """Count trades per net P&L bucket, in bucket definition order.

    Raises:
        ValueError: If buckets do not cover the real line exactly once
    """
    counts = histogram((t.net_pnl for t in coerce_trades(trades)), buckets)
    return [
        DistributionBucket(label=b.label, lower=b.lower, upper=b.upper, count=c)
        for b, c in zip(buckets, counts)
    ]


def outcome_counts(trades: Iterable) -> OutcomeCounts:
    """Wins, losses (net <= 0) and exact break-even trades."""
    wins = losses = break_even = 0
    for trade in coerce_trades(trades):
        if trade.is_win:
            wins += 1
        else:
            losses += 1
            if trade.net_pnl == 0:
                break_even += 1
    return OutcomeCounts(wins=wins, losses=losses, break_even=break_even)


# =============================================================================
# Rankings
# =============================================================================

def symbol_performance(trades: Iterable, top_n: int | None = None) -> list[SymbolPerformance]:
    """Per-symbol rollup, descending by total net P&L.

    Args:
        trades: Trades or raw rows
        top_n: Keep only the best N symbols (None = all)
    """
    counts, wins, totals = _rollup(coerce_trades(trades), attrgetter("symbol"))

    result = [
        SymbolPerformance(
            symbol=symbol,
            count=int(count),
            total_pnl=totals[symbol],
            avg_pnl=totals[symbol] / count,
            win_rate=_win_rate(wins[symbol], count),
            wins=int(wins[symbol]),
            losses=int(count - wins[symbol]),
        )
        for symbol, count in counts.items()
    ]
    result.sort(key=lambda s: s.total_pnl, reverse=True)
    return result[:top_n] if top_n is not None else result


def top_winners_losers(trades: Iterable, n: int = 5) -> tuple[list[Trade], list[Trade]]:
    """Best and worst trades by net P&L.

    Trades are sorted descending; winners are the first n, losers the last
    n reversed (worst first). With fewer than 2n trades the lists overlap.

    Returns:
        (winners, losers)
    """
    ranked = sorted(coerce_trades(trades), key=lambda t: t.net_pnl, reverse=True)
    if n <= 0:
        return [], []
    return ranked[:n], ranked[-n:][::-1]


def weekday_performance(trades: Iterable) -> list[WeekdayPerformance]:
    """Per-weekday rollup, Monday first, only weekdays that have trades."""
    counts, wins, totals = _rollup(coerce_trades(trades), lambda t: t.trade_date.weekday())

    return [
        WeekdayPerformance(
            weekday=WEEKDAYS[day],
            trade_count=int(counts[day]),
            win_rate=_win_rate(wins[day], counts[day]),
            avg_pnl=totals[day] / counts[day],
            total_pnl=totals[day],
        )
        for day in sorted(counts)
    ]
