"""Domain Models: Core data structures for trade analytics.

These models represent the fundamental business entities:
- Trade: A single closed trade as imported or fetched
- AdvancedMetrics: The summary record shown on the P&L report
- Series records: DailyPnL, EquityPoint, MonthlyPnL, DistributionBucket,
  SymbolPerformance, WeekdayPerformance, MonthlyWinRate, OutcomeCounts

Design Principles:
- Immutable (frozen dataclass)
- net_pnl is derived, never stored
- Computed properties for derived values
"""

import math
from dataclasses import dataclass, fields
from datetime import date


def _camel(name: str) -> str:
    """Convert snake_case field name to the display layer's camelCase key."""
    head, *rest = name.split("_")
    parts = []
    for part in rest:
        # P&L keeps its capitalisation: total_net_pnl -> totalNetPnL
        parts.append("PnL" if part == "pnl" else part.capitalize())
    return head + "".join(parts)


# =============================================================================
# Trade
# =============================================================================

@dataclass(frozen=True, slots=True)
class Trade:
    """A single closed trade.

    Attributes:
        trade_date: Day the trade was closed (reported date)
        symbol: Instrument identifier (e.g., "RELIANCE")
        quantity: Traded quantity, display only
        buy_value: Total buy side value
        sell_value: Total sell side value
        gross_pnl: Realized profit/loss before charges
        charges: Fees, commissions and taxes
        trade_type: Free-form type from the source ("equity", "intraday", ...)
        segment: Exchange segment from the source ("EQ", "FO", ...)
        entry_date: Day the position was opened, if known
        exit_date: Day the position was closed, if known

    Example:
        >>> trade = Trade(
        ...     trade_date=date(2024, 1, 15), symbol="INFY", quantity=10,
        ...     buy_value=15000.0, sell_value=15500.0,
        ...     gross_pnl=500.0, charges=20.0,
        ... )
        >>> trade.net_pnl
        480.0
    """

    trade_date: date
    symbol: str
    quantity: float
    buy_value: float
    sell_value: float
    gross_pnl: float
    charges: float
    trade_type: str = ""
    segment: str = ""
    entry_date: date | None = None
    exit_date: date | None = None

    @property
    def net_pnl(self) -> float:
        """Net P&L: gross P&L less charges."""
        return self.gross_pnl - self.charges

    @property
    def is_win(self) -> bool:
        """A trade wins only when net P&L is strictly positive."""
        return self.net_pnl > 0

    @property
    def duration_days(self) -> int | None:
        """Holding period in days, or None without both entry and exit."""
        if self.entry_date is None or self.exit_date is None:
            return None
        return (self.exit_date - self.entry_date).days

    @property
    def is_intraday(self) -> bool:
        """Opened and closed on the same day."""
        return self.entry_date is not None and self.entry_date == self.exit_date

    @property
    def month_key(self) -> str:
        """Month bucket in YYYY-MM form."""
        return self.trade_date.strftime("%Y-%m")

    def to_dict(self) -> dict:
        """Convert to the snake_case row shape used for persistence."""
        return {
            "trade_date": self.trade_date.isoformat(),
            "symbol": self.symbol,
            "quantity": self.quantity,
            "buy_value": self.buy_value,
            "sell_value": self.sell_value,
            "gross_pnl": self.gross_pnl,
            "charges": self.charges,
            "net_pnl": self.net_pnl,
            "trade_type": self.trade_type,
            "segment": self.segment,
            "entry_date": self.entry_date.isoformat() if self.entry_date else None,
            "exit_date": self.exit_date.isoformat() if self.exit_date else None,
        }


# =============================================================================
# Advanced Metrics
# =============================================================================

@dataclass(frozen=True, slots=True)
class AdvancedMetrics:
    """Full performance summary for a list of trades.

    Percent-like fields (win_rate, max_drawdown_percent, intraday_percent,
    kelly_criterion) hold values already multiplied by 100.
    """
    # Core Performance
    total_gross_pnl: float
    total_charges: float
    total_net_pnl: float
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float

    # Risk-Adjusted Returns
    profit_factor: float
    expectancy: float
    sharpe_ratio: float
    sortino_ratio: float
    calmar_ratio: float
    omega_ratio: float
    recovery_factor: float

    # Drawdown
    max_drawdown: float
    max_drawdown_percent: float
    current_drawdown: float
    max_drawdown_duration: int

    # Win/Loss Shape
    avg_win: float
    avg_loss: float
    largest_win: float
    largest_loss: float
    payoff_ratio: float

    # Streaks
    current_streak: int
    longest_win_streak: int
    longest_loss_streak: int

    # Best/Worst
    best_day: float
    worst_day: float
    best_trade: Trade | None
    worst_trade: Trade | None

    # Duration
    avg_trade_duration: float
    longest_trade: int
    intraday_percent: float

    # Kelly
    kelly_criterion: float

    # Range
    start_date: str
    end_date: str

    def __post_init__(self) -> None:
        """Reject NaN or infinite numeric fields."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got: {value}")

    @classmethod
    def empty(cls) -> "AdvancedMetrics":
        """Metrics for an empty trade list: all zeros, no best/worst trade."""
        return cls(
            total_gross_pnl=0.0, total_charges=0.0, total_net_pnl=0.0,
            total_trades=0, winning_trades=0, losing_trades=0, win_rate=0.0,
            profit_factor=0.0, expectancy=0.0, sharpe_ratio=0.0,
            sortino_ratio=0.0, calmar_ratio=0.0, omega_ratio=0.0,
            recovery_factor=0.0,
            max_drawdown=0.0, max_drawdown_percent=0.0, current_drawdown=0.0,
            max_drawdown_duration=0,
            avg_win=0.0, avg_loss=0.0, largest_win=0.0, largest_loss=0.0,
            payoff_ratio=0.0,
            current_streak=0, longest_win_streak=0, longest_loss_streak=0,
            best_day=0.0, worst_day=0.0, best_trade=None, worst_trade=None,
            avg_trade_duration=0.0, longest_trade=0, intraday_percent=0.0,
            kelly_criterion=0.0,
            start_date="", end_date="",
        )

    def to_dict(self, camel_case: bool = False) -> dict:
        """Convert to a flat dictionary.

        Args:
            camel_case: Emit display-layer keys (totalNetPnL, winRate, ...)

        Returns:
            Dict of all fields; best/worst trades as row dicts or None
        """
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Trade):
                value = value.to_dict()
            key = _camel(f.name) if camel_case else f.name
            result[key] = value
        return result


# =============================================================================
# Series Records
# =============================================================================

@dataclass(frozen=True, slots=True)
class DailyPnL:
    """Net/gross totals for one calendar day, with running cumulative net."""
    date: date
    net_pnl: float
    gross_pnl: float
    charges: float
    trade_count: int
    cumulative: float


@dataclass(frozen=True, slots=True)
class EquityPoint:
    """One point of the trade-by-trade equity curve.

    Attributes:
        index: 1-based trade number
        date: Trade date
        cumulative_pnl: Running net P&L after this trade
        peak: Highest cumulative P&L so far (starting from zero)
        drawdown: peak - cumulative_pnl, never negative
    """
    index: int
    date: date
    cumulative_pnl: float
    peak: float
    drawdown: float


@dataclass(frozen=True, slots=True)
class MonthlyPnL:
    """Gross and net totals for a YYYY-MM month."""
    month: str
    gross_pnl: float
    net_pnl: float
    trade_count: int


@dataclass(frozen=True, slots=True)
class DistributionBucket:
    """Trade count for one half-open [lower, upper) net P&L range."""
    label: str
    lower: float
    upper: float
    count: int


@dataclass(frozen=True, slots=True)
class SymbolPerformance:
    """Rollup of all trades in one symbol."""
    symbol: str
    count: int
    total_pnl: float
    avg_pnl: float
    win_rate: float
    wins: int
    losses: int


@dataclass(frozen=True, slots=True)
class WeekdayPerformance:
    """Rollup of all trades closed on one weekday."""
    weekday: str
    trade_count: int
    win_rate: float
    avg_pnl: float
    total_pnl: float


@dataclass(frozen=True, slots=True)
class MonthlyWinRate:
    """Win rate for one YYYY-MM month."""
    month: str
    win_rate: float
    trade_count: int


@dataclass(frozen=True, slots=True)
class OutcomeCounts:
    """Wins, losses and exact break-even trades.

    Break-even trades are also counted in losses, matching the win/loss
    split used by AdvancedMetrics.
    """
    wins: int
    losses: int
    break_even: int

    @property
    def total(self) -> int:
        return self.wins + self.losses
