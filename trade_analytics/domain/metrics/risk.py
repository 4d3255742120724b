"""Risk-Adjusted Ratios: Sharpe, Sortino, Omega, Calmar, recovery and Kelly.

All ratios operate on daily net P&L sums (money, not percentage returns).
Degenerate inputs (too few days, zero deviation, no losing side) return the
documented fallback instead of raising:
- Sharpe/Sortino/Calmar/recovery/Kelly fall back to 0
- Omega with no losses falls back to ratio_cap (if there are gains) or 0
"""

import logging
import math
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

# Relative std below which daily P&L counts as flat
FLAT_TOLERANCE = 1e-12


def sharpe_ratio(daily_returns: Sequence[float], annualization_factor: int = 252) -> float:
    """Annualized Sharpe ratio of daily P&L.

    Formula:
        sharpe = mean / std(ddof=1) × sqrt(annualization_factor)

    Returns:
        0.0 with fewer than two days or zero deviation (within
        FLAT_TOLERANCE of the mean, so repeated 0.1 days count as flat)
    """
    returns = np.asarray(daily_returns, dtype=float)
    if len(returns) < 2:
        return 0.0
    mean = returns.mean()
    std = returns.std(ddof=1)
    if std <= FLAT_TOLERANCE * max(1.0, abs(mean)):
        return 0.0
    return float(mean / std * math.sqrt(annualization_factor))


def downside_deviation(daily_returns: Sequence[float]) -> float:
    """Root mean square of the negative daily returns (relative to zero)."""
    returns = np.asarray(daily_returns, dtype=float)
    negative = returns[returns < 0]
    if len(negative) == 0:
        return 0.0
    return float(np.sqrt(np.mean(negative ** 2)))


def sortino_ratio(daily_returns: Sequence[float], annualization_factor: int = 252) -> float:
    """Annualized Sortino ratio: mean over downside deviation.

    Returns:
        0.0 when there are no losing days
    """
    returns = np.asarray(daily_returns, dtype=float)
    if len(returns) == 0:
        return 0.0
    dd = downside_deviation(returns)
    if dd == 0:
        return 0.0
    return float(returns.mean() / dd * math.sqrt(annualization_factor))


def omega_ratio(
    daily_returns: Sequence[float],
    threshold: float = 0.0,
    ratio_cap: float = 999.0,
) -> float:
    """Probability-weighted ratio of gains to losses around a threshold.

    Formula:
        omega = Σ(r - τ | r > τ) / Σ(τ - r | r < τ)
    """
    returns = np.asarray(daily_returns, dtype=float)
    gains = float(np.sum(returns[returns > threshold] - threshold))
    losses = float(np.sum(threshold - returns[returns < threshold]))
    if losses > 0:
        return gains / losses
    if gains > 0:
        logger.debug("Omega ratio has no losing days, using cap %s", ratio_cap)
        return ratio_cap
    return 0.0


def annualized_return_percent(
    total_net: float,
    capital_base: float,
    trading_days: int,
    annualization_factor: int = 252,
) -> float:
    """Total net P&L as a yearly percentage of the capital base.

    Formula:
        total_net / capital_base × 100 × annualization_factor / trading_days
    """
    if capital_base <= 0 or trading_days <= 0:
        return 0.0
    return total_net / capital_base * 100 * annualization_factor / trading_days


def calmar_ratio(annual_return_pct: float, max_drawdown_pct: float) -> float:
    """Annualized return percent over max drawdown percent, 0 without drawdown."""
    if max_drawdown_pct <= 0:
        return 0.0
    return annual_return_pct / max_drawdown_pct


def recovery_factor(total_net: float, max_drawdown: float) -> float:
    """Net profit over max drawdown, 0 without drawdown."""
    if max_drawdown <= 0:
        return 0.0
    return total_net / max_drawdown


def kelly_criterion(
    win_rate: float,
    payoff_ratio: float,
    bounds: tuple[float, float] = (-100.0, 100.0),
) -> float:
    """Kelly fraction as a clamped percentage.

    Formula:
        kelly = (W - (1 - W) / R) × 100

    Args:
        win_rate: Win rate as a percentage (0-100)
        payoff_ratio: Average win over average loss
        bounds: (low, high) clamp in percent

    Example:
        >>> round(kelly_criterion(50.0, 3.0), 2)
        33.33
    """
    if payoff_ratio <= 0:
        return 0.0
    w = win_rate / 100
    kelly = (w - (1 - w) / payoff_ratio) * 100
    low, high = bounds
    return min(max(kelly, low), high)
