"""Aggregation Primitives: Small building blocks shared by metrics and series.

Provides:
- group_sum: Ordered group-by with summation
- cumulative_sum / drawdown_series: Running totals and peak tracking
- detect_streaks: Win/loss run lengths
- Bucket / histogram: Half-open range counting for P&L distributions
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
import math
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


# =============================================================================
# Grouping and Running Totals
# =============================================================================

def group_sum(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    value_fn: Callable[[T], float],
) -> dict[K, float]:
    """Sum values per key, keys in first-occurrence order.

    Example:
        >>> group_sum(["a", "bb", "c"], len, lambda s: 1.0)
        {1: 2.0, 2: 1.0}
    """
    totals: dict[K, float] = {}
    for item in items:
        key = key_fn(item)
        totals[key] = totals.get(key, 0.0) + value_fn(item)
    return totals


def cumulative_sum(values: Iterable[float]) -> list[float]:
    """Running prefix sums of values."""
    result = []
    running = 0.0
    for value in values:
        running += value
        result.append(running)
    return result


def drawdown_series(
    cumulative: Sequence[float],
    *,
    initial_peak: float = 0.0,
) -> list[tuple[float, float]]:
    """Running peak and drawdown for a cumulative P&L series.

    The peak starts at initial_peak (zero equity before the first trade),
    so a series that only falls still shows a drawdown.

    Args:
        cumulative: Cumulative P&L values in time order
        initial_peak: Peak before the first observation

    Returns:
        List of (peak, drawdown) with drawdown = peak - cumulative >= 0

    Example:
        >>> drawdown_series([100.0, 50.0, 250.0])
        [(100.0, 0.0), (100.0, 50.0), (250.0, 0.0)]
    """
    result = []
    peak = initial_peak
    for value in cumulative:
        peak = max(peak, value)
        result.append((peak, peak - value))
    return result


# =============================================================================
# Streaks
# =============================================================================

@dataclass(frozen=True, slots=True)
class StreakSummary:
    """Win/loss run lengths.

    Attributes:
        current: Length of the final run; positive for wins, negative for losses
        longest_win: Longest run of consecutive wins
        longest_loss: Longest run of consecutive losses
    """
    current: int
    longest_win: int
    longest_loss: int


def detect_streaks(outcomes: Iterable[bool]) -> StreakSummary:
    """Measure streaks over outcomes in chronological order.

    Args:
        outcomes: True for a win, False for a loss

    Example:
        >>> detect_streaks([True, True, True, False, False])
        StreakSummary(current=-2, longest_win=3, longest_loss=2)
    """
    run = 0
    longest_win = 0
    longest_loss = 0

    for won in outcomes:
        if won:
            run = run + 1 if run > 0 else 1
            longest_win = max(longest_win, run)
        else:
            run = run - 1 if run < 0 else -1
            longest_loss = max(longest_loss, -run)

    return StreakSummary(current=run, longest_win=longest_win, longest_loss=longest_loss)


# =============================================================================
# Buckets
# =============================================================================

@dataclass(frozen=True, slots=True)
class Bucket:
    """A labelled half-open range [lower, upper)."""
    label: str
    lower: float
    upper: float

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


DEFAULT_PNL_BUCKETS: tuple[Bucket, ...] = (
    Bucket("< -5000", -math.inf, -5000),
    Bucket("-5000 to -2000", -5000, -2000),
    Bucket("-2000 to -500", -2000, -500),
    Bucket("-500 to 0", -500, 0),
    Bucket("0 to 500", 0, 500),
    Bucket("500 to 2000", 500, 2000),
    Bucket("2000 to 5000", 2000, 5000),
    Bucket("> 5000", 5000, math.inf),
)


def validate_buckets(buckets: Sequence[Bucket]) -> None:
    """Check buckets cover the whole real line without gaps or overlap.

    Raises:
        ValueError: If buckets are empty, unordered, gapped or not open-ended
    """
    if not buckets:
        raise ValueError("At least one bucket is required")
    if buckets[0].lower != -math.inf:
        raise ValueError(f"First bucket must start at -inf, got {buckets[0].lower}")
    if buckets[-1].upper != math.inf:
        raise ValueError(f"Last bucket must end at +inf, got {buckets[-1].upper}")

    for bucket in buckets:
        if not bucket.lower < bucket.upper:
            raise ValueError(f"Bucket {bucket.label!r} is empty or inverted")
    for prev, nxt in zip(buckets, buckets[1:]):
        if prev.upper != nxt.lower:
            raise ValueError(
                f"Buckets {prev.label!r} and {nxt.label!r} are not contiguous"
            )


def histogram(values: Iterable[float], buckets: Sequence[Bucket]) -> list[int]:
    """Count values per bucket; each value lands in exactly one bucket.

    Example:
        >>> histogram([-6000, 0, 0, 9000], DEFAULT_PNL_BUCKETS)
        [1, 0, 0, 0, 2, 0, 0, 1]
    """
    validate_buckets(buckets)
    counts = [0] * len(buckets)
    for value in values:
        for i, bucket in enumerate(buckets):
            if bucket.contains(value):
                counts[i] += 1
                break
    return counts
