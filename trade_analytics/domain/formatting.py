"""Presentation Adapters: Turn metric values into display strings.

Stateless functions used by the CLI and exports:
- format_currency: Signed money with Indian or western digit grouping
- format_percentage / format_ratio: Fixed-decimal numbers
- ratio_label: Qualitative label for risk-adjusted ratios
- format_compact: Short money labels for chart axes (₹1.5K, ₹2.3L, ₹1.2Cr)
"""

from dataclasses import dataclass
from typing import Literal

Grouping = Literal["indian", "western", "none"]

# (threshold, suffix), largest first
_COMPACT_UNITS: dict[str, tuple[tuple[float, str], ...]] = {
    "indian": ((1e7, "Cr"), (1e5, "L"), (1e3, "K")),
    "western": ((1e9, "B"), (1e6, "M"), (1e3, "K")),
    "none": ((1e3, "K"),),
}


@dataclass(frozen=True)
class FormatConfig:
    """Display settings for money values.

    Attributes:
        symbol: Currency symbol placed after the sign
        decimals: Fraction digits
        grouping: "indian" (1,00,000), "western" (100,000) or "none"
    """

    symbol: str = "₹"
    decimals: int = 2
    grouping: Grouping = "indian"

    def __post_init__(self) -> None:
        if self.grouping not in _COMPACT_UNITS:
            raise ValueError(f"Unknown grouping: {self.grouping}")
        if self.decimals < 0:
            raise ValueError(f"decimals must be >= 0, got {self.decimals}")


DEFAULT_FORMAT = FormatConfig()


def group_digits(integer_part: str, grouping: Grouping = "indian") -> str:
    """Insert thousands separators into a string of digits.

    Example:
        >>> group_digits("1234567")
        '12,34,567'
        >>> group_digits("1234567", "western")
        '1,234,567'
    """
    if grouping == "none" or len(integer_part) <= 3:
        return integer_part
    if grouping == "western":
        return f"{int(integer_part):,}"

    head, tail = integer_part[:-3], integer_part[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def _sign(amount: float) -> str:
    if amount > 0:
        return "+"
    if amount < 0:
        return "-"
    return ""


def format_currency(amount: float, config: FormatConfig = DEFAULT_FORMAT) -> str:
    """Format money with an explicit sign, then symbol, then the magnitude.

    Zero (including values that round to zero) carries no sign.

    Example:
        >>> format_currency(1234.5)
        '+₹1,234.50'
        >>> format_currency(-200000)
        '-₹2,00,000.00'
        >>> format_currency(0)
        '₹0.00'
    """
    magnitude = f"{abs(amount):.{config.decimals}f}"
    integer_part, _, fraction = magnitude.partition(".")
    body = group_digits(integer_part, config.grouping)
    if fraction:
        body = f"{body}.{fraction}"
    sign = _sign(amount) if float(magnitude) != 0 else ""
    return f"{sign}{config.symbol}{body}"


def format_percentage(value: float, decimals: int = 2, signed: bool = False) -> str:
    """Format an already-scaled percentage (62.5 -> "62.50%")."""
    prefix = "+" if signed and value > 0 else ""
    return f"{prefix}{value:.{decimals}f}%"


def format_ratio(value: float, decimals: int = 2) -> str:
    """Format a ratio with fixed decimals."""
    return f"{value:.{decimals}f}"


def ratio_label(value: float) -> str:
    """Qualitative label for Sharpe-like ratios.

    Thresholds: > 2 Excellent, > 1 Good, > 0 Fair, otherwise Poor.
    """
    if value > 2:
        return "Excellent"
    if value > 1:
        return "Good"
    if value > 0:
        return "Fair"
    return "Poor"


def format_compact(amount: float, config: FormatConfig = DEFAULT_FORMAT) -> str:
    """Short money label for chart axes.

    Amounts below 1,000 show no decimals; larger ones one decimal and a
    unit suffix. Only negatives are signed.

    Example:
        >>> format_compact(1500)
        '₹1.5K'
        >>> format_compact(-250000)
        '-₹2.5L'
        >>> format_compact(2500000, FormatConfig(symbol="$", grouping="western"))
        '$2.5M'
    """
    sign = "-" if amount < 0 else ""
    magnitude = abs(amount)
    for threshold, suffix in _COMPACT_UNITS[config.grouping]:
        if magnitude >= threshold:
            return f"{sign}{config.symbol}{magnitude / threshold:.1f}{suffix}"
    return f"{sign}{config.symbol}{magnitude:.0f}"
