"""Trade Normalizer: Turn heterogeneous trade rows into Trade objects.

Rows arrive from imports (snake_case) or from the display layer (camelCase)
with loosely typed values. This module:
- Resolves field aliases (trade_date / tradeDate / date, ...)
- Coerces numbers, tolerating currency symbols and thousands separators
- Parses dates in ISO and DD-MM-YYYY forms
- Recomputes net P&L from gross P&L and charges

Normalisation never raises on bad data. Defaulted fields are reported
through parse_trade() and logged at DEBUG.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
import logging
import math
import re

from trade_analytics.domain.models import Trade

logger = logging.getLogger(__name__)


# =============================================================================
# Field Aliases
# =============================================================================

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "trade_date": ("trade_date", "tradeDate", "date"),
    "symbol": ("symbol", "Symbol"),
    "quantity": ("quantity", "Quantity", "qty"),
    "buy_value": ("buy_value", "buyValue", "buy"),
    "sell_value": ("sell_value", "sellValue", "sell"),
    "gross_pnl": ("gross_pnl", "grossPnl", "grossPL", "realized_pnl"),
    "charges": ("charges", "Charges", "fees"),
    "net_pnl": ("net_pnl", "netPnl", "netPL"),
    "trade_type": ("trade_type", "tradeType"),
    "segment": ("segment", "Segment"),
    "entry_date": ("entry_date", "entryDate"),
    "exit_date": ("exit_date", "exitDate"),
}

UNKNOWN_SYMBOL = "UNKNOWN"

_NUMBER_NOISE = re.compile(r"[,\s₹$€£]")
_DMY_FORMATS = ("%d-%m-%Y", "%d/%m/%Y")


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True, slots=True)
class FieldIssue:
    """A field that could not be read and was defaulted.

    Attributes:
        field: Canonical field name (e.g., "gross_pnl")
        raw: The value found in the row, or None if absent
        reason: Short description of what was substituted
    """
    field: str
    raw: object
    reason: str


@dataclass(frozen=True, slots=True)
class ParseResult:
    """A normalised trade plus the repairs it needed."""
    trade: Trade
    issues: tuple[FieldIssue, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no field had to be defaulted."""
        return not self.issues


# =============================================================================
# Value Coercion
# =============================================================================

def _lookup(row: Mapping, name: str) -> object:
    """Return the first present alias value for a canonical field."""
    for key in FIELD_ALIASES[name]:
        if key in row and row[key] is not None:
            return row[key]
    return None


def parse_number(value: object) -> float | None:
    """Coerce a loosely typed value to a finite float.

    Args:
        value: int, float or string like "₹1,234.50"

    Returns:
        The float, or None if the value cannot be read

    Example:
        >>> parse_number("₹1,234.50")
        1234.5
        >>> parse_number("n/a") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = _NUMBER_NOISE.sub("", value)
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_date(value: object) -> date | None:
    """Coerce a loosely typed value to a calendar date.

    Accepts date/datetime objects, ISO strings (time part ignored) and
    DD-MM-YYYY or DD/MM/YYYY strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    for fmt in _DMY_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _is_intraday_label(*labels: str) -> bool:
    return any("intraday" in label.lower() for label in labels)


# =============================================================================
# Normalisation
# =============================================================================

def parse_trade(row: Mapping, *, today: date | None = None) -> ParseResult:
    """Normalise one row and report every defaulted field.

    Args:
        row: Mapping with snake_case or camelCase trade keys
        today: Fallback trade date (default: date.today())

    Returns:
        ParseResult with the Trade and a tuple of FieldIssue

    Raises:
        TypeError: If row is not a mapping
    """
    if not isinstance(row, Mapping):
        raise TypeError(f"Trade row must be a mapping, got {type(row).__name__}")

    issues: list[FieldIssue] = []

    def number(name: str) -> float:
        raw = _lookup(row, name)
        if raw is None:
            return 0.0
        value = parse_number(raw)
        if value is None:
            # Present but unreadable; an absent amount is simply zero
            issues.append(FieldIssue(name, raw, "defaulted to 0"))
            return 0.0
        return value

    raw_date = _lookup(row, "trade_date")
    trade_date = parse_date(raw_date)
    if trade_date is None:
        trade_date = today or date.today()
        issues.append(FieldIssue("trade_date", raw_date, "defaulted to today"))

    raw_symbol = _lookup(row, "symbol")
    symbol = str(raw_symbol).strip() if raw_symbol is not None else ""
    if not symbol:
        symbol = UNKNOWN_SYMBOL
        issues.append(FieldIssue("symbol", raw_symbol, f"defaulted to {UNKNOWN_SYMBOL}"))

    quantity = number("quantity")
    buy_value = number("buy_value")
    sell_value = number("sell_value")
    gross_pnl = number("gross_pnl")
    charges = number("charges")

    trade_type = str(_lookup(row, "trade_type") or "")
    segment = str(_lookup(row, "segment") or "")
    entry_date = parse_date(_lookup(row, "entry_date"))
    exit_date = parse_date(_lookup(row, "exit_date"))
    if entry_date is None and exit_date is None and _is_intraday_label(trade_type, segment):
        entry_date = exit_date = trade_date

    trade = Trade(
        trade_date=trade_date,
        symbol=symbol,
        quantity=quantity,
        buy_value=buy_value,
        sell_value=sell_value,
        gross_pnl=gross_pnl,
        charges=charges,
        trade_type=trade_type,
        segment=segment,
        entry_date=entry_date,
        exit_date=exit_date,
    )

    supplied_net = parse_number(_lookup(row, "net_pnl"))
    if supplied_net is not None and not math.isclose(
        supplied_net, trade.net_pnl, abs_tol=1e-6
    ):
        logger.debug(
            "Discarding supplied net P&L %s for %s, recomputed %s",
            supplied_net, symbol, trade.net_pnl,
        )

    for issue in issues:
        logger.debug("Row field %s=%r %s", issue.field, issue.raw, issue.reason)

    return ParseResult(trade=trade, issues=tuple(issues))


def normalize_trade(row: Mapping, *, today: date | None = None) -> Trade:
    """Normalise one row into a Trade.

    Example:
        >>> t = normalize_trade({"tradeDate": "2024-01-15", "symbol": "INFY",
        ...                      "grossPnl": "1,000", "charges": 20})
        >>> t.net_pnl
        980.0
    """
    return parse_trade(row, today=today).trade


def normalize_trades(
    rows: Iterable[Mapping],
    *,
    drop_zero_gross: bool = False,
    today: date | None = None,
) -> list[Trade]:
    """Normalise a list of rows, preserving order.

    Args:
        rows: Iterable of row mappings
        drop_zero_gross: Skip rows whose gross P&L is exactly zero
        today: Fallback trade date for rows without one

    Returns:
        List of Trade objects

    Raises:
        TypeError: If rows is not iterable or holds a non-mapping
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Iterable):
        raise TypeError(f"rows must be an iterable of mappings, got {type(rows).__name__}")

    trades = []
    for row in rows:
        trade = normalize_trade(row, today=today)
        if drop_zero_gross and trade.gross_pnl == 0:
            continue
        trades.append(trade)

    if drop_zero_gross:
        logger.debug("Normalised %d trades (zero-gross rows dropped)", len(trades))
    return trades


def coerce_trades(items: Iterable) -> list[Trade]:
    """Accept Trade objects or raw rows and return a list of Trade.

    Raises:
        TypeError: If items is not iterable or holds a non-mapping row
    """
    if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        raise TypeError(f"trades must be iterable, got {type(items).__name__}")
    return [item if isinstance(item, Trade) else normalize_trade(item) for item in items]
